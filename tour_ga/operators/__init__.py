from .base import DistanceModel, InvalidInput, Tour, tour_length
from .population import (
    IDENTICAL_CLONE,
    INDEPENDENT_RANDOM,
    INIT_POLICIES,
    init_population,
    is_permutation,
    random_route,
    shuffle_route,
)
from .variation import (
    ALWAYS,
    MUTATION_POLICIES,
    PROBABILISTIC,
    apply_mutation,
    order_crossover,
    order_crossover_at,
    swap_mutate,
    tournament_select,
)

__all__ = [
    "DistanceModel",
    "InvalidInput",
    "Tour",
    "tour_length",
    "IDENTICAL_CLONE",
    "INDEPENDENT_RANDOM",
    "INIT_POLICIES",
    "init_population",
    "is_permutation",
    "random_route",
    "shuffle_route",
    "ALWAYS",
    "MUTATION_POLICIES",
    "PROBABILISTIC",
    "apply_mutation",
    "order_crossover",
    "order_crossover_at",
    "swap_mutate",
    "tournament_select",
]
