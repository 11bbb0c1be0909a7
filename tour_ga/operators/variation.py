"""
Variation operators: tournament selection, segment-copy order crossover and swap mutation.

Every operator draws from the ``random.Random`` it is handed; none touch the module-level generator.
"""

import random
from typing import List, Optional, Sequence

from .base import DistanceModel, InvalidInput, Tour


ALWAYS = "always"
PROBABILISTIC = "probabilistic"
MUTATION_POLICIES = (ALWAYS, PROBABILISTIC)


def tournament_select(
    population: Sequence[Tour], model: DistanceModel, rng: random.Random, k: int = 2
) -> Tour:
    best = None
    best_len = None
    for _ in range(k):
        cand = population[rng.randrange(len(population))]
        cand_len = model.tour_length(cand)
        if best is None or cand_len < best_len:
            best = cand
            best_len = cand_len
    return best


def order_crossover_at(parent1: Sequence[int], parent2: Sequence[int], start: int, end: int) -> Tour:
    n = len(parent1)
    if len(parent2) != n:
        raise InvalidInput(f"parents differ in length: {n} != {len(parent2)}")
    if not 0 <= start <= end <= n - 1:
        raise InvalidInput(f"invalid cut points start={start} end={end} for n={n}")
    child: List[Optional[int]] = [None] * n
    child[start:end] = parent1[start:end]
    present = set(child[start:end])
    # Empty slots run from ``end`` to the last position, then wrap to ``start - 1``.
    slots = [(end + i) % n for i in range(n - (end - start))]
    fill = [g for g in (parent2[(end + i) % n] for i in range(n)) if g not in present]
    if len(fill) != len(slots):
        raise InvalidInput("parents are not permutations of the same nodes")
    for slot, gene in zip(slots, fill):
        child[slot] = gene
    return child


def order_crossover(parent1: Sequence[int], parent2: Sequence[int], rng: random.Random) -> Tour:
    n = len(parent1)
    start = rng.randrange(n)
    end = start + rng.randrange(n - start)
    return order_crossover_at(parent1, parent2, start, end)


def swap_mutate(route: Tour, rng: random.Random) -> None:
    i = rng.randrange(len(route))
    j = rng.randrange(len(route))
    route[i], route[j] = route[j], route[i]


def apply_mutation(route: Tour, rng: random.Random, policy: str = ALWAYS, rate: float = 0.1) -> bool:
    """Mutate ``route`` in place according to ``policy``; returns whether a swap was applied."""
    if policy == ALWAYS:
        swap_mutate(route, rng)
        return True
    if policy == PROBABILISTIC:
        if rng.random() < rate:
            swap_mutate(route, rng)
            return True
        return False
    raise InvalidInput(f"unknown mutation policy {policy!r}; expected one of {MUTATION_POLICIES}")
