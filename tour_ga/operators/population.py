import random
from typing import List, Optional, Sequence

from .base import InvalidInput, Tour


INDEPENDENT_RANDOM = "independent-random"
IDENTICAL_CLONE = "identical-clone"
INIT_POLICIES = (INDEPENDENT_RANDOM, IDENTICAL_CLONE)


def shuffle_route(route: Tour, rng: random.Random) -> Tour:
    # Fisher-Yates, last position first.
    for i in range(len(route) - 1, 0, -1):
        j = rng.randrange(i + 1)
        route[i], route[j] = route[j], route[i]
    return route


def random_route(n: int, rng: random.Random) -> Tour:
    return shuffle_route(list(range(n)), rng)


def is_permutation(route: Sequence[int], n: int) -> bool:
    return len(route) == n and sorted(route) == list(range(n))


def init_population(
    n: int,
    size: int,
    rng: random.Random,
    policy: str = INDEPENDENT_RANDOM,
    seed_route: Optional[Sequence[int]] = None,
) -> List[Tour]:
    if size <= 0:
        raise InvalidInput(f"population size must be positive, got {size}")
    if policy == INDEPENDENT_RANDOM:
        return [random_route(n, rng) for _ in range(size)]
    if policy == IDENTICAL_CLONE:
        if seed_route is None:
            seed_route = random_route(n, rng)
        elif not is_permutation(seed_route, n):
            raise InvalidInput(f"seed route is not a permutation of 0..{n - 1}")
        # Copies, so later in-place mutation never leaks between slots.
        return [list(seed_route) for _ in range(size)]
    raise InvalidInput(f"unknown init policy {policy!r}; expected one of {INIT_POLICIES}")
