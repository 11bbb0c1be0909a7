import enum
import random
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .evaluation import GenerationStats, summarize_population
from .operators.base import DistanceModel, InvalidInput, Number, Tour
from .operators.population import INDEPENDENT_RANDOM, INIT_POLICIES, init_population
from .operators.variation import (
    ALWAYS,
    MUTATION_POLICIES,
    PROBABILISTIC,
    apply_mutation,
    order_crossover,
    tournament_select,
)


@dataclass
class EvolutionConfig:
    population_size: int = 100
    num_generations: int = 2000
    tournament_size: int = 2
    mutation_policy: str = ALWAYS
    mutation_rate: float = 0.1
    init_policy: str = INDEPENDENT_RANDOM
    elitism: bool = False
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.population_size <= 0:
            raise InvalidInput(f"population_size must be positive, got {self.population_size}")
        if self.num_generations < 0:
            raise InvalidInput(f"num_generations must be non-negative, got {self.num_generations}")
        if self.tournament_size < 2:
            raise InvalidInput(f"tournament_size must be at least 2, got {self.tournament_size}")
        if self.mutation_policy not in MUTATION_POLICIES:
            raise InvalidInput(
                f"unknown mutation policy {self.mutation_policy!r}; expected one of {MUTATION_POLICIES}"
            )
        if self.init_policy not in INIT_POLICIES:
            raise InvalidInput(f"unknown init policy {self.init_policy!r}; expected one of {INIT_POLICIES}")
        if self.mutation_policy == PROBABILISTIC:
            if not 0.0 <= self.mutation_rate < 1.0:
                raise InvalidInput(f"mutation_rate must be in [0, 1), got {self.mutation_rate}")
        elif not 0.0 <= self.mutation_rate <= 1.0:
            raise InvalidInput(f"mutation_rate must be in [0, 1], got {self.mutation_rate}")


class State(enum.Enum):
    INIT = "init"
    EVOLVING = "evolving"
    DONE = "done"


@dataclass(frozen=True)
class SearchResult:
    tour: Tuple[int, ...]
    length: Number
    generations: int
    runtime: float
    history: Tuple[GenerationStats, ...] = ()


class EvolutionarySearch:
    """
    Generational GA over closed tours: tournament selection, order crossover, swap mutation.

    The population is replaced wholesale every generation. Without ``elitism`` the best tour of an
    earlier generation can be lost; only the final population is scanned for the result.
    """

    def __init__(
        self,
        config: EvolutionConfig,
        model: DistanceModel,
        rng: random.Random = None,
        seed_route: Optional[Sequence[int]] = None,
    ):
        self.cfg = config
        self.model = model
        self.rng = rng or random.Random(config.random_seed)
        self.state = State.INIT
        self.generation = 0
        self.remaining = config.num_generations
        self.population: List[Tour] = init_population(
            model.n,
            config.population_size,
            self.rng,
            policy=config.init_policy,
            seed_route=seed_route,
        )
        self.history: List[GenerationStats] = [summarize_population(model, self.population, 0)]
        self._elapsed = 0.0
        self.state = State.EVOLVING if self.remaining > 0 else State.DONE

    def _breed(self) -> Tour:
        parent1 = tournament_select(self.population, self.model, self.rng, self.cfg.tournament_size)
        parent2 = tournament_select(self.population, self.model, self.rng, self.cfg.tournament_size)
        child = order_crossover(parent1, parent2, self.rng)
        apply_mutation(child, self.rng, self.cfg.mutation_policy, self.cfg.mutation_rate)
        return child

    def step(self) -> None:
        if self.state is not State.EVOLVING:
            raise RuntimeError(f"cannot step a search in state {self.state.name}")
        start = time.perf_counter()
        new_pop: List[Tour] = []
        if self.cfg.elitism:
            elite, _ = self._best_in_population()
            new_pop.append(list(elite))
        while len(new_pop) < self.cfg.population_size:
            new_pop.append(self._breed())
        self.population = new_pop
        self.generation += 1
        self.remaining -= 1
        self._elapsed += time.perf_counter() - start
        self.history.append(summarize_population(self.model, self.population, self.generation))
        if self.remaining == 0:
            self.state = State.DONE

    def run(self) -> SearchResult:
        while self.state is State.EVOLVING:
            self.step()
        return self.best()

    def _best_in_population(self) -> Tuple[Tour, Number]:
        best_tour = self.population[0]
        best_len = self.model.tour_length(best_tour)
        for tour in self.population[1:]:
            length = self.model.tour_length(tour)
            if length < best_len:
                best_tour = tour
                best_len = length
        return best_tour, best_len

    def best(self) -> SearchResult:
        tour, length = self._best_in_population()
        return SearchResult(
            tour=tuple(tour),
            length=length,
            generations=self.generation,
            runtime=self._elapsed,
            history=tuple(self.history),
        )
