import argparse
import random
import time
from typing import List, Optional, Tuple

from tour_ga.data import Instance, colombia, load_instance
from tour_ga.evolutionary import EvolutionarySearch, EvolutionConfig
from tour_ga.operators.base import InvalidInput
from tour_ga.operators.population import IDENTICAL_CLONE, INDEPENDENT_RANDOM, INIT_POLICIES, random_route
from tour_ga.operators.variation import ALWAYS, MUTATION_POLICIES
from tour_ga.report import format_history, format_result, maps_url, open_in_browser, route_names


# Quick run first, then an exhaustive one.
DEFAULT_COMBOS = [(10, 8), (100, 2000)]


def log(msg: str) -> None:
    ts = time.strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", flush=True)


def _combo(text: str) -> Tuple[int, int]:
    try:
        pop, gens = text.split(":")
        return int(pop), int(gens)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected POP:GENS, got {text!r}")


def _load(args) -> Instance:
    if args.instance:
        inst = load_instance(args.instance)
    else:
        inst = colombia()
    log(f"instance {inst.name}: {inst.n} cities")
    return inst


def _config(args, population_size: int, num_generations: int) -> EvolutionConfig:
    return EvolutionConfig(
        population_size=population_size,
        num_generations=num_generations,
        tournament_size=args.tournament_size,
        mutation_policy=args.mutation_policy,
        mutation_rate=args.mutation_rate,
        init_policy=args.init_policy,
        elitism=args.elitism,
        random_seed=args.seed,
    )


def _report(result, inst: Instance, args) -> None:
    if args.verbose:
        print(format_history(result))
    print(format_result(result, inst.cities))
    if inst.optimum is not None:
        gap = (result.length - inst.optimum) / inst.optimum if inst.optimum else float("inf")
        print(f"known optimum: {inst.optimum} (gap {gap:.2%})")
    if args.open:
        open_in_browser(maps_url(result.tour, inst.cities))


def run(args) -> None:
    inst = _load(args)
    cfg = _config(args, args.population_size, args.generations)
    log(f"population_size={cfg.population_size} generations={cfg.num_generations} init={cfg.init_policy}")
    result = EvolutionarySearch(cfg, inst.model).run()
    _report(result, inst, args)


def sweep(args) -> None:
    inst = _load(args)
    rng = random.Random(args.seed)
    base = None
    # Only cloned populations start from the shared route.
    if args.init_policy == IDENTICAL_CLONE:
        base = random_route(inst.n, rng)
        print(f"base route: {route_names(base, inst.cities)}")
    for population_size, num_generations in args.combo or DEFAULT_COMBOS:
        cfg = _config(args, population_size, num_generations)
        log(f"population_size={population_size} generations={num_generations}")
        search = EvolutionarySearch(cfg, inst.model, rng=rng, seed_route=base)
        _report(search.run(), inst, args)


def _add_search_args(parser: argparse.ArgumentParser, init_default: str) -> None:
    parser.add_argument("--instance", default=None, help=".tsp/.atsp/.json file; built-in Colombia table if omitted")
    parser.add_argument("--tournament-size", type=int, default=2)
    parser.add_argument("--mutation-policy", choices=MUTATION_POLICIES, default=ALWAYS)
    parser.add_argument("--mutation-rate", type=float, default=0.1)
    parser.add_argument("--init-policy", choices=INIT_POLICIES, default=init_default)
    parser.add_argument("--elitism", action="store_true", help="carry the best route into the next generation")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true", help="print per-generation statistics")
    parser.add_argument("--open", action="store_true", help="open the route in a web browser")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Evolutionary TSP tour search")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run one search configuration")
    run_parser.add_argument("--population-size", type=int, default=100)
    run_parser.add_argument("--generations", type=int, default=2000)
    _add_search_args(run_parser, INDEPENDENT_RANDOM)
    run_parser.set_defaults(func=run)

    sweep_parser = subparsers.add_parser("sweep", help="Run several POP:GENS combinations from one base route")
    sweep_parser.add_argument("--combo", type=_combo, action="append", help="POP:GENS, repeatable")
    _add_search_args(sweep_parser, IDENTICAL_CLONE)
    sweep_parser.set_defaults(func=sweep)

    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (InvalidInput, FileNotFoundError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
