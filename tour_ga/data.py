import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

import networkx as nx
import tsplib95

from .operators.base import DistanceModel, InvalidInput


@dataclass
class Instance:
    name: str
    cities: List[str]
    model: DistanceModel
    optimum: Optional[float] = None

    @property
    def n(self) -> int:
        return self.model.n


COLOMBIA_CITIES = [
    "Armenia-Quindio",
    "Bogota",
    "Cali",
    "Barranquilla",
    "Cucuta",
    "Medellin",
    "Bucaramanga",
    "Cartagena",
]

# Road distances in km, same order as COLOMBIA_CITIES.
COLOMBIA_DISTANCES = [
    [0, 267, 179, 1035, 779, 290, 582, 984],
    [267, 0, 460, 1051, 568, 416, 437, 1011],
    [179, 460, 0, 1187, 959, 442, 762, 1136],
    [1035, 1051, 1187, 0, 695, 751, 606, 124],
    [779, 568, 959, 695, 0, 577, 196, 712],
    [290, 416, 442, 751, 577, 0, 382, 696],
    [582, 437, 762, 606, 196, 382, 0, 622],
    [984, 1011, 1136, 124, 712, 696, 622, 0],
]


def colombia() -> Instance:
    return Instance(
        name="colombia8",
        cities=list(COLOMBIA_CITIES),
        model=DistanceModel(COLOMBIA_DISTANCES, n=len(COLOMBIA_CITIES)),
    )


def _solution_candidates(path: Path) -> Iterable[Path]:
    yield path.with_suffix(".opt.tour")
    for ext in (".opt.tour", ".opt", ".tour"):
        yield path.parent / "solutions" / f"{path.stem}{ext}"


def _load_optimum(problem, path: Path) -> Optional[float]:
    for candidate in _solution_candidates(path):
        if not candidate.exists():
            continue
        try:
            tour_file = tsplib95.parse(candidate.read_text())
            nodes = list(tour_file.tours[0])
        except (IndexError, ValueError):
            continue
        dist = 0.0
        for i in range(len(nodes)):
            a = nodes[i]
            b = nodes[(i + 1) % len(nodes)]
            dist += problem.get_weight(a, b)
        return float(dist)
    return None


def load_tsplib(path: Path) -> Instance:
    try:
        problem = tsplib95.load(path)
        graph: nx.Graph = problem.get_graph()
    except (ValueError, KeyError, IndexError) as exc:
        raise InvalidInput(f"{path}: malformed TSPLIB file: {exc}") from exc
    nodes = sorted(graph.nodes())
    model = DistanceModel.from_graph(graph, nodes)
    return Instance(
        name=problem.name or path.stem,
        cities=[str(n) for n in nodes],
        model=model,
        optimum=_load_optimum(problem, path),
    )


def load_json(path: Path) -> Instance:
    """
    Read ``{"name": ..., "cities": [...], "matrix": [[...], ...]}``. ``cities`` defaults to the indices.
    """
    try:
        payload = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise InvalidInput(f"{path}: {exc}") from exc
    if not isinstance(payload, dict) or "matrix" not in payload:
        raise InvalidInput(f"{path}: expected an object with a 'matrix' field")
    model = DistanceModel(payload["matrix"])
    cities = payload.get("cities") or [str(i) for i in range(model.n)]
    if len(cities) != model.n:
        raise InvalidInput(f"{path}: {len(cities)} city names for a {model.n}-node matrix")
    optimum = payload.get("optimum")
    if optimum is not None:
        if isinstance(optimum, bool) or not isinstance(optimum, (int, float)) or not math.isfinite(optimum):
            raise InvalidInput(f"{path}: optimum must be a finite number, got {optimum!r}")
        optimum = float(optimum)
    return Instance(
        name=payload.get("name", path.stem),
        cities=[str(c) for c in cities],
        model=model,
        optimum=optimum,
    )


def load_instance(path) -> Instance:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No instance file at {path}")
    suffix = path.suffix.lower()
    if suffix in (".tsp", ".atsp"):
        return load_tsplib(path)
    if suffix == ".json":
        return load_json(path)
    raise InvalidInput(f"unsupported instance format {suffix!r}; use .tsp, .atsp or .json")
