from typing import List, Optional, Sequence, Union

import networkx as nx
import numpy as np


Tour = List[int]
Number = Union[int, float]


class InvalidInput(ValueError):
    pass


def _as_matrix(matrix, n: Optional[int] = None) -> np.ndarray:
    try:
        mat = np.array(matrix)
    except ValueError as exc:
        raise InvalidInput(f"distance matrix is ragged: {exc}") from exc
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise InvalidInput(f"distance matrix must be square, got shape {mat.shape}")
    if mat.shape[0] == 0:
        raise InvalidInput("distance matrix must contain at least one node")
    if n is not None and mat.shape[0] != n:
        raise InvalidInput(f"distance matrix has dimension {mat.shape[0]}, expected {n}")
    if not np.issubdtype(mat.dtype, np.number) or np.issubdtype(mat.dtype, np.complexfloating):
        raise InvalidInput(f"distance matrix must be real-valued, got dtype {mat.dtype}")
    if not np.isfinite(mat).all():
        raise InvalidInput("distance matrix contains non-finite entries")
    if (mat < 0).any():
        raise InvalidInput("distance matrix contains negative entries")
    mat.setflags(write=False)
    return mat


def tour_length(matrix: np.ndarray, tour: Sequence[int]) -> Number:
    idx = np.asarray(tour, dtype=np.intp)
    return matrix[idx, np.roll(idx, -1)].sum().item()


class DistanceModel:
    """
    Read-only square cost matrix. Costs may be asymmetric; lengths are closed tours.
    """

    def __init__(self, matrix, n: Optional[int] = None):
        self.matrix = _as_matrix(matrix, n)

    @classmethod
    def from_graph(cls, graph: nx.Graph, nodes: Optional[Sequence] = None) -> "DistanceModel":
        nodes = list(graph.nodes()) if nodes is None else list(nodes)
        mat = nx.to_numpy_array(graph, nodelist=nodes, weight="weight", nonedge=0.0)
        return cls(mat)

    @property
    def n(self) -> int:
        return self.matrix.shape[0]

    def __len__(self) -> int:
        return self.n

    def tour_length(self, tour: Sequence[int]) -> Number:
        if len(tour) != self.n:
            raise InvalidInput(f"route has {len(tour)} nodes, matrix has {self.n}")
        idx = np.asarray(tour, dtype=np.intp)
        if (idx < 0).any() or (idx >= self.n).any():
            raise InvalidInput(f"route has node indices outside 0..{self.n - 1}")
        return tour_length(self.matrix, idx)
