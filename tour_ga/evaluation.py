from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import torch

from .operators.base import DistanceModel, Tour


@dataclass(frozen=True)
class GenerationStats:
    generation: int
    best: float
    mean: float
    worst: float


def population_lengths(
    dist: np.ndarray, population: Sequence[Tour], device: Optional[torch.device] = None
) -> torch.Tensor:
    # float64 keeps integer costs exact for the matrix sizes handled here.
    mat = torch.from_numpy(np.array(dist, dtype=np.float64)).to(device or "cpu")
    idx = torch.tensor([list(r) for r in population], dtype=torch.long, device=mat.device)
    a = idx
    b = idx.roll(-1, dims=1)
    return mat[a, b].sum(dim=1)


def summarize_population(
    model: DistanceModel, population: Sequence[Tour], generation: int
) -> GenerationStats:
    lengths = population_lengths(model.matrix, population)
    return GenerationStats(
        generation=generation,
        best=lengths.min().item(),
        mean=lengths.mean().item(),
        worst=lengths.max().item(),
    )
