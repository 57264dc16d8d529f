"""
Core data structures for the Lloyd clustering engine.
"""

from typing import Any, Dict, List, NamedTuple
from dataclasses import dataclass, field


class Point(NamedTuple):
    """A 2-D coordinate. Compares equal to any (x, y) tuple with the same values."""
    x: float
    y: float


@dataclass
class AlgorithmState:
    """State of the convergence loop after one iteration.

    Used for convergence diagnostics and debugging. ``centroids`` are the
    centroids that produced this iteration's partition, ``candidate`` the
    means recomputed from it.
    """
    iteration: int
    centroids: List[Any]
    candidate: List[Any]
    cluster_sizes: List[int]
    inertia: float
    shift: float
    converged: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_empty(self) -> int:
        """Number of clusters that received no points."""
        return sum(1 for size in self.cluster_sizes if size == 0)
