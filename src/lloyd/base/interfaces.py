"""
Core interfaces for the Lloyd clustering engine.

This module defines the abstract base classes that all components must implement,
so the convergence loop can be assembled from interchangeable parts:
- Metric: distance and mean over one item type
- InitializationStrategy: picks the first k centroids
- AssignmentStrategy: maps every item to a centroid index
- ParameterUpdater: recomputes centroids from a partition
- ConvergenceCriterion: decides when the loop has reached a fixed point
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar, Union
import torch
from torch import Tensor

from .exceptions import InvalidArgumentError

T = TypeVar('T')


class Metric(ABC, Generic[T]):
    """Distance and mean over items of a single type.

    Items are moved in and out of tensor space with ``encode``/``decode`` so
    that distances can be computed for a whole column of the distance table
    at once. ``encode`` always yields an (n, d) float64 tensor.
    """

    dtype = torch.float64

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Number of coordinates per item."""
        pass

    @abstractmethod
    def encode(self, items: Union[Sequence[T], Tensor]) -> Tensor:
        """Convert items to an (n, d) tensor."""
        pass

    @abstractmethod
    def decode(self, row: Tensor) -> T:
        """Convert one (d,) tensor row back to an item."""
        pass

    @abstractmethod
    def distance_to_point(self, points: Tensor, center: Tensor) -> Tensor:
        """Compute distances from points to a single center.

        Args:
            points: (n, d) tensor of encoded items
            center: (d,) tensor of an encoded centroid

        Returns:
            (n,) tensor of non-negative distances
        """
        pass

    def distance(self, a: T, b: T) -> float:
        """Distance between two items."""
        encoded = self.encode([a, b])
        return float(self.distance_to_point(encoded[:1], encoded[1])[0])

    def mean(self, items: Sequence[T]) -> T:
        """Mean of a non-empty collection, computed independently per axis."""
        if len(items) == 0:
            raise InvalidArgumentError("Cannot compute the mean of an empty collection")
        return self.decode(self.encode(items).mean(dim=0))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dimension={self.dimension})"


class InitializationStrategy(ABC):
    """Abstract base class for centroid initialization strategies."""

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int, metric: Metric,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> List[Any]:
        """Select initial centroids.

        Args:
            points: (n, d) tensor of encoded dataset items
            n_clusters: Number of centroids k to produce
            metric: Metric used to decode rows into items
            generator: Optional random source
            **kwargs: Strategy-specific parameters

        Returns:
            List of k distinct centroid items
        """
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-centroid assignment strategies."""

    @abstractmethod
    def compute_assignments(self, points: Tensor, centers: Tensor,
                            metric: Metric, **kwargs) -> Tensor:
        """Compute cluster assignments for points.

        Args:
            points: (n, d) tensor of encoded items
            centers: (k, d) tensor of encoded centroids
            metric: Metric providing the distance

        Returns:
            (n,) long tensor of centroid indices
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for centroid update strategies."""

    @abstractmethod
    def update(self, clusters: List[List[Any]], centroids: List[Any],
               metric: Metric, **kwargs) -> List[Any]:
        """Compute the next centroid set from a partition.

        Args:
            clusters: k groups of items, index-aligned with centroids
            centroids: Current centroid set
            metric: Metric providing the mean

        Returns:
            New list of k centroids
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
