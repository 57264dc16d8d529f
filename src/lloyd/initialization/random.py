"""
Random initialization strategies.

SamplingInit picks existing dataset items; RangeInit draws fresh values
inside the bounding box of the dataset.
"""

from typing import Any, List, Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, Metric
from ..base.exceptions import InvalidArgumentError, ResourceExhaustedError
from ..utils.validation import check_n_clusters


class SamplingInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Walks a random permutation of the dataset (sampling without replacement)
    and keeps the first n_clusters items whose values have not been taken yet,
    so duplicated dataset values never produce duplicated centroids.
    """

    def initialize(self, points: Tensor, n_clusters: int, metric: Metric,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> List[Any]:
        """Initialize centroids with random dataset items.

        Args:
            points: (n, d) encoded dataset
            n_clusters: Number of clusters
            metric: Metric used to decode rows
            generator: Optional random source

        Returns:
            List of n_clusters distinct centroids
        """
        n_points = points.shape[0]
        check_n_clusters(n_clusters, n_points)

        order = torch.randperm(n_points, generator=generator)

        centroids = []
        seen = set()
        for idx in order.tolist():
            candidate = metric.decode(points[idx])
            if candidate in seen:
                continue
            seen.add(candidate)
            centroids.append(candidate)
            if len(centroids) == n_clusters:
                return centroids

        raise InvalidArgumentError(f"Cannot pick {n_clusters} distinct centroids from a dataset "
                                   f"with {len(centroids)} distinct values")


class RangeInit(InitializationStrategy):
    """Random initialization inside the bounding range of the dataset.

    Each coordinate is drawn uniformly from [min, max] of that axis. Draws
    equal to an already chosen centroid are rejected and retried.
    """

    def __init__(self, max_attempts: Optional[int] = None):
        """
        Args:
            max_attempts: Total number of draws allowed before giving up.
                          If None, uses 100 * n_clusters.
        """
        self.max_attempts = max_attempts

    def initialize(self, points: Tensor, n_clusters: int, metric: Metric,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> List[Any]:
        """Initialize centroids with uniform draws from the dataset bounds.

        Args:
            points: (n, d) encoded dataset
            n_clusters: Number of clusters
            metric: Metric used to decode draws
            generator: Optional random source

        Returns:
            List of n_clusters distinct centroids

        Raises:
            ResourceExhaustedError: If max_attempts draws did not yield enough distinct values
        """
        n_points, dimension = points.shape
        check_n_clusters(n_clusters, n_points)

        low = points.min(dim=0).values
        high = points.max(dim=0).values
        span = high - low

        max_attempts = self.max_attempts if self.max_attempts is not None else 100 * n_clusters

        centroids = []
        seen = set()
        attempts = 0
        while len(centroids) < n_clusters:
            if attempts >= max_attempts:
                raise ResourceExhaustedError(
                    f"Found only {len(centroids)} of {n_clusters} distinct centroids "
                    f"after {attempts} draws",
                    attempts=attempts,
                    found=len(centroids)
                )
            attempts += 1

            u = torch.rand(dimension, generator=generator, dtype=points.dtype)
            candidate = metric.decode(low + u * span)
            if candidate not in seen:
                seen.add(candidate)
                centroids.append(candidate)

        return centroids
