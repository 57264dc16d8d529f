"""
Initialization from a previous solution or custom centroids.

Useful for warm starts or when you have good initial guesses.
"""

from typing import Any, List, Optional, Sequence
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, Metric
from ..base.exceptions import InvalidArgumentError
from ..utils.validation import check_n_clusters, check_distinct


class FromPreviousInit(InitializationStrategy):
    """Initialize from user-supplied centroids.

    The centroids are normalized through the metric, so tuples become
    ``Point`` values and integers become floats.
    """

    def __init__(self, initial_centroids: Sequence[Any]):
        """
        Args:
            initial_centroids: Sequence of k starting centroids
        """
        self.initial_centroids = initial_centroids

    def initialize(self, points: Tensor, n_clusters: int, metric: Metric,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> List[Any]:
        """Initialize from the stored centroids.

        Args:
            points: (n, d) encoded dataset (used for validation)
            n_clusters: Expected number of clusters
            metric: Metric used to encode and decode the centroids
            generator: Ignored

        Returns:
            List of centroids
        """
        check_n_clusters(n_clusters, points.shape[0])

        centers = metric.encode(self.initial_centroids)
        if centers.shape[0] != n_clusters:
            raise InvalidArgumentError(f"Initial centroids has {centers.shape[0]} entries, "
                                       f"but n_clusters={n_clusters}")

        centroids = [metric.decode(row) for row in centers]
        check_distinct(centroids, "initial centroids")
        return centroids
