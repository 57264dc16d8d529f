"""
Hard assignment strategy for the convergence loop.

Assigns each point to its nearest centroid under the metric.
"""

from typing import Any, List, Sequence
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, Metric
from ..base.exceptions import InvalidArgumentError


class NearestCentroidAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to the nearest centroid.

    Centroids are scanned in order with a best-so-far accumulator started
    at centroid 0. A later centroid takes over only when its distance is
    strictly smaller, so exact ties go to the lowest index.
    """

    def compute_assignments(self, points: Tensor, centers: Tensor,
                            metric: Metric, **kwargs) -> Tensor:
        """Assign each point to its nearest centroid.

        Args:
            points: (n, d) encoded items
            centers: (k, d) encoded centroids
            metric: Metric providing the distance
            **kwargs: Ignored

        Returns:
            (n,) long tensor of centroid indices
        """
        n_points = points.shape[0]
        n_clusters = centers.shape[0]

        if n_clusters == 0:
            raise InvalidArgumentError("Cannot assign points to an empty centroid set")

        best_distance = metric.distance_to_point(points, centers[0])
        assignments = torch.zeros(n_points, dtype=torch.long, device=points.device)

        for k in range(1, n_clusters):
            distance = metric.distance_to_point(points, centers[k])
            closer = distance < best_distance
            assignments[closer] = k
            best_distance = torch.where(closer, distance, best_distance)

        return assignments

    def compute_distances(self, points: Tensor, centers: Tensor, metric: Metric) -> Tensor:
        """Return the full (n, k) distance table."""
        if centers.shape[0] == 0:
            raise InvalidArgumentError("Cannot compute distances to an empty centroid set")
        return torch.stack(
            [metric.distance_to_point(points, center) for center in centers], dim=1
        )


def partition(items: Sequence[Any], assignments: Tensor, n_clusters: int) -> List[List[Any]]:
    """Group items by assignment, preserving dataset order within each group.

    Args:
        items: Dataset items, aligned with assignments
        assignments: (n,) centroid indices
        n_clusters: Number of groups k

    Returns:
        k lists of items; group i holds the items assigned to centroid i
    """
    clusters = [[] for _ in range(n_clusters)]
    for item, k in zip(items, assignments.tolist()):
        clusters[k].append(item)
    return clusters
