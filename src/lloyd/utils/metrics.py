"""
Clustering evaluation metrics.

Internal metrics on a finished partition; no ground truth needed.
"""

from collections import Counter
from typing import Any, List, Sequence
import torch
from torch import Tensor

from ..base.interfaces import Metric


def inertia(points: Tensor, assignments: Tensor, centers: Tensor, metric: Metric) -> float:
    """Compute sum of squared distances to the assigned centers.

    Args:
        points: (n, d) encoded items
        assignments: (n,) cluster labels
        centers: (k, d) encoded centers
        metric: Metric providing the distance

    Returns:
        Total inertia (lower is better)
    """
    total = 0.0
    n_clusters = centers.shape[0]

    for k in range(n_clusters):
        mask = assignments == k
        if mask.any():
            distances = metric.distance_to_point(points[mask], centers[k])
            total += torch.sum(distances * distances).item()

    return total


def cluster_sizes(clusters: List[List[Any]]) -> List[int]:
    """Number of members in each cluster."""
    return [len(members) for members in clusters]


def is_partition(items: Sequence[Any], clusters: List[List[Any]]) -> bool:
    """Check that the clusters cover every item exactly once.

    Items are compared by value, so duplicated dataset values must appear
    as many times across the clusters as in the dataset.
    """
    merged = Counter()
    for members in clusters:
        merged.update(members)
    return merged == Counter(items)
