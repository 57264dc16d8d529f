# tests/utils.py
"""
Small, reusable helpers used across the test suite.

Functions:
- assert_partition(items, clusters): every item in exactly one group.
- assert_fixed_point(model, items): reassignment reproduces the clusters.
- same_grouping(labels_a, labels_b): equal partitions up to relabeling.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from lloyd.assignments import NearestCentroidAssignment, partition
from lloyd.utils.metrics import is_partition


def assert_partition(items: Sequence[Any], clusters: List[List[Any]]) -> None:
    assert is_partition(items, clusters), "Clusters do not cover the dataset exactly once"


def assert_fixed_point(model, items: Sequence[Any]) -> None:
    """Assigning the data to the final centroids must give back the final clusters."""
    metric = model.metric_
    points = metric.encode(items)
    centers = metric.encode(model.cluster_centers_)
    labels = NearestCentroidAssignment().compute_assignments(points, centers, metric)
    assert partition(items, labels, len(model.cluster_centers_)) == model.clusters_


def same_grouping(labels_a: Sequence[int], labels_b: Sequence[int]) -> bool:
    """True when both label vectors describe the same partition."""
    forward = {}
    backward = {}
    for a, b in zip(labels_a, labels_b):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return len(labels_a) == len(labels_b)
