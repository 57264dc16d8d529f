"""Metrics defining distance and mean for each supported item type."""

from typing import Union

from ..base.interfaces import Metric
from ..base.exceptions import InvalidArgumentError
from .scalar import ScalarMetric
from .euclidean import EuclideanMetric

METRICS = {
    'scalar': ScalarMetric,
    'euclidean': EuclideanMetric,
    'point': EuclideanMetric,
}


def get_metric(metric: Union[str, Metric]) -> Metric:
    """Resolve a metric instance or registry name.

    Args:
        metric: A Metric instance, or one of 'scalar', 'euclidean', 'point'

    Returns:
        Metric instance
    """
    if isinstance(metric, Metric):
        return metric
    if isinstance(metric, str) and metric in METRICS:
        return METRICS[metric]()
    raise InvalidArgumentError(
        f"Unknown metric: {metric!r}. Expected a Metric or one of {sorted(METRICS)}"
    )


__all__ = [
    'ScalarMetric',
    'EuclideanMetric',
    'get_metric',
    'METRICS'
]
