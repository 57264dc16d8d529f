"""
Metric behavior: distance, mean, encoding and the registry.
"""

from __future__ import annotations

import math

import numpy as np
import pytest
import torch

from lloyd.base import Point, InvalidArgumentError
from lloyd.distances import ScalarMetric, EuclideanMetric, get_metric


def test_scalar_distance_is_absolute_difference():
    m = ScalarMetric()
    assert m.distance(3, 10) == 7.0
    assert m.distance(10, 3) == 7.0
    assert m.distance(-2.5, -2.5) == 0.0


def test_scalar_mean():
    m = ScalarMetric()
    assert m.mean([1, 2, 3, 4]) == pytest.approx(2.5)
    assert isinstance(m.mean([1, 2]), float)


def test_point_distance_is_euclidean():
    m = EuclideanMetric()
    assert m.distance((0, 0), (3, 4)) == pytest.approx(5.0)
    assert m.distance(Point(3, 4), Point(0, 0)) == pytest.approx(5.0)
    assert m.distance((1.5, -2.0), (1.5, -2.0)) == 0.0


def test_point_mean_is_per_axis():
    m = EuclideanMetric()
    mean = m.mean([(0, 0), (2, 4), (4, 2)])
    assert isinstance(mean, Point)
    assert mean.x == pytest.approx(2.0)
    assert mean.y == pytest.approx(2.0)


@pytest.mark.parametrize("metric,item", [
    (ScalarMetric(), 17),
    (ScalarMetric(), -0.125),
    (EuclideanMetric(), (11, 52)),
    (EuclideanMetric(), Point(0.1, 0.7)),
])
def test_mean_of_singleton_is_the_item(metric, item):
    assert metric.mean([item]) == item


@pytest.mark.parametrize("metric", [ScalarMetric(), EuclideanMetric()])
def test_mean_of_empty_collection_fails(metric):
    with pytest.raises(InvalidArgumentError):
        metric.mean([])


def test_point_compares_equal_to_tuple():
    assert Point(1.0, 2.0) == (1, 2)
    assert hash(Point(1.0, 2.0)) == hash((1, 2))


def test_encode_shapes():
    assert ScalarMetric().encode([1, 2, 3]).shape == (3, 1)
    assert ScalarMetric().encode(np.array([[1.0], [2.0]])).shape == (2, 1)
    assert EuclideanMetric().encode([(1, 2), (3, 4)]).shape == (2, 2)
    assert EuclideanMetric().encode([]).shape == (0, 2)
    assert EuclideanMetric().encode([(1, 2)]).dtype == torch.float64


def test_encode_rejects_wrong_shapes():
    with pytest.raises(InvalidArgumentError):
        EuclideanMetric().encode([1, 2, 3])
    with pytest.raises(InvalidArgumentError):
        EuclideanMetric().encode([(1, 2, 3)])
    with pytest.raises(InvalidArgumentError):
        ScalarMetric().encode([(1, 2), (3, 4)])
    with pytest.raises(InvalidArgumentError):
        ScalarMetric().encode(5)


def test_distance_to_point_batches_rows():
    m = EuclideanMetric()
    points = m.encode([(0, 0), (3, 4), (6, 8)])
    d = m.distance_to_point(points, torch.tensor([0.0, 0.0], dtype=torch.float64))
    assert d.tolist() == pytest.approx([0.0, 5.0, 10.0])


def test_distance_properties_on_random_points(rng):
    m = EuclideanMetric()
    xy = rng.normal(size=(20, 2))
    for a, b in zip(xy[:10], xy[10:]):
        a, b = tuple(a), tuple(b)
        d = m.distance(a, b)
        assert d >= 0.0
        assert d == m.distance(b, a)
        assert d == pytest.approx(math.hypot(a[0] - b[0], a[1] - b[1]))


def test_get_metric_registry():
    assert isinstance(get_metric('scalar'), ScalarMetric)
    assert isinstance(get_metric('euclidean'), EuclideanMetric)
    assert isinstance(get_metric('point'), EuclideanMetric)
    m = ScalarMetric()
    assert get_metric(m) is m
    with pytest.raises(InvalidArgumentError):
        get_metric('manhattan')
