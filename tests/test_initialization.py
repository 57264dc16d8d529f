"""
Centroid initializers: sampling, range and user-supplied centroids.
"""

from __future__ import annotations

import pytest
import torch

from lloyd.base import Point, InvalidArgumentError, ResourceExhaustedError
from lloyd.distances import ScalarMetric, EuclideanMetric
from lloyd.initialization import SamplingInit, RangeInit, FromPreviousInit

from data_gen import SCALARS, POINTS


def _seeded(seed: int) -> torch.Generator:
    gen = torch.Generator()
    gen.manual_seed(seed)
    return gen


def test_sampling_returns_distinct_dataset_items(generator):
    m = ScalarMetric()
    centroids = SamplingInit().initialize(m.encode(SCALARS), 5, m, generator=generator)
    assert len(centroids) == 5
    assert len(set(centroids)) == 5
    assert all(c in SCALARS for c in centroids)


def test_sampling_skips_duplicate_values():
    m = ScalarMetric()
    data = [4, 4, 4, 4, 9]
    for seed in range(10):
        centroids = SamplingInit().initialize(m.encode(data), 2, m, generator=_seeded(seed))
        assert sorted(centroids) == [4.0, 9.0]


def test_sampling_fails_without_enough_distinct_values():
    m = ScalarMetric()
    with pytest.raises(InvalidArgumentError):
        SamplingInit().initialize(m.encode([1, 1, 2]), 3, m, generator=_seeded(0))


def test_sampling_is_reproducible_with_seed():
    m = EuclideanMetric()
    points = m.encode(POINTS)
    a = SamplingInit().initialize(points, 5, m, generator=_seeded(42))
    b = SamplingInit().initialize(points, 5, m, generator=_seeded(42))
    assert a == b
    assert all(isinstance(c, Point) for c in a)


def test_sampling_with_k_equal_to_n_uses_every_item():
    m = EuclideanMetric()
    centroids = SamplingInit().initialize(m.encode(POINTS), len(POINTS), m, generator=_seeded(3))
    assert sorted(centroids) == sorted(Point(*p) for p in POINTS)


@pytest.mark.parametrize("init", [SamplingInit(), RangeInit()])
@pytest.mark.parametrize("k", [0, -1, 13])
def test_initializers_reject_bad_k(init, k):
    m = EuclideanMetric()
    with pytest.raises(InvalidArgumentError):
        init.initialize(m.encode(POINTS), k, m, generator=_seeded(0))


def test_range_draws_within_bounds(generator):
    m = EuclideanMetric()
    centroids = RangeInit().initialize(m.encode(POINTS), 5, m, generator=generator)
    xs = [p[0] for p in POINTS]
    ys = [p[1] for p in POINTS]
    assert len(set(centroids)) == 5
    for c in centroids:
        assert min(xs) <= c.x <= max(xs)
        assert min(ys) <= c.y <= max(ys)


def test_range_scalar_within_bounds(generator):
    m = ScalarMetric()
    centroids = RangeInit().initialize(m.encode(SCALARS), 5, m, generator=generator)
    assert len(set(centroids)) == 5
    assert all(1 <= c <= 59 for c in centroids)


def test_range_exhausts_on_degenerate_data():
    m = ScalarMetric()
    with pytest.raises(ResourceExhaustedError) as info:
        RangeInit(max_attempts=25).initialize(m.encode([7, 7, 7]), 2, m, generator=_seeded(0))
    assert info.value.attempts == 25
    assert info.value.found == 1


def test_range_single_centroid_on_degenerate_data():
    m = ScalarMetric()
    assert RangeInit().initialize(m.encode([7, 7, 7]), 1, m, generator=_seeded(0)) == [7.0]


def test_from_previous_normalizes_centroids():
    m = EuclideanMetric()
    centroids = FromPreviousInit([(0, 0), (10, 10)]).initialize(m.encode(POINTS), 2, m)
    assert centroids == [Point(0.0, 0.0), Point(10.0, 10.0)]
    assert all(isinstance(c, Point) for c in centroids)


def test_from_previous_validates_count_and_duplicates():
    m = ScalarMetric()
    points = m.encode(SCALARS)
    with pytest.raises(InvalidArgumentError):
        FromPreviousInit([1, 2, 3]).initialize(points, 2, m)
    with pytest.raises(InvalidArgumentError):
        FromPreviousInit([5, 5.0]).initialize(points, 2, m)
