import random

import pytest

from cloudidw.point import Point, generate_random_point_cloud, noise_mask


def test_point_default_weight():
    p = Point(1.0, 2.0, 3.0)
    assert p.weight == 0.0
    assert (p.x, p.y, p.z) == (1.0, 2.0, 3.0)


@pytest.mark.parametrize("coords", [(0, 0, 0), (1.5, -2.0, 7.25), (-100, 50, 3)])
def test_noise_mask_is_non_negative(coords):
    assert noise_mask(*coords) >= 0.0


def test_cloud_has_requested_size():
    cloud = generate_random_point_cloud(50, 0.0, 10.0, 1.0, 5.0, random.Random(1))
    assert len(cloud) == 50


def test_cloud_points_within_ranges_and_below_threshold():
    cloud = generate_random_point_cloud(200, -5.0, 5.0, 2.0, 3.0, random.Random(7))
    for p in cloud:
        assert -5.0 <= p.x <= 5.0
        assert -5.0 <= p.y <= 5.0
        assert -5.0 <= p.z <= 5.0
        assert 2.0 <= p.weight <= 3.0
        assert noise_mask(p.x, p.y, p.z) < 0.9


def test_cloud_is_reproducible_with_seed():
    a = generate_random_point_cloud(30, 0.0, 10.0, 0.0, 1.0, random.Random(42))
    b = generate_random_point_cloud(30, 0.0, 10.0, 0.0, 1.0, random.Random(42))
    assert a == b


def test_zero_points_gives_empty_cloud():
    assert generate_random_point_cloud(0, 0.0, 1.0, 0.0, 1.0) == []


def test_negative_count_raises():
    with pytest.raises(ValueError):
        generate_random_point_cloud(-1, 0.0, 1.0, 0.0, 1.0)