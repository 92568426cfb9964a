import math
import random

import pytest

from nayukicore.math_helper import (
    PI,
    Extent2D,
    angle_from_xy,
    clamp,
    lerp,
    rand_f,
    rand_int,
    rand_unit_vec3,
)


def test_rand_f_within_range():
    random.seed(7)
    values = [rand_f(-3.0, 5.0) for _ in range(500)]
    assert all(-3.0 <= v < 5.0 for v in values)


def test_rand_int_inclusive_bounds():
    random.seed(11)
    values = {rand_int(2, 4) for _ in range(300)}
    assert values == {2, 3, 4}


def test_lerp_endpoints():
    assert lerp(2.0, 6.0, 0.0) == 2.0
    assert lerp(2.0, 6.0, 1.0) == 6.0


def test_lerp_midpoint_is_between():
    mid = lerp(2.0, 6.0, 0.5)
    assert 2.0 < mid < 6.0
    assert mid - 2.0 == pytest.approx(6.0 - mid)


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-2, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_angle_on_axes():
    assert angle_from_xy(1.0, 0.0) == 0.0
    assert angle_from_xy(0.0, 1.0) == pytest.approx(PI / 2)
    assert angle_from_xy(-1.0, 0.0) == pytest.approx(PI)


@pytest.mark.parametrize("x,y", [(1.0, 1.0), (-1.0, 2.0), (-3.0, -1.0), (2.0, -5.0)])
def test_angle_matches_direction(x, y):
    theta = angle_from_xy(x, y)
    assert 0.0 <= theta < 2 * PI
    r = math.hypot(x, y)
    assert math.cos(theta) * r == pytest.approx(x, abs=1e-6)
    assert math.sin(theta) * r == pytest.approx(y, abs=1e-6)


def test_angle_of_origin_is_undefined():
    result = angle_from_xy(0.0, 0.0)
    assert str(result) == "nan"


def test_rand_unit_vec3_has_unit_length():
    random.seed(3)
    for _ in range(100):
        v = rand_unit_vec3()
        assert math.sqrt(sum(c * c for c in v)) == pytest.approx(1.0)


def test_extent_equality_and_default():
    assert Extent2D(640, 480) == Extent2D(640, 480)
    assert Extent2D(640, 480) != Extent2D(480, 640)
    assert Extent2D() == Extent2D(0, 0)


def test_extent_rejects_out_of_range():
    with pytest.raises(ValueError):
        Extent2D(-1, 5)
    with pytest.raises(ValueError):
        Extent2D(5, 2**32)