# tests/test_inverse.py

import math
import random

import pytest

from digitrig import trig


def _grid(lo, hi, n):
    return [lo + (hi - lo) * k / n for k in range(n + 1)]


def test_asin_acos_error_bound():
    """Largest error of the sqrt(1 - a) form is about 6.8e-5 radians."""
    for a in _grid(-1.0, 1.0, 4000):
        assert abs(trig.asin(a) - math.asin(a)) <= 1e-4
        assert abs(trig.acos(a) - math.acos(a)) <= 1e-4


def test_asin_acos_units():
    for a in _grid(-1.0, 1.0, 1000):
        assert trig.asin_deg(a) == pytest.approx(math.degrees(math.asin(a)), abs=5e-3)
        assert trig.acos_deg(a) == pytest.approx(math.degrees(math.acos(a)), abs=5e-3)
        assert trig.asin_turns(a) == pytest.approx(math.asin(a) / (2 * math.pi), abs=2e-5)
        assert trig.acos_turns(a) == pytest.approx(math.acos(a) / (2 * math.pi), abs=2e-5)


def test_asin_acos_endpoints():
    assert trig.asin(1.0) == trig.HALF_PI
    assert trig.asin(-1.0) == -trig.HALF_PI
    assert trig.acos(1.0) == 0.0
    assert trig.acos(-1.0) == trig.PI
    assert trig.asin_deg(1.0) == 90.0
    assert trig.acos_deg(-1.0) == 180.0
    assert trig.asin_turns(-1.0) == -0.25
    assert trig.acos_turns(-1.0) == 0.5


def test_asin_saturates_outside_domain():
    assert trig.asin(2.0) == trig.HALF_PI
    assert trig.asin(-5.0) == -trig.HALF_PI
    assert trig.acos(1.5) == 0.0
    assert trig.acos(-1.5) == trig.PI
    assert math.isnan(trig.asin(math.nan))
    assert math.isnan(trig.acos_deg(math.nan))


def test_sin_of_asin_round_trip():
    random.seed(42)
    for _ in range(2000):
        a = random.uniform(-1.0, 1.0)
        assert trig.sin_smoother(trig.asin(a)) == pytest.approx(a, abs=1e-4)
        assert trig.cos_smoother(trig.acos(a)) == pytest.approx(a, abs=1e-4)


def test_atan_error_bound():
    random.seed(42)
    for _ in range(5000):
        i = random.uniform(-50.0, 50.0)
        assert abs(trig.atan(i) - math.atan(i)) <= 5e-6
        assert abs(trig.atan_deg(i) - math.degrees(math.atan(i))) <= 3e-4
        assert abs(trig.atan_turns(i) - math.atan(i) / (2 * math.pi)) <= 1e-6
        assert trig.atan_unchecked(i) == trig.atan(i)


def test_atan_special_values():
    assert trig.atan(0.0) == 0.0
    assert trig.atan(1.0) == pytest.approx(math.pi / 4, abs=1e-12)
    assert trig.atan_deg(-1.0) == pytest.approx(-45.0, abs=1e-12)
    assert trig.atan(math.inf) == pytest.approx(trig.HALF_PI, abs=5e-6)
    assert trig.atan_deg(-math.inf) == pytest.approx(-90.0, abs=3e-4)
    assert trig.atan(1e300) == pytest.approx(trig.HALF_PI, abs=5e-6)
    assert math.isnan(trig.atan(math.nan))
    assert math.isnan(trig.atan_unchecked(math.inf))


def test_atan_is_odd():
    random.seed(42)
    for _ in range(500):
        i = random.uniform(0.0, 100.0)
        assert trig.atan(-i) == -trig.atan(i)


def test_atan2_quadrants():
    q = math.pi / 4
    assert trig.atan2(1.0, 1.0) == pytest.approx(q, abs=5e-6)
    assert trig.atan2(1.0, -1.0) == pytest.approx(3 * q, abs=5e-6)
    assert trig.atan2(-1.0, -1.0) == pytest.approx(-3 * q, abs=5e-6)
    assert trig.atan2(-1.0, 1.0) == pytest.approx(-q, abs=5e-6)


def test_atan2_axes():
    assert trig.atan2(0.0, 0.0) == 0.0
    assert trig.atan2(0.0, 1.0) == 0.0
    assert trig.atan2(0.0, -1.0) == trig.PI
    assert trig.atan2(1.0, 0.0) == trig.HALF_PI
    assert trig.atan2(-1.0, 0.0) == -trig.HALF_PI
    assert trig.atan2(3.0, -0.0) == trig.HALF_PI

    assert trig.atan2_deg(1.0, 0.0) == 90.0
    assert trig.atan2_deg(0.0, -2.0) == 180.0
    assert trig.atan2_deg360(-1.0, 0.0) == 270.0
    assert trig.atan2_deg360(0.0, -1.0) == 180.0
    assert trig.atan2_deg360(0.0, 0.0) == 0.0
    assert trig.atan2_turns(1.0, 0.0) == 0.25
    assert trig.atan2_turns(-1.0, 0.0) == 0.75
    assert trig.atan2_turns(0.0, -1.0) == 0.5


def test_atan2_infinities_and_nan():
    q = math.pi / 4
    assert trig.atan2(math.inf, math.inf) == pytest.approx(q, abs=5e-6)
    assert trig.atan2(math.inf, -math.inf) == pytest.approx(3 * q, abs=5e-6)
    assert trig.atan2(-math.inf, math.inf) == pytest.approx(-q, abs=5e-6)
    assert trig.atan2(math.inf, 1.0) == trig.HALF_PI
    assert trig.atan2(1.0, math.inf) == pytest.approx(0.0, abs=5e-6)
    assert math.isnan(trig.atan2(math.nan, 1.0))
    assert math.isnan(trig.atan2(1.0, math.nan))
    assert math.isnan(trig.atan2_deg360(math.nan, math.nan))
    assert math.isnan(trig.atan2_turns(0.0, math.nan))


def test_atan2_matches_math_and_ranges():
    random.seed(42)
    for _ in range(5000):
        y = random.uniform(-10.0, 10.0)
        x = random.uniform(-10.0, 10.0)
        exact = math.atan2(y, x)

        r = trig.atan2(y, x)
        assert -math.pi < r <= math.pi or r == pytest.approx(-math.pi, abs=5e-6)
        assert r == pytest.approx(exact, abs=5e-6)

        assert trig.atan2_deg(y, x) == pytest.approx(math.degrees(exact), abs=3e-4)

        d = trig.atan2_deg360(y, x)
        assert 0.0 <= d < 360.0
        assert d == pytest.approx(math.degrees(exact) % 360.0, abs=3e-4)

        t = trig.atan2_turns(y, x)
        assert 0.0 <= t < 1.0
        assert t == pytest.approx((exact / (2 * math.pi)) % 1.0, abs=1e-6)


def test_asin_acos_saturate_for_huge_input():
    """The cubic would overflow past about 1e102; clamping first keeps the saturated value."""
    for big in (1e200, 1e308, math.inf):
        assert trig.asin(big) == trig.HALF_PI
        assert trig.asin(-big) == -trig.HALF_PI
        assert trig.acos(big) == 0.0
        assert trig.acos(-big) == trig.PI
        assert trig.asin_deg(big) == 90.0
        assert trig.acos_deg(-big) == 180.0
        assert trig.asin_turns(-big) == -0.25
        assert trig.acos_turns(-big) == 0.5


def test_positive_atan2_never_reaches_a_full_turn():
    """A slope that underflows to -0.0 below the x axis must wrap to 0, not to a full turn."""
    assert trig.atan2_turns(-1e-300, 1e300) == 0.0
    assert trig.atan2_deg360(-5e-324, 2.0) == 0.0
    random.seed(42)
    for _ in range(1000):
        y = -10.0 ** random.uniform(-320.0, -1.0)
        x = 10.0 ** random.uniform(-1.0, 300.0)
        assert 0.0 <= trig.atan2_turns(y, x) < 1.0
        assert 0.0 <= trig.atan2_deg360(y, x) < 360.0
