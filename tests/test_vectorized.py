# tests/test_vectorized.py

import math

import pytest

from digitrig import trig
from digitrig.core.errors import UnknownTierError, UnknownUnitError

np = pytest.importorskip("numpy")

from digitrig import vectorized as vz  # noqa: E402

SCALAR = {
    ("table", "radians"): (trig.sin, trig.cos, trig.tan),
    ("table", "degrees"): (trig.sin_deg, trig.cos_deg, trig.tan_deg),
    ("table", "turns"): (trig.sin_turns, trig.cos_turns, trig.tan_turns),
    ("smooth", "radians"): (trig.sin_smooth, trig.cos_smooth, trig.tan_smooth),
    ("smooth", "degrees"): (trig.sin_smooth_deg, trig.cos_smooth_deg, trig.tan_smooth_deg),
    ("smooth", "turns"): (trig.sin_smooth_turns, trig.cos_smooth_turns, trig.tan_smooth_turns),
    ("smoother", "radians"): (trig.sin_smoother, trig.cos_smoother, trig.tan_smoother),
    ("smoother", "degrees"): (trig.sin_smoother_deg, trig.cos_smoother_deg, trig.tan_smoother_deg),
    ("smoother", "turns"): (trig.sin_smoother_turns, trig.cos_smoother_turns, trig.tan_smoother_turns),
}

SPAN = {"radians": 20.0, "degrees": 1000.0, "turns": 3.0}


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.mark.parametrize("tier,unit", sorted(SCALAR))
def test_sin_cos_match_scalar(tier, unit, rng):
    x = rng.uniform(-SPAN[unit], SPAN[unit], 2000)
    s_fn, c_fn, _ = SCALAR[(tier, unit)]
    np.testing.assert_allclose(vz.sin(x, unit=unit, tier=tier), [s_fn(v) for v in x], rtol=0, atol=1e-12)
    np.testing.assert_allclose(vz.cos(x, unit=unit, tier=tier), [c_fn(v) for v in x], rtol=0, atol=1e-12)


@pytest.mark.parametrize("tier,unit", sorted(SCALAR))
def test_tan_matches_scalar(tier, unit, rng):
    x = rng.uniform(-SPAN[unit], SPAN[unit], 2000)
    t_fn = SCALAR[(tier, unit)][2]
    np.testing.assert_allclose(vz.tan(x, unit=unit, tier=tier), [t_fn(v) for v in x], rtol=1e-9, atol=1e-12)


def test_table_tier_is_the_same_lookup():
    x = np.linspace(-7.0, 7.0, 1001)
    assert np.array_equal(vz.sin(x), np.array([trig.sin(v) for v in x]))


def test_float32_uses_single_precision_tables():
    """float32 input reads the f32 tables and keeps its dtype; anything else is float64."""
    x = np.array([0.0, 0.3, 1.0, -2.5, 4.0], dtype=np.float32)
    out = vz.sin(x)
    assert out.dtype == np.float32
    for v, got in zip(x, out):
        i = trig.table_index(float(v), trig.RAD_TO_INDEX)
        assert float(got) == trig.SIN_TABLE_F32[i]
    assert vz.sin(x, tier="smoother").dtype == np.float32
    assert vz.atan2(x, x).dtype == np.float32
    assert vz.sin(x.astype(np.float64)).dtype == np.float64
    assert vz.sin([1, 2, 3]).dtype == np.float64


def test_non_finite_elements_give_nan():
    x = np.array([np.nan, np.inf, -np.inf, 0.5])
    for tier in ("table", "smooth", "smoother"):
        out = vz.sin(x, tier=tier)
        assert np.isnan(out[:3]).all()
        assert out[3] == pytest.approx(math.sin(0.5), abs=5e-4)
        assert np.isnan(vz.tan(x, tier=tier)[:3]).all()


def test_tan_table_right_angles():
    out = vz.tan(np.array([90.0, 270.0]), unit="degrees")
    assert out[0] == np.inf
    assert out[1] == -np.inf


def test_inverse_functions_match_scalar():
    a = np.linspace(-1.0, 1.0, 1001)
    np.testing.assert_allclose(vz.asin(a), [trig.asin(v) for v in a], rtol=0, atol=1e-12)
    np.testing.assert_allclose(vz.acos(a), [trig.acos(v) for v in a], rtol=0, atol=1e-12)
    np.testing.assert_allclose(vz.asin(a, unit="deg"), [trig.asin_deg(v) for v in a], rtol=0, atol=1e-10)
    np.testing.assert_allclose(vz.acos(a, unit="deg"), [trig.acos_deg(v) for v in a], rtol=0, atol=1e-10)
    np.testing.assert_allclose(vz.acos(a, unit="turns"), [trig.acos_turns(v) for v in a], rtol=0, atol=1e-12)

    i = np.concatenate([np.linspace(-60.0, 60.0, 1001), [np.inf, -np.inf, 0.0]])
    np.testing.assert_allclose(vz.atan(i), [trig.atan(v) for v in i], rtol=0, atol=1e-12)
    np.testing.assert_allclose(vz.atan(i, unit="turns"), [trig.atan_turns(v) for v in i], rtol=0, atol=1e-12)


def test_inverse_out_of_domain_and_nan():
    out = vz.asin(np.array([2.0, -2.0, np.nan]))
    assert out[0] == trig.HALF_PI
    assert out[1] == -trig.HALF_PI
    assert np.isnan(out[2])
    assert np.isnan(vz.atan(np.array([np.nan]))[0])


def test_atan2_matches_scalar(rng):
    y = np.concatenate([rng.uniform(-5.0, 5.0, 500), [0.0, 0.0, 1.0, -1.0, np.inf, np.inf, -np.inf, np.nan, 1.0, 0.0]])
    x = np.concatenate([rng.uniform(-5.0, 5.0, 500), [0.0, -1.0, 0.0, 0.0, np.inf, -np.inf, np.inf, 1.0, np.nan, 2.0]])
    cases = [
        ("radians", False, trig.atan2),
        ("degrees", False, trig.atan2_deg),
        ("degrees", True, trig.atan2_deg360),
        ("turns", True, trig.atan2_turns),
    ]
    for unit, positive, fn in cases:
        got = vz.atan2(y, x, unit=unit, positive=positive)
        want = [fn(a, b) for a, b in zip(y, x)]
        np.testing.assert_allclose(got, want, rtol=0, atol=1e-10)


def test_atan2_broadcasts():
    out = vz.atan2(np.array([[1.0], [-1.0]]), np.array([1.0, -1.0, 0.0]))
    assert out.shape == (2, 3)
    assert out[0, 2] == trig.HALF_PI
    assert out[1, 2] == -trig.HALF_PI


def test_bad_unit_and_tier():
    with pytest.raises(UnknownUnitError):
        vz.sin([1.0], unit="grad")
    with pytest.raises(UnknownTierError):
        vz.cos([1.0], tier="fastest")


def test_huge_inverse_input_saturates():
    a = np.array([1e200, -1e200, np.inf, -np.inf, np.nan])
    out = vz.asin(a)
    assert list(out[:4]) == [trig.HALF_PI, -trig.HALF_PI, trig.HALF_PI, -trig.HALF_PI]
    assert np.isnan(out[4])
    out = vz.acos(a, unit="degrees")
    assert list(out[:4]) == [0.0, 180.0, 0.0, 180.0]


def test_positive_atan2_stays_below_a_full_turn():
    y = np.array([-1e-300, -5e-324, -1e-5])
    x = np.array([1e300, 2.0, 1.0])
    turns = vz.atan2(y, x, unit="turns", positive=True)
    degs = vz.atan2(y, x, unit="degrees", positive=True)
    assert turns[0] == 0.0
    assert degs[1] == 0.0
    assert ((turns >= 0.0) & (turns < 1.0)).all()
    assert ((degs >= 0.0) & (degs < 360.0)).all()
