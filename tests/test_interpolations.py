# tests/test_interpolations.py

import math

import pytest

from digitrig import interpolations as ip
from digitrig.core.errors import UnknownInterpolatorError


def test_every_curve_starts_at_zero_and_ends_at_one():
    """
    Every registered curve maps 0 -> 0 and 1 -> 1, including the ones built
    on the sine table and the flipped OutIn variants.
    """
    for interp in ip.interpolators():
        # the cube-root curves use the fast cbrt
        tol = 1e-6 if interp.tag.startswith("pow3") and interp.tag.endswith("Inverse") else 1e-9
        assert interp(0.0) == pytest.approx(0.0, abs=tol), interp.tag
        assert interp(1.0) == pytest.approx(1.0, abs=tol), interp.tag


def test_registry_lookup():
    assert ip.get("pow2In") is ip.pow2_in
    assert ip.get("bounceOut") is ip.bounce_out
    assert ip.get_or_none("noSuchCurve") is None
    with pytest.raises(UnknownInterpolatorError):
        ip.get("noSuchCurve")
    with pytest.raises(KeyError):
        ip.get("noSuchCurve")

    tags = ip.tags()
    assert len(tags) == len(set(tags))
    assert tags[0] == "linear"
    for tag in ("smooth", "fade", "pow2OutIn", "exp10", "kumaraswamyCentralA", "elasticOutIn", "backOut"):
        assert tag in tags


def test_alpha_is_clamped():
    assert ip.pow2_in(2.0) == 1.0
    assert ip.pow2_in(-1.0) == 0.0
    assert ip.linear(1.5) == 1.0
    assert ip.linear.apply(10.0, 20.0, 3.0) == 20.0


def test_known_values():
    assert ip.pow2_in(0.5) == 0.25
    assert ip.pow2_out(0.5) == 0.75
    assert ip.pow2(0.25) == 0.125
    assert ip.pow2(0.5) == 0.5
    assert ip.smooth(0.5) == 0.5
    assert ip.smoother(0.5) == 0.5
    assert ip.pow0_5_in(0.25) == 0.5
    assert ip.pow3_in_inverse(0.125) == pytest.approx(0.5, rel=1e-4)
    assert ip.pow3_out_inverse(0.875) == pytest.approx(0.5, rel=1e-4)
    assert ip.circle_out(0.5) == pytest.approx(0.75 ** 0.5, abs=1e-12)
    assert ip.linear.apply(10.0, 20.0, 0.5) == 15.0


def test_aliases_share_functions():
    assert ip.quad_in_out(0.3) == ip.pow2(0.3)
    assert ip.cubic_out(0.3) == ip.pow3_out(0.3)
    assert ip.slow_fast(0.3) == ip.pow2_in(0.3)
    assert ip.fast_slow(0.3) == ip.pow2_out(0.3)
    assert ip.fade(0.3) == ip.smoother(0.3)
    assert ip.back_in(0.3) == ip.swing_in(0.3)


def test_overshooting_curves():
    assert ip.swing_in(0.3) < 0.0
    assert ip.swing_out(0.7) > 1.0
    assert max(ip.elastic_out(k / 100.0) for k in range(101)) > 1.0
    assert min(ip.elastic_in(k / 100.0) for k in range(101)) < 0.0


def test_out_in_curves_pass_through_the_middle():
    for interp in (ip.smooth_out_in, ip.pow2_out_in, ip.pow3_out_in, ip.circle_out_in,
                   ip.bounce_out_in, ip.swing_out_in, ip.exp5_out_in):
        assert interp(0.5) == pytest.approx(0.5, abs=1e-9), interp.tag
    # fast at the ends, slow in the middle
    assert ip.pow2_out_in(0.25) > 0.25
    assert ip.pow2_out_in(0.75) < 0.75


def test_monotonic_curves():
    for interp in (ip.smooth, ip.smoother, ip.sine_out, ip.sine_in, ip.pow3, ip.exp10, ip.circle):
        prev = interp(0.0)
        for k in range(1, 1001):
            cur = interp(k / 1000.0)
            assert cur >= prev - 1e-12, (interp.tag, k)
            prev = cur


def test_equality_hash_and_text():
    twin = ip.Interpolator("pow2", lambda a: a, register=False)
    assert twin == ip.pow2
    assert hash(twin) == hash(ip.pow2)
    assert ip.get("pow2") is ip.pow2
    assert ip.pow2 != ip.pow3
    assert str(ip.pow2) == "pow2"
    assert repr(ip.pow2) == "Interpolator('pow2')"


def test_flip():
    flipped = ip.smooth.flip()
    assert flipped(0.0) == pytest.approx(0.0, abs=1e-12)
    assert flipped(1.0) == pytest.approx(1.0, abs=1e-12)
    assert flipped(0.3) == pytest.approx(ip.smooth_out_in(0.3), abs=1e-15)


def test_factories():
    curve = ip.Interpolator("custom", ip.kumaraswamy_function(1.0, 1.0), register=False)
    assert curve(0.3) == pytest.approx(0.3, abs=1e-12)
    assert ip.get_or_none("custom") is None
    assert ip.bias_gain_function(1.0, 0.5)(0.3) == pytest.approx(0.3, abs=1e-12)
    assert ip.pow_function(1.0)(0.3) == pytest.approx(0.3, abs=1e-12)


def test_nan_alpha_does_not_raise():
    assert math.isnan(ip.sine_out_in(math.nan))
    assert math.isnan(ip.smooth_out_in(math.nan))
    assert math.isnan(ip.bounce_out_in(math.nan))
    assert math.isnan(ip.pow3_in_inverse(math.nan))
    for interp in ip.interpolators():
        interp(math.nan)
