"""
Named interpolation (easing) curves.

An interpolation function takes alpha, usually in [0, 1], and returns a value
that is usually in [0, 1] too, with f(0) == 0 and f(1) == 1. :class:`Interpolator`
wraps such a function under a unique tag, clamps alpha into [0, 1], and
registers itself so it can be looked up by tag with :func:`get`.

Naming follows the usual easing vocabulary: "In" accelerates from rest, "Out"
decelerates into rest, no suffix does both, and "OutIn" is the flipped form
(fast at both ends, slow through the middle). Tags keep their camelCase
spelling (``"pow2OutIn"``); the module attributes are snake_case
(``pow2_out_in``).
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Optional

from .core.errors import UnknownInterpolatorError
from .mathtools import barron_spline, cbrt, fract, lerp
from .trig.lookup import cos_turns, sin_turns

InterpolationFunction = Callable[[float], float]

_REGISTRY: Dict[str, "Interpolator"] = {}


def flip(fn: InterpolationFunction) -> InterpolationFunction:
    """
    Swap the two halves of `fn` around alpha == 0.5, turning an In-Out curve
    into an Out-In one. Only continuous when fn(0) == 0, fn(0.5) == 0.5 and
    fn(1) == 1.
    """
    def flipped(a: float) -> float:
        return fn(fract(a + 0.5)) + math.copysign(0.5, a - 0.5)
    return flipped


class Interpolator:
    """An interpolation function with a tag; clamps alpha to [0, 1] when called."""

    __slots__ = ("tag", "fn")

    def __init__(self, tag: str, fn: InterpolationFunction, register: bool = True):
        self.tag = tag
        self.fn = fn
        if register:
            # a later Interpolator with the same tag replaces the earlier one
            _REGISTRY[tag] = self

    def __call__(self, alpha: float) -> float:
        return self.fn(min(max(alpha, 0.0), 1.0))

    def apply(self, start: float, end: float, alpha: float) -> float:
        """Map this curve from [0, 1] onto [start, end]."""
        return start + self(alpha) * (end - start)

    def flip(self) -> InterpolationFunction:
        return flip(self.fn)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interpolator):
            return NotImplemented
        return self.tag == other.tag

    def __hash__(self) -> int:
        return hash(self.tag)

    def __repr__(self) -> str:
        return f"Interpolator({self.tag!r})"

    def __str__(self) -> str:
        return self.tag


def get(tag: str) -> Interpolator:
    try:
        return _REGISTRY[tag]
    except KeyError:
        raise UnknownInterpolatorError(tag) from None


def get_or_none(tag: str) -> Optional[Interpolator]:
    return _REGISTRY.get(tag)


def tags() -> List[str]:
    """Every registered tag, in registration order."""
    return list(_REGISTRY)


def interpolators() -> List[Interpolator]:
    return list(_REGISTRY.values())


# --- function factories ------------------------------------------------------

def linear_function(a: float) -> float:
    return a


def pow_function(power: float) -> InterpolationFunction:
    """Accelerate then decelerate; power 2 is quadratic ease-in-out."""
    def fn(a: float) -> float:
        if a <= 0.5:
            return (a + a) ** power * 0.5
        return (2.0 - a - a) ** power * -0.5 + 1.0
    return fn


def pow_out_in_function(power: float) -> InterpolationFunction:
    def fn(a: float) -> float:
        if a > 0.5:
            return (a + a - 1.0) ** power * 0.5 + 0.5
        return (1.0 - a - a) ** power * -0.5 + 0.5
    return fn


def pow_in_function(power: float) -> InterpolationFunction:
    return lambda a: a ** power


def pow_out_function(power: float) -> InterpolationFunction:
    return lambda a: 1.0 - (1.0 - a) ** power


def exp_function(value: float, power: float) -> InterpolationFunction:
    lo = value ** -power
    scale = 1.0 / (1.0 - lo)

    def fn(a: float) -> float:
        if a <= 0.5:
            return (value ** (power * (a * 2.0 - 1.0)) - lo) * scale * 0.5
        return (2.0 - (value ** (-power * (a * 2.0 - 1.0)) - lo) * scale) * 0.5
    return fn


def exp_in_function(value: float, power: float) -> InterpolationFunction:
    lo = value ** -power
    scale = 1.0 / (1.0 - lo)
    return lambda a: (value ** (power * (a - 1.0)) - lo) * scale


def exp_out_function(value: float, power: float) -> InterpolationFunction:
    lo = value ** -power
    scale = 1.0 / (1.0 - lo)
    return lambda a: 1.0 - (value ** (-power * a) - lo) * scale


def kumaraswamy_function(a: float, b: float) -> InterpolationFunction:
    """
    The CDF shapes of the Kumaraswamy distribution; a and b must be > 0. Most
    of these curves are asymmetrical.
    """
    inv_a = 1.0 / a
    inv_b = 1.0 / b
    return lambda x: (1.0 - (1.0 - x) ** inv_b) ** inv_a


def bias_gain_function(shape: float, turning: float) -> InterpolationFunction:
    """Wraps :func:`~digitrig.mathtools.barron_spline`."""
    return lambda a: barron_spline(a, shape, turning)


def bounce_out_function(*pairs: float) -> InterpolationFunction:
    """
    Decelerates by bouncing to rest. `pairs` alternate (width, height) for each
    bounce; the widths should sum to about 2.
    """
    n = (len(pairs) & -2) - 1

    def fn(a: float) -> float:
        b = a + pairs[0] * 0.5
        width = height = 0.0
        for i in range(0, n, 2):
            width = pairs[i]
            if b <= width:
                height = pairs[i + 1]
                break
            b -= width
        z = 4.0 / (width * width) * height * b
        f = 1.0 - z * (width - b)
        return lerp(f, 1.0, 50.0 * (a - 0.98)) if a >= 0.98 else f
    return fn


def bounce_in_function(*pairs: float) -> InterpolationFunction:
    b_out = bounce_out_function(*pairs)
    return lambda a: 1.0 - b_out(1.0 - a)


def bounce_function(*pairs: float) -> InterpolationFunction:
    b_out = bounce_out_function(*pairs)

    def i_out(o: float) -> float:
        test = o + pairs[0] * 0.5
        if test < pairs[0]:
            return test / (pairs[0] * 0.5) - 1.0
        return b_out(o)

    def fn(a: float) -> float:
        if a <= 0.5:
            return (1.0 - i_out(1.0 - a - a)) * 0.5
        return i_out(a + a - 1.0) * 0.5 + 0.5
    return fn


def swing_function(scale: float) -> InterpolationFunction:
    """Overshoots both ends (also called "back"); larger scale swings further."""
    sc = scale + scale

    def fn(a: float) -> float:
        if a <= 0.5:
            a += a
            return ((sc + 1.0) * a - sc) * a * a * 0.5
        a += a - 2.0
        return ((sc + 1.0) * a + sc) * a * a * 0.5 + 1.0
    return fn


def swing_out_function(scale: float) -> InterpolationFunction:
    def fn(a: float) -> float:
        a -= 1.0
        return ((scale + 1.0) * a + scale) * a * a + 1.0
    return fn


def swing_in_function(scale: float) -> InterpolationFunction:
    return lambda a: a * a * ((scale + 1.0) * a - scale)


def _bounce_turns(bounces: int) -> float:
    return bounces * (0.5 - (bounces & 1))


def elastic_function(value: float, power: float, bounces: int, scale: float) -> InterpolationFunction:
    """Oscillates around both ends like a spring; the wave comes from the sine table."""
    bounce = _bounce_turns(bounces)

    def fn(a: float) -> float:
        if a <= 0.5:
            a += a
            return value ** (power * (a - 1.0)) * sin_turns(a * bounce) * scale * 0.5
        a = 2.0 - a - a
        return 1.0 - value ** (power * (a - 1.0)) * sin_turns(a * bounce) * scale * 0.5
    return fn


def elastic_out_function(value: float, power: float, bounces: int, scale: float) -> InterpolationFunction:
    bounce = _bounce_turns(bounces)

    def fn(a: float) -> float:
        f = 1.0 - value ** (power * -a) * sin_turns(bounce - a * bounce) * scale
        return lerp(0.0, f, a * 50.0) if a <= 0.02 else f
    return fn


def elastic_in_function(value: float, power: float, bounces: int, scale: float) -> InterpolationFunction:
    bounce = _bounce_turns(bounces)

    def fn(a: float) -> float:
        f = value ** (power * (a - 1.0)) * sin_turns(a * bounce) * scale
        return lerp(f, 1.0, 50.0 * (a - 0.98)) if a >= 0.98 else f
    return fn


def elastic_out_in_function(value: float, power: float, bounces: int, scale: float) -> InterpolationFunction:
    bounce = _bounce_turns(bounces) - 0.25

    def fn(a: float) -> float:
        if a > 0.5:
            a += a - 1.0
            return value ** (power * (a - 1.0)) * sin_turns(a * bounce) * scale * 0.5 + 0.5
        a = 1.0 - a - a
        return 0.5 - value ** (power * (a - 1.0)) * sin_turns(a * bounce) * scale * 0.5
    return fn


def _smooth(a: float) -> float:
    return a * a * (3.0 - a - a)


def _smooth2(a: float) -> float:
    a = _smooth(a)
    return _smooth(a)


def _smoother(a: float) -> float:
    return a * a * a * (a * (a * 6.0 - 15.0) + 10.0)


def _pow0_5(a: float) -> float:
    if a <= 0.5:
        return math.sqrt(a + a) * 0.5
    return math.sqrt(2.0 - a - a) * -0.5 + 1.0


def _sine(a: float) -> float:
    s = sin_turns(a * 0.25)
    return s * s


def _circle(a: float) -> float:
    if a <= 0.5:
        return (1.0 - math.sqrt(max(0.0, 1.0 - a * a * 4.0))) * 0.5
    return (math.sqrt(max(0.0, 1.0 - 4.0 * (a * (a - 2.0) + 1.0))) + 1.0) * 0.5


# --- registered curves ---------------------------------------------------------

linear = Interpolator("linear", linear_function)

smooth = Interpolator("smooth", _smooth)
smooth_out_in = Interpolator("smoothOutIn", flip(_smooth))
smooth2 = Interpolator("smooth2", _smooth2)
smooth2_out_in = Interpolator("smooth2OutIn", flip(_smooth2))
smoother = Interpolator("smoother", _smoother)
smoother_out_in = Interpolator("smootherOutIn", flip(_smoother))
fade = Interpolator("fade", smoother.fn)
fade_out_in = Interpolator("fadeOutIn", smoother_out_in.fn)

pow2 = Interpolator("pow2", pow_function(2.0))
pow3 = Interpolator("pow3", pow_function(3.0))
pow4 = Interpolator("pow4", pow_function(4.0))
pow5 = Interpolator("pow5", pow_function(5.0))
pow0_75 = Interpolator("pow0_75", pow_function(0.75))
pow0_5 = Interpolator("pow0_5", _pow0_5)
pow0_25 = Interpolator("pow0_25", pow_function(0.25))

pow2_in = Interpolator("pow2In", pow_in_function(2.0))
slow_fast = Interpolator("slowFast", pow2_in.fn)
pow3_in = Interpolator("pow3In", pow_in_function(3.0))
pow4_in = Interpolator("pow4In", pow_in_function(4.0))
pow5_in = Interpolator("pow5In", pow_in_function(5.0))
pow0_75_in = Interpolator("pow0_75In", pow_in_function(0.75))
pow0_5_in = Interpolator("pow0_5In", math.sqrt)
pow0_25_in = Interpolator("pow0_25In", pow_in_function(0.25))
pow2_in_inverse = Interpolator("pow2InInverse", math.sqrt)
pow3_in_inverse = Interpolator("pow3InInverse", cbrt)

pow2_out = Interpolator("pow2Out", pow_out_function(2.0))
fast_slow = Interpolator("fastSlow", pow2_out.fn)
pow3_out = Interpolator("pow3Out", pow_out_function(3.0))
pow4_out = Interpolator("pow4Out", pow_out_function(4.0))
pow5_out = Interpolator("pow5Out", pow_out_function(5.0))
pow0_75_out = Interpolator("pow0_75Out", pow_out_function(0.75))
pow0_5_out = Interpolator("pow0_5Out", lambda a: 1.0 - math.sqrt(1.0 - a))
pow0_25_out = Interpolator("pow0_25Out", pow_out_function(0.25))
pow2_out_inverse = Interpolator("pow2OutInverse", lambda a: 1.0 - math.sqrt(1.0 - a))
pow3_out_inverse = Interpolator("pow3OutInverse", lambda a: 1.0 - cbrt(1.0 - a))

pow2_out_in = Interpolator("pow2OutIn", pow_out_in_function(2.0))
fast_slow_fast = Interpolator("fastSlowFast", pow2_out_in.fn)
pow3_out_in = Interpolator("pow3OutIn", pow_out_in_function(3.0))
pow4_out_in = Interpolator("pow4OutIn", pow_out_in_function(4.0))
pow5_out_in = Interpolator("pow5OutIn", pow_out_in_function(5.0))
pow0_75_out_in = Interpolator("pow0_75OutIn", pow_out_in_function(0.75))
pow0_5_out_in = Interpolator("pow0_5OutIn", pow_out_in_function(0.5))
pow0_25_out_in = Interpolator("pow0_25OutIn", pow_out_in_function(0.25))

exp5 = Interpolator("exp5", exp_function(2.0, 5.0))
exp10 = Interpolator("exp10", exp_function(2.0, 10.0))
exp5_in = Interpolator("exp5In", exp_in_function(2.0, 5.0))
exp10_in = Interpolator("exp10In", exp_in_function(2.0, 10.0))
exp5_out = Interpolator("exp5Out", exp_out_function(2.0, 5.0))
exp10_out = Interpolator("exp10Out", exp_out_function(2.0, 10.0))
exp5_out_in = Interpolator("exp5OutIn", flip(exp5.fn))
exp10_out_in = Interpolator("exp10OutIn", flip(exp10.fn))

bias_gain_centered_a = Interpolator("biasGainCenteredA", bias_gain_function(0.75, 0.5))
bias_gain_centered_b = Interpolator("biasGainCenteredB", bias_gain_function(0.5, 0.5))
bias_gain_centered_c = Interpolator("biasGainCenteredC", bias_gain_function(0.25, 0.5))
bias_gain_extreme_a = Interpolator("biasGainExtremeA", bias_gain_function(2.0, 0.5))
bias_gain_extreme_b = Interpolator("biasGainExtremeB", bias_gain_function(3.0, 0.5))
bias_gain_extreme_c = Interpolator("biasGainExtremeC", bias_gain_function(4.0, 0.5))
bias_gain_mostly_low = Interpolator("biasGainMostlyLow", bias_gain_function(3.0, 0.9))
bias_gain_mostly_high = Interpolator("biasGainMostlyHigh", bias_gain_function(3.0, 0.1))

kumaraswamy_extreme_a = Interpolator("kumaraswamyExtremeA", kumaraswamy_function(0.75, 0.75))
kumaraswamy_extreme_b = Interpolator("kumaraswamyExtremeB", kumaraswamy_function(0.5, 0.5))
kumaraswamy_extreme_c = Interpolator("kumaraswamyExtremeC", kumaraswamy_function(0.25, 0.25))
kumaraswamy_central_a = Interpolator("kumaraswamyCentralA", kumaraswamy_function(2.0, 2.0))
kumaraswamy_central_b = Interpolator("kumaraswamyCentralB", kumaraswamy_function(4.0, 4.0))
kumaraswamy_central_c = Interpolator("kumaraswamyCentralC", kumaraswamy_function(6.0, 6.0))
kumaraswamy_mostly_low = Interpolator("kumaraswamyMostlyLow", kumaraswamy_function(1.0, 5.0))
kumaraswamy_mostly_high = Interpolator("kumaraswamyMostlyHigh", kumaraswamy_function(5.0, 1.0))

sine = Interpolator("sine", _sine)
sine_in = Interpolator("sineIn", lambda a: 1.0 - cos_turns(a * 0.25))
sine_out = Interpolator("sineOut", lambda a: sin_turns(a * 0.25))
sine_out_in = Interpolator("sineOutIn", flip(_sine))

circle = Interpolator("circle", _circle)
circle_in = Interpolator("circleIn", lambda a: 1.0 - math.sqrt(1.0 - a * a))
circle_out = Interpolator("circleOut", lambda a: math.sqrt(a * (2.0 - a)))
circle_out_in = Interpolator("circleOutIn", flip(_circle))

_BOUNCE2 = (1.2, 1.0, 0.4, 0.33)
_BOUNCE3 = (0.8, 1.0, 0.4, 0.33, 0.2, 0.1)
_BOUNCE4 = (0.65, 1.0, 0.325, 0.26, 0.2, 0.11, 0.15, 0.03)
_BOUNCE = (0.68, 1.0, 0.34, 0.26, 0.2, 0.11, 0.15, 0.03)
_BOUNCE5 = (0.61, 1.0, 0.31, 0.45, 0.21, 0.3, 0.11, 0.15, 0.06, 0.06)

bounce2 = Interpolator("bounce2", bounce_function(*_BOUNCE2))
bounce3 = Interpolator("bounce3", bounce_function(*_BOUNCE3))
bounce4 = Interpolator("bounce4", bounce_function(*_BOUNCE4))
bounce = Interpolator("bounce", bounce_function(*_BOUNCE))
bounce5 = Interpolator("bounce5", bounce_function(*_BOUNCE5))
bounce2_out = Interpolator("bounce2Out", bounce_out_function(*_BOUNCE2))
bounce3_out = Interpolator("bounce3Out", bounce_out_function(*_BOUNCE3))
bounce4_out = Interpolator("bounce4Out", bounce_out_function(*_BOUNCE4))
bounce_out = Interpolator("bounceOut", bounce_out_function(*_BOUNCE))
bounce5_out = Interpolator("bounce5Out", bounce_out_function(*_BOUNCE5))
bounce2_in = Interpolator("bounce2In", bounce_in_function(*_BOUNCE2))
bounce3_in = Interpolator("bounce3In", bounce_in_function(*_BOUNCE3))
bounce4_in = Interpolator("bounce4In", bounce_in_function(*_BOUNCE4))
bounce_in = Interpolator("bounceIn", bounce_in_function(*_BOUNCE))
bounce5_in = Interpolator("bounce5In", bounce_in_function(*_BOUNCE5))
bounce2_out_in = Interpolator("bounce2OutIn", flip(bounce2.fn))
bounce3_out_in = Interpolator("bounce3OutIn", flip(bounce3.fn))
bounce4_out_in = Interpolator("bounce4OutIn", flip(bounce4.fn))
bounce_out_in = Interpolator("bounceOutIn", flip(bounce.fn))
bounce5_out_in = Interpolator("bounce5OutIn", flip(bounce5.fn))

swing2 = Interpolator("swing2", swing_function(2.0))
swing = Interpolator("swing", swing_function(1.5))
swing3 = Interpolator("swing3", swing_function(3.0))
swing0_75 = Interpolator("swing0_75", swing_function(0.75))
swing0_5 = Interpolator("swing0_5", swing_function(0.5))
swing2_out = Interpolator("swing2Out", swing_out_function(2.0))
swing_out = Interpolator("swingOut", swing2_out.fn)
swing3_out = Interpolator("swing3Out", swing_out_function(3.0))
swing0_75_out = Interpolator("swing0_75Out", swing_out_function(0.75))
swing0_5_out = Interpolator("swing0_5Out", swing_out_function(0.5))
swing2_in = Interpolator("swing2In", swing_in_function(2.0))
swing_in = Interpolator("swingIn", swing2_in.fn)
swing3_in = Interpolator("swing3In", swing_in_function(3.0))
swing0_75_in = Interpolator("swing0_75In", swing_in_function(0.75))
swing0_5_in = Interpolator("swing0_5In", swing_in_function(0.5))
swing2_out_in = Interpolator("swing2OutIn", flip(swing2.fn))
swing_out_in = Interpolator("swingOutIn", flip(swing.fn))
swing3_out_in = Interpolator("swing3OutIn", flip(swing3.fn))
swing0_75_out_in = Interpolator("swing0_75OutIn", flip(swing0_75.fn))
swing0_5_out_in = Interpolator("swing0_5OutIn", flip(swing0_5.fn))

elastic = Interpolator("elastic", elastic_function(2.0, 10.0, 7, 1.0))
elastic_out = Interpolator("elasticOut", elastic_out_function(2.0, 10.0, 7, 1.0))
elastic_in = Interpolator("elasticIn", elastic_in_function(2.0, 10.0, 6, 1.0))
elastic_out_in = Interpolator("elasticOutIn", elastic_out_in_function(2.0, 10.0, 7, 1.0))

# common easing names
quad_in_out = Interpolator("quadInOut", pow2.fn)
quad_in = Interpolator("quadIn", pow2_in.fn)
quad_out = Interpolator("quadOut", pow2_out.fn)
quad_out_in = Interpolator("quadOutIn", pow2_out_in.fn)
cubic_in_out = Interpolator("cubicInOut", pow3.fn)
cubic_in = Interpolator("cubicIn", pow3_in.fn)
cubic_out = Interpolator("cubicOut", pow3_out.fn)
cubic_out_in = Interpolator("cubicOutIn", pow3_out_in.fn)
quart_in_out = Interpolator("quartInOut", pow4.fn)
quart_in = Interpolator("quartIn", pow4_in.fn)
quart_out = Interpolator("quartOut", pow4_out.fn)
quart_out_in = Interpolator("quartOutIn", pow4_out_in.fn)
quint_in_out = Interpolator("quintInOut", pow5.fn)
quint_in = Interpolator("quintIn", pow5_in.fn)
quint_out = Interpolator("quintOut", pow5_out.fn)
quint_out_in = Interpolator("quintOutIn", pow5_out_in.fn)
expo_in_out = Interpolator("expoInOut", exp10.fn)
expo_in = Interpolator("expoIn", exp10_in.fn)
expo_out = Interpolator("expoOut", exp10_out.fn)
expo_out_in = Interpolator("expoOutIn", exp10_out_in.fn)
circ_in_out = Interpolator("circInOut", circle.fn)
circ_in = Interpolator("circIn", circle_in.fn)
circ_out = Interpolator("circOut", circle_out.fn)
circ_out_in = Interpolator("circOutIn", circle_out_in.fn)
back_in_out = Interpolator("backInOut", swing.fn)
back_in = Interpolator("backIn", swing_in.fn)
back_out = Interpolator("backOut", swing_out.fn)
back_out_in = Interpolator("backOutIn", swing_out_in.fn)
