"""Single-precision inverse hyperbolic functions."""

from __future__ import annotations

import math

from dax.fmath.bits import f32, is_inf, is_nan, nan
from dax.fmath.functions import log, log1p

_LN2 = f32(6.93147180559945286227e-01)
_LARGE = float(1 << 28)
_NEAR_ZERO = 1.0 / (1 << 28)


def _sqrt(x: float) -> float:
    return f32(math.sqrt(f32(x)))


def acosh(x: float) -> float:
    """Inverse hyperbolic cosine; NaN for ``x < 1`` and for NaN."""
    x = f32(x)
    if x < 1 or is_nan(x):
        return nan()
    if x == 1:
        return 0.0
    if x >= _LARGE:
        return f32(log(x) + _LN2)
    if x > 2:
        root = _sqrt(f32(f32(x * x) - 1))
        return log(f32(f32(2 * x) - f32(1 / f32(x + root))))
    t = f32(x - 1)
    root = _sqrt(f32(f32(2 * t) + f32(t * t)))
    return log1p(f32(t + root))


def asinh(x: float) -> float:
    """Inverse hyperbolic sine; signed zeros, infinities and NaN pass through."""
    x = f32(x)
    if is_nan(x) or is_inf(x, 0):
        return x
    negative = x < 0
    if negative:
        x = -x
    if x > _LARGE:
        result = f32(log(x) + _LN2)
    elif x > 2:
        root = _sqrt(f32(f32(x * x) + 1))
        result = log(f32(f32(2 * x) + f32(1 / f32(root + x))))
    elif x < _NEAR_ZERO:
        result = x
    else:
        xx = f32(x * x)
        result = log1p(f32(x + f32(xx / f32(1 + _sqrt(f32(1 + xx))))))
    return -result if negative else result