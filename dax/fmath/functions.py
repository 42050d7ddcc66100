"""Single-precision elementary and special functions.

Every function rounds its arguments and result to 32-bit floats and follows
IEEE 754 conventions for special values (NaN, infinities, signed zeros)
instead of raising.
"""

from __future__ import annotations

import math

from scipy import special

from dax.fmath.bits import f32

_INF = float("inf")
_NAN = float("nan")


def _signbit(x: float) -> bool:
    return math.copysign(1.0, x) < 0


def acos(x: float) -> float:
    """Arccosine in radians; NaN outside ``[-1, 1]``."""
    x = f32(x)
    if math.isnan(x) or not -1 <= x <= 1:
        return _NAN
    return f32(math.acos(x))


def asin(x: float) -> float:
    """Arcsine in radians; NaN outside ``[-1, 1]``."""
    x = f32(x)
    if math.isnan(x) or not -1 <= x <= 1:
        return _NAN
    return f32(math.asin(x))


def atan(x: float) -> float:
    """Arctangent in radians."""
    return f32(math.atan(f32(x)))


def atan2(y: float, x: float) -> float:
    """Arctangent of ``y/x`` using the signs of both to pick the quadrant."""
    return f32(math.atan2(f32(y), f32(x)))


def atanh(x: float) -> float:
    """Inverse hyperbolic tangent."""
    x = f32(x)
    if math.isnan(x) or x < -1 or x > 1:
        return _NAN
    if x == 1:
        return _INF
    if x == -1:
        return -_INF
    return f32(math.atanh(x))


def cbrt(x: float) -> float:
    """Cube root."""
    x = f32(x)
    if math.isnan(x) or math.isinf(x) or x == 0:
        return x
    return f32(math.copysign(abs(x) ** (1.0 / 3.0), x) if not hasattr(math, "cbrt") else math.cbrt(x))


def _integral(x: float, rounder) -> float:
    x = f32(x)
    if math.isnan(x) or math.isinf(x) or x == 0:
        return x
    return math.copysign(float(rounder(x)), x)


def ceil(x: float) -> float:
    """Least integer value greater than or equal to ``x``."""
    return _integral(x, math.ceil)


def floor(x: float) -> float:
    """Greatest integer value less than or equal to ``x``."""
    return _integral(x, math.floor)


def trunc(x: float) -> float:
    """Integer part of ``x``."""
    return _integral(x, math.trunc)


def copysign(x: float, y: float) -> float:
    """Magnitude of ``x`` with the sign of ``y``."""
    return f32(math.copysign(f32(x), f32(y)))


def dim(x: float, y: float) -> float:
    """The maximum of ``x - y`` and 0."""
    v = f32(x) - f32(y)
    if math.isnan(v):
        return _NAN
    return f32(v) if v > 0 else 0.0


def erf(x: float) -> float:
    """Error function."""
    return f32(math.erf(f32(x)))


def erfc(x: float) -> float:
    """Complementary error function."""
    return f32(math.erfc(f32(x)))


def exp(x: float) -> float:
    """Base-e exponential."""
    x = f32(x)
    try:
        return f32(math.exp(x))
    except OverflowError:
        return _INF


def exp2(x: float) -> float:
    """Base-2 exponential."""
    x = f32(x)
    try:
        return f32(2.0**x)
    except OverflowError:
        return _INF


def expm1(x: float) -> float:
    """``e**x - 1``, accurate near zero."""
    x = f32(x)
    try:
        return f32(math.expm1(x))
    except OverflowError:
        return _INF


def frexp(f: float) -> tuple[float, int]:
    """Split ``f`` into a fraction in ``[0.5, 1)`` and a power of two."""
    frac, e = math.frexp(f32(f))
    return f32(frac), e


def gamma(x: float) -> float:
    """Gamma function."""
    x = f32(x)
    if math.isnan(x) or x == -_INF:
        return _NAN
    if x == _INF:
        return _INF
    if x == 0:
        return -_INF if _signbit(x) else _INF
    if x < 0 and x == math.floor(x):
        return _NAN
    try:
        return f32(math.gamma(x))
    except OverflowError:
        return _INF


def hypot(p: float, q: float) -> float:
    """``sqrt(p*p + q*q)`` without needless overflow."""
    return f32(math.hypot(f32(p), f32(q)))


def j0(x: float) -> float:
    """Order-zero Bessel function of the first kind."""
    return jn(0, x)


def j1(x: float) -> float:
    """Order-one Bessel function of the first kind."""
    return jn(1, x)


def jn(n: int, x: float) -> float:
    """Order-``n`` Bessel function of the first kind."""
    x = f32(x)
    if math.isnan(x):
        return _NAN
    if math.isinf(x):
        return 0.0
    value = float(special.jv(abs(n), x))
    if n < 0 and n % 2:
        value = -value
    return f32(value)


def y0(x: float) -> float:
    """Order-zero Bessel function of the second kind."""
    return yn(0, x)


def y1(x: float) -> float:
    """Order-one Bessel function of the second kind."""
    return yn(1, x)


def yn(n: int, x: float) -> float:
    """Order-``n`` Bessel function of the second kind."""
    x = f32(x)
    if math.isnan(x) or x < 0:
        return _NAN
    if x == _INF:
        return 0.0
    odd_negative = n < 0 and n % 2 == 1
    if x == 0:
        return _INF if odd_negative else -_INF
    value = float(special.yn(abs(n), x))
    if odd_negative:
        value = -value
    return f32(value)


def ldexp(frac: float, exp: int) -> float:
    """``frac * 2**exp``."""
    frac = f32(frac)
    try:
        return f32(math.ldexp(frac, exp))
    except OverflowError:
        return math.copysign(_INF, frac)


def lgamma(x: float) -> tuple[float, int]:
    """Natural log of ``|Gamma(x)|`` and the sign of ``Gamma(x)``."""
    x = f32(x)
    if math.isnan(x):
        return _NAN, 1
    if x == _INF:
        return _INF, 1
    if x == -_INF:
        return -_INF, 1
    if x == 0:
        return _INF, -1 if _signbit(x) else 1
    if x < 0 and x == math.floor(x):
        return _INF, 1
    sign = 1
    if x < 0 and int(math.floor(x)) % 2:
        sign = -1
    try:
        return f32(math.lgamma(x)), sign
    except OverflowError:
        return _INF, sign


def _logarithm(x: float, fn) -> float:
    x = f32(x)
    if math.isnan(x) or x < 0:
        return _NAN
    if x == 0:
        return -_INF
    if x == _INF:
        return _INF
    return f32(fn(x))


def log(x: float) -> float:
    """Natural logarithm."""
    return _logarithm(x, math.log)


def log10(x: float) -> float:
    """Decimal logarithm."""
    return _logarithm(x, math.log10)


def log2(x: float) -> float:
    """Binary logarithm."""
    return _logarithm(x, math.log2)


def log1p(x: float) -> float:
    """Natural logarithm of ``1 + x``, accurate near zero."""
    x = f32(x)
    if math.isnan(x) or x < -1:
        return _NAN
    if x == -1:
        return -_INF
    if x == _INF:
        return _INF
    return f32(math.log1p(x))


def fmax(x: float, y: float) -> float:
    """The larger of ``x`` and ``y``; +Inf wins over NaN."""
    x, y = f32(x), f32(y)
    if x == _INF or y == _INF:
        return _INF
    if math.isnan(x) or math.isnan(y):
        return _NAN
    if x == 0 and x == y:
        return y if _signbit(x) else x
    return x if x > y else y


def fmin(x: float, y: float) -> float:
    """The smaller of ``x`` and ``y``; -Inf wins over NaN."""
    x, y = f32(x), f32(y)
    if x == -_INF or y == -_INF:
        return -_INF
    if math.isnan(x) or math.isnan(y):
        return _NAN
    if x == 0 and x == y:
        return x if _signbit(x) else y
    return x if x < y else y


def mod(x: float, y: float) -> float:
    """Floating-point remainder of ``x/y`` with the sign of ``x``."""
    x, y = f32(x), f32(y)
    if math.isnan(x) or math.isnan(y) or math.isinf(x) or y == 0:
        return _NAN
    return f32(math.fmod(x, y))


def modf(f: float) -> tuple[float, float]:
    """Integer and fractional parts of ``f``, both with its sign."""
    f = f32(f)
    if math.isnan(f) or math.isinf(f):
        return f, _NAN
    frac, integer = math.modf(f)
    return f32(integer), f32(frac)


def remainder(x: float, y: float) -> float:
    """IEEE 754 remainder of ``x/y``."""
    x, y = f32(x), f32(y)
    if math.isnan(x) or math.isnan(y) or math.isinf(x) or y == 0:
        return _NAN
    return f32(math.remainder(x, y))


def sincos(x: float) -> tuple[float, float]:
    """Sine and cosine of ``x``."""
    x = f32(x)
    if math.isnan(x) or math.isinf(x):
        return _NAN, _NAN
    return f32(math.sin(x)), f32(math.cos(x))


def tan(x: float) -> float:
    """Tangent of ``x``."""
    x = f32(x)
    if math.isnan(x) or math.isinf(x):
        return _NAN
    return f32(math.tan(x))