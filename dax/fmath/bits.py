"""Single-precision float helpers: constants, bit views and exponent queries.

Values are carried as Python floats.  Functions that model single-precision
behaviour round their inputs and results to the nearest 32-bit float with
:func:`f32`.
"""

from __future__ import annotations

import struct

# Mathematical constants.
E = 2.71828182845904523536028747135266249775724709369995957496696763
PI = 3.14159265358979323846264338327950288419716939937510582097494459
PHI = 1.61803398874989484820458683436563811772030917980576286213544862

SQRT2 = 1.41421356237309504880168872420969807856967187537694807317667974
SQRT_E = 1.64872127070012814684865078781416357165377610071014801157507931
SQRT_PI = 1.77245385090551602729816748334114518279754945612238712821380779
SQRT_PHI = 1.27201964951406896425242246173749149171560804184009624861664038

LN2 = 0.693147180559945309417232121458176568075500134360255254120680009
LOG2_E = 1 / LN2
LN10 = 2.30258509299404568401799145468436420760110148862877297603332790
LOG10_E = 1 / LN10

# Floating-point limit values.
MAX_FLOAT32 = 3.40282346638528859811704183484516925440e38
SMALLEST_NONZERO_FLOAT32 = 1.401298464324817070923729583289916131280e-45
MAX_FLOAT64 = 1.797693134862315708145274237317043567981e308
SMALLEST_NONZERO_FLOAT64 = 4.940656458412465441765687928682213723651e-324

# Integer limit values.
MAX_INT8 = (1 << 7) - 1
MIN_INT8 = -(1 << 7)
MAX_INT16 = (1 << 15) - 1
MIN_INT16 = -(1 << 15)
MAX_INT32 = (1 << 31) - 1
MIN_INT32 = -(1 << 31)
MAX_INT64 = (1 << 63) - 1
MIN_INT64 = -(1 << 63)
MAX_UINT8 = (1 << 8) - 1
MAX_UINT16 = (1 << 16) - 1
MAX_UINT32 = (1 << 32) - 1
MAX_UINT64 = (1 << 64) - 1

# IEEE 754 single-precision layout.
TOTAL_SIZE = 32
MANTISSA_SIZE = 23
EXPONENT_SIZE = 8
SIGN_SIZE = 1
UVNAN = 0x7FC00001
UVINF = 0x7F800000
UVNEGINF = 0xFF800000
MASK = 0xFF
SHIFT = TOTAL_SIZE - EXPONENT_SIZE - SIGN_SIZE
BIAS = 127

_SMALLEST_NORMAL = 2.0**-126

_F32 = struct.Struct("<f")
_U32 = struct.Struct("<I")
_F64 = struct.Struct("<d")
_U64 = struct.Struct("<Q")


def f32(x: float) -> float:
    """Round ``x`` to the nearest single-precision value."""
    try:
        return _F32.unpack(_F32.pack(x))[0]
    except OverflowError:
        return float("inf") if x > 0 else float("-inf")


def float32_bits(f: float) -> int:
    """Return the IEEE 754 single-precision bit pattern of ``f``."""
    return _U32.unpack(_F32.pack(f32(f)))[0]


def float32_from_bits(b: int) -> float:
    """Return the single-precision value whose bit pattern is ``b``."""
    if not 0 <= b <= MAX_UINT32:
        raise ValueError(f"bit pattern out of range for 32 bits: {b!r}")
    return _F32.unpack(_U32.pack(b))[0]


def float64_bits(f: float) -> int:
    """Return the IEEE 754 double-precision bit pattern of ``f``."""
    return _U64.unpack(_F64.pack(f))[0]


def float64_from_bits(b: int) -> float:
    """Return the double-precision value whose bit pattern is ``b``."""
    if not 0 <= b <= MAX_UINT64:
        raise ValueError(f"bit pattern out of range for 64 bits: {b!r}")
    return _F64.unpack(_U64.pack(b))[0]


def inf(sign: int) -> float:
    """Positive infinity if ``sign >= 0``, negative infinity otherwise."""
    return float32_from_bits(UVINF if sign >= 0 else UVNEGINF)


def nan() -> float:
    """Return an IEEE 754 not-a-number value."""
    return float32_from_bits(UVNAN)


def is_nan(f: float) -> bool:
    """Report whether ``f`` is not-a-number."""
    return f != f


def is_inf(f: float, sign: int) -> bool:
    """Report whether ``f`` is an infinity of the given sign (0 for either)."""
    return (sign >= 0 and f > MAX_FLOAT32) or (sign <= 0 and f < -MAX_FLOAT32)


def fabs(x: float) -> float:
    """Absolute value; ``fabs(-0.0)`` is ``+0.0``."""
    if x < 0:
        return -x
    if x == 0:
        return 0.0
    return x


def clamp(f: float, low: float, high: float) -> float:
    """Return ``f`` clamped to ``[low, high]``; NaN passes through."""
    if f < low:
        return low
    if f > high:
        return high
    return f


def _normalize(x: float) -> tuple[float, int]:
    if fabs(x) < _SMALLEST_NORMAL:
        return x * (1 << 23), -23
    return x, 0


def _ilogb(x: float) -> int:
    y, exp = _normalize(f32(x))
    return ((float32_bits(y) >> SHIFT) & MASK) - BIAS + exp


def logb(x: float) -> float:
    """Binary exponent of ``x`` as a float."""
    if x == 0:
        return inf(-1)
    if is_inf(x, 0):
        return inf(1)
    if is_nan(x):
        return x
    return float(_ilogb(x))


def ilogb(x: float) -> int:
    """Binary exponent of ``x`` as an integer."""
    if x == 0:
        return MIN_INT32
    if is_nan(x) or is_inf(x, 0):
        return MAX_INT32
    return _ilogb(x)