"""RGBA colours with HSL conversions, stored as single-precision components."""

from __future__ import annotations

from dataclasses import dataclass

from dax.fmath.bits import f32

_ONE_THIRD = f32(1.0 / 3)
_ONE_SIXTH = f32(1.0 / 6)
_ONE_HALF = f32(0.5)
_TWO_THIRDS = f32(2.0 / 3)


def _u8_to_float(x: int) -> float:
    if not 0 <= x <= 255:
        raise ValueError(f"colour component out of range 0..255: {x!r}")
    return f32(x / 255.0)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t = f32(t + 1)
    if t > 1:
        t = f32(t - 1)
    if t < _ONE_SIXTH:
        return f32(p + f32(f32(f32(q - p) * 6) * t))
    if t < _ONE_HALF:
        return q
    if t < _TWO_THIRDS:
        return f32(p + f32(f32(f32(q - p) * f32(_TWO_THIRDS - t)) * 6))
    return p


@dataclass
class Color:
    """A colour with red, green, blue and alpha components between 0 and 1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        """Build a colour from components between 0 and 1."""
        return cls(f32(r), f32(g), f32(b), f32(a))

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> Color:
        """Build an opaque colour from components between 0 and 1."""
        return cls.from_rgba(r, g, b, 1.0)

    @classmethod
    def from_rgba_u8(cls, r: int, g: int, b: int, a: int) -> Color:
        """Build a colour from components between 0 and 255."""
        return cls.from_rgba(
            _u8_to_float(r), _u8_to_float(g), _u8_to_float(b), _u8_to_float(a)
        )

    @classmethod
    def from_rgb_u8(cls, r: int, g: int, b: int) -> Color:
        """Build an opaque colour from components between 0 and 255."""
        return cls.from_rgba_u8(r, g, b, 255)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> Color:
        """Build an opaque colour from hue, saturation and lightness in [0, 1]."""
        h, s, l = f32(h), f32(s), f32(l)
        if s == 0:
            return cls(l, l, l, 1.0)
        if l < 0.5:
            q = f32(l * f32(1 + s))
        else:
            q = f32(f32(l + s) - f32(l * s))
        p = f32(f32(2 * l) - q)
        return cls(
            _hue_to_rgb(p, q, f32(h + _ONE_THIRD)),
            _hue_to_rgb(p, q, h),
            _hue_to_rgb(p, q, f32(h - _ONE_THIRD)),
            1.0,
        )

    def to_hsl(self) -> tuple[float, float, float]:
        """Return ``(h, s, l)`` with every component between 0 and 1."""
        r, g, b = f32(self.r), f32(self.g), f32(self.b)
        hi = max(r, g, b)
        lo = min(r, g, b)
        l = f32(f32(hi + lo) / 2)
        if hi == lo:
            return 0.0, 0.0, l

        d = f32(hi - lo)
        if l > 0.5:
            s = f32(d / f32(f32(2 - hi) - lo))
        else:
            s = f32(d / f32(hi + lo))

        if hi == r:
            k = 6.0 if g < b else 0.0
            h = f32(f32(f32(g - b) / d) + k)
        elif hi == g:
            h = f32(f32(f32(b - r) / d) + 2)
        else:
            h = f32(f32(f32(r - g) / d) + 4)
        return f32(h / 6), s, l

    def vec4(self) -> tuple[float, float, float, float]:
        """The four components as an ``(r, g, b, a)`` tuple."""
        return (self.r, self.g, self.b, self.a)