"""Conversions between cartesian, spherical and cylindrical coordinates.

Spherical coordinates are (radius, inclination theta, azimuth phi);
cylindrical coordinates are (radial distance rho, azimuth phi, height z).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from dax.fmath.bits import PI, f32
from dax.fmath.functions import acos, atan2, hypot, sincos

_PI32 = f32(PI)


def _length(x: float, y: float, z: float) -> float:
    x, y, z = f32(x), f32(y), f32(z)
    return f32(math.sqrt(f32(f32(f32(x * x) + f32(y * y)) + f32(z * z))))


def cartesian_to_spherical(coord: Sequence[float]) -> tuple[float, float, float]:
    """Convert ``(x, y, z)`` to ``(r, theta, phi)``."""
    x, y, z = coord
    r = _length(x, y, z)
    theta = acos(f32(f32(z) / r) if r != 0 else math.nan)
    phi = atan2(y, x)
    return r, theta, phi


def spherical_to_cartesian(r: float, theta: float, phi: float) -> tuple[float, float, float]:
    """Convert ``(r, theta, phi)`` to ``(x, y, z)``."""
    r = f32(r)
    st, ct = sincos(theta)
    sp, cp = sincos(phi)
    return f32(f32(r * st) * cp), f32(f32(r * st) * sp), f32(r * ct)


def cartesian_to_cylindrical(coord: Sequence[float]) -> tuple[float, float, float]:
    """Convert ``(x, y, z)`` to ``(rho, phi, z)``."""
    x, y, z = coord
    return hypot(x, y), atan2(y, x), f32(z)


def cylindrical_to_cartesian(rho: float, phi: float, z: float) -> tuple[float, float, float]:
    """Convert ``(rho, phi, z)`` to ``(x, y, z)``."""
    rho = f32(rho)
    s, c = sincos(phi)
    return f32(rho * c), f32(rho * s), f32(z)


def spherical_to_cylindrical(r: float, theta: float, phi: float) -> tuple[float, float, float]:
    """Convert ``(r, theta, phi)`` to ``(rho, phi, z)``."""
    r = f32(r)
    s, c = sincos(theta)
    return f32(r * s), f32(phi), f32(r * c)


def cylindrical_to_spherical(rho: float, phi: float, z: float) -> tuple[float, float, float]:
    """Convert ``(rho, phi, z)`` to ``(r, theta, phi)``."""
    return hypot(rho, z), atan2(rho, z), f32(phi)


def deg_to_rad(angle: float) -> float:
    """Convert degrees to radians."""
    return f32(f32(f32(angle) * _PI32) / 180)


def rad_to_deg(angle: float) -> float:
    """Convert radians to degrees."""
    return f32(f32(f32(angle) * 180) / _PI32)