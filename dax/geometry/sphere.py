"""Sphere geometry built from latitude and longitude segments."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dax.fmath.bits import PI, f32
from dax.geometry.box import GeometryData

_PI32 = f32(PI)
_FULL_TURN = f32(2 * _PI32)


@dataclass
class Sphere:
    """A sphere, or a slice of one, of the given radius.

    ``n_v_segments`` splits it around the azimuth (phi), ``n_h_segments``
    along the inclination (theta).
    """

    radius: float
    n_v_segments: int
    n_h_segments: int
    phi_start: float = 0.0
    phi_length: float = _FULL_TURN
    theta_start: float = 0.0
    theta_length: float = _FULL_TURN

    def get_mesh(self) -> GeometryData:
        """Generate positions, normals, uvs and triangle indices."""
        mesh = GeometryData()
        radius = f32(self.radius)
        phi_start, phi_length = f32(self.phi_start), f32(self.phi_length)
        theta_start, theta_length = f32(self.theta_start), f32(self.theta_length)
        theta_end = f32(theta_start + theta_length)

        rows: list[list[int]] = []
        index = 0
        for y in range(self.n_h_segments + 1):
            row = []
            v = f32(y / self.n_h_segments)
            theta = f32(theta_start + f32(v * theta_length))
            sin_t, cos_t = f32(math.sin(theta)), f32(math.cos(theta))
            for x in range(self.n_v_segments + 1):
                u = f32(x / self.n_v_segments)
                phi = f32(phi_start + f32(u * phi_length))
                sin_p, cos_p = f32(math.sin(phi)), f32(math.cos(phi))

                px = f32(f32(f32(-radius * cos_p)) * sin_t)
                py = f32(radius * cos_t)
                pz = f32(f32(radius * sin_p) * sin_t)

                length = math.sqrt(px * px + py * py + pz * pz)
                if length:
                    normal = (f32(px / length), f32(py / length), f32(pz / length))
                else:
                    normal = (0.0, 0.0, 0.0)

                mesh.positions.extend((px, py, pz))
                mesh.normals.extend(normal)
                mesh.uvs.extend((u, f32(1 - v)))
                row.append(index)
                index += 1
            rows.append(row)
        mesh.n_vertices = index

        for y in range(self.n_h_segments):
            for x in range(self.n_v_segments):
                v1 = rows[y][x + 1]
                v2 = rows[y][x]
                v3 = rows[y + 1][x]
                v4 = rows[y + 1][x + 1]
                if y != 0 or theta_start > 0:
                    mesh.indices.extend((v1, v2, v4))
                if y != self.n_h_segments - 1 or theta_end < _PI32:
                    mesh.indices.extend((v2, v3, v4))

        return mesh