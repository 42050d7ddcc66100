"""Box geometry: a tessellated rectangular cuboid centred on the origin."""

from __future__ import annotations

from dataclasses import dataclass, field

from dax.fmath.bits import f32


@dataclass
class GeometryData:
    """Vertex attributes and triangle indices of a generated geometry.

    ``positions`` and ``normals`` hold three components per vertex, ``uvs``
    two. ``indices`` lists triangles, three vertex indices each.
    """

    n_vertices: int = 0
    positions: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)
    uvs: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


@dataclass
class BoxOptions:
    """Optional tessellation of a box; non-positive values keep the default."""

    num_width_segments: int = 0
    num_height_segments: int = 0
    num_depth_segments: int = 0


@dataclass
class Box:
    """A cuboid of sizes width, height and depth along X, Y and Z."""

    width: float = 1.0
    height: float = 1.0
    depth: float = 1.0
    num_width_segments: int = 1
    num_height_segments: int = 1
    num_depth_segments: int = 1

    def get_mesh(self) -> GeometryData:
        """Generate positions, normals, uvs and indices for the six faces."""
        ctx = GeometryData()
        width, height, depth = self.width, self.height, self.depth
        ws = self.num_width_segments
        hs = self.num_height_segments
        ds = self.num_depth_segments

        build_plane(ctx, 2, 1, 0, -1, -1, depth, height, width, ds, hs)  # +x
        build_plane(ctx, 2, 1, 0, 1, -1, depth, height, -width, ds, hs)  # -x
        build_plane(ctx, 0, 2, 1, 1, 1, width, depth, height, ws, ds)  # +y
        build_plane(ctx, 0, 2, 1, 1, -1, width, depth, -height, ws, ds)  # -y
        build_plane(ctx, 0, 1, 2, 1, -1, width, height, depth, ws, hs)  # +z
        build_plane(ctx, 0, 1, 2, -1, -1, width, height, -depth, ws, hs)  # -z
        return ctx


def new_box(
    width: float,
    height: float,
    depth: float,
    options: BoxOptions | None = None,
) -> Box:
    """Create a box, applying the positive segment counts found in ``options``."""
    box = Box(width=f32(width), height=f32(height), depth=f32(depth))
    if options is None:
        return box
    if options.num_width_segments > 0:
        box.num_width_segments = options.num_width_segments
    if options.num_height_segments > 0:
        box.num_height_segments = options.num_height_segments
    if options.num_depth_segments > 0:
        box.num_depth_segments = options.num_depth_segments
    return box


def build_plane(
    ctx: GeometryData,
    u: int,
    v: int,
    w: int,
    udir: float,
    vdir: float,
    width: float,
    height: float,
    depth: float,
    grid_x: int,
    grid_y: int,
) -> None:
    """Append one face of ``grid_x`` by ``grid_y`` segments to ``ctx``.

    ``u``, ``v`` and ``w`` are the axes the face spans and faces along;
    ``udir`` and ``vdir`` flip the face's orientation.
    """
    segment_width = f32(f32(width) / grid_x)
    segment_height = f32(f32(height) / grid_y)
    width_half = f32(f32(width) / 2)
    height_half = f32(f32(height) / 2)
    depth_half = f32(f32(depth) / 2)
    normal_w = 1.0 if depth > 0 else -1.0

    grid_x1 = grid_x + 1
    grid_y1 = grid_y + 1

    for iy in range(grid_y1):
        y = f32(f32(iy * segment_height) - height_half)
        for ix in range(grid_x1):
            x = f32(f32(ix * segment_width) - width_half)

            position = [0.0, 0.0, 0.0]
            position[u] = f32(x * udir)
            position[v] = f32(y * vdir)
            position[w] = depth_half
            ctx.positions.extend(position)

            normal = [0.0, 0.0, 0.0]
            normal[w] = normal_w
            ctx.normals.extend(normal)

            ctx.uvs.extend((f32(ix / grid_x), f32(1 - f32(iy / grid_y))))

    base = ctx.n_vertices
    for iy in range(grid_y):
        for ix in range(grid_x):
            a = base + ix + grid_x1 * iy
            b = base + ix + grid_x1 * (iy + 1)
            c = base + (ix + 1) + grid_x1 * (iy + 1)
            d = base + (ix + 1) + grid_x1 * iy
            ctx.indices.extend((a, b, d, b, c, d))

    ctx.n_vertices += grid_x1 * grid_y1