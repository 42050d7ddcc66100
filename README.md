# dax

Building blocks for a small graphics toolkit, usable on their own:

- **`dax.fmath`** – math that behaves like IEEE 754 single precision
  (`float32`). Results are rounded to the nearest `float32`, and special
  values (signed zeros, infinities, NaN) are returned rather than raised.
- **`dax.color`** – an RGBA colour type with conversions from 8-bit
  components and to and from HSL.
- **`dax.events`** – mouse button identifiers.
- **`dax.material`** – blending and depth-test state for materials, plus a
  plain colour material.
- **`dax.geometry`** – procedural boxes and UV spheres that produce vertex
  positions, normals, texture coordinates and triangle indices.
- **`dax.examples`** – a registry of named, categorised example scenes.

Python 3.11 or later is required. The only runtime dependency is SciPy,
which supplies the Bessel functions.

## Single-precision math

```python
from dax.fmath.bits import clamp, f32, float32_bits, inf, is_nan, nan
from dax.fmath.functions import frexp, hypot, sincos
from dax.fmath.hyperbolic import asinh
from dax.fmath.conv import cartesian_to_spherical, deg_to_rad

f32(0.1)                    # 0.10000000149011612, the nearest float32
hex(float32_bits(1.0))      # '0x3f800000'
clamp(2.5, 1.0, 2.0)        # 2.0
is_nan(clamp(nan(), 1, 2))  # True: NaN passes through

frexp(8.0)                  # (0.5, 4)
hypot(3, 4)                 # 5.0
s, c = sincos(deg_to_rad(90))

asinh(inf(-1))              # -inf

r, theta, phi = cartesian_to_spherical((5, 12, 9))
```

`dax.fmath.bits` also holds the constants (`PI`, `E`, `LN2`, `MAX_FLOAT32`,
the integer limits, ...), `logb` and `ilogb`. `dax.fmath.functions` covers
the elementary and special functions (`exp`, `log`, `erf`, `gamma`,
`lgamma`, `j0`/`j1`/`jn`, `y0`/`y1`/`yn`, `mod`, `remainder`, `fmax`,
`fmin`, ...). `dax.fmath.conv` converts between cartesian, spherical and
cylindrical coordinates and between degrees and radians.

`dax.fmath.imath` holds integer helpers working on 64-bit signed integers,
wrapping on overflow: `iabs`, `imax`, `imin`, `pow`, `pow10`, an integer
square root `sqrt`, and more.

```python
from dax.fmath import imath

imath.sqrt(399)    # 19
imath.pow(3, 4)    # 81
```

## Colours

```python
from dax.color import Color

red = Color.from_rgb_u8(255, 0, 0)
red.to_hsl()           # (0.0, 1.0, 0.5)

teal = Color.from_hsl(180 / 360, 1, 0.25)
teal.vec4()            # (r, g, b, a) with a == 1.0
```

8-bit components outside 0..255 raise `ValueError`.

## Mouse buttons

`dax.events.MouseButton` is an integer enumeration; `str()` gives `"left"`,
`"right"` and `"middle"` for the three main buttons.

## Materials

```python
from dax.color import Color
from dax.material import ColorMaterial

material = ColorMaterial(color=Color.from_rgb(1, 1, 1))
material.material_id()   # '-dax-material-color'
```

`Blending` and `DepthTest` carry the full blending and depth state, using the
`BlendingMode`, `BlendingFunc` and `DepthTestFunc` enumerations.

## Geometry

```python
from dax.geometry.box import BoxOptions, new_box
from dax.geometry.sphere import Sphere

box = new_box(10, 20, 30, BoxOptions(2, 2, 2))
box_mesh = box.get_mesh()

sphere_mesh = Sphere(1.0, 16, 12).get_mesh()
```

Both return a `GeometryData` with flat `positions` and `normals` lists
(three components per vertex), `uvs` (two per vertex), triangle `indices`
and the vertex count `n_vertices`. A box is centred on the origin; each of
its six faces is split into the requested number of segments along each
direction. Segment counts that are not positive keep their default of one.

## Examples registry

```python
from dax.examples import Category, Example, ExampleRegistry

registry = ExampleRegistry([
    Example(Category.GRAPHICS, "Scene Graph", "Display a few rotating cubes"),
])
registry.describe()              # ['gfx-scene-graph: Display a few rotating cubes']
registry.find("gfx-scene-graph")
```

`find` raises `LookupError` for an unknown identifier.

## What this package does not do

There is no window, no rendering and no GPU code: materials hold state but
carry no shaders, meshes are plain lists not uploaded anywhere, and an
`Example`'s `scene` is stored but never run. There is no command-line tool.