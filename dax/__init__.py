"""Float32 math, colours, mouse buttons, materials, procedural geometry and an examples registry."""

__version__ = "0.1.0"