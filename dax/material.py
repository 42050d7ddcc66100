"""Materials: how geometries are painted, with blending and depth state."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum

from dax.color import Color


class BlendingMode(IntEnum):
    """Equation used to combine source and destination when blending."""

    ADD = 0
    SUBSTRACT = 1
    REVERSE_SUBSTRACT = 2
    MIN = 3
    MAX = 4


class BlendingFunc(IntEnum):
    """Factor applied to source or destination when blending."""

    ONE = 0
    ZERO = 1
    SRC_COLOR = 2
    DST_COLOR = 3
    ONE_MINUS_SRC_COLOR = 4
    ONE_MINUS_DST_COLOR = 5
    SRC_ALPHA = 6
    DST_ALPHA = 7
    ONE_MINUS_SRC_ALPHA = 8
    ONE_MINUS_DST_ALPHA = 9
    CONSTANT_COLOR = 10
    ONE_MINUS_CONSTANT_COLOR = 11
    CONSTANT_ALPHA = 12
    ONE_MINUS_CONSTANT_ALPHA = 13


@dataclass
class Blending:
    """The whole blending state of a material."""

    enabled: bool = False
    mode_rgb: BlendingMode = BlendingMode.ADD
    mode_alpha: BlendingMode = BlendingMode.ADD
    src_rgb: BlendingFunc = BlendingFunc.ONE
    dst_rgb: BlendingFunc = BlendingFunc.ONE
    src_alpha: BlendingFunc = BlendingFunc.ONE
    dst_alpha: BlendingFunc = BlendingFunc.ONE
    color: Color = field(default_factory=Color)


class DepthTestFunc(IntEnum):
    """Comparison used by the depth test."""

    NEVER = 0
    LESS = 1
    GREATER = 2
    EQUAL = 3
    ALWAYS = 4
    LESS_OR_EQUAL = 5
    GREATER_OR_EQUAL = 6
    NOT_EQUAL = 7


@dataclass
class DepthTest:
    """The whole depth test state of a material."""

    enabled: bool = False
    write: bool = False
    func: DepthTestFunc = DepthTestFunc.NEVER


@dataclass
class BaseMaterial:
    """Common material state; custom materials build on it."""

    blending: Blending = field(default_factory=Blending)
    depth_test: DepthTest = field(default_factory=DepthTest)

    def material_id(self) -> str:
        """Identifier unique to this kind of material."""
        return "-dax-material-base"


@dataclass
class ColorMaterial(BaseMaterial):
    """The simplest material: a single colour."""

    color: Color = field(default_factory=Color)

    def __post_init__(self) -> None:
        self.color = replace(self.color)

    def material_id(self) -> str:
        """Identifier unique to this kind of material."""
        return "-dax-material-color"