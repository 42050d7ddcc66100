from dax.color import Color
from dax.material import (
    BaseMaterial,
    Blending,
    BlendingFunc,
    BlendingMode,
    ColorMaterial,
    DepthTest,
    DepthTestFunc,
)


def test_base_material_id():
    assert BaseMaterial().material_id() == "-dax-material-base"


def test_color_material_id():
    material = ColorMaterial(color=Color.from_rgb(1, 1, 1))
    assert material.material_id() == "-dax-material-color"


def test_ids_are_unique():
    assert BaseMaterial().material_id() != ColorMaterial().material_id()
    assert len({BaseMaterial().material_id(), ColorMaterial().material_id()}) == 2


def test_default_blending_is_first_of_each_enum():
    blending = Blending()
    assert blending.enabled is False
    assert blending.mode_rgb is list(BlendingMode)[0]
    assert blending.mode_alpha is list(BlendingMode)[0]
    assert blending.src_rgb is list(BlendingFunc)[0]
    assert blending.dst_alpha is list(BlendingFunc)[0]
    assert blending.color == Color()


def test_default_depth_test():
    depth = DepthTest()
    assert depth.enabled is False
    assert depth.write is False
    assert depth.func is list(DepthTestFunc)[0]


def test_enum_values_follow_declaration_order():
    for enum_cls in (BlendingMode, BlendingFunc, DepthTestFunc):
        assert [enum_cls(i) for i in range(len(enum_cls))] == list(enum_cls)
    assert BlendingMode(0) is BlendingMode.ADD
    assert DepthTestFunc(1) is DepthTestFunc.LESS


def test_materials_do_not_share_state():
    first = BaseMaterial()
    second = BaseMaterial()
    first.blending.enabled = True
    first.depth_test.func = DepthTestFunc.LESS
    assert second.blending.enabled is False
    assert second.depth_test.func is DepthTestFunc.NEVER


def test_color_material_copies_color():
    source = Color.from_rgb(0.5, 0.25, 0.125)
    material = ColorMaterial(color=source)
    source.r = 0.0
    assert material.color.r == 0.5
    assert material.color.vec4() == (0.5, 0.25, 0.125, 1.0)


def test_color_material_is_base_material():
    material = ColorMaterial()
    assert isinstance(material, BaseMaterial)
    assert material.blending == Blending()