import pytest

from dax.events import MouseButton


@pytest.mark.parametrize(
    "button,text",
    [
        (MouseButton.LEFT, "left"),
        (MouseButton.RIGHT, "right"),
        (MouseButton.MIDDLE, "middle"),
    ],
)
def test_named_buttons(button, text):
    assert str(button) == text


def test_numbered_aliases():
    assert MouseButton(MouseButton.BUTTON_1.value) is MouseButton.LEFT
    assert MouseButton(MouseButton.BUTTON_2.value) is MouseButton.RIGHT
    assert MouseButton(MouseButton.BUTTON_3.value) is MouseButton.MIDDLE
    assert str(MouseButton(MouseButton.BUTTON_1.value)) == "left"


def test_last_is_button_8():
    assert MouseButton(MouseButton.LAST.value) is MouseButton.BUTTON_8
    assert str(MouseButton(MouseButton.LAST.value)) == str(MouseButton.BUTTON_8)


def test_format_uses_name():
    button = MouseButton(MouseButton.RIGHT.value)
    assert "Button " + str(button) + " pressed" == "Button right pressed"


def test_unnamed_buttons_render_distinctly():
    others = [
        MouseButton.BUTTON_4,
        MouseButton.BUTTON_5,
        MouseButton.BUTTON_6,
        MouseButton.BUTTON_7,
        MouseButton.BUTTON_8,
    ]
    rendered = {str(MouseButton(b.value)) for b in others}
    assert len(rendered) == len(others)
    assert rendered.isdisjoint({"left", "right", "middle"})


def test_member_count():
    members = {MouseButton(b.value) for b in MouseButton}
    assert len(members) == 8