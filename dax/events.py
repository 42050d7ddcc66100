"""Input event identifiers."""

from __future__ import annotations

from enum import IntEnum


class MouseButton(IntEnum):
    """Mouse buttons; buttons 1 to 3 are the left, right and middle ones."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    LAST = 7

    def __str__(self) -> str:
        name = _BUTTON_NAMES.get(self)
        if name is not None:
            return name
        # Unnamed buttons render as the character with the button's code.
        return chr(self.value)

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_BUTTON_NAMES = {
    MouseButton.LEFT: "left",
    MouseButton.RIGHT: "right",
    MouseButton.MIDDLE: "middle",
}