"""A catalogue of example scenes, grouped by category."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Category(IntEnum):
    """Area an example belongs to."""

    WINSYS = 0
    GRAPHICS = 1

    def __str__(self) -> str:
        return _CATEGORY_NAMES[self]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_CATEGORY_NAMES = {
    Category.WINSYS: "winsys",
    Category.GRAPHICS: "gfx",
}


@dataclass
class Example:
    """A scene that shows off part of the API."""

    category: Category
    name: str
    description: str
    scene: Any = None

    def example_id(self) -> str:
        """Identifier made of the category and the hyphenated, lower-cased name."""
        category = str(self.category).lower()
        name = self.name.replace(" ", "-").lower()
        return f"{category}-{name}"


@dataclass
class ExampleRegistry:
    """An ordered collection of examples, looked up by identifier."""

    examples: list[Example] = field(default_factory=list)

    def __iter__(self) -> Iterator[Example]:
        return iter(self.examples)

    def __len__(self) -> int:
        return len(self.examples)

    def find(self, example_id: str) -> Example:
        """Return the first example with the given identifier."""
        for example in self.examples:
            if example.example_id() == example_id:
                return example
        raise LookupError(f"no example with id '{example_id}'")

    def describe(self) -> list[str]:
        """One ``"<id>: <description>"`` line per example, in order."""
        return [f"{e.example_id()}: {e.description}" for e in self.examples]