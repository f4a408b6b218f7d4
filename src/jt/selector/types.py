"""Selector path types."""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Key:
    """Mapping field access (``.name``)."""

    name: str

    def __str__(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True)
class Index:
    """Sequence position access (``[N]``)."""

    position: int

    def __str__(self) -> str:
        return f"[{self.position}]"


Step = Union[Key, Index]


@dataclass(frozen=True)
class SelectorPath:
    """Parsed selector: an ordered, immutable tuple of steps.

    Examples:
        "."         → SelectorPath(steps=())
        ".a.b[2]"   → SelectorPath(steps=(Key("a"), Key("b"), Index(2)))
        ".[0].name" → SelectorPath(steps=(Index(0), Key("name")))
    """

    steps: Tuple[Step, ...] = ()

    @property
    def is_identity(self) -> bool:
        return not self.steps

    @property
    def starts_with_index(self) -> bool:
        return bool(self.steps) and isinstance(self.steps[0], Index)

    def prefix(self, length: int) -> "SelectorPath":
        return SelectorPath(self.steps[:length])

    def __str__(self) -> str:
        return format_steps(self.steps)


def format_steps(steps) -> str:
    """Render steps in canonical form (``.a.b[2]``); identity is ``.``."""
    text = "".join(str(step) for step in steps)
    if not text.startswith("."):
        text = "." + text
    return text
