"""Selector parsing.

Syntax:
    .                identity
    .field           mapping key
    .field.sub       chained keys
    .field[N]        key followed by a zero-based index
    .[N]             index at the top level

``[`` is normalised to ``.[`` so every bracketed index becomes its own
segment, then the text is split on ``.``. Empty segments are skipped.
"""

import re
from typing import List

from ..errors import SelectorSyntaxError
from .types import Index, Key, SelectorPath, Step, format_steps

_INDEX_RE = re.compile(r"^\[(\d+)\]$")


def parse_selector(raw: str) -> SelectorPath:
    """Parse selector text into a SelectorPath.

    Raises:
        SelectorSyntaxError: selector does not start with '.', or a segment
            is neither an identifier nor a bracketed non-negative integer.

    Examples:
        >>> parse_selector(".")
        SelectorPath(steps=())

        >>> parse_selector(".items[3].name")
        SelectorPath(steps=(Key(name='items'), Index(position=3), Key(name='name')))
    """
    text = raw.strip() if raw else ""
    if not text.startswith("."):
        raise SelectorSyntaxError(
            f"selector must start with '.': '{raw}'", segment=text
        )

    normalized = text[1:].replace("[", ".[")
    steps: List[Step] = []
    for segment in normalized.split("."):
        if not segment:
            continue
        steps.append(_parse_segment(segment, steps))

    return SelectorPath(tuple(steps))


def _parse_segment(segment: str, parsed: List[Step]) -> Step:
    if segment.startswith("["):
        match = _INDEX_RE.match(segment)
        if not match:
            inner = segment[1:-1] if segment.endswith("]") else segment[1:]
            path = format_steps(parsed) + segment
            raise SelectorSyntaxError(
                f"invalid array index '{inner}' in path '{path}'",
                segment=segment,
                path=path,
            )
        return Index(int(match.group(1)))

    if "]" in segment:
        path = format_steps([*parsed, Key(segment)])
        raise SelectorSyntaxError(
            f"invalid selector segment '{segment}' in path '{path}'",
            segment=segment,
            path=path,
        )
    return Key(segment)


def looks_like_selector(arg: str) -> bool:
    """Tell a selector argument apart from a file name.

    A selector is ``.`` or ``.`` followed by a letter or ``[``.
    """
    if arg == ".":
        return True
    if len(arg) >= 2 and arg[0] == ".":
        first = arg[1]
        return first == "[" or ("a" <= first.lower() <= "z")
    return False
