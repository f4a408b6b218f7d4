"""Selector evaluation against the value tree."""

import logging
from typing import Any

from ..errors import (
    IndexOutOfBounds,
    KeyNotFound,
    NotAnArray,
    NotAnObject,
)
from ..values import ParsedInput, ValueKind, kind_of
from .parser import parse_selector
from .types import Index, SelectorPath

logger = logging.getLogger(__name__)


def evaluate(root: Any, path: SelectorPath) -> Any:
    """Walk ``root`` one step at a time and return the selected sub-value.

    Raises:
        NotAnObject: a key step met something other than a mapping.
        KeyNotFound: a key step named a missing key.
        NotAnArray: an index step met something other than a sequence.
        IndexOutOfBounds: an index step fell outside the sequence.
    """
    current = root
    for depth, step in enumerate(path.steps, start=1):
        walked = str(path.prefix(depth))
        kind = kind_of(current)

        if isinstance(step, Index):
            if kind is not ValueKind.SEQUENCE:
                raise NotAnArray(
                    f"cannot index into non-array at path '{walked}'", walked
                )
            if not 0 <= step.position < len(current):
                raise IndexOutOfBounds(step.position, len(current), walked)
            current = current[step.position]
        else:
            if kind is not ValueKind.MAPPING:
                raise NotAnObject(
                    f"cannot traverse into non-object at path '{walked}'", walked
                )
            if step.name not in current:
                raise KeyNotFound(step.name, walked)
            current = current[step.name]

    return current


def select(parsed: ParsedInput, selector: str) -> ParsedInput:
    """Apply selector text to a parsed input.

    A multi-document input fans out: unless the path starts with an index
    (which picks one document), the same path is applied to every document
    and the per-document results stay a multi-document value.
    """
    path = parse_selector(selector)
    logger.debug("selector %r parsed to %s", selector, list(path.steps))

    if path.is_identity:
        return parsed

    if parsed.multi_document and not path.starts_with_index:
        results = [evaluate(doc, path) for doc in parsed.value]
        return ParsedInput(results, multi_document=True)

    return ParsedInput(evaluate(parsed.value, path))
