"""Value tree helpers.

Parsed documents are plain Python values (``dict``, ``list``, ``str``,
``int``, ``float``, ``bool`` and ``None``). ``kind_of`` gives the closed tag
every consumer dispatches on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueKind(Enum):
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.SEQUENCE, ValueKind.MAPPING)


def kind_of(value: Any) -> ValueKind:
    """Classify a value tree node."""
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.MAPPING
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


def scalar_text(value: Any) -> str:
    """Canonical display form of a scalar."""
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class ParsedInput:
    """A parsed document plus the multi-document flag.

    When ``multi_document`` is set, ``value`` is the list of YAML documents
    found in the input, in stream order.
    """

    value: Any
    multi_document: bool = False
