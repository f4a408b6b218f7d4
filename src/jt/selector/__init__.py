"""Path selectors for drilling into the value tree.

Syntax:
    .field.sub[N]

Examples:
    .                     # whole document
    .users                # key access
    .users[0].name        # index, then key
    .[1]                  # second document of a multi-document stream
"""

from .evaluator import evaluate, select
from .parser import looks_like_selector, parse_selector
from .types import Index, Key, SelectorPath, Step

__all__ = [
    "Index",
    "Key",
    "SelectorPath",
    "Step",
    "evaluate",
    "looks_like_selector",
    "parse_selector",
    "select",
]
