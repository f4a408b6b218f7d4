"""Exceptions raised while reading, selecting and paging data."""


class JTError(Exception):
    """Base class for every error jt reports to the user."""


class InputError(JTError):
    """Input could not be acquired (missing file, nothing on stdin)."""


class InputParseError(JTError):
    """Input bytes are not valid JSON, XML or YAML."""

    def __init__(self, message: str = "Input is not valid JSON or YAML."):
        super().__init__(message)


class SelectorSyntaxError(JTError):
    """Selector text could not be parsed."""

    def __init__(self, message: str, segment: str = "", path: str = "."):
        super().__init__(message)
        self.segment = segment
        self.path = path


class SelectorTraversalError(JTError):
    """Selector could not be applied to the value tree.

    ``path`` is the canonical prefix walked so far, including the failing
    step.
    """

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class NotAnObject(SelectorTraversalError):
    pass


class NotAnArray(SelectorTraversalError):
    pass


class KeyNotFound(SelectorTraversalError):
    def __init__(self, key: str, path: str):
        super().__init__(f"key '{key}' not found in path '{path}'", path)
        self.key = key


class IndexOutOfBounds(SelectorTraversalError):
    def __init__(self, index: int, length: int, path: str):
        super().__init__(
            f"index {index} out of bounds for array of length {length} at path '{path}'",
            path,
        )
        self.index = index
        self.length = length


class PagerError(JTError):
    """The interactive viewer could not run."""


__all__ = [
    "IndexOutOfBounds",
    "InputError",
    "InputParseError",
    "JTError",
    "KeyNotFound",
    "NotAnArray",
    "NotAnObject",
    "PagerError",
    "SelectorSyntaxError",
    "SelectorTraversalError",
]
