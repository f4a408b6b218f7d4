"""Work out where the input comes from and which selector applies."""

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, Optional, Sequence

from .errors import InputError
from .selector import looks_like_selector

USAGE = "Usage: cat data.json | jt [selector]\n       jt <file> [selector]"


@dataclass(frozen=True)
class InputRequest:
    """Resolved positional arguments: a file (or stdin when None) and a selector."""

    path: Optional[Path] = None
    selector: str = "."

    @property
    def from_stdin(self) -> bool:
        return self.path is None


def _is_file(arg: str) -> bool:
    return Path(arg).is_file()


def resolve_arguments(
    args: Sequence[str],
    stdin_has_data: bool,
    is_file: Callable[[str], bool] = _is_file,
) -> InputRequest:
    """Disambiguate positional arguments.

    - no args: read stdin, identity selector
    - one arg: an existing file, or a selector applied to stdin
    - two or more: file followed by selector (extra arguments are ignored)

    Raises:
        InputError: stdin is needed but is a terminal, or the file is missing.
    """
    if not args:
        if not stdin_has_data:
            raise InputError(USAGE)
        return InputRequest()

    if len(args) == 1:
        arg = args[0]
        if is_file(arg):
            return InputRequest(path=Path(arg))
        if looks_like_selector(arg):
            if not stdin_has_data:
                raise InputError("selector provided but no data piped to stdin")
            return InputRequest(selector=arg)
        raise InputError(f"file not found: {arg}")

    return InputRequest(path=Path(args[0]), selector=args[1])


def read_input(request: InputRequest, stdin: BinaryIO) -> bytes:
    """Read all input bytes for a request.

    Raises:
        InputError: the file cannot be read or there is nothing to process.
    """
    if request.from_stdin:
        data = stdin.read()
    else:
        try:
            data = request.path.read_bytes()
        except OSError as e:
            raise InputError(f"reading file: {e}") from e

    if not data or not data.strip():
        raise InputError("no data to process")
    return data
