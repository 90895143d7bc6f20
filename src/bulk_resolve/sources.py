"""Where targets come from: a file, a single literal, or a stream."""

import os
import sys
from typing import Iterable, Iterator, List, Optional, TextIO


def read_lines(path: str) -> List[str]:
    """Read every non-blank line of ``path`` up front."""
    with open(path, encoding="utf-8") as handle:
        return list(stream_lines(handle))


def stream_lines(stream: TextIO) -> Iterator[str]:
    """Yield trimmed, non-blank lines from ``stream`` as they arrive."""
    for line in stream:
        target = line.strip()
        if target:
            yield target


def targets_from_argument(
    argument: Optional[str], stdin: Optional[TextIO] = None
) -> Iterable[str]:
    """
    Pick the target source for a positional argument.

    Args:
        argument: A file path, an IP or a hostname. None means read the stream.
        stdin: Stream to read when no argument is given. Defaults to sys.stdin.

    Returns:
        A list for file and literal input, a lazy iterator for stream input.

    Raises:
        OSError: The file could not be read.
        UnicodeDecodeError: The file is not valid UTF-8.
    """
    if argument is None:
        return stream_lines(stdin if stdin is not None else sys.stdin)
    if os.path.isfile(argument):
        return read_lines(argument)
    target = argument.strip()
    return [target] if target else []
