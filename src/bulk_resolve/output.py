"""Text rendering of lookup results."""

import sys
import threading
from typing import List, Optional, TextIO

from bulk_resolve.resolver import LookupResult


def format_lines(result: LookupResult) -> List[str]:
    """
    Render a result as output lines.

    Forward results read ``target:address`` and reverse results read
    ``name:target``. An empty result gives one bare ``target:`` or ``:target``.
    """
    if not result.values:
        return [":" + result.target] if result.reverse else [result.target + ":"]
    if result.reverse:
        return [f"{name}:{result.target}" for name in result.values]
    return [f"{result.target}:{address}" for address in result.values]


class ResultWriter:
    """Writes result lines from many threads without interleaving them."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lock = threading.Lock()

    def write(self, result: LookupResult) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        with self._lock:
            for line in format_lines(result):
                stream.write(line + "\n")
            stream.flush()
