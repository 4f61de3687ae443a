"""Line matching for suffixgrep.

Files are read as bytes and split on ``\\n`` only, so content in any
encoding is matched and printed verbatim.  The pattern is a literal
substring; an empty pattern matches every line.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO, Iterator

if TYPE_CHECKING:  # pragma: no cover
    from ..reporting.reporter import Reporter


@dataclass(frozen=True)
class MatchRecord:
    path: str
    line_number: int
    line: bytes

    def format(self) -> bytes:
        """Render as ``path:line_number: line`` terminated by a newline."""
        return b'%s:%d: %s\n' % (os.fsencode(self.path), self.line_number, self.line)


def match_lines(path: str, handle: BinaryIO, pattern: bytes) -> Iterator[MatchRecord]:
    """Yield a ``MatchRecord`` for every line of ``handle`` containing ``pattern``.

    Line numbers are 1-based and count every line read.  A final line
    without a trailing newline is still a line; end of input adds none.
    """
    for line_number, raw in enumerate(handle, start=1):
        line = raw[:-1] if raw.endswith(b'\n') else raw
        if pattern in line:
            yield MatchRecord(path=path, line_number=line_number, line=line)


def search_file(path: str, pattern: str, reporter: 'Reporter') -> None:
    """Search one file and report its matches, or report why it could not be read.

    Only errors opening or reading ``path`` are reported; errors writing
    the output propagate to the caller.
    """
    encoded = os.fsencode(pattern)
    try:
        handle = open(path, 'rb')
    except OSError as exc:
        reporter.report_error(path, exc)
        return
    with handle:
        records = match_lines(path, handle, encoded)
        while True:
            try:
                record = next(records)
            except StopIteration:
                break
            except OSError as exc:
                reporter.report_error(path, exc)
                return
            reporter.report_match(record)
