"""Output helpers for suffixgrep.

``Reporter`` writes each match to a binary stream as soon as it is found
and reports unreadable files on a text stream.  Nothing is buffered across
files.
"""

from __future__ import annotations

from typing import BinaryIO, TextIO

import click

from ..matching.engine import MatchRecord


class Reporter:
    def __init__(self, out: BinaryIO, err: TextIO):
        self.out = out
        self.err = err

    @classmethod
    def for_console(cls) -> 'Reporter':
        return cls(click.get_binary_stream('stdout'), click.get_text_stream('stderr'))

    def report_match(self, record: MatchRecord) -> None:
        self.out.write(record.format())
        self.out.flush()

    def report_error(self, path: str, error: OSError) -> None:
        """Print ``<system error description>: <path>`` to the error stream."""
        description = error.strerror or str(error)
        click.echo(f'{description}: {path}', file=self.err)
