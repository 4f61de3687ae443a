"""Discovery engine for suffixgrep.

Walks a start path depth-first in pre-order and decides for each entry
whether to descend into it, search it, or skip it.  Children of a
directory are visited in sorted path order so output is deterministic.
Paths given directly by the caller (level 0) are always searched,
whatever their type or extension; below that only regular files whose
extension passes the ``SuffixConfig`` filter are searched.
"""

from __future__ import annotations

import logging
import os
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple, Union

from ..config_loader import SuffixConfig
from ..matching.engine import search_file
from ..reporting.reporter import Reporter

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class EntryKind(Enum):
    DIRECTORY = auto()
    SEARCH = auto()
    SKIP = auto()


def extension_of(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[1]


def classify(path: str, level: int, config: SuffixConfig) -> EntryKind:
    """Classify ``path`` as a directory to descend into, a file to search, or an entry to skip.

    Symlinks are followed; a loop or dangling link is whatever the OS
    reports for it and is not guarded against.
    """
    if os.path.isdir(path):
        return EntryKind.DIRECTORY
    if level == 0:
        return EntryKind.SEARCH
    if os.path.isfile(path) and config.is_valid_suffix(extension_of(path)):
        return EntryKind.SEARCH
    return EntryKind.SKIP


def list_children(directory: str) -> List[str]:
    """Return the entries of ``directory`` sorted by path string.

    Entries that cannot be enumerated are left out silently.
    """
    children: List[str] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                children.append(entry.path)
    except OSError as exc:
        logger.debug('Cannot list directory %s: %s', directory, exc)
    children.sort()
    return children


def iter_candidates(path: PathLike, config: SuffixConfig, level: int = 0) -> Iterator[Tuple[str, int]]:
    """Yield ``(path, level)`` for every file to search under ``path``, in visiting order.

    Uses an explicit stack instead of recursion, so deep trees do not hit
    the interpreter's recursion limit.
    """
    stack = [(os.fspath(path), level)]
    while stack:
        current, depth = stack.pop()
        kind = classify(current, depth, config)
        if kind is EntryKind.DIRECTORY:
            children = list_children(current)
            stack.extend((child, depth + 1) for child in reversed(children))
        elif kind is EntryKind.SEARCH:
            yield current, depth
        else:
            logger.debug('Skipping %s', current)


def search(
    path: PathLike,
    pattern: str,
    level: int,
    config: SuffixConfig,
    reporter: Optional[Reporter] = None,
) -> None:
    """Search ``path`` for lines containing ``pattern``.

    Args:
        path: File or directory to start from.
        pattern: Literal substring to look for.
        level: Depth of ``path``; 0 means it was named by the user.
        config: Suffix filter applied to files found below level 0.
        reporter: Destination for matches and errors (defaults to stdout/stderr).
    """
    if reporter is None:
        reporter = Reporter.for_console()
    for candidate, _ in iter_candidates(path, config, level):
        search_file(candidate, pattern, reporter)
