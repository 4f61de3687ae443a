"""Configuration loading for suffixgrep.

The configuration lives in ``<home>/<app_name>.ini`` and only knows one
setting: the ``suffixes`` key of the ``[files]`` section, a whitespace
separated list of file extensions that are eligible when recursing into
directories.  The file is created with default content on first use.
Loading never fails: any problem falls back to the built-in defaults.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)

APP_NAME = 'suffixgrep'

DEFAULT_LINES: List[str] = [
    '[files]',
    'suffixes=txt log xml html c h cpp cs java bat sh sql',
]

HOME_VARIABLES = ('HOME', 'USERPROFILE')

SEPARATORS = ' \t\n\v\f\r'


def split_suffixes(value: str) -> List[str]:
    """Split a ``suffixes`` value into tokens.

    An empty value, or one ending in whitespace, also yields the empty
    suffix, which makes files without an extension eligible.
    """
    tokens = [token for token in re.split(f'[{re.escape(SEPARATORS)}]+', value) if token]
    if not value or value[-1] in SEPARATORS:
        tokens.append('')
    return tokens


@dataclass(frozen=True)
class SuffixConfig:
    suffixes: FrozenSet[str]
    source: Optional[Path] = None

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: Optional[Path] = None) -> 'SuffixConfig':
        """Parse INI-like ``lines`` into a ``SuffixConfig``.

        Section headers are ``[name]``; a header without a closing bracket
        leaves the current section unchanged.  ``key=value`` lines are split
        on the first ``=`` and neither side is trimmed further.  Anything
        else is ignored.
        """
        suffixes = set()
        section = ''
        for line in lines:
            trimmed = line.lstrip(' \t')
            if trimmed.startswith('['):
                end = trimmed.find(']')
                if end != -1:
                    section = trimmed[1:end]
            elif '=' in trimmed:
                key, value = trimmed.split('=', 1)
                if section == 'files' and key == 'suffixes':
                    suffixes.update(token.lower() for token in split_suffixes(value))
        return cls(suffixes=frozenset(suffixes), source=source)

    @classmethod
    def default(cls) -> 'SuffixConfig':
        return cls.from_lines(DEFAULT_LINES)

    def is_valid_suffix(self, suffix: str) -> bool:
        """Return ``True`` if ``suffix`` is eligible, ignoring case and one leading dot."""
        suffix = suffix.lower()
        if suffix.startswith('.'):
            suffix = suffix[1:]
        return suffix in self.suffixes


def resolve_home(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Return the user's home directory from the environment, or ``None``."""
    if environ is None:
        environ = os.environ
    for name in HOME_VARIABLES:
        value = environ.get(name)
        if value:
            return Path(value)
    return None


def config_path(app_name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    home = resolve_home(environ)
    if home is None:
        return None
    return home / f'{app_name}.ini'


def _read_lines(path: Path) -> Optional[List[str]]:
    try:
        with path.open('r', encoding='utf-8', errors='replace') as f:
            return f.read().split('\n')
    except OSError as exc:
        logger.debug('Cannot read config file %s: %s', path, exc)
        return None


def _write_defaults(path: Path) -> None:
    try:
        with path.open('w', encoding='utf-8') as f:
            for line in DEFAULT_LINES:
                f.write(line + '\n')
    except OSError as exc:
        logger.debug('Cannot create config file %s: %s', path, exc)
    else:
        logger.info('Created default config file %s', path)


def load_config(app_name: str = APP_NAME, environ: Optional[Mapping[str, str]] = None) -> SuffixConfig:
    """Load the suffix configuration for ``app_name``.

    Args:
        app_name: Base name of the ini file in the home directory.
        environ: Environment mapping used to find the home directory
            (defaults to ``os.environ``).

    Returns:
        The parsed ``SuffixConfig``.  If the home directory is unknown or the
        file can be neither read nor created, the built-in defaults are used.
    """
    path = config_path(app_name, environ)
    if path is None:
        logger.debug('No home directory found, using default suffixes')
        return SuffixConfig.default()

    lines = _read_lines(path)
    if lines is None:
        _write_defaults(path)
        lines = _read_lines(path)
    if lines is None:
        logger.debug('Falling back to default suffixes')
        return SuffixConfig.default()

    config = SuffixConfig.from_lines(lines, source=path)
    logger.debug('Loaded %d suffixes from %s', len(config.suffixes), path)
    return config
