"""Logging setup for suffixgrep.

Diagnostics go to stderr through ``rich`` and stay quiet at the default
WARNING level, so they never mix with normal search output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def setup_logger(name: str = 'suffixgrep', level: str = 'WARNING') -> logging.Logger:
    """Configure and return the ``name`` logger.

    Any handlers installed by an earlier call are replaced.
    """
    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)

    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False
    return logger
