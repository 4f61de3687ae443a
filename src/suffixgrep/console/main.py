"""Command-line interface for suffixgrep.

``suffixgrep pattern [path]...`` prints every line containing ``pattern``
in the given files, or in the eligible files below the given directories
(the current directory by default), as ``path:line_number: line``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from ..config_loader import APP_NAME, SuffixConfig, load_config
from ..discovery.engine import search
from ..logging.logger import LOG_LEVELS, setup_logger
from ..reporting.reporter import Reporter


console = Console()


def show_suffixes(config: SuffixConfig) -> None:
    source = str(config.source) if config.source else 'built-in defaults'
    table = Table(title=f'Eligible suffixes ({source})')
    table.add_column('Suffix')
    for suffix in sorted(config.suffixes):
        table.add_row(suffix or '(no extension)')
    console.print(table)


def program_name(ctx: click.Context) -> str:
    """Stem of the invoked program name, used to name the config file."""
    name = ctx.find_root().info_name
    if not name or ' ' in name:
        return APP_NAME
    return Path(name).stem or APP_NAME


@click.command(context_settings={'ignore_unknown_options': True})
@click.argument('pattern', required=False)
@click.argument('paths', nargs=-1)
@click.option('--log-level', default='WARNING', type=click.Choice(LOG_LEVELS, case_sensitive=False), help='Diagnostic logging level.')
@click.option('--show-config', is_flag=True, help='Print the eligible suffixes and exit.')
@click.pass_context
def cli(ctx: click.Context, pattern: Optional[str], paths: Tuple[str, ...], log_level: str, show_config: bool) -> None:
    """Search files recursively for lines containing PATTERN."""
    setup_logger(APP_NAME, log_level)
    config = load_config(program_name(ctx))

    if show_config:
        show_suffixes(config)
        return

    if pattern is None:
        click.echo(f'Usage: {ctx.info_name} pattern [path] ...', err=True)
        ctx.exit(1)

    reporter = Reporter.for_console()
    for path in paths or (os.getcwd(),):
        search(path, pattern, 0, config, reporter)


if __name__ == '__main__':  # pragma: no cover
    cli()
