#!/usr/bin/env python3
"""
fuzz-wordlist - Wordlist input provider for keyword substitution fuzzing

Main CLI entry point for the application.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fuzz_wordlist import __version__
from fuzz_wordlist.core.config import Config, WordlistFilterConfig, load_config
from fuzz_wordlist.core.exceptions import WordlistReadError, WordlistSourceError
from fuzz_wordlist.core.logger import configure_logging, get_component_logger
from fuzz_wordlist.input.provider import InputProvider
from fuzz_wordlist.input.wordlist import WordlistInput

console = Console(stderr=True)
logger = get_component_logger("cli")

# CLI flag dest -> WordlistFilterConfig field
FILTER_FLAGS = {
    'dirsearch_compat': 'dirsearch_compat',
    'ignore_comments': 'ignore_wordlist_comments',
    'xc_c': 'exclude_comment_lines',
    'xc_d': 'exclude_dot_lines',
    'xc_n': 'exclude_number_lines',
    'xc_upper': 'exclude_uppercase',
    'xc_lower': 'exclude_lowercase',
    'xc_s_upper': 'exclude_start_upper',
    'xc_s_lower': 'exclude_start_lower',
}


@click.group()
@click.version_option(version=__version__)
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
              default=None, help='Set logging level')
@click.option('--log-file', type=click.Path(), help='Path to log file')
@click.pass_context
def cli(ctx, debug, log_level, log_file):
    """fuzz-wordlist - Wordlist input provider for keyword substitution fuzzing"""

    ctx.ensure_object(dict)

    overrides = {}
    if debug:
        overrides['debug'] = True
        overrides['log_level'] = 'DEBUG'
    elif log_level:
        overrides['log_level'] = log_level
    if log_file:
        overrides['log_file'] = Path(log_file)

    config = load_config(**overrides)
    configure_logging(
        level=config.log_level,
        log_file=config.log_file,
        show_time=config.debug,
        show_path=config.debug
    )

    ctx.obj['config'] = config


def build_filter_config(
        base: WordlistFilterConfig,
        extensions: Optional[str],
        flags: Dict[str, bool]
) -> WordlistFilterConfig:
    """Overlay command line filter options on the configured defaults."""
    updates = base.model_dump()
    for dest, enabled in flags.items():
        if enabled:
            updates[FILTER_FLAGS[dest]] = True
    if extensions:
        updates['extensions'] = [ext for ext in extensions.split(',') if ext]
    return WordlistFilterConfig(**updates)


def emit_values(provider: InputProvider, limit: Optional[int]) -> int:
    """Walk the provider from the start and write each value to stdout."""
    provider.reset_position()
    shown = 0
    while provider.next():
        if limit is not None and shown >= limit:
            break
        click.echo(provider.value())
        provider.increment_position()
        shown += 1
    return shown


@cli.command()
@click.argument('wordlist')
@click.option('--keyword', '-w', default='FUZZ', show_default=True,
              help='Keyword bound to the wordlist')
@click.option('--extensions', '-e', default=None,
              help='Comma separated list of extensions, e.g. .php,.bak')
@click.option('--dirsearch-compat', '-D', is_flag=True,
              help='Replace %EXT% in wordlist entries with each extension')
@click.option('--ic', 'ignore_comments', is_flag=True, help='Ignore wordlist comments')
@click.option('--xc-c', 'xc_c', is_flag=True, help='Exclude lines starting with #, ~ or /')
@click.option('--xc-d', 'xc_d', is_flag=True, help='Exclude lines starting with .')
@click.option('--xc-n', 'xc_n', is_flag=True, help='Exclude lines starting with a digit')
@click.option('--xc-upper', 'xc_upper', is_flag=True, help='Exclude all-uppercase lines')
@click.option('--xc-lower', 'xc_lower', is_flag=True, help='Exclude all-lowercase lines')
@click.option('--xc-s-upper', 'xc_s_upper', is_flag=True, help='Exclude lines starting uppercase')
@click.option('--xc-s-lower', 'xc_s_lower', is_flag=True, help='Exclude lines starting lowercase')
@click.option('--limit', type=click.IntRange(min=0), default=None, help='Show at most N values')
@click.option('--count', 'count_only', is_flag=True, help='Only print the number of values')
@click.pass_context
def preview(ctx, wordlist, keyword, extensions, limit, count_only, **flags):
    """Load WORDLIST (a path, or - for stdin) and print the filtered values."""
    config: Config = ctx.obj['config']
    filter_config = build_filter_config(config.wordlist, extensions, flags)

    try:
        provider = WordlistInput(keyword, wordlist, filter_config)
    except WordlistSourceError as e:
        console.print(f"[red]Wordlist error: {escape(str(e))}[/red]")
        sys.exit(1)
    except WordlistReadError as e:
        if not count_only:
            emit_values(e.provider, limit)
        console.print(f"[red]Wordlist read failed after {e.lines_read} lines: {escape(str(e))}[/red]")
        sys.exit(1)

    if count_only:
        click.echo(provider.total())
        return

    shown = emit_values(provider, limit)
    logger.debug(f"Printed {shown} of {provider.total()} values")


@cli.command('show-config')
@click.pass_context
def show_config(ctx):
    """Display the effective wordlist filter configuration."""
    config: Config = ctx.obj['config']

    table = Table(title="Wordlist filters")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for name, value in config.wordlist.model_dump().items():
        table.add_row(name, escape(str(value)))

    Console().print(table)


if __name__ == '__main__':
    cli()
