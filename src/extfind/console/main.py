"""Command‑line interface for extfind.

``extfind -e py,rs [PATH]`` prints every file under ``PATH`` whose
extension is listed, one path per line, as soon as it is found.
Directories named in ``--ignore`` are skipped together with everything
below them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import click
from click.core import ParameterSource
from rich.console import Console

from ..config_loader import DEFAULT_IGNORE, ConfigError, load_config
from ..discovery.engine import SearchConfig, search
from ..discovery.filters import normalize_extensions, normalize_ignore
from ..logging.logger import setup_logging

NO_EXTENSIONS_MESSAGE = 'Error: please specify at least one file extension'

console = Console()


def _describe(config: SearchConfig, show_count: bool, verbose: int) -> Dict[str, Any]:
    return {
        'root': str(config.root),
        'extensions': sorted(config.extensions),
        'ignore': sorted(config.ignore),
        'max_depth': config.max_depth,
        'count': show_count,
        'verbose': verbose,
    }


@click.command()
@click.argument('path', type=click.Path(path_type=Path), default='.')
@click.option('-e', '--extension', 'extension', default=None, help='Comma-separated file extensions to look for, without dots.')
@click.option('-m', '--max-depth', type=click.IntRange(min=0), default=None, help='Maximum recursion depth (unlimited by default).')
@click.option('-i', '--ignore', default=DEFAULT_IGNORE, show_default=True, help='Comma-separated directory names to skip.')
@click.option('-c', '--count', 'show_count', is_flag=True, help='Print the number of matching files at the end.')
@click.option('-v', '--verbose', count=True, help='Report unreadable entries (-v) and debug output (-vv) on stderr.')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None, help='YAML file with default options.')
@click.option('--show-config', is_flag=True, help='Print the effective configuration and exit.')
@click.version_option('0.1.0', prog_name='extfind')
@click.pass_context
def cli(
    ctx: click.Context,
    path: Path,
    extension: Optional[str],
    max_depth: Optional[int],
    ignore: str,
    show_count: bool,
    verbose: int,
    config_path: Optional[Path],
    show_config: bool,
) -> None:
    """Find files under PATH whose extension is in the given list."""
    cfg: Dict[str, Any] = {}
    if config_path is not None:
        try:
            cfg = load_config(config_path)
        except ConfigError as exc:
            raise click.ClickException(str(exc)) from exc

    def pick(param: str, value: Any, key: str) -> Any:
        if key in cfg and ctx.get_parameter_source(param) is ParameterSource.DEFAULT:
            return cfg[key]
        return value

    extension = pick('extension', extension, 'extensions')
    max_depth = pick('max_depth', max_depth, 'max_depth')
    ignore = pick('ignore', ignore, 'ignore')
    show_count = pick('show_count', show_count, 'count')
    verbose = pick('verbose', verbose, 'verbose')

    if extension is None:
        raise click.UsageError("Missing option '-e' / '--extension'.", ctx=ctx)

    logger = setup_logging(verbose)
    config = SearchConfig(
        root=path,
        extensions=normalize_extensions(extension),
        ignore=normalize_ignore(ignore),
        max_depth=max_depth,
    )

    if show_config:
        console.print_json(json.dumps(_describe(config, show_count, verbose), indent=2))
        return

    if not config.extensions:
        click.echo(NO_EXTENSIONS_MESSAGE)
        return

    def on_error(entry_path: Path, exc: OSError) -> None:
        logger.warning('Cannot access %s: %s', entry_path, exc)

    logger.debug('Searching %s for %s', config.root, ', '.join(sorted(config.extensions)))
    found = search(config, lambda match: click.echo(str(match)), on_error=on_error)
    logger.debug('Found %d matching files', found)

    if show_count:
        click.echo()
        click.echo(f'Found {found} matching files')


if __name__ == '__main__':  # pragma: no cover
    cli()
