"""CLI entry point for zest.

Usage:
    zest [PATHS...] [options]
    python -m zest [PATHS...] [options]
"""

import sys
from pathlib import Path
from typing import Optional

import click

from .config.parser import DEFAULT_CONFIG_FILE, parse_config
from .config.schema import VALID_COLOR_MODES, VALID_LOG_LEVELS, RunConfig
from .config.validator import validate_config
from .discovery.collector import collect
from .errors import BookkeepingError, CollectionError, ConfigError
from .session import run

EXIT_USAGE = 2


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--config", "config_path", type=click.Path(dir_okay=False),
    help=f"Config file (default: ./{DEFAULT_CONFIG_FILE} if present).",
)
@click.option("--color", type=click.Choice(sorted(VALID_COLOR_MODES)), help="Colour output mode.")
@click.option(
    "--log-level", type=click.Choice(sorted(VALID_LOG_LEVELS), case_sensitive=False),
    help="Lowest log level echoed while a test runs.",
)
@click.option("--traces/--no-traces", default=None, help="Print tracebacks for failing tests.")
@click.option("-p", "--pattern", multiple=True, help="File pattern used when walking directories.")
@click.version_option(package_name="zest")
def main(
    paths: tuple[str, ...],
    config_path: Optional[str],
    color: Optional[str],
    log_level: Optional[str],
    traces: Optional[bool],
    pattern: tuple[str, ...],
):
    """Run zest tests found in PATHS (default: current directory)."""
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ConfigError) as e:
        fail(str(e))

    if color:
        config.color = color
    if log_level:
        config.log_level = log_level.lower()
    if traces is not None:
        config.show_traces = traces
    if pattern:
        config.pattern = list(pattern)

    validation = validate_config(config)
    for warning in validation.warnings:
        click.echo(f"Warning: {warning.path}: {warning.message}", err=True)
    if not validation.valid:
        errors_str = "; ".join(f"{e.path}: {e.message}" for e in validation.errors)
        fail(f"{validation} in config: {errors_str}")

    try:
        cases = collect(paths or ["."], config.pattern)
    except (FileNotFoundError, CollectionError) as e:
        fail(str(e))

    try:
        result = run(cases, config=config, stream=sys.stderr)
    except BookkeepingError as e:
        click.echo(f"Fatal: {e}", err=True)
        sys.exit(1)

    sys.exit(result.exit_code)


def load_config(config_path: Optional[str]) -> RunConfig:
    """Load the explicit config file, or ./zest.yaml when it exists."""
    if config_path:
        return parse_config(config_path)
    default = Path(DEFAULT_CONFIG_FILE)
    if default.is_file():
        return parse_config(default)
    return RunConfig()


def fail(message: str):
    click.echo(f"Error: {message}", err=True)
    sys.exit(EXIT_USAGE)


if __name__ == "__main__":
    main()
