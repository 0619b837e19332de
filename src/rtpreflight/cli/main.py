"""Command-line interface for rtpreflight."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from ..checker import VersionChecker
from ..config import PreflightConfig, load_config
from ..exceptions import ConfigError
from ..logging_config import setup_logging
from ._helpers import console, print_diagnostic, print_error

app = typer.Typer(help="Preflight checks for container runtime versions")
logger = logging.getLogger(__name__)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (pyproject.toml or rtpreflight.toml)",
    ),
]

LogLevelOption = Annotated[
    str | None,
    typer.Option(..., "--log-level", "-l", help="Logging level, e.g. debug"),
]


def _load(config: Path | None) -> PreflightConfig:
    try:
        loaded = load_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    logger.debug(
        "Using minimum %s version %s", loaded.runtime_name, loaded.minimum_version
    )
    return loaded


@app.command()
def check(
    version: Annotated[
        str,
        typer.Argument(
            ..., help="Version reported by the runtime, e.g. linux-20.10.7"
        ),
    ],
    as_json: Annotated[
        bool, typer.Option(..., "--json", help="Print the diagnostic as JSON")
    ] = False,
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Check a runtime version string against the minimum version."""
    setup_logging(log_level)
    checker = VersionChecker(_load(config))

    result = checker.check(version)
    logger.debug("Checked %r: %s", version, result.to_dict())

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        print_diagnostic(version, result)

    raise typer.Exit(0 if result.healthy else 1)


@app.command()
def minimum(
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Show the configured minimum runtime version."""
    setup_logging(log_level)
    loaded = _load(config)
    console.print(escape(f"{loaded.runtime_name} {loaded.minimum_version}"))


def main() -> None:
    """Entry point for the rtpreflight console script."""
    app()
