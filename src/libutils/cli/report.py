"""
libutils CLI - leveled reports from shell scripts.

Commands:
- info: Print an informational message
- warn: Print a warning, optionally waiting for y/N (--ack)
- fail: Print a fatal error to stderr and abort
- version: Show the libutils version

Examples:
    libutils info "copied %s files" 12
    libutils warn --ack "about to overwrite %s" build/
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from libutils import __version__
from libutils.core.config import load_config
from libutils.core.errors import ConfigError
from libutils.reporting import CallSite, Severity, get_reporter

app = typer.Typer(
    name="libutils",
    help="Leveled, location-annotated console reports",
    no_args_is_help=True,
)

# Rich console for CLI diagnostics
err_console = Console(stderr=True)

SHELL_FILE = "<shell>"
SHELL_FUNCTION = "main"

_FILE_OPTION = typer.Option(SHELL_FILE, "--file", help="Source file shown in the header")
_FUNCTION_OPTION = typer.Option(SHELL_FUNCTION, "--function", help="Function shown in the header")
_LINE_OPTION = typer.Option(0, "--line", help="Line number shown in the header")
_ARGS_ARGUMENT = typer.Argument(None, help="Values substituted into MESSAGE")


@app.callback()
def main_callback(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help="YAML configuration file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Leveled, location-annotated console reports."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if config is not None:
        try:
            load_config(config)
        except ConfigError as e:
            err_console.print(e.message, style="red", markup=False)
            raise typer.Exit(1)


def _report(
    severity: Severity,
    message: str,
    args: Optional[List[str]],
    file: str,
    function: str,
    line: int,
) -> None:
    site = CallSite(file=file, function=function, line=line)
    try:
        get_reporter().report(severity, message, *(args or []), site=site)
    except (TypeError, ValueError) as e:
        err_console.print(f"Cannot format message: {e}", style="red", markup=False)
        raise typer.Exit(2)


@app.command("info")
def info_command(
    message: str = typer.Argument(..., help="printf-style message"),
    args: Optional[List[str]] = _ARGS_ARGUMENT,
    file: str = _FILE_OPTION,
    function: str = _FUNCTION_OPTION,
    line: int = _LINE_OPTION,
):
    """Print an informational message to stdout."""
    _report(Severity.INFO, message, args, file, function, line)


@app.command("warn")
def warn_command(
    message: str = typer.Argument(..., help="printf-style message"),
    args: Optional[List[str]] = _ARGS_ARGUMENT,
    ack: bool = typer.Option(
        False,
        "--ack",
        help="Wait for y/N; exit with the declined status on N",
    ),
    file: str = _FILE_OPTION,
    function: str = _FUNCTION_OPTION,
    line: int = _LINE_OPTION,
):
    """Print a warning to stdout."""
    severity = Severity.WARN_ACK if ack else Severity.WARN_NO_ACK
    _report(severity, message, args, file, function, line)


@app.command("fail")
def fail_command(
    message: str = typer.Argument(..., help="printf-style message"),
    args: Optional[List[str]] = _ARGS_ARGUMENT,
    file: str = _FILE_OPTION,
    function: str = _FUNCTION_OPTION,
    line: int = _LINE_OPTION,
):
    """Print a fatal error to stderr and abort."""
    _report(Severity.ERROR, message, args, file, function, line)


@app.command("version")
def version_command():
    """Show the libutils version."""
    typer.echo(f"libutils {__version__}")
