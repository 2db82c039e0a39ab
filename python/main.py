#!/usr/bin/env python3
"""Cast Duet solver.

Usage::

    python main.py                              # interactive prompt
    python main.py solve "U(3,1)-(4,1)"         # shortest way to FREE
    python main.py solve "D(3,1)-(3,0)" "D(2,2)-(3,1)" --diagram
    python main.py show "U(3,1)-(4,1)"          # frame diagram
    python main.py graph                        # graph statistics
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import NoReturn

import typer
from rich.logging import RichHandler
from rich.markup import escape

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from castduet.engine.gamesolver import FREE_HALF_RING, Solver, default_solver  # noqa: E402
from castduet.frontend.cli import app as rich_app  # noqa: E402
from castduet.models.errors import DuetError  # noqa: E402


# -- log levels ---------------------------------------------------------------


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"
    critical = "CRITICAL"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=rich_app.console, show_path=False)],
        force=True,
    )


def _fail(exc: DuetError) -> NoReturn:
    rich_app.console.print(f"[red]{escape(str(exc))}[/red]")
    raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=False)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="CASTDUET_LOG_LEVEL",
        case_sensitive=False,
        help="Logging level.",
    ),
) -> None:
    """Cast Duet solver."""
    _configure_logging(log_level)
    if ctx.invoked_subcommand is None:
        rich_app.run(default_solver())


@app.command()
def solve(
    source: str = typer.Argument(..., help="Starting position, e.g. U(3,1)-(4,1)."),
    target: str = typer.Argument(FREE_HALF_RING, help="Target position."),
    diagram: bool = typer.Option(
        False, "-d", "--diagram",
        help="Draw the frame for every step.",
    ),
) -> None:
    """Print the shortest move sequence from SOURCE to TARGET."""
    try:
        path = default_solver().solve(source, target)
    except DuetError as exc:
        _fail(exc)
    rich_app.print_solution(path, diagrams=diagram)


@app.command()
def parse(position: str = typer.Argument(..., help="Position to validate.")) -> None:
    """Validate POSITION and describe it."""
    try:
        Solver.parse(position)
    except DuetError as exc:
        _fail(exc)
    rich_app.console.print(rich_app.render_details(position))


@app.command()
def show(position: str = typer.Argument(..., help="Position to draw.")) -> None:
    """Draw the frame with the half-ring at POSITION."""
    try:
        Solver.parse(position)
    except DuetError as exc:
        _fail(exc)
    rich_app.console.print(rich_app.render_position(position))


@app.command()
def graph() -> None:
    """Show the size of the move graph."""
    rich_app.console.print(rich_app.render_graph(default_solver().graph))


if __name__ == "__main__":
    app()
