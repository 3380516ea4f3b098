from __future__ import annotations

import logging
import sys
from datetime import date
from pathlib import Path

import typer

from .config import resolve_parameters
from .game import UnresolvedGameError
from .logging_setup import setup_logging
from .parse import InputFormatError
from .puzzles import Part, UnknownPuzzleError, get_solver, input_path
from .version import __version__

app = typer.Typer(help="Bingo grid simulator: first and last winning grids")

logger = logging.getLogger(__name__)


@app.callback(invoke_without_command=True)
def common_options(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", help="Show application version and exit", is_eager=True
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def run(
    day: int = typer.Option(
        None,
        "--day",
        help="Puzzle day to run (defaults to today's day of month)",
    ),
    part: Part = typer.Option(Part.ONE, "--part", help="part1 = first winner, part2 = last winner"),
    input_file: str = typer.Option(None, "--input", help="Puzzle input path (overrides --day lookup)"),
    config: str = typer.Option(
        None,
        "--config",
        help="Path to config file (YAML/JSON)",
    ),
    log_file: str = typer.Option(None, "--log-file", help="Log file path"),
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="DEBUG|INFO|WARN|ERROR",
    ),
) -> None:
    """Solve one puzzle part and print its result line."""

    try:
        resolved, _cfg_path = resolve_parameters(
            config_path_str=config,
            cli_overrides={"log_file": log_file, "log_level": log_level},
        )
        setup_logging(
            level=str(resolved.get("log_level", "INFO")),
            log_file=resolved.get("log_file"),
        )
    except (OSError, ValueError) as exc:
        # console-only logging so the failure still reaches stderr
        setup_logging(level=log_level or "INFO")
        logger.error("Configuration error: %s", exc)
        raise typer.Exit(code=1)

    if day is None:
        day = date.today().day

    if input_file:
        path = Path(input_file)
    else:
        path = input_path(
            day,
            input_dir=str(resolved["input_dir"]),
            input_pattern=str(resolved["input_pattern"]),
        )

    try:
        solver = get_solver(day, part)
        text = path.read_text(encoding="utf-8")
        logger.debug("Running day %d %s on %s", day, part.value, path)
        line = solver(text)
    except FileNotFoundError:
        logger.error("Input for day %d not found: %s", day, path)
        raise typer.Exit(code=1)
    except (UnknownPuzzleError, InputFormatError, UnresolvedGameError) as exc:
        logger.error("%s", exc.args[0] if exc.args else exc)
        raise typer.Exit(code=1)

    typer.echo(line)
    raise typer.Exit(code=0)


def main(_argv: list[str] | None = None) -> int:
    try:
        app(standalone_mode=True)
        return 0
    except SystemExit as e:
        return int(e.code) if e.code is not None else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
