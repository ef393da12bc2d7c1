"""CLI commands for jugsolver."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from jugsolver.config import OUTPUT_FORMATS, SolverConfig, load_config
from jugsolver.core.feasibility import check_feasibility
from jugsolver.errors import JugSolverError
from jugsolver.exploration.solver import failure_message, solve
from jugsolver.reporting import get_reporter

EXIT_SOLVED = 0
EXIT_NOT_POSSIBLE = 1
EXIT_ERROR = 2


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _fail(error: JugSolverError, verbose: bool) -> None:
    click.echo(error.format_verbose() if verbose else str(error), err=True)
    sys.exit(EXIT_ERROR)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """jugsolver - Measure water with two jugs."""
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
    except JugSolverError as e:
        _fail(e, verbose)
    if verbose:
        config_obj.verbose = True

    ctx.obj["config"] = config_obj
    ctx.obj["verbose"] = config_obj.verbose

    setup_logging(config_obj.verbose)


@cli.command("solve")
@click.argument("x", type=int)
@click.argument("y", type=int)
@click.argument("target", type=int)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS)),
    default=None,
    help="Output format (default: from config)",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file (default: stdout)")
@click.option("--max-states", type=click.IntRange(min=1), default=None, help="Explored-state limit")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.pass_context
def solve_command(
    ctx: click.Context,
    x: int,
    y: int,
    target: int,
    output_format: str | None,
    output: str | None,
    max_states: int | None,
    no_color: bool,
) -> None:
    """Find the shortest way to measure TARGET litres with jugs of X and Y litres.

    Put -- before the arguments to pass a negative number, e.g.
    `jugsolver solve -- 3 5 -1`.
    """
    config: SolverConfig = ctx.obj["config"]
    output_format = output_format or config.output_format
    color = config.color and not no_color and output is None

    try:
        solution = solve(x, y, target, max_states=max_states, config=config)
    except JugSolverError as e:
        _fail(e, ctx.obj["verbose"])

    text = get_reporter(output_format, color=color).report(solution)
    if output:
        try:
            Path(output).write_text(text)
        except OSError as e:
            click.echo(f"Cannot write report to {output}: {e}", err=True)
            sys.exit(EXIT_ERROR)
        click.echo(f"Report written to {output}")
    else:
        click.echo(text, nl=not text.endswith("\n"))

    sys.exit(EXIT_SOLVED if solution.possible else EXIT_NOT_POSSIBLE)


@cli.command("check")
@click.argument("x", type=int)
@click.argument("y", type=int)
@click.argument("target", type=int)
@click.pass_context
def check_command(ctx: click.Context, x: int, y: int, target: int) -> None:
    """Check whether TARGET litres can be measured, without searching.

    Put -- before the arguments to pass a negative number.
    """
    try:
        verdict = check_feasibility(x, y, target)
    except JugSolverError as e:
        _fail(e, ctx.obj["verbose"])

    click.echo(f"gcd({x}, {y}) = {verdict.gcd}")
    if verdict.feasible:
        click.echo(f"✓ {target}L can be measured with jugs of {x}L and {y}L")
        sys.exit(EXIT_SOLVED)

    click.echo(f"✗ {failure_message(verdict, x, y, target)}")
    sys.exit(EXIT_NOT_POSSIBLE)
