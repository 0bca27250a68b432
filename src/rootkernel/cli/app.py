"""CLI application entry point for rootkernel.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from rootkernel import __version__
from rootkernel.cli.output import (
    console,
    print_coefficients,
    print_error,
    print_header,
    print_intersections,
    print_roots,
    print_step,
    print_summary,
)
from rootkernel.config import KernelSettings, LoggingConfig
from rootkernel.core import RootSolver, power
from rootkernel.core.bezier import create_bezier
from rootkernel.exceptions import RootKernelError
from rootkernel.utils import SolveLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="rootkernel",
    help="Real roots of polynomials, Bezier polynomials and unit circle intersections.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Rootkernel[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Console logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print results only",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Solve for real roots with the rootkernel numeric core.

    Negative coefficients must follow ``--`` so they are not read as options.

    Example:
        rootkernel solve -- -2 0 1
    """
    settings = KernelSettings(
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level or "WARNING",
        ),
    )
    logger = None
    if log_file is not None or log_level is not None:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=log_level is None,
        )
    ctx.obj = {
        "settings": settings,
        "solver": RootSolver(settings, SolveLogger(logger)),
        "quiet": quiet,
    }


def _solver(ctx: typer.Context) -> RootSolver:
    return ctx.obj["solver"]


@app.command()
def solve(
    ctx: typer.Context,
    coefficients: Annotated[
        list[float],
        typer.Argument(
            help="Power-basis coefficients, constant term first",
            show_default=False,
        ),
    ],
    lower: Annotated[
        float,
        typer.Option(
            "--lower",
            help="Search interval start (degree above 4)",
        ),
    ] = 0.0,
    upper: Annotated[
        float,
        typer.Option(
            "--upper",
            help="Search interval end (degree above 4)",
        ),
    ] = 1.0,
) -> None:
    """Print the real roots of c0 + c1*x + c2*x^2 + ...

    Degree 4 and below are solved in closed form over all reals. Higher
    degrees are solved on [--lower, --upper] by Bezier deflation.
    """
    quiet = ctx.obj["quiet"]
    solver = _solver(ctx)
    try:
        roots = solver.solve(coefficients, lower=lower, upper=upper)
    except RootKernelError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Power polynomial")
        print_coefficients("power", coefficients)
    print_roots(roots, [power.evaluate(coefficients, r) for r in roots])
    if not quiet:
        print_summary(solver.stats)


@app.command()
def bezier(
    ctx: typer.Context,
    coefficients: Annotated[
        list[float],
        typer.Argument(
            help="Bezier-basis coefficients",
            show_default=False,
        ),
    ],
    target: Annotated[
        float,
        typer.Option(
            "--target",
            "-t",
            help="Solve f(u) = target",
        ),
    ] = 0.0,
    restrict: Annotated[
        bool,
        typer.Option(
            "--restrict/--no-restrict",
            help="Only report roots in [0, 1]",
        ),
    ] = True,
) -> None:
    """Print the parameters where a Bezier-basis polynomial equals the target."""
    quiet = ctx.obj["quiet"]
    solver = _solver(ctx)
    try:
        roots = solver.solve_bezier(coefficients, target=target, restrict_to_01=restrict)
        curve = create_bezier(coefficients)
    except RootKernelError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step(f"Bezier polynomial (order {len(coefficients)})")
        print_coefficients("bezier", coefficients)
    print_roots(roots, [curve.evaluate(r) - target for r in roots])
    if not quiet:
        print_summary(solver.stats)


@app.command("circle-ellipse")
def circle_ellipse(
    ctx: typer.Context,
    cx: Annotated[float, typer.Argument(help="Ellipse center x")],
    cy: Annotated[float, typer.Argument(help="Ellipse center y")],
    ux: Annotated[float, typer.Argument(help="Vector to theta=0 point, x")],
    uy: Annotated[float, typer.Argument(help="Vector to theta=0 point, y")],
    vx: Annotated[float, typer.Argument(help="Vector to theta=pi/2 point, x")],
    vy: Annotated[float, typer.Argument(help="Vector to theta=pi/2 point, y")],
) -> None:
    """Print intersections of the unit circle with the ellipse c + u*cos + v*sin."""
    quiet = ctx.obj["quiet"]
    solver = _solver(ctx)
    try:
        pairs = solver.circle_ellipse((cx, cy), (ux, uy), (vx, vy))
    except RootKernelError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Unit circle / ellipse")
    print_intersections(pairs)
    if not quiet:
        print_summary(solver.stats)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
