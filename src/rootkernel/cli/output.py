"""Rich console output helpers for the CLI.

This module provides console output using the Rich library: root tables,
intersection tables and formatted status messages.
"""

import math
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from rootkernel.domain import TrigSolution
from rootkernel.utils import SolveStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_value(x: float) -> str:
    """Format a root or residual with 12 significant digits."""
    return f"{x:.12g}"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Rootkernel[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_coefficients(label: str, coffs: Sequence[float]) -> None:
    """Print the input coefficients on one line.

    Args:
        label: Basis name (e.g., "power", "bezier")
        coffs: Coefficients as given
    """
    line = Text(f"  {label} ")
    line.append(" ".join(format_value(c) for c in coffs), style="bold")
    console.print(line)


def print_roots(roots: Sequence[float], residuals: Sequence[float] | None = None) -> None:
    """Print roots as a table, with an optional residual column.

    Args:
        roots: Ascending roots
        residuals: Function value at each root
    """
    if not roots:
        console.print(f"  [yellow]{SYM_DOT} no real roots[/yellow]")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("root", justify="right")
    if residuals is not None:
        table.add_column("residual", justify="right")
    for i, root in enumerate(roots):
        row = [str(i), format_value(root)]
        if residuals is not None:
            row.append(f"{residuals[i]:.3e}")
        table.add_row(*row)
    console.print(table)


def print_intersections(pairs: Sequence[tuple[TrigSolution, TrigSolution]]) -> None:
    """Print ellipse / circle intersection angles as a table.

    Args:
        pairs: (ellipse parameter, circle angle) solutions
    """
    if not pairs:
        console.print(f"  [yellow]{SYM_DOT} no intersections[/yellow]")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("ellipse rad", justify="right")
    table.add_column("circle rad", justify="right")
    table.add_column("circle deg", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for i, (ellipse, circle) in enumerate(pairs):
        table.add_row(
            str(i),
            format_value(ellipse.radians),
            format_value(circle.radians),
            f"{math.degrees(circle.radians):.6f}",
            format_value(circle.cos),
            format_value(circle.sin),
        )
    console.print(table)


def print_summary(stats: SolveStats) -> None:
    """Print a one-line solve summary.

    Args:
        stats: Statistics from the solver
    """
    console.print(
        f"\n[bold green]{SYM_OK}[/bold green] {stats.solve_count} solves {SYM_DOT} "
        f"{stats.roots_found} roots {SYM_DOT} {stats.duration_seconds * 1000:.1f}ms"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
