"""Command-line interface for rootkernel.

This module provides the CLI using Typer with rich table output.

Key features:
- Power-basis polynomial roots (closed form or interval deflation)
- Bezier-basis polynomial roots
- Unit circle / ellipse intersections
"""

from rootkernel.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
