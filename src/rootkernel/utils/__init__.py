"""Utility functions for rootkernel.

This module provides utility functions including:

- Logging setup and solve statistics
- Guarded scalar division and small numeric helpers
"""

from rootkernel.utils.logging import (
    SolveLogger,
    SolveStats,
    configure_logging,
    get_stdlib_logger,
)
from rootkernel.utils.numeric import (
    conditional_divide_fraction,
    is_in_01,
)

__all__ = [
    "SolveLogger",
    "SolveStats",
    "conditional_divide_fraction",
    "configure_logging",
    "get_stdlib_logger",
    "is_in_01",
]
