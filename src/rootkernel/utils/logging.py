"""Logging utilities for Rootkernel."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class SolveStats:
    """Statistics from a sequence of solves."""

    solve_count: int = 0
    roots_found: int = 0
    empty_count: int = 0
    newton_failures: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate elapsed time between the first and last recorded solve."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("rootkernel")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None, level=file_level)

    return logger


def get_stdlib_logger(name: str = "rootkernel") -> structlog.stdlib.BoundLogger:
    """Wrap a stdlib logger without touching global structlog configuration.

    Records go through the stdlib logger's level and handlers, so nothing is
    emitted until the application configures logging.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class SolveLogger:
    """Logger for tracking solve requests and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_stdlib_logger()
        self._stats = SolveStats()

    def _touch(self) -> None:
        now = time.time()
        if self._stats.start_time is None:
            self._stats.start_time = now
        self._stats.end_time = now

    def log_solve_start(self, kind: str, coefficients: list[float]) -> None:
        """Log start of a solve."""
        self._logger.debug("Solve started", kind=kind, coefficients=coefficients)

    def log_solve_complete(self, kind: str, roots: list[float], duration_ms: float) -> None:
        """Log a finished solve and count its roots."""
        self._logger.debug(
            "Solve complete",
            kind=kind,
            root_count=len(roots),
            duration_ms=round(duration_ms, 3),
        )
        self._touch()
        self._stats.solve_count += 1
        self._stats.roots_found += len(roots)
        if not roots:
            self._stats.empty_count += 1

    def log_newton_failure(self, kind: str, start: float) -> None:
        """Log a Newton iteration that did not converge."""
        self._logger.debug("Newton did not converge", kind=kind, start=start)
        self._stats.newton_failures += 1

    def log_solve_error(self, kind: str, error: Exception) -> None:
        """Log a rejected solve request."""
        self._logger.warning(
            "Solve rejected",
            kind=kind,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._touch()
        self._stats.error_count += 1
        self._stats.errors.append((kind, str(error)))

    @property
    def stats(self) -> SolveStats:
        """Get current solve statistics."""
        return self._stats
