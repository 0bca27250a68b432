"""Configuration settings for Rootkernel."""

from pathlib import Path

from pydantic import BaseModel, Field


class ToleranceConfig(BaseModel):
    """Numeric policy constants for the closed-form and trigonometric solvers.

    The core modules read these defaults once at import time into module
    constants. They are not part of ``KernelSettings``; instantiate this class
    directly to inspect the tuned values.
    """

    eqn_eps: float = Field(
        default=1.0e-9,
        gt=0.0,
        le=1.0e-3,
        description="Absolute zero test for discriminants and depressed coefficients",
    )
    safe_divide_factor: float = Field(
        default=1.0e-14,
        gt=0.0,
        le=1.0e-6,
        description="Relative factor for safe division of leading coefficients",
    )
    polish_relative_tolerance: float = Field(
        default=1.0e-10,
        gt=0.0,
        le=1.0e-4,
        description="Relative step tolerance for post-solve Newton polishing",
    )
    trig_coefficient_rel_tol: float = Field(
        default=1.0e-12,
        gt=0.0,
        le=1.0e-3,
        description="Ratio below which quadratic trig terms are dropped (degree 2 substitution)",
    )
    trig_small_angle: float = Field(
        default=1.0e-11,
        gt=0.0,
        le=1.0e-3,
        description="Relative tolerance for trimming leading zero coefficients",
    )
    large_fraction_result: float = Field(
        default=1.0e10,
        ge=1.0e3,
        description="Largest ratio accepted by conditional fraction division",
    )
    small_metric_distance: float = Field(
        default=1.0e-6,
        gt=0.0,
        le=1.0e-2,
        description="Near-zero band for Bezier coefficient sign tests",
    )


class NewtonConfig(BaseModel):
    """Iteration budgets and tolerances for Newton iterations."""

    step_size_tolerance: float = Field(
        default=1.0e-11,
        gt=0.0,
        le=1.0e-3,
        description="Relative step size considered converged",
    )
    successive_convergence_target: int = Field(
        default=2,
        ge=1,
        le=5,
        description="Consecutive small steps required before accepting convergence",
    )
    max_iterations: int = Field(
        default=15,
        ge=1,
        le=100,
        description="Iteration budget for the generic Newton framework",
    )
    derivative_h: float = Field(
        default=1.0e-8,
        gt=0.0,
        le=1.0e-2,
        description="Forward-difference offset for approximate derivatives",
    )
    bezier_max_iterations: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Iteration budget for Newton on Bezier polynomials",
    )
    bezier_step_tolerance: float = Field(
        default=1.0e-11,
        gt=0.0,
        le=1.0e-3,
        description="Step tolerance for Newton on Bezier polynomials",
    )
    bezier_big_step: float = Field(
        default=10.0,
        gt=0.0,
        description="Divergence guard: abort when |f| exceeds this multiple of |f'|",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class KernelSettings(BaseModel):
    """Main application settings."""

    newton: NewtonConfig = Field(default_factory=NewtonConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> KernelSettings:
    """Get default application settings."""
    return KernelSettings()
