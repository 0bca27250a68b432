"""Configuration management for rootkernel.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ToleranceConfig: Numeric policy constants for the analytic solvers
- NewtonConfig: Iteration budgets and step tolerances
- LoggingConfig: Logging settings
- KernelSettings: Main application settings
"""

from rootkernel.config.settings import (
    KernelSettings,
    LoggingConfig,
    NewtonConfig,
    ToleranceConfig,
    get_default_settings,
)

__all__ = [
    "KernelSettings",
    "LoggingConfig",
    "NewtonConfig",
    "ToleranceConfig",
    "get_default_settings",
]
