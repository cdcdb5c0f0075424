"""Core infrastructure shared by the configuration modules.

Responsibility: Provides the exception hierarchy, structured logging helpers and
environment settings used by the store and service layers.
"""

from .exceptions import (
    HardValidationFailure,
    InvalidArgument,
    MissingConfiguration,
    StoreError,
    TrainingConfigError,
)
from .logging import configure_logging, get_logger, log_with_context
from .settings import TrainingConfigSettings, get_settings

__all__ = [
    "TrainingConfigError",
    "MissingConfiguration",
    "HardValidationFailure",
    "InvalidArgument",
    "StoreError",
    "configure_logging",
    "get_logger",
    "log_with_context",
    "TrainingConfigSettings",
    "get_settings",
]
