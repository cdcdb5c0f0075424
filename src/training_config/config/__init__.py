"""Training configuration schema, validation and lifecycle.

Responsibility: Defines the training configuration aggregate with Pydantic, validates it
against field and cross-field rules, and loads/saves it through a configuration store
under a fail-fast policy.
"""

from .defaults import create_default_configuration
from .schema import (
    PersistenceConfiguration,
    QualityTargets,
    SafetyConfiguration,
    ScenarioDistribution,
    TrainingAggressiveness,
    TrainingConfiguration,
    TrainingFocus,
)
from .service import CONFIGURATION_KEY, TrainingConfigurationService, build_service
from .validation import ValidationResult, validate_configuration

__all__ = [
    "CONFIGURATION_KEY",
    "PersistenceConfiguration",
    "QualityTargets",
    "SafetyConfiguration",
    "ScenarioDistribution",
    "TrainingAggressiveness",
    "TrainingConfiguration",
    "TrainingConfigurationService",
    "TrainingFocus",
    "ValidationResult",
    "build_service",
    "create_default_configuration",
    "validate_configuration",
]
