"""Fail-fast lifecycle management for the training configuration.

The service is the only component that touches both the store and the
validation engine. An invalid aggregate is never returned from
:meth:`TrainingConfigurationService.load_configuration` and never reaches the
store through :meth:`TrainingConfigurationService.save_configuration`. The only
automatic remediation is writing the default configuration when nothing has
been stored yet.
"""

from __future__ import annotations

from typing import Optional

from ..core.exceptions import HardValidationFailure, InvalidArgument, MissingConfiguration
from ..core.logging import configure_logging, get_logger, log_with_context
from ..core.settings import TrainingConfigSettings, get_settings
from ..storage import ConfigurationStore, YamlFileConfigurationStore
from .defaults import create_default_configuration
from .schema import TrainingConfiguration
from .validation import ValidationResult, validate_configuration

LOGGER = get_logger(__name__)

CONFIGURATION_KEY = "training-config"


class TrainingConfigurationService:
    def __init__(self, store: ConfigurationStore, *, bootstrap_defaults: bool = True) -> None:
        if store is None:
            raise InvalidArgument("A configuration store is required")
        self.store = store
        self.bootstrap_defaults = bootstrap_defaults

    def load_configuration(self) -> TrainingConfiguration:
        """Load the stored configuration, writing the default on first use.

        Raises:
            MissingConfiguration: nothing is stored and bootstrapping is off.
            HardValidationFailure: the stored configuration breaks a hard rule.
        """
        LOGGER.debug("Loading training configuration")
        config = self.store.load(CONFIGURATION_KEY, TrainingConfiguration)

        if config is None:
            if not self.bootstrap_defaults:
                raise MissingConfiguration(
                    f"No training configuration stored under '{CONFIGURATION_KEY}'. "
                    "Save a configuration or enable default bootstrapping.",
                    metadata={"key": CONFIGURATION_KEY},
                )
            LOGGER.info("Training configuration not found, creating default configuration")
            config = self.create_default_configuration()
            self.store.save(CONFIGURATION_KEY, config)
            log_with_context(LOGGER, "info", "Default training configuration saved", extra={"key": CONFIGURATION_KEY})

        validation = self.validate_configuration(config)
        if not validation.is_valid:
            raise HardValidationFailure(
                "Invalid training configuration loaded from storage. "
                "Configuration may be corrupted or incompatible. "
                f"Errors: {', '.join(validation.errors)}. "
                "Delete the configuration and recreate it, or fix the validation errors.",
                metadata=_failure_metadata(validation),
            )

        self._report_warnings(validation)
        log_with_context(
            LOGGER,
            "info",
            "Training configuration loaded",
            extra={"scenario_count": config.scenario_count, "max_generations": config.max_generations},
        )
        return config

    def save_configuration(self, config: TrainingConfiguration) -> None:
        """Validate and persist ``config``; invalid aggregates are never written."""
        if config is None:
            raise InvalidArgument("Cannot save a missing training configuration")

        validation = self.validate_configuration(config)
        if not validation.is_valid:
            raise HardValidationFailure(
                "Cannot save invalid training configuration. "
                "Fix validation errors before saving. "
                f"Errors: {', '.join(validation.errors)}",
                metadata=_failure_metadata(validation),
            )

        self.store.save(CONFIGURATION_KEY, config)
        LOGGER.info("Training configuration saved")
        self._report_warnings(validation)

    def validate_configuration(self, config: TrainingConfiguration) -> ValidationResult:
        if config is None:
            raise InvalidArgument("Cannot validate a missing training configuration")
        result = validate_configuration(config)
        log_with_context(
            LOGGER,
            "debug",
            "Configuration validation completed",
            extra={"is_valid": result.is_valid, "errors": len(result.errors), "warnings": len(result.warnings)},
        )
        return result

    def create_default_configuration(self) -> TrainingConfiguration:
        config = create_default_configuration()
        LOGGER.debug(
            "Created default training configuration: %d scenarios, %d generations",
            config.scenario_count,
            config.max_generations,
        )
        return config

    def reset_configuration(self) -> TrainingConfiguration:
        """Replace whatever is stored with a fresh default configuration."""
        config = self.create_default_configuration()
        self.store.save(CONFIGURATION_KEY, config)
        LOGGER.warning("Stored training configuration replaced with defaults")
        return config

    @staticmethod
    def _report_warnings(validation: ValidationResult) -> None:
        for warning in validation.warnings:
            LOGGER.warning("Configuration warning: %s", warning)


def _failure_metadata(validation: ValidationResult) -> dict:
    return {
        "key": CONFIGURATION_KEY,
        "errors": list(validation.errors),
        "warnings": list(validation.warnings),
    }


def build_service(settings: Optional[TrainingConfigSettings] = None) -> TrainingConfigurationService:
    """Wire a service backed by the YAML store described by ``settings``."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, json_logs=settings.json_logs)
    store = YamlFileConfigurationStore(settings.data_dir)
    return TrainingConfigurationService(store, bootstrap_defaults=settings.bootstrap_defaults)
