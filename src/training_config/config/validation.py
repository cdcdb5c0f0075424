"""Validation engine for :class:`TrainingConfiguration`.

Validation runs in two tiers. Field rules are an ordered, statically enumerated
list of required/range checks that yield hard errors. Business rules then look
at relationships between fields; the scenario mix total is a hard error, the
rest are advisory warnings. Every violated rule is reported, not just the first.

The engine performs no I/O and never mutates the configuration it inspects.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Iterable, List, Optional, Set, Tuple

from pydantic.alias_generators import to_camel

from .schema import SUM_TOLERANCE, QualityTargets, ScenarioDistribution, TrainingConfiguration, TrainingFocus

MAX_RECOMMENDED_DURATION = timedelta(hours=24)
MIN_APPROVAL_THRESHOLD = 0.10
PRIMARY_FOCUS_MINIMUM = 1.0
LARGE_SCENARIO_COUNT = 2000
LARGE_GENERATION_COUNT = 50


@dataclass(frozen=True)
class ValidationResult:
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, errors: Iterable[str], warnings: Iterable[str] = ()) -> "ValidationResult":
        errors = tuple(errors)
        if not errors:
            raise ValueError("A failed validation result needs at least one error")
        return cls(errors=errors, warnings=tuple(warnings))

    @classmethod
    def with_warnings(cls, warnings: Iterable[str]) -> "ValidationResult":
        return cls(warnings=tuple(warnings))


def field_label(path: str) -> str:
    """Render an attribute path the way it appears in stored configurations."""
    return ".".join(to_camel(part) for part in path.split("."))


@dataclass(frozen=True)
class FieldRule:
    path: str
    kind: str  # "int", "float", "bool" or "duration"
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    exclusive_minimum: bool = False

    @property
    def label(self) -> str:
        return field_label(self.path)

    def check(self, value: Any) -> Optional[str]:
        if value is None:
            return f"{self.label} is required"
        if self.kind == "bool":
            if not isinstance(value, bool):
                return f"{self.label} must be a boolean, got {value!r}"
            return None
        if self.kind == "duration":
            if not isinstance(value, timedelta):
                return f"{self.label} must be a duration, got {value!r}"
            if value <= timedelta(0):
                return f"{self.label} must be a positive duration, got {value}"
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return f"{self.label} must be a number, got {value!r}"
        if self.kind == "int" and not isinstance(value, int):
            return f"{self.label} must be an integer, got {value!r}"
        if math.isnan(value) or not self._in_range(value):
            return f"{self.label} must be {self._describe_range()}, got {value}"
        return None

    def _in_range(self, value: float) -> bool:
        if self.minimum is not None:
            if self.exclusive_minimum and value <= self.minimum:
                return False
            if not self.exclusive_minimum and value < self.minimum:
                return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True

    def _describe_range(self) -> str:
        if self.maximum is None:
            comparison = "greater than" if self.exclusive_minimum else "at least"
            return f"{comparison} {self.minimum}"
        if self.exclusive_minimum:
            return f"greater than {self.minimum} and at most {self.maximum}"
        return f"between {self.minimum} and {self.maximum}"


def _positive_int(path: str) -> FieldRule:
    return FieldRule(path, "int", minimum=0, exclusive_minimum=True)


def _fraction(path: str) -> FieldRule:
    return FieldRule(path, "float", minimum=0.0, maximum=1.0)


def _flag(path: str) -> FieldRule:
    return FieldRule(path, "bool")


def _positive_duration(path: str) -> FieldRule:
    return FieldRule(path, "duration")


FIELD_RULES: Tuple[FieldRule, ...] = (
    _positive_int("scenario_count"),
    _positive_int("max_generations"),
    _fraction("improvement_threshold"),
    _positive_int("validation_scenarios"),
    *(_fraction(f"scenario_mix.{name}") for name in ScenarioDistribution.model_fields),
    _fraction("aggressiveness.mutation_rate"),
    _fraction("aggressiveness.exploration_ratio"),
    FieldRule("aggressiveness.regression_tolerance", "float", minimum=-1.0, maximum=1.0),
    _positive_int("aggressiveness.stagnation_limit"),
    FieldRule("aggressiveness.minimum_progress", "float", minimum=0.0, maximum=1.0, exclusive_minimum=True),
    *(_fraction(f"quality_targets.{name}") for name in QualityTargets.model_fields),
    *(_fraction(f"focus.{name}") for name in TrainingFocus.model_fields),
    _positive_duration("safety.max_training_duration"),
    _positive_int("safety.max_prompt_length"),
    _flag("safety.required_regression_tests"),
    _fraction("safety.human_approval_threshold"),
    _positive_duration("safety.auto_backup_interval"),
    _flag("persistence.save_intermediate_results"),
    _positive_int("persistence.results_retention_days"),
    _flag("persistence.detailed_logging"),
    _flag("persistence.metrics_collection"),
)


@dataclass(frozen=True)
class BusinessRule:
    """Cross-field rule; skipped when any field it reads already failed."""

    name: str
    severity: str  # "error" or "warning"
    reads: Tuple[str, ...]
    check: Callable[[TrainingConfiguration], Optional[str]]


def _scenario_mix_sums_to_one(config: TrainingConfiguration) -> Optional[str]:
    config.scenario_mix.check_total()
    return None


def _training_duration_is_monitorable(config: TrainingConfiguration) -> Optional[str]:
    duration = config.safety.max_training_duration
    if duration > MAX_RECOMMENDED_DURATION:
        return (
            f"safety.maxTrainingDuration ({duration}) exceeds 24 hours - "
            "consider shorter sessions for better monitoring"
        )
    return None


def _approval_threshold_is_reviewable(config: TrainingConfiguration) -> Optional[str]:
    threshold = config.safety.human_approval_threshold
    if threshold < MIN_APPROVAL_THRESHOLD:
        return (
            f"safety.humanApprovalThreshold ({threshold:.2f}) below 10% "
            "may allow significant changes without review"
        )
    return None


def _accuracy_leads_completion(config: TrainingConfiguration) -> Optional[str]:
    targets = config.quality_targets
    if targets.technical_accuracy < targets.conversation_completion:
        return (
            f"qualityTargets.technicalAccuracy ({targets.technical_accuracy:.2f}) should typically be "
            f"higher than qualityTargets.conversationCompletion ({targets.conversation_completion:.2f})"
        )
    return None


def _primary_focus_is_sufficient(config: TrainingConfiguration) -> Optional[str]:
    total = config.focus.primary_total()
    if total < PRIMARY_FOCUS_MINIMUM - SUM_TOLERANCE:
        return (
            f"Low total of primary focus weights ({total:.2f}) "
            "may result in minimal training improvements"
        )
    return None


def _runtime_is_bounded(config: TrainingConfiguration) -> Optional[str]:
    if config.scenario_count > LARGE_SCENARIO_COUNT and config.max_generations > LARGE_GENERATION_COUNT:
        return (
            f"High scenario count ({config.scenario_count}) with many generations "
            f"({config.max_generations}) may result in very long training times"
        )
    return None


BUSINESS_RULES: Tuple[BusinessRule, ...] = (
    BusinessRule(
        "scenario_mix_total",
        "error",
        tuple(f"scenario_mix.{name}" for name in ScenarioDistribution.model_fields),
        _scenario_mix_sums_to_one,
    ),
    BusinessRule(
        "training_duration",
        "warning",
        ("safety.max_training_duration",),
        _training_duration_is_monitorable,
    ),
    BusinessRule(
        "approval_threshold",
        "warning",
        ("safety.human_approval_threshold",),
        _approval_threshold_is_reviewable,
    ),
    BusinessRule(
        "quality_target_order",
        "warning",
        ("quality_targets.technical_accuracy", "quality_targets.conversation_completion"),
        _accuracy_leads_completion,
    ),
    BusinessRule(
        "primary_focus_total",
        "warning",
        (
            "focus.tool_selection_accuracy",
            "focus.personality_authenticity",
            "focus.payment_flow_completion",
            "focus.contextual_appropriateness",
        ),
        _primary_focus_is_sufficient,
    ),
    BusinessRule(
        "projected_runtime",
        "warning",
        ("scenario_count", "max_generations"),
        _runtime_is_bounded,
    ),
)


def _check_fields(config: TrainingConfiguration) -> Tuple[List[str], Set[str]]:
    errors: List[str] = []
    failed: Set[str] = set()
    missing_sections: Set[str] = set()
    for rule in FIELD_RULES:
        section, _, attribute = rule.path.rpartition(".")
        owner: Any = config
        if section:
            owner = getattr(config, section, None)
            if owner is None:
                if section not in missing_sections:
                    missing_sections.add(section)
                    errors.append(f"{field_label(section)} is required")
                failed.add(rule.path)
                continue
        message = rule.check(getattr(owner, attribute, None))
        if message is not None:
            errors.append(message)
            failed.add(rule.path)
    return errors, failed


def validate_configuration(config: TrainingConfiguration) -> ValidationResult:
    """Check ``config`` against every field and business rule."""
    errors, failed = _check_fields(config)
    warnings: List[str] = []

    for rule in BUSINESS_RULES:
        if failed.intersection(rule.reads):
            continue
        try:
            message = rule.check(config)
        except ValueError as exc:
            message = str(exc)
        if message is None:
            continue
        if rule.severity == "error":
            errors.append(message)
        else:
            warnings.append(message)

    if errors:
        return ValidationResult.failure(errors, warnings)
    if warnings:
        return ValidationResult.with_warnings(warnings)
    return ValidationResult.success()
