"""Pydantic schemas for the training configuration aggregate.

Range constraints are not declared on the fields. An out-of-range aggregate
stays constructible and the validation engine reports every violation at once.
Every field defaults to ``None`` so a missing or null value reaches the engine as a
required-field error. Pydantic only type-checks present values and rejects
unknown keys.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

# Allowed drift when fractions are expected to add up to 1.0.
SUM_TOLERANCE = 1e-3

_MODEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "validate_assignment": True,
    "extra": "forbid",
}


class ScenarioDistribution(BaseModel):
    basic_ordering: Optional[float] = None
    edge_cases: Optional[float] = None
    cultural_variations: Optional[float] = None
    ambiguous_requests: Optional[float] = None
    payment_scenarios: Optional[float] = None

    model_config = _MODEL_CONFIG

    def total(self) -> float:
        return (
            self.basic_ordering
            + self.edge_cases
            + self.cultural_variations
            + self.ambiguous_requests
            + self.payment_scenarios
        )

    def check_total(self) -> None:
        """Raise ``ValueError`` unless the scenario fractions sum to 1.0."""
        total = self.total()
        if abs(total - 1.0) > SUM_TOLERANCE:
            raise ValueError(
                f"Scenario distribution must sum to 1.0, got {total:.3f}. "
                "Adjust scenario percentages to total 100%. "
                f"Current: basicOrdering={self.basic_ordering:.3f}, edgeCases={self.edge_cases:.3f}, "
                f"culturalVariations={self.cultural_variations:.3f}, "
                f"ambiguousRequests={self.ambiguous_requests:.3f}, "
                f"paymentScenarios={self.payment_scenarios:.3f}"
            )


class TrainingAggressiveness(BaseModel):
    mutation_rate: Optional[float] = None
    exploration_ratio: Optional[float] = None
    # Negative: the regression that aborts a run.
    regression_tolerance: Optional[float] = None
    stagnation_limit: Optional[int] = None
    minimum_progress: Optional[float] = None

    model_config = _MODEL_CONFIG


class QualityTargets(BaseModel):
    # Primary
    conversation_completion: Optional[float] = None
    technical_accuracy: Optional[float] = None
    personality_consistency: Optional[float] = None

    # Secondary
    contextual_appropriateness: Optional[float] = None
    value_optimization: Optional[float] = None
    information_completeness: Optional[float] = None

    # Tertiary
    domain_expertise: Optional[float] = None
    cultural_authenticity: Optional[float] = None
    customer_satisfaction: Optional[float] = None

    model_config = _MODEL_CONFIG


class TrainingFocus(BaseModel):
    """Weights from 0.0 (ignore) to 1.0 (maximum focus)."""

    tool_selection_accuracy: Optional[float] = None
    personality_authenticity: Optional[float] = None
    payment_flow_completion: Optional[float] = None
    contextual_appropriateness: Optional[float] = None
    information_completeness: Optional[float] = None
    value_optimization: Optional[float] = None
    ambiguity_handling: Optional[float] = None
    cultural_term_recognition: Optional[float] = None
    conversation_efficiency: Optional[float] = None

    model_config = _MODEL_CONFIG

    def primary_total(self) -> float:
        return (
            self.tool_selection_accuracy
            + self.personality_authenticity
            + self.payment_flow_completion
            + self.contextual_appropriateness
        )


class SafetyConfiguration(BaseModel):
    max_training_duration: Optional[timedelta] = None
    max_prompt_length: Optional[int] = None
    required_regression_tests: Optional[bool] = None
    human_approval_threshold: Optional[float] = None
    auto_backup_interval: Optional[timedelta] = None

    model_config = _MODEL_CONFIG


class PersistenceConfiguration(BaseModel):
    save_intermediate_results: Optional[bool] = None
    results_retention_days: Optional[int] = None
    detailed_logging: Optional[bool] = None
    metrics_collection: Optional[bool] = None

    model_config = _MODEL_CONFIG


class TrainingConfiguration(BaseModel):
    scenario_count: Optional[int] = None
    max_generations: Optional[int] = None
    improvement_threshold: Optional[float] = None
    validation_scenarios: Optional[int] = None
    scenario_mix: Optional[ScenarioDistribution] = None
    aggressiveness: Optional[TrainingAggressiveness] = None
    quality_targets: Optional[QualityTargets] = None
    focus: Optional[TrainingFocus] = None
    safety: Optional[SafetyConfiguration] = None
    persistence: Optional[PersistenceConfiguration] = None

    model_config = _MODEL_CONFIG

    def to_payload(self) -> dict:
        """Serialize to a JSON-compatible mapping keyed by camelCase names."""
        return self.model_dump(mode="json", by_alias=True)
