"""Canonical default training configuration used on first run."""

from __future__ import annotations

from datetime import timedelta

from .schema import (
    PersistenceConfiguration,
    QualityTargets,
    SafetyConfiguration,
    ScenarioDistribution,
    TrainingAggressiveness,
    TrainingConfiguration,
    TrainingFocus,
)


def create_default_configuration() -> TrainingConfiguration:
    """Return a new default configuration.

    The scenario and generation counts are kept small so a first run finishes
    quickly. The result always validates without errors or warnings.
    """
    return TrainingConfiguration(
        scenario_count=3,
        max_generations=3,
        improvement_threshold=0.02,
        validation_scenarios=3,
        scenario_mix=ScenarioDistribution(
            basic_ordering=0.40,
            edge_cases=0.20,
            cultural_variations=0.20,
            ambiguous_requests=0.10,
            payment_scenarios=0.10,
        ),
        aggressiveness=TrainingAggressiveness(
            mutation_rate=0.15,
            exploration_ratio=0.30,
            regression_tolerance=-0.05,
            stagnation_limit=5,
            minimum_progress=0.001,
        ),
        quality_targets=QualityTargets(
            conversation_completion=0.90,
            technical_accuracy=0.95,
            personality_consistency=0.90,
            contextual_appropriateness=0.85,
            value_optimization=0.80,
            information_completeness=0.88,
            domain_expertise=0.75,
            cultural_authenticity=0.85,
            customer_satisfaction=0.82,
        ),
        focus=TrainingFocus(
            tool_selection_accuracy=1.0,
            personality_authenticity=0.8,
            payment_flow_completion=1.0,
            contextual_appropriateness=0.9,
            information_completeness=0.85,
            value_optimization=0.7,
            ambiguity_handling=0.6,
            cultural_term_recognition=0.6,
            conversation_efficiency=0.4,
        ),
        safety=SafetyConfiguration(
            max_training_duration=timedelta(hours=8),
            max_prompt_length=10000,
            required_regression_tests=True,
            human_approval_threshold=0.15,
            auto_backup_interval=timedelta(minutes=30),
        ),
        persistence=PersistenceConfiguration(
            save_intermediate_results=True,
            results_retention_days=30,
            detailed_logging=True,
            metrics_collection=True,
        ),
    )
