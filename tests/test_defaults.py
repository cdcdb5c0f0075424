"""
Default configuration tests.
"""
from datetime import timedelta

from training_config.config import (
    TrainingConfigurationService,
    create_default_configuration,
    validate_configuration,
)

EXPECTED_DEFAULTS = {
    "scenarioCount": 3,
    "maxGenerations": 3,
    "improvementThreshold": 0.02,
    "validationScenarios": 3,
    "scenarioMix": {
        "basicOrdering": 0.40,
        "edgeCases": 0.20,
        "culturalVariations": 0.20,
        "ambiguousRequests": 0.10,
        "paymentScenarios": 0.10,
    },
    "aggressiveness": {
        "mutationRate": 0.15,
        "explorationRatio": 0.30,
        "regressionTolerance": -0.05,
        "stagnationLimit": 5,
        "minimumProgress": 0.001,
    },
    "qualityTargets": {
        "conversationCompletion": 0.90,
        "technicalAccuracy": 0.95,
        "personalityConsistency": 0.90,
        "contextualAppropriateness": 0.85,
        "valueOptimization": 0.80,
        "informationCompleteness": 0.88,
        "domainExpertise": 0.75,
        "culturalAuthenticity": 0.85,
        "customerSatisfaction": 0.82,
    },
    "focus": {
        "toolSelectionAccuracy": 1.0,
        "personalityAuthenticity": 0.8,
        "paymentFlowCompletion": 1.0,
        "contextualAppropriateness": 0.9,
        "informationCompleteness": 0.85,
        "valueOptimization": 0.7,
        "ambiguityHandling": 0.6,
        "culturalTermRecognition": 0.6,
        "conversationEfficiency": 0.4,
    },
    "safety": {
        "maxTrainingDuration": timedelta(hours=8),
        "maxPromptLength": 10000,
        "requiredRegressionTests": True,
        "humanApprovalThreshold": 0.15,
        "autoBackupInterval": timedelta(minutes=30),
    },
    "persistence": {
        "saveIntermediateResults": True,
        "resultsRetentionDays": 30,
        "detailedLogging": True,
        "metricsCollection": True,
    },
}


def test_default_values_are_fixed():
    assert create_default_configuration().model_dump(by_alias=True) == EXPECTED_DEFAULTS


def test_bootstrapped_default_matches_fixed_values(spy_store):
    config = TrainingConfigurationService(spy_store).load_configuration()
    assert config.model_dump(by_alias=True) == EXPECTED_DEFAULTS


def test_default_validates_cleanly():
    result = validate_configuration(create_default_configuration())
    assert result.is_valid
    assert result.warnings == ()
