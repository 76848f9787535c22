import pytest

from analyzers.facial_asymmetry import AsymmetryMetrics
from analyzers.posture import PostureMetrics
from risk_classifier import (
    FAST_REMINDER,
    HIGH_RISK_ADVICE,
    LOW_RISK_ADVICE,
    MEDIUM_RISK_ADVICE,
    RiskClassifier,
    RiskLevel,
    RiskThresholds,
    classify,
)


def test_no_asymmetry_is_low():
    result = classify(AsymmetryMetrics(), PostureMetrics())
    assert result.risk_level == RiskLevel.LOW
    assert result.findings == (LOW_RISK_ADVICE, FAST_REMINDER)
    assert result.score == 0
    assert result.high_risk_indicators == 0


def test_eye_and_mouth_high_is_high_risk():
    result = classify(AsymmetryMetrics(eye_asymmetry=0.35, mouth_asymmetry=0.35), PostureMetrics())
    assert result.risk_level == RiskLevel.HIGH
    assert result.score == 6
    assert result.high_risk_indicators == 2
    assert result.findings == (
        "Significant eye asymmetry detected - possible facial drooping",
        "Significant mouth asymmetry detected - possible facial drooping",
        HIGH_RISK_ADVICE,
        FAST_REMINDER,
    )


def test_mild_eye_with_small_shoulder_stays_low():
    result = classify(AsymmetryMetrics(eye_asymmetry=0.15), PostureMetrics(shoulder_imbalance=0.15))
    assert result.risk_level == RiskLevel.LOW
    # Shoulder imbalance has no mild tier, so only the eye contributes.
    assert result.score == 1
    assert result.findings == ("Mild eye asymmetry detected", LOW_RISK_ADVICE, FAST_REMINDER)


def test_two_indicators_force_high_below_score():
    # 3 (overall) + 2 (shoulder) = 5 points, but two indicators.
    result = classify(AsymmetryMetrics(overall_asymmetry=0.31), PostureMetrics(shoulder_imbalance=0.31))
    assert result.score == 5
    assert result.high_risk_indicators == 2
    assert result.risk_level == RiskLevel.HIGH


def test_medium_risk():
    result = classify(AsymmetryMetrics(mouth_asymmetry=0.25), PostureMetrics(head_tilt=0.25))
    assert result.score == 3
    assert result.risk_level == RiskLevel.MEDIUM
    assert result.findings == (
        "Moderate mouth asymmetry detected",
        "Moderate head tilt detected",
        MEDIUM_RISK_ADVICE,
        FAST_REMINDER,
    )


def test_thresholds_are_strict():
    result = classify(AsymmetryMetrics(eye_asymmetry=0.10, mouth_asymmetry=0.20), PostureMetrics(body_lean=0.30))
    assert result.findings == (
        "Mild mouth asymmetry detected",
        "Moderate body leaning detected",
        LOW_RISK_ADVICE,
        FAST_REMINDER,
    )
    assert result.score == 2


def test_eyebrow_has_no_mild_tier_and_no_indicator():
    assert classify(AsymmetryMetrics(eyebrow_asymmetry=0.15), PostureMetrics()).score == 0
    result = classify(AsymmetryMetrics(eyebrow_asymmetry=0.5), PostureMetrics())
    assert result.score == 2
    assert result.high_risk_indicators == 0
    assert result.findings[0] == "Significant eyebrow asymmetry detected"


def test_findings_follow_metric_order():
    asymmetry = AsymmetryMetrics(0.9, 0.9, 0.9, 0.9)
    posture = PostureMetrics(1.0, 1.0, 1.0)
    result = classify(asymmetry, posture)
    assert result.findings == (
        "Significant eye asymmetry detected - possible facial drooping",
        "Significant mouth asymmetry detected - possible facial drooping",
        "Significant eyebrow asymmetry detected",
        "High overall facial asymmetry detected",
        "Significant shoulder imbalance detected - possible weakness on one side",
        "Significant head tilt detected",
        "Significant body leaning detected - possible balance issues",
        HIGH_RISK_ADVICE,
        FAST_REMINDER,
    )
    assert result.score == 3 + 3 + 2 + 3 + 2 + 2 + 2
    assert result.high_risk_indicators == 4


@pytest.mark.parametrize(
    "asymmetry,posture",
    [
        (AsymmetryMetrics(0.12, 0.22, 0.05, 0.31), PostureMetrics(0.4, 0.0, 0.21)),
        (AsymmetryMetrics(), PostureMetrics(0.9, 0.9, 0.9)),
    ],
)
def test_classification_is_deterministic(asymmetry, posture):
    classifier = RiskClassifier()
    first = classifier.classify(asymmetry, posture)
    assert classifier.classify(asymmetry, posture) == first
    assert RiskClassifier().classify(asymmetry, posture) == first
    assert first.findings[-1] == FAST_REMINDER


def test_custom_thresholds():
    classifier = RiskClassifier(RiskThresholds(low=0.05, medium=0.5, high=0.8))
    result = classifier.classify(AsymmetryMetrics(eye_asymmetry=0.3), PostureMetrics())
    assert result.findings[0] == "Mild eye asymmetry detected"
    assert result.risk_level == RiskLevel.LOW


def test_risk_level_serializes_as_plain_string():
    assert RiskLevel.HIGH.value == "high"
    assert RiskLevel("medium") is RiskLevel.MEDIUM
