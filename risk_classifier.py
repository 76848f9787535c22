from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from analyzers.facial_asymmetry import AsymmetryMetrics
from analyzers.posture import PostureMetrics

HIGH_RISK_ADVICE = "Multiple high-risk indicators detected. Consider seeking immediate medical evaluation."
MEDIUM_RISK_ADVICE = "Some concerning asymmetry detected. Consider consulting a healthcare provider."
LOW_RISK_ADVICE = "No significant asymmetry indicators detected at this time."
FAST_REMINDER = (
    "Remember FAST for stroke: Face drooping, Arm weakness, Speech difficulty, "
    "Time to call emergency services."
)


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class RiskThresholds:
    low: float = 0.10
    medium: float = 0.20
    high: float = 0.30
    high_score: int = 6
    high_indicators: int = 2
    medium_score: int = 3


@dataclass(frozen=True)
class Tier:
    points: int
    finding: str
    indicator: bool = False


@dataclass(frozen=True)
class MetricRule:
    metric: str
    high: Tier
    medium: Tier
    low: Optional[Tier] = None


# Evaluation order is also the order findings are reported in.
RULES: Tuple[MetricRule, ...] = (
    MetricRule(
        "eye_asymmetry",
        high=Tier(3, "Significant eye asymmetry detected - possible facial drooping", indicator=True),
        medium=Tier(2, "Moderate eye asymmetry detected"),
        low=Tier(1, "Mild eye asymmetry detected"),
    ),
    MetricRule(
        "mouth_asymmetry",
        high=Tier(3, "Significant mouth asymmetry detected - possible facial drooping", indicator=True),
        medium=Tier(2, "Moderate mouth asymmetry detected"),
        low=Tier(1, "Mild mouth asymmetry detected"),
    ),
    MetricRule(
        "eyebrow_asymmetry",
        high=Tier(2, "Significant eyebrow asymmetry detected"),
        medium=Tier(1, "Moderate eyebrow asymmetry detected"),
    ),
    MetricRule(
        "overall_asymmetry",
        high=Tier(3, "High overall facial asymmetry detected", indicator=True),
        medium=Tier(2, "Moderate overall facial asymmetry"),
    ),
    MetricRule(
        "shoulder_imbalance",
        high=Tier(2, "Significant shoulder imbalance detected - possible weakness on one side", indicator=True),
        medium=Tier(1, "Moderate shoulder imbalance detected"),
    ),
    MetricRule(
        "head_tilt",
        high=Tier(2, "Significant head tilt detected"),
        medium=Tier(1, "Moderate head tilt detected"),
    ),
    MetricRule(
        "body_lean",
        high=Tier(2, "Significant body leaning detected - possible balance issues"),
        medium=Tier(1, "Moderate body leaning detected"),
    ),
)


@dataclass(frozen=True)
class RiskAssessment:
    risk_level: RiskLevel
    findings: Tuple[str, ...]
    score: int
    high_risk_indicators: int


class RiskClassifier:
    """Rule-based stroke risk ladder over one frame's metrics.

    Each metric is graded on its own against the low/medium/high cut points
    (strictly greater than). Points and high-risk indicators are summed, then
    mapped to a level. Nothing carries over between calls.
    """

    def __init__(self, thresholds: RiskThresholds = RiskThresholds(), rules: Tuple[MetricRule, ...] = RULES):
        self._thresholds = thresholds
        self._rules = rules

    def classify(self, asymmetry: AsymmetryMetrics, posture: PostureMetrics) -> RiskAssessment:
        findings: List[str] = []
        score = 0
        indicators = 0

        for rule in self._rules:
            value = self._metric_value(rule.metric, asymmetry, posture)
            tier = self._grade(value, rule)
            if tier is None:
                continue
            findings.append(tier.finding)
            score += tier.points
            if tier.indicator:
                indicators += 1

        t = self._thresholds
        if score >= t.high_score or indicators >= t.high_indicators:
            level = RiskLevel.HIGH
            findings.append(HIGH_RISK_ADVICE)
        elif score >= t.medium_score:
            level = RiskLevel.MEDIUM
            findings.append(MEDIUM_RISK_ADVICE)
        else:
            level = RiskLevel.LOW
            findings.append(LOW_RISK_ADVICE)
        findings.append(FAST_REMINDER)

        return RiskAssessment(level, tuple(findings), score, indicators)

    def _grade(self, value: float, rule: MetricRule) -> Optional[Tier]:
        t = self._thresholds
        if value > t.high:
            return rule.high
        if value > t.medium:
            return rule.medium
        if value > t.low:
            return rule.low
        return None

    @staticmethod
    def _metric_value(metric: str, asymmetry: AsymmetryMetrics, posture: PostureMetrics) -> float:
        if hasattr(asymmetry, metric):
            return getattr(asymmetry, metric)
        return getattr(posture, metric)


def classify(asymmetry: AsymmetryMetrics, posture: PostureMetrics) -> RiskAssessment:
    return RiskClassifier().classify(asymmetry, posture)
