import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from analyzers.facial_asymmetry import AsymmetryMetrics, FacialAsymmetryAnalyzer
from analyzers.posture import PostureAnalyzer, PostureMetrics
from history import AssessmentHistory
from risk_classifier import RiskAssessment, RiskClassifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScreeningResult:
    asymmetry: AsymmetryMetrics
    posture: PostureMetrics
    assessment: Optional[RiskAssessment]
    face_sufficient: bool
    pose_sufficient: bool


def assess(
    face_landmarks: Optional[Sequence[Any]],
    pose_landmarks: Optional[Sequence[Any]],
    face_analyzer: Optional[FacialAsymmetryAnalyzer] = None,
    posture_analyzer: Optional[PostureAnalyzer] = None,
    classifier: Optional[RiskClassifier] = None,
) -> ScreeningResult:
    """Run both analyzers and the classifier on a single snapshot.

    A missing stream (`None`) means nothing was detected; metrics for it stay
    zero and no assessment is made. Short but present landmark lists still
    degrade to zero metrics and are classified.
    """
    face_analyzer = face_analyzer or FacialAsymmetryAnalyzer()
    posture_analyzer = posture_analyzer or PostureAnalyzer()
    classifier = classifier or RiskClassifier()

    face = face_analyzer.evaluate(face_landmarks)
    pose = posture_analyzer.evaluate(pose_landmarks)

    assessment = None
    if face_landmarks is not None and pose_landmarks is not None:
        assessment = classifier.classify(face.metrics, pose.metrics)
    return ScreeningResult(
        asymmetry=face.metrics,
        posture=pose.metrics,
        assessment=assessment,
        face_sufficient=face.sufficient,
        pose_sufficient=pose.sufficient,
    )


class ScreeningSession:
    """Holds the latest face and pose metrics for a live feed.

    Face and pose results arrive independently and possibly out of order.
    A result tagged with an older frame index than the one already applied
    for its stream is dropped. The classifier only runs once both streams
    have produced metrics.
    """

    def __init__(
        self,
        face_analyzer: Optional[FacialAsymmetryAnalyzer] = None,
        posture_analyzer: Optional[PostureAnalyzer] = None,
        classifier: Optional[RiskClassifier] = None,
        history: Optional[AssessmentHistory] = None,
    ):
        self.face_analyzer = face_analyzer or FacialAsymmetryAnalyzer()
        self.posture_analyzer = posture_analyzer or PostureAnalyzer()
        self.classifier = classifier or RiskClassifier()
        self.history = history
        self.asymmetry: Optional[AsymmetryMetrics] = None
        self.posture: Optional[PostureMetrics] = None
        self.assessment: Optional[RiskAssessment] = None
        self._face_frame: Optional[int] = None
        self._pose_frame: Optional[int] = None

    def reset(self) -> None:
        self.asymmetry = None
        self.posture = None
        self.assessment = None
        self._face_frame = None
        self._pose_frame = None

    def update(
        self,
        frame_index: int,
        face_landmarks: Optional[Sequence[Any]] = None,
        pose_landmarks: Optional[Sequence[Any]] = None,
        timestamp: Optional[float] = None,
    ) -> Optional[RiskAssessment]:
        changed = False

        if face_landmarks is not None:
            if self._face_frame is not None and frame_index < self._face_frame:
                logger.debug("Dropping stale face metrics: frame %d < %d", frame_index, self._face_frame)
            else:
                self.asymmetry = self.face_analyzer.analyze(face_landmarks)
                self._face_frame = frame_index
                changed = True

        if pose_landmarks is not None:
            if self._pose_frame is not None and frame_index < self._pose_frame:
                logger.debug("Dropping stale pose metrics: frame %d < %d", frame_index, self._pose_frame)
            else:
                self.posture = self.posture_analyzer.analyze(pose_landmarks)
                self._pose_frame = frame_index
                changed = True

        if self.asymmetry is None or self.posture is None:
            return None
        if not changed:
            return self.assessment

        self.assessment = self.classifier.classify(self.asymmetry, self.posture)
        if self.history is not None:
            self.history.add(self.asymmetry, self.posture, self.assessment.risk_level, timestamp)
        return self.assessment
