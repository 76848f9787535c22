import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, Sequence, TypeVar

from landmark_types import Point, to_points

logger = logging.getLogger(__name__)

M = TypeVar("M")


@dataclass(frozen=True)
class AnalysisResult(Generic[M]):
    metrics: M
    sufficient: bool


class AnalyzerBase(Generic[M]):
    name = "base"
    min_landmarks = 0

    def empty_metrics(self) -> M:
        raise NotImplementedError

    def compute(self, landmarks: Sequence[Point]) -> M:
        raise NotImplementedError

    def evaluate(self, landmarks: Optional[Sequence[Any]]) -> AnalysisResult[M]:
        # Short or missing input degrades to zero metrics, flagged as insufficient.
        count = 0 if landmarks is None else len(landmarks)
        if count < self.min_landmarks:
            logger.debug("%s: %d landmarks, need %d", self.name, count, self.min_landmarks)
            return AnalysisResult(self.empty_metrics(), False)
        return AnalysisResult(self.compute(to_points(landmarks)), True)

    def analyze(self, landmarks: Optional[Sequence[Any]]) -> M:
        return self.evaluate(landmarks).metrics
