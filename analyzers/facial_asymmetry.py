from dataclasses import dataclass
from typing import Sequence

import numpy as np

from analyzers.base import AnalyzerBase
from geometry import asymmetry_ratio, distance_2d, mean_x
from landmark_types import FACE_LANDMARK_COUNT, FaceLandmark, Point


@dataclass(frozen=True)
class AsymmetryMetrics:
    eye_asymmetry: float = 0.0
    mouth_asymmetry: float = 0.0
    eyebrow_asymmetry: float = 0.0
    overall_asymmetry: float = 0.0


@dataclass(frozen=True)
class OverallWeights:
    eye: float = 0.4
    mouth: float = 0.4
    eyebrow: float = 0.2


class FacialAsymmetryAnalyzer(AnalyzerBase[AsymmetryMetrics]):
    """Left/right symmetry ratios from a single FaceMesh landmark set.

    The midline is taken from the x coordinates of forehead, nose tip and chin,
    so the face is assumed to be frontal and not rolled.
    """

    name = "facial_asymmetry"
    min_landmarks = FACE_LANDMARK_COUNT

    def __init__(self, weights: OverallWeights = OverallWeights()):
        self._weights = weights

    def empty_metrics(self) -> AsymmetryMetrics:
        return AsymmetryMetrics()

    def compute(self, landmarks: Sequence[Point]) -> AsymmetryMetrics:
        lm = landmarks
        F = FaceLandmark

        forehead = lm[F.FOREHEAD_MID]
        chin = lm[F.CHIN_BOTTOM]
        midline_x = mean_x(forehead, lm[F.NOSE_TIP], chin)

        eye = self._eye_asymmetry(lm, midline_x)

        mouth_left = abs(lm[F.MOUTH_LEFT].x - midline_x)
        mouth_right = abs(lm[F.MOUTH_RIGHT].x - midline_x)
        mouth = asymmetry_ratio(mouth_left, mouth_right)

        eyebrow = self._eyebrow_asymmetry(lm, distance_2d(forehead, chin))

        w = self._weights
        overall = eye * w.eye + mouth * w.mouth + eyebrow * w.eyebrow
        return AsymmetryMetrics(
            eye_asymmetry=eye,
            mouth_asymmetry=mouth,
            eyebrow_asymmetry=eyebrow,
            overall_asymmetry=overall,
        )

    def _eye_asymmetry(self, lm: Sequence[Point], midline_x: float) -> float:
        F = FaceLandmark
        left_outer, left_inner = lm[F.LEFT_EYE_OUTER], lm[F.LEFT_EYE_INNER]
        right_outer, right_inner = lm[F.RIGHT_EYE_OUTER], lm[F.RIGHT_EYE_INNER]

        width = asymmetry_ratio(
            distance_2d(left_outer, left_inner),
            distance_2d(right_outer, right_inner),
        )
        # Eyelid gap: a drooping lid narrows one side.
        height = asymmetry_ratio(
            distance_2d(lm[F.LEFT_EYE_TOP], lm[F.LEFT_EYE_BOTTOM]),
            distance_2d(lm[F.RIGHT_EYE_TOP], lm[F.RIGHT_EYE_BOTTOM]),
        )
        position = asymmetry_ratio(
            abs(midline_x - mean_x(left_outer, left_inner)),
            abs(midline_x - mean_x(right_outer, right_inner)),
        )
        return float(np.mean([width, height, position]))

    def _eyebrow_asymmetry(self, lm: Sequence[Point], face_height: float) -> float:
        F = FaceLandmark
        left_outer, left_inner = lm[F.LEFT_EYEBROW_OUTER], lm[F.LEFT_EYEBROW_INNER]
        right_outer, right_inner = lm[F.RIGHT_EYEBROW_OUTER], lm[F.RIGHT_EYEBROW_INNER]

        length = asymmetry_ratio(
            distance_2d(left_outer, left_inner),
            distance_2d(right_outer, right_inner),
        )

        left_y = (left_outer.y + left_inner.y) / 2.0
        right_y = (right_outer.y + right_inner.y) / 2.0
        height = abs(left_y - right_y) / face_height if face_height > 0 else 0.0

        return (length + height) / 2.0
