import math
from dataclasses import dataclass
from typing import Sequence

from analyzers.base import AnalyzerBase
from geometry import angle_between, midpoint, normalize, slope
from landmark_types import POSE_LANDMARK_COUNT, Point, PoseLandmark


@dataclass(frozen=True)
class PostureMetrics:
    shoulder_imbalance: float = 0.0
    head_tilt: float = 0.0
    body_lean: float = 0.0


@dataclass(frozen=True)
class PostureReferences:
    # Values at which each metric saturates to 1.0.
    shoulder_tilt_radians: float = 0.36
    head_tilt_degrees: float = 15.0
    body_lean_degrees: float = 10.0
    # Offset used to place a point straight above a joint, in normalized image units.
    vertical_offset: float = 0.1


class PostureAnalyzer(AnalyzerBase[PostureMetrics]):
    name = "posture"
    min_landmarks = POSE_LANDMARK_COUNT

    def __init__(self, references: PostureReferences = PostureReferences()):
        self._refs = references

    def empty_metrics(self) -> PostureMetrics:
        return PostureMetrics()

    def compute(self, landmarks: Sequence[Point]) -> PostureMetrics:
        lm = landmarks
        P = PoseLandmark
        refs = self._refs

        left_shoulder = lm[P.LEFT_SHOULDER]
        right_shoulder = lm[P.RIGHT_SHOULDER]

        shoulder_angle = math.atan(slope(left_shoulder, right_shoulder))
        shoulder_imbalance = normalize(shoulder_angle, refs.shoulder_tilt_radians)

        ear_mid = midpoint(lm[P.LEFT_EAR], lm[P.RIGHT_EAR])
        head_angle = angle_between(self._above(ear_mid), ear_mid, lm[P.NOSE])
        head_tilt = normalize(head_angle, refs.head_tilt_degrees)

        shoulder_mid = midpoint(left_shoulder, right_shoulder)
        hip_mid = midpoint(lm[P.LEFT_HIP], lm[P.RIGHT_HIP])
        spine_angle = angle_between(self._above(hip_mid), hip_mid, shoulder_mid)
        body_lean = normalize(spine_angle, refs.body_lean_degrees)

        return PostureMetrics(
            shoulder_imbalance=shoulder_imbalance,
            head_tilt=head_tilt,
            body_lean=body_lean,
        )

    def _above(self, p: Point) -> Point:
        # Image y grows downward.
        return Point(p.x, p.y - self._refs.vertical_offset)
