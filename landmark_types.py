from dataclasses import dataclass
from enum import IntEnum
from typing import Any, List, Mapping, Optional, Sequence, Tuple

FACE_LANDMARK_COUNT = 468
POSE_LANDMARK_COUNT = 33


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    z: float = 0.0
    visibility: Optional[float] = None


class FaceLandmark(IntEnum):
    """FaceMesh indices used by the asymmetry analysis."""

    NOSE_TIP = 4
    FOREHEAD_MID = 151
    CHIN_BOTTOM = 199

    LEFT_EYE_OUTER = 33
    LEFT_EYE_INNER = 133
    RIGHT_EYE_OUTER = 263
    RIGHT_EYE_INNER = 362
    LEFT_EYE_TOP = 159
    LEFT_EYE_BOTTOM = 145
    RIGHT_EYE_TOP = 386
    RIGHT_EYE_BOTTOM = 374

    MOUTH_LEFT = 61
    MOUTH_RIGHT = 291

    LEFT_EYEBROW_OUTER = 70
    LEFT_EYEBROW_INNER = 107
    RIGHT_EYEBROW_OUTER = 300
    RIGHT_EYEBROW_INNER = 336


class PoseLandmark(IntEnum):
    """BlazePose indices used by the posture analysis."""

    NOSE = 0
    LEFT_EAR = 7
    RIGHT_EAR = 8
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_HIP = 23
    RIGHT_HIP = 24


@dataclass
class LandmarkFrame:
    timestamp: float
    image_size: Tuple[int, int]
    face: Optional[List[Point]]
    pose: Optional[List[Point]]


def to_point(raw: Any) -> Point:
    """Build a Point from a Point, a mapping or a landmark-like object."""
    if isinstance(raw, Point):
        return raw
    if isinstance(raw, Mapping):
        if "x" not in raw or "y" not in raw:
            raise ValueError(f"Landmark mapping needs x and y: {dict(raw)!r}")
        visibility = raw.get("visibility")
        return Point(
            float(raw["x"]),
            float(raw["y"]),
            float(raw.get("z", 0.0)),
            None if visibility is None else float(visibility),
        )
    if hasattr(raw, "x") and hasattr(raw, "y"):
        # MediaPipe NormalizedLandmark always carries z and visibility.
        visibility = getattr(raw, "visibility", None)
        return Point(
            float(raw.x),
            float(raw.y),
            float(getattr(raw, "z", 0.0)),
            None if visibility is None else float(visibility),
        )
    raise TypeError(f"Cannot convert {type(raw).__name__} to Point")


def to_points(raw_landmarks: Optional[Sequence[Any]]) -> Optional[List[Point]]:
    if raw_landmarks is None:
        return None
    return [to_point(lm) for lm in raw_landmarks]
