from typing import Dict, List

import pytest

from landmark_types import FACE_LANDMARK_COUNT, POSE_LANDMARK_COUNT, FaceLandmark, Point, PoseLandmark

CENTER_X = 0.5

# Left-side features as (dx, y); right side mirrors them about CENTER_X.
# Offsets are powers of two so mirrored distances compare exactly.
FACE_PAIRS = {
    (FaceLandmark.LEFT_EYE_OUTER, FaceLandmark.RIGHT_EYE_OUTER): (-0.1875, 0.375),
    (FaceLandmark.LEFT_EYE_INNER, FaceLandmark.RIGHT_EYE_INNER): (-0.0625, 0.375),
    (FaceLandmark.LEFT_EYE_TOP, FaceLandmark.RIGHT_EYE_TOP): (-0.125, 0.359375),
    (FaceLandmark.LEFT_EYE_BOTTOM, FaceLandmark.RIGHT_EYE_BOTTOM): (-0.125, 0.390625),
    (FaceLandmark.MOUTH_LEFT, FaceLandmark.MOUTH_RIGHT): (-0.125, 0.6875),
    (FaceLandmark.LEFT_EYEBROW_OUTER, FaceLandmark.RIGHT_EYEBROW_OUTER): (-0.21875, 0.3125),
    (FaceLandmark.LEFT_EYEBROW_INNER, FaceLandmark.RIGHT_EYEBROW_INNER): (-0.0625, 0.296875),
}

FACE_MIDLINE = {
    FaceLandmark.FOREHEAD_MID: 0.1875,
    FaceLandmark.NOSE_TIP: 0.5,
    FaceLandmark.CHIN_BOTTOM: 0.8125,
}


def build_face(overrides: Dict[int, Point] = None) -> List[Point]:
    points = [Point(CENTER_X, 0.5) for _ in range(FACE_LANDMARK_COUNT)]
    for idx, y in FACE_MIDLINE.items():
        points[idx] = Point(CENTER_X, y)
    for (left, right), (dx, y) in FACE_PAIRS.items():
        points[left] = Point(CENTER_X + dx, y)
        points[right] = Point(CENTER_X - dx, y)
    for idx, point in (overrides or {}).items():
        points[idx] = point
    return points


def build_pose(overrides: Dict[int, Point] = None) -> List[Point]:
    points = [Point(CENTER_X, 0.5) for _ in range(POSE_LANDMARK_COUNT)]
    points[PoseLandmark.NOSE] = Point(CENTER_X, 0.125)
    points[PoseLandmark.LEFT_EAR] = Point(CENTER_X + 0.0625, 0.1875)
    points[PoseLandmark.RIGHT_EAR] = Point(CENTER_X - 0.0625, 0.1875)
    points[PoseLandmark.LEFT_SHOULDER] = Point(CENTER_X + 0.125, 0.375)
    points[PoseLandmark.RIGHT_SHOULDER] = Point(CENTER_X - 0.125, 0.375)
    points[PoseLandmark.LEFT_HIP] = Point(CENTER_X + 0.09375, 0.75)
    points[PoseLandmark.RIGHT_HIP] = Point(CENTER_X - 0.09375, 0.75)
    for idx, point in (overrides or {}).items():
        points[idx] = point
    return points


@pytest.fixture
def symmetric_face() -> List[Point]:
    return build_face()


@pytest.fixture
def upright_pose() -> List[Point]:
    return build_pose()
