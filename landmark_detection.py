import logging
import time
from typing import List, Optional

import cv2
import mediapipe as mp

from landmark_types import LandmarkFrame, Point, to_point

logger = logging.getLogger(__name__)


class LandmarkDetector:
    """Runs MediaPipe FaceMesh and Pose on BGR frames.

    Only the first detected face is kept. Landmarks are returned in
    MediaPipe's normalized image coordinates without any filtering.
    """

    def __init__(
        self,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
        static_image_mode: bool = False,
        refine_landmarks: bool = True,
    ):
        self._mp_face_mesh = mp.solutions.face_mesh
        self._mp_pose = mp.solutions.pose
        self._face_mesh = self._mp_face_mesh.FaceMesh(
            static_image_mode=static_image_mode,
            max_num_faces=1,
            refine_landmarks=refine_landmarks,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        self._pose = self._mp_pose.Pose(
            static_image_mode=static_image_mode,
            model_complexity=1,
            smooth_landmarks=True,
            enable_segmentation=False,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )

    def __enter__(self) -> "LandmarkDetector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def process(self, frame_bgr, timestamp: Optional[float] = None) -> LandmarkFrame:
        if frame_bgr is None or frame_bgr.size == 0:
            raise ValueError("Empty frame")
        if timestamp is None:
            timestamp = time.time()

        height, width = frame_bgr.shape[:2]
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)

        face_results = self._face_mesh.process(frame_rgb)
        pose_results = self._pose.process(frame_rgb)

        face: Optional[List[Point]] = None
        if face_results.multi_face_landmarks:
            face = landmark_list_to_points(face_results.multi_face_landmarks[0])

        pose: Optional[List[Point]] = None
        if pose_results.pose_landmarks is not None:
            pose = landmark_list_to_points(pose_results.pose_landmarks)

        logger.debug(
            "Frame %dx%d: face=%s pose=%s",
            width,
            height,
            "none" if face is None else len(face),
            "none" if pose is None else len(pose),
        )
        return LandmarkFrame(
            timestamp=timestamp,
            image_size=(width, height),
            face=face,
            pose=pose,
        )

    def close(self) -> None:
        self._face_mesh.close()
        self._pose.close()


def landmark_list_to_points(landmark_list) -> List[Point]:
    # NormalizedLandmarkList protos wrap their points in `.landmark`.
    return [to_point(lm) for lm in landmark_list.landmark]
