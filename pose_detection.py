import logging
from typing import Dict, Optional

import cv2
import mediapipe as mp

from pose_types import POSE_LANDMARK_INDEX, Landmark, LandmarkFrame

logger = logging.getLogger(__name__)


class PoseDetector:
    """Runs MediaPipe Pose on BGR frames and keeps the arm joints.

    Joints below ``visibility_threshold`` are dropped, which makes the frame
    incomplete rather than feeding guessed coordinates to the classifier.
    """

    def __init__(
        self,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
        visibility_threshold: float = 0.5,
    ):
        self.visibility_threshold = visibility_threshold
        self._mp_pose = mp.solutions.pose
        self._pose = self._mp_pose.Pose(
            static_image_mode=False,
            model_complexity=1,
            smooth_landmarks=True,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        logger.info("Initialized MediaPipe pose detector")

    def process(self, frame_bgr, timestamp: float) -> LandmarkFrame:
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self._pose.process(frame_rgb)
        if results.pose_landmarks is None:
            return LandmarkFrame.empty(timestamp)

        landmarks: Dict[str, Optional[Landmark]] = {}
        for name, idx in POSE_LANDMARK_INDEX.items():
            lm = results.pose_landmarks.landmark[idx]
            if lm.visibility < self.visibility_threshold:
                landmarks[name] = None
                continue
            landmarks[name] = Landmark(lm.x, lm.y, lm.z, lm.visibility)
        return LandmarkFrame(timestamp=timestamp, landmarks=landmarks, valid=True)

    def close(self) -> None:
        self._pose.close()
