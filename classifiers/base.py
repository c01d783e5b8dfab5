from typing import List, Optional

from gestures import GestureLabel
from pose_types import REQUIRED_JOINTS, LandmarkFrame


def dab_side(
    right_elbow_angle: Optional[float],
    left_elbow_angle: Optional[float],
    bend_max: float = 65.0,
    straight_min: float = 165.0,
) -> Optional[str]:
    # One arm sharply bent, the other nearly straight. Strict on both bounds.
    if right_elbow_angle is None or left_elbow_angle is None:
        return None
    if right_elbow_angle < bend_max and left_elbow_angle > straight_min:
        return "right"
    if left_elbow_angle < bend_max and right_elbow_angle > straight_min:
        return "left"
    return None


class ClassifierBase:
    name = "base"
    required_joints: List[str] = list(REQUIRED_JOINTS)

    def classify(self, frame: LandmarkFrame) -> GestureLabel:
        raise NotImplementedError

    def __call__(self, frame: LandmarkFrame) -> GestureLabel:
        return self.classify(frame)
