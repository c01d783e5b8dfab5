from dataclasses import dataclass
from typing import Optional

from classifiers.base import ClassifierBase, dab_side
from geometry import angle3, slope_degrees, vector_angle
from gestures import GestureLabel
from pose_types import Landmark, LandmarkFrame

# Arm direction buckets: -1 rising toward +x, 0 level, 1 falling toward +x.
_DIRECTION_LABELS = {
    "right": {1: "down", 0: "side", -1: "up"},
    "left": {1: "up", 0: "side", -1: "down"},
}


@dataclass
class ChickenWingThresholds:
    bend_max: float = 65.0
    straight_min: float = 165.0
    wing_fold_max: float = 30.0
    wing_level_max: float = 25.0
    straight_fold_min: float = 165.0
    straight_fold_max: float = 195.0
    straight_level_max: float = 20.0


def _bucket(slope: float, level_max: float) -> int:
    if abs(slope) <= level_max:
        return 0
    return 1 if slope > level_max else -1


class ChickenWingClassifier(ClassifierBase):
    """Alternative sub-classifier: folded "chicken wing" arm plus straight arm.

    Uses the same elbow gate as the limb vote, then reads the direction from
    the bent forearm slope and the straight arm's shoulder-to-wrist slope.
    Both must agree. Not equivalent to the limb vote on every input.
    """

    name = "chicken_wing"

    def __init__(self, thresholds: Optional[ChickenWingThresholds] = None):
        self._thresholds = thresholds or ChickenWingThresholds()

    def wing_direction(self, wrist: Landmark, elbow: Landmark, shoulder: Landmark) -> Optional[int]:
        forearm = (wrist.x - elbow.x, wrist.y - elbow.y)
        upper = (shoulder.x - elbow.x, shoulder.y - elbow.y)
        fold = vector_angle(forearm, upper)
        if fold is None or fold > self._thresholds.wing_fold_max:
            return None
        slope = slope_degrees(forearm[0], forearm[1])
        if slope is None:
            return None
        return _bucket(slope, self._thresholds.wing_level_max)

    def straight_direction(self, wrist: Landmark, elbow: Landmark, shoulder: Landmark) -> Optional[int]:
        forearm = (wrist.x - elbow.x, wrist.y - elbow.y)
        upper = (shoulder.x - elbow.x, shoulder.y - elbow.y)
        fold = vector_angle(forearm, upper)
        if fold is None:
            return None
        if fold < self._thresholds.straight_fold_min or fold > self._thresholds.straight_fold_max:
            return None
        # Shoulder to wrist; the elbow can be noisy once the fold is known.
        slope = slope_degrees(wrist.x - shoulder.x, wrist.y - shoulder.y)
        if slope is None:
            return None
        return _bucket(slope, self._thresholds.straight_level_max)

    def classify(self, frame: LandmarkFrame) -> GestureLabel:
        if not frame.is_complete(self.required_joints):
            return GestureLabel.NOT_DAB

        lm = frame.landmarks
        right_elbow_angle = angle3(lm["right_wrist"], lm["right_elbow"], lm["right_shoulder"])
        left_elbow_angle = angle3(lm["left_shoulder"], lm["left_elbow"], lm["left_wrist"])
        side = dab_side(
            right_elbow_angle,
            left_elbow_angle,
            bend_max=self._thresholds.bend_max,
            straight_min=self._thresholds.straight_min,
        )
        if side is None:
            return GestureLabel.NOT_DAB

        bent = side
        straight = "left" if side == "right" else "right"
        wing = self.wing_direction(lm[f"{bent}_wrist"], lm[f"{bent}_elbow"], lm[f"{bent}_shoulder"])
        arm = self.straight_direction(
            lm[f"{straight}_wrist"], lm[f"{straight}_elbow"], lm[f"{straight}_shoulder"]
        )
        if wing is None or arm is None or wing != arm:
            return GestureLabel.NOT_DAB

        return GestureLabel.from_parts(side, _DIRECTION_LABELS[side][wing])
