import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from classifiers.base import ClassifierBase, dab_side
from geometry import angle3, segment_angle
from gestures import GestureLabel
from pose_types import Landmark, LandmarkFrame

logger = logging.getLogger(__name__)

# (left forearm, left upper arm, right forearm, right upper arm)
Votes = Tuple[str, str, str, str]

# All four limbs on one line tilted up or down toward the straight arm.
PATTERNS: Dict[str, Dict[Votes, GestureLabel]] = {
    "right": {
        ("side", "side", "side", "side"): GestureLabel.RIGHT_SIDE_DAB,
        ("down", "down", "down", "up"): GestureLabel.RIGHT_UP_DAB,
        ("up", "up", "up", "down"): GestureLabel.RIGHT_DOWN_DAB,
    },
    "left": {
        ("side", "side", "side", "side"): GestureLabel.LEFT_SIDE_DAB,
        ("down", "up", "down", "down"): GestureLabel.LEFT_UP_DAB,
        ("up", "down", "up", "up"): GestureLabel.LEFT_DOWN_DAB,
    },
}


@dataclass
class LimbVoteThresholds:
    bend_max: float = 65.0
    straight_min: float = 165.0
    side_low: float = 30.0
    side_high: float = 160.0


class LimbVoteClassifier(ClassifierBase):
    """Elbow-bend gate followed by a four-limb direction vote.

    The gate picks the dab side from the two elbow angles. Each arm segment
    then votes "side", "up" or "down" and the four votes must form one of the
    canonical patterns for that side, so a single jittery joint cancels the
    sub-type instead of flipping it.
    """

    name = "limb_vote"

    def __init__(self, thresholds: Optional[LimbVoteThresholds] = None):
        self._thresholds = thresholds or LimbVoteThresholds()

    @property
    def thresholds(self) -> LimbVoteThresholds:
        return self._thresholds

    def segment_direction(self, start: Landmark, end: Landmark, side: str) -> Optional[str]:
        angle = segment_angle(start, end)
        if angle is None:
            return None
        if angle < self._thresholds.side_low or angle > self._thresholds.side_high:
            return "side"
        # The arms mirror each other in the image plane.
        if side == "right":
            rising = start.y > end.y
        else:
            rising = start.y < end.y
        return "up" if rising else "down"

    def votes(self, frame: LandmarkFrame) -> Optional[Votes]:
        lm = frame.landmarks
        segments = [
            (lm["left_elbow"], lm["left_wrist"], "left"),
            (lm["left_shoulder"], lm["left_elbow"], "left"),
            (lm["right_wrist"], lm["right_elbow"], "right"),
            (lm["right_elbow"], lm["right_shoulder"], "right"),
        ]
        directions = []
        for start, end, side in segments:
            direction = self.segment_direction(start, end, side)
            if direction is None:
                return None
            directions.append(direction)
        return tuple(directions)

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

        votes = self.votes(frame)
        if votes is None:
            return GestureLabel.NOT_DAB

        label = PATTERNS[side].get(votes, GestureLabel.NOT_DAB)
        logger.debug(
            "elbows right=%s left=%s side=%s votes=%s -> %s",
            right_elbow_angle,
            left_elbow_angle,
            side,
            votes,
            label.value,
        )
        return label
