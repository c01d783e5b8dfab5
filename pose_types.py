from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

REQUIRED_JOINTS = [
    "left_shoulder",
    "right_shoulder",
    "left_elbow",
    "right_elbow",
    "left_wrist",
    "right_wrist",
]

# MediaPipe Pose landmark indices for the joints we use.
POSE_LANDMARK_INDEX = {
    "left_shoulder": 11,
    "right_shoulder": 12,
    "left_elbow": 13,
    "right_elbow": 14,
    "left_wrist": 15,
    "right_wrist": 16,
}


@dataclass(frozen=True)
class Landmark:
    x: float
    y: float
    z: float = 0.0
    visibility: float = 1.0


@dataclass
class LandmarkFrame:
    timestamp: float = 0.0
    landmarks: Dict[str, Optional[Landmark]] = field(default_factory=dict)
    valid: bool = True

    def get(self, name: str) -> Optional[Landmark]:
        return self.landmarks.get(name)

    def missing_joints(self, required: Sequence[str] = REQUIRED_JOINTS) -> List[str]:
        return [k for k in required if self.landmarks.get(k) is None]

    def is_complete(self, required: Sequence[str] = REQUIRED_JOINTS) -> bool:
        return self.valid and not self.missing_joints(required)

    @classmethod
    def empty(cls, timestamp: float = 0.0) -> "LandmarkFrame":
        return cls(timestamp=timestamp, landmarks={}, valid=False)

    @classmethod
    def from_landmark_list(cls, landmarks: Optional[Sequence], timestamp: float = 0.0) -> "LandmarkFrame":
        """Build a frame from a MediaPipe-indexed sequence of points.

        Items may be ``Landmark`` instances or anything with ``x``, ``y``, ``z``
        and optionally ``visibility`` attributes. A missing or short sequence
        produces an incomplete frame.
        """
        if not landmarks:
            return cls.empty(timestamp)

        named: Dict[str, Optional[Landmark]] = {}
        for name, idx in POSE_LANDMARK_INDEX.items():
            if idx >= len(landmarks) or landmarks[idx] is None:
                named[name] = None
                continue
            point = landmarks[idx]
            named[name] = Landmark(
                float(point.x),
                float(point.y),
                float(getattr(point, "z", 0.0)),
                float(getattr(point, "visibility", 1.0)),
            )
        return cls(timestamp=timestamp, landmarks=named, valid=True)
