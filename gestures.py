from enum import Enum
from typing import Optional


class GestureLabel(Enum):
    NOT_DAB = "notDab"
    LEFT_UP_DAB = "leftUpDab"
    LEFT_SIDE_DAB = "leftSideDab"
    LEFT_DOWN_DAB = "leftDownDab"
    RIGHT_UP_DAB = "rightUpDab"
    RIGHT_SIDE_DAB = "rightSideDab"
    RIGHT_DOWN_DAB = "rightDownDab"

    @property
    def side(self) -> Optional[str]:
        if self.value.startswith("left"):
            return "left"
        if self.value.startswith("right"):
            return "right"
        return None

    @property
    def direction(self) -> Optional[str]:
        for direction in ("Up", "Side", "Down"):
            if direction in self.value:
                return direction.lower()
        return None

    @classmethod
    def from_parts(cls, side: str, direction: str) -> "GestureLabel":
        return cls(f"{side}{direction.capitalize()}Dab")
