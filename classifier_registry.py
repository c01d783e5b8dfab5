from dataclasses import dataclass
from typing import List, Optional

from classifiers.base import ClassifierBase
from classifiers.chicken_wing import ChickenWingClassifier, ChickenWingThresholds
from classifiers.limb_vote import LimbVoteClassifier, LimbVoteThresholds

DEFAULT_CLASSIFIER = "limb_vote"
CLASSIFIER_NAMES = ("limb_vote", "chicken_wing")


@dataclass
class ClassifierEntry:
    name: str
    classifier: ClassifierBase
    description: str


def get_classifier_entries(
    limb_vote: Optional[LimbVoteThresholds] = None,
    chicken_wing: Optional[ChickenWingThresholds] = None,
) -> List[ClassifierEntry]:
    return [
        ClassifierEntry(
            "limb_vote",
            LimbVoteClassifier(limb_vote),
            "Elbow gate plus four-limb up/side/down vote",
        ),
        ClassifierEntry(
            "chicken_wing",
            ChickenWingClassifier(chicken_wing),
            "Elbow gate plus bent-forearm and straight-arm slopes",
        ),
    ]


def get_classifier(
    name: str = DEFAULT_CLASSIFIER,
    limb_vote: Optional[LimbVoteThresholds] = None,
    chicken_wing: Optional[ChickenWingThresholds] = None,
) -> ClassifierBase:
    entries = get_classifier_entries(limb_vote, chicken_wing)
    for entry in entries:
        if entry.name == name:
            return entry.classifier
    names = ", ".join(e.name for e in entries)
    raise KeyError(f"Unknown classifier {name!r}; available: {names}")
