from classifiers.base import ClassifierBase, dab_side
from classifiers.chicken_wing import ChickenWingClassifier, ChickenWingThresholds
from classifiers.limb_vote import LimbVoteClassifier, LimbVoteThresholds

__all__ = [
    "ClassifierBase",
    "dab_side",
    "LimbVoteClassifier",
    "LimbVoteThresholds",
    "ChickenWingClassifier",
    "ChickenWingThresholds",
]
