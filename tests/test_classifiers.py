import copy

import pytest

from classifiers import ChickenWingClassifier, LimbVoteClassifier, LimbVoteThresholds, dab_side
from gestures import GestureLabel
from pose_types import LandmarkFrame
from tests.frames import (
    bent_arm,
    dab_frame,
    make_frame,
    scenario_a_frame,
    scenario_d_frame,
    straight_arm,
)

ALL_DABS = [
    ("right", "up", GestureLabel.RIGHT_UP_DAB),
    ("right", "side", GestureLabel.RIGHT_SIDE_DAB),
    ("right", "down", GestureLabel.RIGHT_DOWN_DAB),
    ("left", "up", GestureLabel.LEFT_UP_DAB),
    ("left", "side", GestureLabel.LEFT_SIDE_DAB),
    ("left", "down", GestureLabel.LEFT_DOWN_DAB),
]


@pytest.mark.parametrize("classifier", [LimbVoteClassifier(), ChickenWingClassifier()], ids=lambda c: c.name)
@pytest.mark.parametrize("side,direction,expected", ALL_DABS)
def test_recognizes_every_dab(classifier, side, direction, expected):
    assert classifier.classify(dab_frame(side, direction)) is expected


@pytest.mark.parametrize(
    "right,left,expected",
    [
        (64.9, 170.0, "right"),
        (65.0, 170.0, None),
        (40.0, 165.1, "right"),
        (40.0, 165.0, None),
        (170.0, 64.9, "left"),
        (165.0, 40.0, None),
        (175.0, 170.0, None),
        (30.0, 40.0, None),
        (None, 170.0, None),
    ],
)
def test_dab_side_gate_is_strict(right, left, expected):
    assert dab_side(right, left) == expected


def test_gate_boundary_end_to_end():
    classifier = LimbVoteClassifier()
    left = straight_arm((0.6, 0.45), -45.0, -45.0)
    # Elbow->shoulder at -104.9 / -105 against the forearm at -40.
    inside = make_frame(bent_arm((0.3, 0.5), -104.9, -40.0), left)
    boundary = make_frame(bent_arm((0.3, 0.5), -105.0, -40.0), left)
    assert classifier.classify(inside) is GestureLabel.RIGHT_UP_DAB
    assert classifier.classify(boundary) is GestureLabel.NOT_DAB


def test_scenario_a_right_side_dab():
    frame = scenario_a_frame()
    classifier = LimbVoteClassifier()
    assert classifier.votes(frame) == ("side", "side", "side", "side")
    assert classifier.classify(frame) is GestureLabel.RIGHT_SIDE_DAB


def test_scenario_d_arms_straight_is_not_dab():
    for classifier in (LimbVoteClassifier(), ChickenWingClassifier()):
        assert classifier.classify(scenario_d_frame()) is GestureLabel.NOT_DAB


def test_limb_votes_for_up_and_down():
    classifier = LimbVoteClassifier()
    assert classifier.votes(dab_frame("right", "up")) == ("down", "down", "down", "up")
    assert classifier.votes(dab_frame("right", "down")) == ("up", "up", "up", "down")
    assert classifier.votes(dab_frame("left", "up")) == ("down", "up", "down", "down")
    assert classifier.votes(dab_frame("left", "down")) == ("up", "down", "up", "up")


def test_disagreeing_arms_are_not_dab():
    # Bent right arm tilted up, straight left arm tilted down.
    frame = make_frame(bent_arm((0.3, 0.5), -60.0, -40.0), straight_arm((0.6, 0.45), 45.0, 45.0))
    assert LimbVoteClassifier().classify(frame) is GestureLabel.NOT_DAB
    assert ChickenWingClassifier().classify(frame) is GestureLabel.NOT_DAB


def test_degenerate_geometry_fails_closed():
    frame = dab_frame("right", "side")
    frame.landmarks["right_wrist"] = frame.landmarks["right_elbow"]
    assert LimbVoteClassifier().classify(frame) is GestureLabel.NOT_DAB
    assert ChickenWingClassifier().classify(frame) is GestureLabel.NOT_DAB


def test_incomplete_frame_is_not_dab():
    frame = dab_frame("left", "up")
    frame.landmarks["left_wrist"] = None
    assert LimbVoteClassifier().classify(frame) is GestureLabel.NOT_DAB
    assert LimbVoteClassifier().classify(LandmarkFrame.empty()) is GestureLabel.NOT_DAB


def test_classify_is_pure():
    classifier = LimbVoteClassifier()
    frame = dab_frame("left", "down")
    before = copy.deepcopy(frame)
    labels = {classifier.classify(frame) for _ in range(5)}
    assert labels == {GestureLabel.LEFT_DOWN_DAB}
    assert frame == before


def test_custom_thresholds():
    # Scenario A has a 40 degree elbow; a tighter bend limit rejects it.
    strict = LimbVoteClassifier(LimbVoteThresholds(bend_max=35.0))
    assert strict.classify(scenario_a_frame()) is GestureLabel.NOT_DAB


def test_chicken_wing_rejects_loose_fold():
    # A 40 degree fold passes the elbow gate but is not a chicken wing.
    assert ChickenWingClassifier().classify(scenario_a_frame()) is GestureLabel.NOT_DAB
