import pytest

from gestures import GestureLabel
from notes import (
    DEFAULT_PITCHES,
    NoteTable,
    available_pitches,
    is_valid_pitch,
    key_of,
    pitch_to_frequency,
    pitch_to_midi,
    score_of,
)


@pytest.mark.parametrize(
    "label,score",
    [
        (GestureLabel.NOT_DAB, 0),
        (GestureLabel.RIGHT_UP_DAB, 1),
        (GestureLabel.RIGHT_SIDE_DAB, 2),
        (GestureLabel.RIGHT_DOWN_DAB, 3),
        (GestureLabel.LEFT_UP_DAB, 4),
        (GestureLabel.LEFT_SIDE_DAB, 5),
        (GestureLabel.LEFT_DOWN_DAB, 6),
    ],
)
def test_score_of(label, score):
    assert score_of(label) == score


def test_key_of_default_table():
    table = NoteTable()
    assert key_of(0, table) is None
    assert key_of(2, table) == "D4"
    assert [key_of(s, table) for s in range(1, 7)] == list(DEFAULT_PITCHES)


@pytest.mark.parametrize("score", [-1, 7, 12])
def test_key_of_rejects_out_of_range(score):
    with pytest.raises(ValueError):
        key_of(score, NoteTable())


def test_note_table_validation():
    with pytest.raises(ValueError):
        NoteTable(("C4", "D4"))
    with pytest.raises(ValueError):
        NoteTable(("C4", "D4", "E4", "F4", "G4", "H4"))
    with pytest.raises(ValueError):
        NoteTable()[0]


def test_note_table_with_pitch_is_independent():
    table = NoteTable()
    changed = table.with_pitch(3, "Eb5")
    assert changed[3] == "Eb5"
    assert table[3] == "E4"
    assert changed.pitches[:2] == table.pitches[:2]


def test_note_table_from_list():
    table = NoteTable.from_sequence(["E5", "Eb5", "B4", "D5", "C5", "A4"])
    assert table.pitches == ("E5", "Eb5", "B4", "D5", "C5", "A4")
    assert len(table) == 6


def test_pitch_conversions():
    assert pitch_to_midi("C4") == 60
    assert pitch_to_midi("A4") == 69
    assert pitch_to_midi("Bb3") == pitch_to_midi("A#3") == 58
    assert pitch_to_frequency("A4") == pytest.approx(440.0)
    assert pitch_to_frequency("C4") == pytest.approx(261.6256, rel=1e-5)
    assert pitch_to_frequency("A5") == pytest.approx(880.0)
    assert is_valid_pitch("F#2")
    assert not is_valid_pitch("")
    assert not is_valid_pitch(None)
    assert not is_valid_pitch("C")


def test_available_pitches():
    pitches = available_pitches()
    assert len(pitches) == 96
    assert pitches[0] == "Ab1"
    assert pitches[-1] == "G8"
    assert "C4" in pitches
    assert all(is_valid_pitch(p) for p in pitches)
