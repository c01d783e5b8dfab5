import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from gestures import GestureLabel

MAX_SCORE = 6

NOTE_NAMES = ["Ab", "A", "Bb", "B", "C", "C#", "D", "Eb", "E", "F", "F#", "G"]
OCTAVES = [1, 2, 3, 4, 5, 6, 7, 8]

DEFAULT_PITCHES = ("C4", "D4", "E4", "F4", "G4", "A4")

_PITCH_RE = re.compile(r"^([A-Ga-g])([#b]?)(-?\d+)$")
_SEMITONES = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

_HORIZONTAL = {"left": 3, "right": 0}
_VERTICAL = {"up": 1, "side": 2, "down": 3}


def available_pitches() -> List[str]:
    # Lowest octave first, notes within an octave in NOTE_NAMES order.
    return [f"{note}{octave}" for octave in OCTAVES for note in NOTE_NAMES]


def pitch_to_midi(pitch: str) -> int:
    match = _PITCH_RE.match(pitch.strip()) if isinstance(pitch, str) else None
    if match is None:
        raise ValueError(f"Not a pitch in scientific notation: {pitch!r}")
    letter, accidental, octave = match.groups()
    semitone = _SEMITONES[letter.upper()]
    if accidental == "#":
        semitone += 1
    elif accidental == "b":
        semitone -= 1
    return 12 * (int(octave) + 1) + semitone


def pitch_to_frequency(pitch: str) -> float:
    return 440.0 * 2 ** ((pitch_to_midi(pitch) - 69) / 12)


def is_valid_pitch(pitch) -> bool:
    try:
        pitch_to_midi(pitch)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class NoteTable:
    """Six pitches selected by score 1..6. Score 0 is always silence."""

    pitches: Tuple[str, ...] = DEFAULT_PITCHES

    def __post_init__(self):
        pitches = tuple(self.pitches)
        if len(pitches) != MAX_SCORE:
            raise ValueError(f"A note table holds exactly {MAX_SCORE} pitches, got {len(pitches)}")
        for pitch in pitches:
            if not is_valid_pitch(pitch):
                raise ValueError(f"Invalid pitch in note table: {pitch!r}")
        object.__setattr__(self, "pitches", pitches)

    def __getitem__(self, score: int) -> str:
        if not 1 <= score <= MAX_SCORE:
            raise ValueError(f"Note table index out of range: {score}")
        return self.pitches[score - 1]

    def __len__(self) -> int:
        return len(self.pitches)

    def with_pitch(self, index: int, pitch: str) -> "NoteTable":
        if not 1 <= index <= MAX_SCORE:
            raise ValueError(f"Note table index out of range: {index}")
        pitches = list(self.pitches)
        pitches[index - 1] = pitch
        return NoteTable(tuple(pitches))

    @classmethod
    def from_sequence(cls, pitches: Sequence[str]) -> "NoteTable":
        return cls(tuple(pitches))


def score_of(label: GestureLabel) -> int:
    if label is GestureLabel.NOT_DAB:
        return 0
    score = _HORIZONTAL[label.side] + _VERTICAL[label.direction]
    if not 0 <= score <= MAX_SCORE:
        raise ValueError(f"Score out of range for {label}: {score}")
    return score


def key_of(score: int, table: NoteTable) -> Optional[str]:
    if not 0 <= score <= MAX_SCORE:
        raise ValueError(f"Score out of range: {score}")
    if score == 0:
        return None
    return table[score]
