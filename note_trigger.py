import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from gestures import GestureLabel
from notes import NoteTable, key_of, score_of

logger = logging.getLogger(__name__)

# Scheduling offset for attacks, in seconds after "now".
DEFAULT_LOOKAHEAD = 0.05


@dataclass(frozen=True)
class Attack:
    pitch: str
    when: float = DEFAULT_LOOKAHEAD


@dataclass(frozen=True)
class Release:
    pass


NoteEvent = Union[Attack, Release]


class NoteTrigger:
    """Monophonic edge-triggered note state machine.

    A changed, non-silent key releases whatever is sounding and attacks the
    new key. Two silent frames in a row emit an explicit release, which also
    clears a note left over from a one-frame classification flicker.
    """

    def __init__(self, lookahead: float = DEFAULT_LOOKAHEAD):
        self.lookahead = lookahead
        self.previous_key: Optional[str] = None
        self._sounding: Optional[str] = None

    @property
    def phase(self) -> str:
        return "SOUNDING" if self._sounding is not None else "SILENT"

    @property
    def sounding(self) -> Optional[str]:
        return self._sounding

    def reset(self) -> None:
        self.previous_key = None
        self._sounding = None

    def process(self, label: GestureLabel, table: NoteTable) -> List[NoteEvent]:
        key = key_of(score_of(label), table)
        events: List[NoteEvent] = []

        if key != self.previous_key and key is not None:
            events.append(Release())
            events.append(Attack(key, self.lookahead))
            self._sounding = key

        if key is None and self.previous_key is None:
            events.append(Release())
            self._sounding = None

        self.previous_key = key
        return events

    def finish(self) -> List[NoteEvent]:
        events: List[NoteEvent] = []
        if self._sounding is not None or self.previous_key is not None:
            logger.debug("Forcing release of %s", self._sounding or self.previous_key)
            events.append(Release())
        self.reset()
        return events
