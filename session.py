import logging
from dataclasses import dataclass, field
from typing import List, Optional

from classifiers.base import ClassifierBase
from gestures import GestureLabel
from note_sinks import NoteSink
from note_trigger import NoteEvent, NoteTrigger
from notes import NoteTable, key_of, score_of
from pose_types import LandmarkFrame

logger = logging.getLogger(__name__)

INCOMPLETE_POLICIES = ("release", "hold")


@dataclass
class FrameResult:
    label: GestureLabel
    score: int
    key: Optional[str]
    events: List[NoteEvent] = field(default_factory=list)
    complete: bool = True


class DabSession:
    """One performer: classify each frame, map it to a pitch, trigger notes.

    Incomplete frames (pose lost) follow ``incomplete_policy``: "release"
    treats them as NotDab so a lost pose falls silent after two frames,
    "hold" skips them and leaves the trigger as it was.
    """

    def __init__(
        self,
        classifier: ClassifierBase,
        note_table: Optional[NoteTable] = None,
        trigger: Optional[NoteTrigger] = None,
        sink: Optional[NoteSink] = None,
        incomplete_policy: str = "release",
    ):
        if incomplete_policy not in INCOMPLETE_POLICIES:
            raise ValueError(
                f"Unknown incomplete frame policy {incomplete_policy!r}, expected one of {INCOMPLETE_POLICIES}"
            )
        self.classifier = classifier
        self.note_table = note_table or NoteTable()
        self.trigger = trigger or NoteTrigger()
        self.sink = sink
        self.incomplete_policy = incomplete_policy
        self.frame_count = 0

    def set_pitch(self, index: int, pitch: str) -> None:
        self.note_table = self.note_table.with_pitch(index, pitch)

    def handle_frame(self, frame: LandmarkFrame) -> FrameResult:
        self.frame_count += 1
        if not frame.is_complete(self.classifier.required_joints):
            if self.incomplete_policy == "hold":
                return FrameResult(GestureLabel.NOT_DAB, 0, None, [], False)
            result = self._advance(GestureLabel.NOT_DAB)
            result.complete = False
            return result

        label = self.classifier.classify(frame)
        logger.debug("Classification: %s", label.value)
        return self._advance(label)

    def _advance(self, label: GestureLabel) -> FrameResult:
        score = score_of(label)
        key = key_of(score, self.note_table)
        events = self.trigger.process(label, self.note_table)
        self._emit(events)
        return FrameResult(label, score, key, events)

    def _emit(self, events: List[NoteEvent]) -> None:
        if self.sink is not None:
            self.sink.send_all(events)

    def close(self) -> List[NoteEvent]:
        events = self.trigger.finish()
        self._emit(events)
        return events

    def __enter__(self) -> "DabSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
