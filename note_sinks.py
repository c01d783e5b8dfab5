import logging
from typing import Iterable, List

from note_trigger import Attack, NoteEvent, Release
from notes import pitch_to_frequency

logger = logging.getLogger(__name__)


class NoteSink:
    name = "base"

    def send(self, event: NoteEvent) -> None:
        raise NotImplementedError

    def send_all(self, events: Iterable[NoteEvent]) -> None:
        for event in events:
            self.send(event)


class LoggingNoteSink(NoteSink):
    name = "log"

    def send(self, event: NoteEvent) -> None:
        if isinstance(event, Attack):
            logger.info(
                "attack %s (%.2f Hz) in %.3fs",
                event.pitch,
                pitch_to_frequency(event.pitch),
                event.when,
            )
        elif isinstance(event, Release):
            logger.info("release")
        else:
            raise TypeError(f"Unknown note event: {event!r}")


class RecordingNoteSink(NoteSink):
    name = "record"

    def __init__(self):
        self.events: List[NoteEvent] = []

    def send(self, event: NoteEvent) -> None:
        self.events.append(event)

    def attacks(self) -> List[str]:
        return [e.pitch for e in self.events if isinstance(e, Attack)]

    def clear(self) -> None:
        self.events.clear()
