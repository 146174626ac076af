"""
In-memory note storage.

Notes are created once and never changed or removed. Ids come from a counter
that starts at 1 and only moves forward.
"""

import itertools
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from demo_server.errors import NoteNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Note:
    id: int
    title: str
    content: str
    created: str


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class NoteStore:
    """Owns every note and the id counter."""

    def __init__(self, clock: Callable[[], str] = _utc_now) -> None:
        self._notes: dict[int, Note] = {}
        self._ids = itertools.count(1)
        self._clock = clock
        self._lock = threading.Lock()

    def create(self, title: str, content: str) -> Note:
        """Store a new note under the next id.

        Args:
            title: Note title
            content: Note body
        """
        with self._lock:
            note = Note(
                id=next(self._ids),
                title=title,
                content=content,
                created=self._clock(),
            )
            self._notes[note.id] = note
        logger.info("Created note %d (%r)", note.id, title)
        return note

    def get(self, note_id: int) -> Note:
        try:
            return self._notes[note_id]
        except KeyError:
            raise NoteNotFoundError(f"Note not found: {note_id}") from None

    def all(self) -> list[Note]:
        """Return every note in insertion order."""
        return list(self._notes.values())

    def __len__(self) -> int:
        return len(self._notes)

