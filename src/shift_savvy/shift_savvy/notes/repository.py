from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Note


class NoteRepository(Protocol):
    def list_all(self) -> Sequence[Note]:
        raise NotImplementedError

    def get_by_id(self, note_id: str) -> Optional[Note]:
        raise NotImplementedError

    def save(self, note: Note) -> None:
        """Insert or fully replace a note (keyed by note_id)."""

        raise NotImplementedError

    def delete(self, note_id: str) -> bool:
        raise NotImplementedError

    def delete_all(self) -> None:
        raise NotImplementedError
