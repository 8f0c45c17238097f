from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ShiftDefinition


class ShiftRepository(Protocol):
    def list_all(self) -> Sequence[ShiftDefinition]:
        raise NotImplementedError

    def get_by_id(self, shift_id: str) -> Optional[ShiftDefinition]:
        raise NotImplementedError

    def save(self, shift: ShiftDefinition) -> None:
        """Insert or fully replace a shift (keyed by shift_id)."""

        raise NotImplementedError

    def delete(self, shift_id: str) -> bool:
        raise NotImplementedError

    def delete_all(self) -> None:
        raise NotImplementedError

    def get_active_id(self) -> Optional[str]:
        raise NotImplementedError

    def set_active_id(self, shift_id: Optional[str]) -> None:
        raise NotImplementedError

    def get_active(self) -> Optional[ShiftDefinition]:
        raise NotImplementedError
