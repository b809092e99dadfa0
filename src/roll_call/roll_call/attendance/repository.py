from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def list_for_division(self, division: str) -> Sequence[AttendanceEntry]:
        """All rows of ``division``, newest ``created_at`` first."""
        raise NotImplementedError

    def insert_entry(
        self,
        *,
        enrollment: str,
        division: str,
        status: AttendanceStatus,
        date: str,
        user_id: str,
    ) -> None:
        raise NotImplementedError
