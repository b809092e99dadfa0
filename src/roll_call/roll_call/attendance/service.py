from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

from ..common.datetime_utils import now_utc, today_iso
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import AuthenticationError, BackendError
from ..users.model import SessionUser
from .model import AttendanceEntry
from .repository import AttendanceRepository


class AttendanceService:
    """Use case: mark attendance and list entries of a division."""

    ENROLLMENT_REQUIRED = "Please enter enrollment number"
    NOT_LOGGED_IN = "User not logged in"
    MARK_FAILED = "Failed to mark attendance"
    LOAD_FAILED = "Failed to load entries"

    def __init__(self, entries: AttendanceRepository, *, clock: Callable[[], datetime] = now_utc):
        self._entries = entries
        self._clock = clock

    def mark(
        self,
        *,
        user: Optional[SessionUser],
        enrollment: str,
        division: str,
        status: AttendanceStatus,
    ) -> str:
        """Insert one row tagged with today's date; returns the stored enrollment."""
        enrollment = require_non_empty(enrollment, self.ENROLLMENT_REQUIRED)
        if user is None:
            raise AuthenticationError(self.NOT_LOGGED_IN)

        try:
            self._entries.insert_entry(
                enrollment=enrollment,
                division=division,
                status=status,
                date=today_iso(self._clock()),
                user_id=user.user_id,
            )
        except BackendError as e:
            raise BackendError(self.MARK_FAILED) from e
        return enrollment

    def list_entries(self, division: str) -> List[AttendanceEntry]:
        try:
            return list(self._entries.list_for_division(division))
        except BackendError as e:
            raise BackendError(self.LOAD_FAILED) from e

    def to_ui(self, entry: AttendanceEntry) -> dict:
        css = {
            AttendanceStatus.PRESENT: "bg-success",
            AttendanceStatus.ABSENT: "bg-danger",
        }.get(entry.status, "bg-secondary")

        return {
            "id": entry.entry_id,
            "enrollment": entry.enrollment,
            "date": entry.date,
            "status": entry.status.value,
            "css_class": css,
        }
