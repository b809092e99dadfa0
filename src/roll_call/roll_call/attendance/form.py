from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..common.validators import pick_division
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError
from ..users.model import SessionUser
from .model import AttendanceEntry
from .service import AttendanceService

Notice = Tuple[str, str]


@dataclass
class AttendanceForm:
    """View state of the attendance screen for one operator.

    Every action issues at most one remote call and reports its outcome as a
    transient notice ``(category, message)``; on failure the rest of the state
    is left untouched.
    """

    service: AttendanceService
    divisions: Sequence[str]
    division: str
    enrollment: str = ""
    show_entries: bool = False
    entries: List[AttendanceEntry] = field(default_factory=list)
    notices: List[Notice] = field(default_factory=list)
    loaded: bool = False

    def refresh(self) -> None:
        try:
            self.entries = self.service.list_entries(self.division)
        except DomainError as e:
            self.notices.append(("danger", str(e)))
        self.loaded = True

    def ensure_loaded(self) -> None:
        if not self.loaded:
            self.refresh()

    def select_division(self, division: Optional[str]) -> None:
        division = pick_division(division, self.divisions, self.division)
        if division == self.division:
            return
        self.division = division
        self.refresh()

    def mark(self, status: AttendanceStatus, user: Optional[SessionUser]) -> bool:
        try:
            enrollment = self.service.mark(
                user=user,
                enrollment=self.enrollment,
                division=self.division,
                status=status,
            )
        except DomainError as e:
            self.notices.append(("danger", str(e)))
            return False

        self.notices.append(("success", f"Marked {enrollment} as {status.value}"))
        self.enrollment = ""
        self.refresh()
        return True

    def toggle_entries(self) -> None:
        self.show_entries = not self.show_entries

    def rows_ui(self) -> list[dict]:
        return [self.service.to_ui(e) for e in self.entries]
