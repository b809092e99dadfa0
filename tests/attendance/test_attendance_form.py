from __future__ import annotations

from datetime import datetime, timezone

from src.roll_call.roll_call.attendance.form import AttendanceForm
from src.roll_call.roll_call.attendance.model import AttendanceEntry
from src.roll_call.roll_call.attendance.service import AttendanceService
from src.roll_call.roll_call.core.enums import AttendanceStatus
from src.roll_call.roll_call.core.exceptions import BackendError
from src.roll_call.roll_call.users.model import SessionUser

USER = SessionUser(user_id="uid-1", email="op@x.io")


class InMemoryAttendance:
    """Newest-first listing, like ``ORDER BY created_at DESC``."""

    def __init__(self):
        self._rows: list[AttendanceEntry] = []
        self._id = 0
        self.list_calls: list[str] = []
        self.insert_calls = 0
        self.fail_insert = False
        self.fail_list = False

    def list_for_division(self, division: str):
        self.list_calls.append(division)
        if self.fail_list:
            raise BackendError("select attendance")
        rows = [r for r in self._rows if r.division == division]
        return sorted(rows, key=lambda r: r.created_at, reverse=True)

    def insert_entry(self, *, enrollment, division, status, date, user_id) -> None:
        self.insert_calls += 1
        if self.fail_insert:
            raise BackendError("insert attendance")
        self._id += 1
        self._rows.append(
            AttendanceEntry(
                entry_id=str(self._id),
                enrollment=enrollment,
                division=division,
                status=status,
                date=date,
                created_at=f"2026-02-01T08:00:{self._id:02d}+00:00",
                user_id=user_id,
            )
        )


def _form(repo: InMemoryAttendance, **kwargs) -> AttendanceForm:
    svc = AttendanceService(repo, clock=lambda: datetime(2026, 2, 1, 8, 0, tzinfo=timezone.utc))
    return AttendanceForm(service=svc, divisions=("A", "F"), division=kwargs.pop("division", "A"), **kwargs)


def test_empty_enrollment_never_issues_remote_call():
    repo = InMemoryAttendance()
    form = _form(repo)

    assert form.mark(AttendanceStatus.PRESENT, USER) is False

    assert repo.insert_calls == 0
    assert repo.list_calls == []
    assert form.notices == [("danger", "Please enter enrollment number")]


def test_successful_insert_clears_enrollment_and_refetches_once():
    repo = InMemoryAttendance()
    form = _form(repo, enrollment="E-7")

    assert form.mark(AttendanceStatus.PRESENT, USER) is True

    assert repo.insert_calls == 1
    assert repo.list_calls == ["A"]
    assert form.enrollment == ""
    assert [e.enrollment for e in form.entries] == ["E-7"]
    assert form.notices == [("success", "Marked E-7 as Present")]


def test_failed_insert_keeps_enrollment_and_skips_refetch():
    repo = InMemoryAttendance()
    repo.fail_insert = True
    form = _form(repo, enrollment="E-7")

    assert form.mark(AttendanceStatus.ABSENT, USER) is False

    assert form.enrollment == "E-7"
    assert repo.list_calls == []
    assert form.notices == [("danger", "Failed to mark attendance")]


def test_mark_without_user_is_reported():
    repo = InMemoryAttendance()
    form = _form(repo, enrollment="E-7")

    form.mark(AttendanceStatus.PRESENT, None)

    assert repo.insert_calls == 0
    assert form.notices == [("danger", "User not logged in")]


def test_switching_division_refetches_once_for_new_division():
    repo = InMemoryAttendance()
    form = _form(repo)

    form.select_division("F")

    assert form.division == "F"
    assert repo.list_calls == ["F"]


def test_selecting_same_or_unknown_division_does_not_refetch():
    repo = InMemoryAttendance()
    form = _form(repo)

    form.select_division("A")
    form.select_division("Z")
    form.select_division(None)

    assert form.division == "A"
    assert repo.list_calls == []


def test_entries_are_filtered_and_newest_first():
    repo = InMemoryAttendance()
    form = _form(repo)
    for enrollment in ("E1", "E2"):
        form.enrollment = enrollment
        form.mark(AttendanceStatus.PRESENT, USER)
    form.select_division("F")
    form.enrollment = "F1"
    form.mark(AttendanceStatus.ABSENT, USER)

    form.select_division("A")

    assert [e.enrollment for e in form.entries] == ["E2", "E1"]


def test_load_failure_keeps_previous_entries():
    repo = InMemoryAttendance()
    form = _form(repo, enrollment="E1")
    form.mark(AttendanceStatus.PRESENT, USER)
    form.notices.clear()

    repo.fail_list = True
    form.refresh()

    assert [e.enrollment for e in form.entries] == ["E1"]
    assert form.notices == [("danger", "Failed to load entries")]


def test_ensure_loaded_fetches_only_once():
    repo = InMemoryAttendance()
    form = _form(repo)

    form.ensure_loaded()
    form.ensure_loaded()

    assert repo.list_calls == ["A"]


def test_toggle_entries_and_rows_ui():
    repo = InMemoryAttendance()
    form = _form(repo, enrollment="E1")
    form.mark(AttendanceStatus.ABSENT, USER)

    form.toggle_entries()
    assert form.show_entries is True
    assert form.rows_ui()[0]["css_class"] == "bg-danger"

    form.toggle_entries()
    assert form.show_entries is False
