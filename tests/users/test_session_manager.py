from __future__ import annotations

from typing import Optional

import pytest

from src.roll_call.roll_call.core.constants import SESSION_ACCESS_TOKEN, SESSION_REFRESH_TOKEN, SESSION_USER_ID
from src.roll_call.roll_call.core.enums import AttendanceView
from src.roll_call.roll_call.core.exceptions import BackendError
from src.roll_call.roll_call.users.model import AuthSession, SessionUser
from src.roll_call.roll_call.users.session import SessionManager


def _session(email: str) -> AuthSession:
    return AuthSession(
        user=SessionUser(user_id=f"uid-{email}", email=email),
        access_token=f"at-{email}",
        refresh_token=f"rt-{email}",
    )


class FakeGateway:
    def __init__(self, *, known: tuple[str, ...] = ()):
        self.known = set(known)
        self.listeners = []
        self.restore_calls = 0

    def restore_session(self, *, access_token: str, refresh_token: str) -> Optional[AuthSession]:
        self.restore_calls += 1
        email = access_token.removeprefix("at-")
        if email not in self.known:
            raise BackendError("set_session")
        return _session(email)

    def on_session_change(self, listener):
        self.listeners.append(listener)
        return lambda: self.listeners.remove(listener)

    def emit(self, session: Optional[AuthSession]) -> None:
        for listener in list(self.listeners):
            listener(session)


def test_load_without_tokens_stays_signed_out_and_shows_login():
    gw = FakeGateway()
    store: dict = {}
    sessions = SessionManager(gw, store)

    assert sessions.load() is None
    assert sessions.current_user is None
    assert sessions.view == AttendanceView.LOGIN
    assert gw.restore_calls == 0
    assert len(gw.listeners) == 1


def test_load_restores_stored_session():
    gw = FakeGateway(known=("a@x.io",))
    s = _session("a@x.io")
    store = {SESSION_ACCESS_TOKEN: s.access_token, SESSION_REFRESH_TOKEN: s.refresh_token}

    sessions = SessionManager(gw, store)
    user = sessions.load()

    assert user == SessionUser(user_id="uid-a@x.io", email="a@x.io")
    assert sessions.view == AttendanceView.ATTENDANCE
    assert store[SESSION_USER_ID] == "uid-a@x.io"


def test_failed_restore_leaves_user_signed_out_and_clears_tokens():
    gw = FakeGateway()
    store = {SESSION_ACCESS_TOKEN: "at-gone@x.io", SESSION_REFRESH_TOKEN: "rt-gone@x.io", SESSION_USER_ID: "uid"}

    sessions = SessionManager(gw, store)

    assert sessions.load() is None
    assert sessions.view == AttendanceView.LOGIN
    assert SESSION_ACCESS_TOKEN not in store
    assert SESSION_USER_ID not in store


def test_session_becoming_present_switches_to_attendance_view():
    gw = FakeGateway()
    sessions = SessionManager(gw, {})
    sessions.load()
    sessions.show(AttendanceView.REGISTER)
    assert sessions.view == AttendanceView.REGISTER

    gw.emit(_session("a@x.io"))

    assert sessions.current_user is not None
    assert sessions.view == AttendanceView.ATTENDANCE


def test_sign_out_notification_switches_back_to_login():
    gw = FakeGateway()
    store: dict = {}
    sessions = SessionManager(gw, store)
    sessions.load()
    sessions.establish(_session("a@x.io"))
    assert sessions.view == AttendanceView.ATTENDANCE

    gw.emit(None)

    assert sessions.current_user is None
    assert sessions.view == AttendanceView.LOGIN
    assert SESSION_ACCESS_TOKEN not in store


def test_refreshed_tokens_are_mirrored_into_store():
    gw = FakeGateway()
    store: dict = {}
    sessions = SessionManager(gw, store)
    sessions.load()
    sessions.establish(_session("a@x.io"))

    refreshed = AuthSession(user=_session("a@x.io").user, access_token="at-new", refresh_token="rt-new")
    gw.emit(refreshed)

    assert store[SESSION_ACCESS_TOKEN] == "at-new"
    assert store[SESSION_REFRESH_TOKEN] == "rt-new"


def test_close_unsubscribes():
    gw = FakeGateway()
    sessions = SessionManager(gw, {})
    sessions.load()
    sessions.close()

    gw.emit(_session("a@x.io"))

    assert gw.listeners == []
    assert sessions.current_user is None


def test_attendance_view_cannot_be_forced():
    sessions = SessionManager(FakeGateway(), {})

    with pytest.raises(ValueError):
        sessions.show(AttendanceView.ATTENDANCE)

    assert sessions.view == AttendanceView.LOGIN
