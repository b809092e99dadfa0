from __future__ import annotations

from typing import Any, MutableMapping, Optional

from ..core.constants import (
    SESSION_ACCESS_TOKEN,
    SESSION_AUTH_VIEW,
    SESSION_EMAIL,
    SESSION_REFRESH_TOKEN,
    SESSION_USER_ID,
)
from ..core.enums import AttendanceView
from ..core.exceptions import BackendError
from .model import AuthSession, SessionUser
from .repository import AuthGateway, Unsubscribe


class SessionManager:
    """Mirrors the provider session into a key/value store (the Flask session cookie).

    The manager never decides who is signed in; it only reflects what the
    provider reports, either from ``load()`` or from a session-change
    notification, and derives the view to render from it.
    """

    def __init__(self, gateway: AuthGateway, store: MutableMapping[str, Any]):
        self._gateway = gateway
        self._store = store
        self._user: Optional[SessionUser] = None
        self._unsubscribe: Optional[Unsubscribe] = None

    def load(self) -> Optional[SessionUser]:
        """Fetch the current session; a failed fetch leaves the user signed out."""
        if self._unsubscribe is None:
            self._unsubscribe = self._gateway.on_session_change(self._apply)

        access_token = self._store.get(SESSION_ACCESS_TOKEN)
        refresh_token = self._store.get(SESSION_REFRESH_TOKEN)
        if not access_token or not refresh_token:
            self._user = None
            return None

        try:
            session = self._gateway.restore_session(access_token=access_token, refresh_token=refresh_token)
        except BackendError:
            session = None
        self._apply(session)
        return self._user

    @property
    def current_user(self) -> Optional[SessionUser]:
        return self._user

    @property
    def view(self) -> AttendanceView:
        if self._user is not None:
            return AttendanceView.ATTENDANCE
        if self._store.get(SESSION_AUTH_VIEW) == AttendanceView.REGISTER.value:
            return AttendanceView.REGISTER
        return AttendanceView.LOGIN

    def show(self, view: AttendanceView) -> None:
        """Switch between the login and register forms."""
        if view == AttendanceView.ATTENDANCE:
            raise ValueError("attendance view is derived from the session")
        self._store[SESSION_AUTH_VIEW] = view.value

    def establish(self, session: AuthSession) -> None:
        self._apply(session)

    def clear(self) -> None:
        self._apply(None)

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _apply(self, session: Optional[AuthSession]) -> None:
        if session is None:
            for key in (SESSION_ACCESS_TOKEN, SESSION_REFRESH_TOKEN, SESSION_USER_ID, SESSION_EMAIL):
                self._store.pop(key, None)
            self._store[SESSION_AUTH_VIEW] = AttendanceView.LOGIN.value
            self._user = None
            return

        self._store[SESSION_ACCESS_TOKEN] = session.access_token
        self._store[SESSION_REFRESH_TOKEN] = session.refresh_token
        self._store[SESSION_USER_ID] = session.user.user_id
        self._store[SESSION_EMAIL] = session.user.email
        self._store.pop(SESSION_AUTH_VIEW, None)
        self._user = session.user
