from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import BackendError
from ..database.supabase_base import ClientProvider, backend_call
from .model import AuthSession, SessionUser
from .repository import AuthGateway, SessionListener, Unsubscribe


def _to_session(session: Any) -> Optional[AuthSession]:
    if session is None or getattr(session, "user", None) is None:
        return None
    return AuthSession(
        user=SessionUser(user_id=str(session.user.id), email=str(session.user.email or "")),
        access_token=session.access_token,
        refresh_token=session.refresh_token,
    )


class SupabaseAuthGateway(AuthGateway):
    def __init__(self, client_provider: ClientProvider):
        self._client = client_provider

    def sign_in_with_password(self, *, email: str, password: str) -> AuthSession:
        with backend_call("sign_in_with_password"):
            res = self._client().auth.sign_in_with_password({"email": email, "password": password})
        session = _to_session(res.session)
        if session is None:
            # e.g. account exists but email not confirmed yet
            raise BackendError("sign_in_with_password")
        return session

    def sign_up(self, *, email: str, password: str) -> None:
        with backend_call("sign_up"):
            self._client().auth.sign_up({"email": email, "password": password})

    def sign_out(self) -> None:
        with backend_call("sign_out"):
            self._client().auth.sign_out()

    def restore_session(self, *, access_token: str, refresh_token: str) -> Optional[AuthSession]:
        with backend_call("set_session"):
            res = self._client().auth.set_session(access_token, refresh_token)
        return _to_session(res.session)

    def on_session_change(self, listener: SessionListener) -> Unsubscribe:
        def _callback(_event, session) -> None:
            listener(_to_session(session))

        subscription = self._client().auth.on_auth_state_change(_callback)
        return subscription.unsubscribe
