from __future__ import annotations

from typing import Callable, Optional, Protocol

from .model import AuthSession

SessionListener = Callable[[Optional[AuthSession]], None]
Unsubscribe = Callable[[], None]


class AuthGateway(Protocol):
    """Giao diện tới dịch vụ xác thực bên ngoài.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp SDK cụ thể.
    Every method raises ``BackendError`` when the provider reports a failure.
    """

    def sign_in_with_password(self, *, email: str, password: str) -> AuthSession:
        raise NotImplementedError

    def sign_up(self, *, email: str, password: str) -> None:
        raise NotImplementedError

    def sign_out(self) -> None:
        raise NotImplementedError

    def restore_session(self, *, access_token: str, refresh_token: str) -> Optional[AuthSession]:
        raise NotImplementedError

    def on_session_change(self, listener: SessionListener) -> Unsubscribe:
        raise NotImplementedError
