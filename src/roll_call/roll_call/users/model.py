from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionUser:
    """Người dùng đang đăng nhập, phản chiếu từ phiên của nhà cung cấp xác thực."""

    user_id: str
    email: str


@dataclass(frozen=True)
class AuthSession:
    """Provider session: the user plus the token pair needed to restore it later."""

    user: SessionUser
    access_token: str
    refresh_token: str
