from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from flask import g

from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .attendance.supabase_attendance_repository import SupabaseAttendanceRepository
from .core.constants import ATTENDANCE_TABLE, DEFAULT_DIVISION, DEFAULT_DIVISIONS
from .database.connection import SupabaseConfig, SupabaseConnection
from .database.supabase_base import ClientProvider
from .users.repository import AuthGateway
from .users.service import AuthService
from .users.supabase_auth_gateway import SupabaseAuthGateway


@dataclass(frozen=True)
class Container:
    auth_gateway: AuthGateway
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    attendance_service: AttendanceService

    divisions: Sequence[str] = DEFAULT_DIVISIONS
    default_division: str = DEFAULT_DIVISION
    conn: Optional[SupabaseConnection] = None


def _request_client(conn: SupabaseConnection) -> ClientProvider:
    """One client per Flask request, kept on ``flask.g`` until teardown."""

    def provider():
        if "supabase" not in g:
            g.supabase = conn.connect()
        return g.supabase

    return provider


def _shared_client(conn: SupabaseConnection) -> ClientProvider:
    client = conn.connect()
    return lambda: client


def build_container(
    *,
    supabase_config: dict,
    request_scoped: bool = True,
    attendance_table: str = ATTENDANCE_TABLE,
    divisions: Sequence[str] = DEFAULT_DIVISIONS,
    default_division: str = DEFAULT_DIVISION,
) -> Container:
    config = SupabaseConfig(
        url=str(supabase_config["url"]),
        key=str(supabase_config["key"]),
    )
    conn = SupabaseConnection.get_instance(config)
    client_provider = _request_client(conn) if request_scoped else _shared_client(conn)

    auth_gateway = SupabaseAuthGateway(client_provider)
    attendance_repo = SupabaseAttendanceRepository(client_provider, table=attendance_table)

    return Container(
        auth_gateway=auth_gateway,
        attendance_repo=attendance_repo,
        auth_service=AuthService(auth_gateway),
        attendance_service=AttendanceService(attendance_repo),
        divisions=tuple(divisions),
        default_division=default_division,
        conn=conn,
    )
