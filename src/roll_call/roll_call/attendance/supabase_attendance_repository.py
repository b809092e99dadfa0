from __future__ import annotations

from typing import Any, Dict, Sequence

from ..core.constants import ATTENDANCE_TABLE
from ..core.enums import AttendanceStatus
from ..database.supabase_base import ClientProvider, backend_call, rows
from .model import AttendanceEntry
from .repository import AttendanceRepository


def _to_entry(r: Dict[str, Any]) -> AttendanceEntry:
    return AttendanceEntry(
        entry_id=str(r["id"]),
        enrollment=str(r["enrollment"]),
        division=str(r["division"]),
        status=AttendanceStatus(r["status"]),
        date=str(r["date"]),
        created_at=str(r.get("created_at") or ""),
        user_id=str(r["user_id"]) if r.get("user_id") else None,
    )


class SupabaseAttendanceRepository(AttendanceRepository):
    def __init__(self, client_provider: ClientProvider, *, table: str = ATTENDANCE_TABLE):
        self._client = client_provider
        self._table = table

    def list_for_division(self, division: str) -> Sequence[AttendanceEntry]:
        with backend_call(f"select {self._table}"):
            res = (
                self._client()
                .table(self._table)
                .select("*")
                .eq("division", division)
                .order("created_at", desc=True)
                .execute()
            )
        return [_to_entry(r) for r in rows(res)]

    def insert_entry(
        self,
        *,
        enrollment: str,
        division: str,
        status: AttendanceStatus,
        date: str,
        user_id: str,
    ) -> None:
        with backend_call(f"insert {self._table}"):
            self._client().table(self._table).insert(
                [
                    {
                        "enrollment": enrollment,
                        "division": division,
                        "status": status.value,
                        "date": date,
                        "user_id": user_id,
                    }
                ]
            ).execute()
