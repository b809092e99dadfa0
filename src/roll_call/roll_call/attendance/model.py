from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """Thực thể miền (domain): Một dòng trong bảng attendance."""

    entry_id: str
    enrollment: str
    division: str
    status: AttendanceStatus
    date: str
    created_at: str
    user_id: Optional[str] = None
