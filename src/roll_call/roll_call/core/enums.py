from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh, lưu nguyên văn trong bảng attendance."""

    PRESENT = "Present"
    ABSENT = "Absent"


class AttendanceView(str, Enum):
    """Màn hình đang hiển thị cho người dùng."""

    LOGIN = "login"
    REGISTER = "register"
    ATTENDANCE = "attendance"
