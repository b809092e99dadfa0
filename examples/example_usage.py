"""Ví dụ: dùng service layer (không qua Flask).

Mục tiêu: Controllers chỉ là lớp mỏng, nghiệp vụ nằm ở Services.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.roll_call.roll_call.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        supabase_config=settings.SUPABASE_CONFIG,
        request_scoped=False,
        attendance_table=settings.ATTENDANCE_TABLE,
        divisions=settings.DIVISIONS,
        default_division=settings.DEFAULT_DIVISION,
    )
    entries = container.attendance_service.list_entries(settings.DEFAULT_DIVISION)
    print([container.attendance_service.to_ui(e) for e in entries[:5]])


if __name__ == "__main__":
    main()
