from __future__ import annotations

import sys
from pathlib import Path

import importlib

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.roll_call.roll_call.container import build_container
from src.roll_call.roll_call.core.exceptions import BackendError


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        supabase_config=dict(settings.SUPABASE_CONFIG),
        request_scoped=False,
        attendance_table=settings.ATTENDANCE_TABLE,
        divisions=settings.DIVISIONS,
        default_division=settings.DEFAULT_DIVISION,
    )

    host = container.conn.config.host if container.conn else "-"
    failed = False
    for division in container.divisions:
        try:
            entries = container.attendance_service.list_entries(division)
        except BackendError as e:
            print(f"FAIL: {host} division={division}: {e}")
            failed = True
            continue
        print(f"OK: {host} division={division} entries={len(entries)}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
