from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.connection import SupabaseConfig
from .users.controller import register as register_users


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", 7)))

    level = getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")), logging.INFO)
    logging.basicConfig(level=level, format="[roll-call] %(levelname)s %(name)s: %(message)s")
    app.logger.setLevel(level)
    logging.getLogger(__package__).setLevel(level)

    supabase_config = getattr(settings, "SUPABASE_CONFIG")
    if container is None:
        if not supabase_config.get("url") or not supabase_config.get("key"):
            raise RuntimeError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")
        container = build_container(
            supabase_config=supabase_config,
            attendance_table=getattr(settings, "ATTENDANCE_TABLE", "attendance"),
            divisions=getattr(settings, "DIVISIONS", ("A", "F")),
            default_division=getattr(settings, "DEFAULT_DIVISION", "A"),
        )

    app.logger.info(
        "[roll-call] settings=%s backend=%s divisions=%s",
        settings_module,
        SupabaseConfig(url=str(supabase_config.get("url", "")), key="").host or "-",
        ",".join(container.divisions),
    )

    register_users(app, container)
    register_attendance(app, container)

    return app
