import os


def _divisions(raw: str) -> tuple[str, ...]:
    return tuple(d.strip() for d in raw.split(",") if d.strip())


class Config:
    """Settings shared by every environment; modules below override per environment."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "roll-call-dev-secret"

    # Hosted backend (URL + public anon key), same names as the web client build
    SUPABASE_URL = os.environ.get("SUPABASE_URL", os.environ.get("VITE_SUPABASE_URL", ""))
    SUPABASE_ANON_KEY = os.environ.get("SUPABASE_ANON_KEY", os.environ.get("VITE_SUPABASE_ANON_KEY", ""))

    ATTENDANCE_TABLE = os.environ.get("ATTENDANCE_TABLE", "attendance")
    DIVISIONS = _divisions(os.environ.get("DIVISIONS", "A,F"))
    DEFAULT_DIVISION = os.environ.get("DEFAULT_DIVISION", DIVISIONS[0] if DIVISIONS else "A")

    SESSION_DAYS = int(os.environ.get("SESSION_DAYS", "7"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


SUPABASE_CONFIG = {
    "url": Config.SUPABASE_URL,
    "key": Config.SUPABASE_ANON_KEY,
}
