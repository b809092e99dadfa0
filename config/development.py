from .config import Config, SUPABASE_CONFIG

SECRET_KEY = Config.SECRET_KEY

SUPABASE_CONFIG = dict(SUPABASE_CONFIG)
ATTENDANCE_TABLE = Config.ATTENDANCE_TABLE
DIVISIONS = Config.DIVISIONS
DEFAULT_DIVISION = Config.DEFAULT_DIVISION

SESSION_DAYS = Config.SESSION_DAYS
LOG_LEVEL = "DEBUG"

DEBUG = True
