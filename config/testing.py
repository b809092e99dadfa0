SECRET_KEY = "test-secret"

SUPABASE_CONFIG = {
    "url": "http://localhost:54321",
    "key": "test-anon-key",
}
ATTENDANCE_TABLE = "attendance"
DIVISIONS = ("A", "F")
DEFAULT_DIVISION = "A"

SESSION_DAYS = 7
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
