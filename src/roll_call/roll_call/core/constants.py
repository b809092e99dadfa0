"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

ATTENDANCE_TABLE = "attendance"
DEFAULT_DIVISIONS = ("A", "F")
DEFAULT_DIVISION = "A"

# Keys used in the Flask session cookie.
SESSION_ACCESS_TOKEN = "access_token"
SESSION_REFRESH_TOKEN = "refresh_token"
SESSION_USER_ID = "user_id"
SESSION_EMAIL = "email"
SESSION_AUTH_VIEW = "auth_view"
SESSION_DIVISION = "division"
SESSION_SHOW_ENTRIES = "show_entries"
