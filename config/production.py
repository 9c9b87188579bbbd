import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

REPORT_CONFIG = {
    "expected_hours_per_day": float(os.getenv("EXPECTED_HOURS_PER_DAY", "8")),
    "expected_hours_from_schedule": bool(int(os.getenv("EXPECTED_HOURS_FROM_SCHEDULE", "0"))),
    "overnight_policy": os.getenv("OVERNIGHT_POLICY", "WRAP"),
    "default_entry_time": os.getenv("DEFAULT_ENTRY_TIME", "08:00"),
    "default_exit_time": os.getenv("DEFAULT_EXIT_TIME", "17:00"),
    "default_break_minutes": int(os.getenv("DEFAULT_BREAK_MINUTES", "60")),
}
