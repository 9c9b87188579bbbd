import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

REPORT_CONFIG = {
    "expected_hours_per_day": float(os.getenv("EXPECTED_HOURS_PER_DAY", "8")),
    # 1 = derive expected hours from the user's schedule span minus break
    "expected_hours_from_schedule": bool(int(os.getenv("EXPECTED_HOURS_FROM_SCHEDULE", "0"))),
    # WRAP | NAIVE, how overnight schedules (exit < entry) are evaluated
    "overnight_policy": os.getenv("OVERNIGHT_POLICY", "WRAP"),
    "default_entry_time": os.getenv("DEFAULT_ENTRY_TIME", "08:00"),
    "default_exit_time": os.getenv("DEFAULT_EXIT_TIME", "17:00"),
    "default_break_minutes": int(os.getenv("DEFAULT_BREAK_MINUTES", "60")),
}
