SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

REPORT_CONFIG = {
    "expected_hours_per_day": 8,
    "expected_hours_from_schedule": False,
    "overnight_policy": "WRAP",
    "default_entry_time": "08:00",
    "default_exit_time": "17:00",
    "default_break_minutes": 60,
}
