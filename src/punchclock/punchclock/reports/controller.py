from __future__ import annotations

import logging
from dataclasses import asdict
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import DomainError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _subject_id() -> Optional[int]:
        # Managers pass ?user_id=; everyone else reports on themselves.
        user_id_s = request.args.get("user_id")
        if user_id_s and user_id_s.isdigit():
            return int(user_id_s)
        if "user_id" in session:
            return int(session["user_id"])
        return None

    def json_report(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user_id = _subject_id()
            if user_id is None:
                return jsonify({"message": "Login required"}), 401
            try:
                return jsonify(view(user_id, *args, **kwargs)), 200
            except DomainError as e:
                return jsonify({"message": str(e)}), 400
            except Exception:
                logger.exception("Report %s failed for user %s", request.path, user_id)
                return jsonify({"message": "Failed to build report"}), 500

        return wrapper

    def _int_arg(name: str) -> int:
        value = request.args.get(name)
        if not value or not value.lstrip("-").isdigit():
            raise ValidationError(f"{name} is required")
        return int(value)

    @app.route("/api/reports/summary", methods=["GET"], endpoint="api_report_summary")
    @json_report
    def api_report_summary(user_id: int):
        period = request.args.get("period", "month")
        summary = container.report_service.period_summary(user_id, period)
        return asdict(summary)

    @app.route("/api/reports/summary/range", methods=["GET"], endpoint="api_report_summary_range")
    @json_report
    def api_report_summary_range(user_id: int):
        start = parse_iso_date(request.args.get("start"))
        end = parse_iso_date(request.args.get("end"))
        summary = container.report_service.summary_for_range(user_id, start=start, end=end)
        return asdict(summary)

    @app.route("/api/reports/weekly", methods=["GET"], endpoint="api_report_weekly")
    @json_report
    def api_report_weekly(user_id: int):
        week_start_s = request.args.get("week_start")
        week_start = parse_iso_date(week_start_s) if week_start_s else None
        return asdict(container.report_service.weekly_chart(user_id, week_start=week_start))

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="api_report_monthly")
    @json_report
    def api_report_monthly(user_id: int):
        series = container.report_service.monthly_chart(user_id, year=_int_arg("year"), month=_int_arg("month"))
        return asdict(series)

    @app.route("/api/reports/time-entries", methods=["GET"], endpoint="api_report_time_entries")
    @json_report
    def api_report_time_entries(user_id: int):
        return container.report_service.time_entries_report(user_id, year=_int_arg("year"), month=_int_arg("month"))
