"""Work-time reconciliation engine.

Pure functions: punch records and a schedule in, aggregates out. ``now`` is
always passed in by the caller.
"""

from .aggregator import daily_breakdown, evaluate_day, group_by_day, monthly_series, summarize_period, weekly_series
from .evaluator import evaluate_timing
from .model import ChartSeries, DayAggregate, PeriodSummary, SessionTotals, TimingTotals
from .reconstructor import reconstruct_sessions

__all__ = [
    "ChartSeries",
    "DayAggregate",
    "PeriodSummary",
    "SessionTotals",
    "TimingTotals",
    "daily_breakdown",
    "evaluate_day",
    "evaluate_timing",
    "group_by_day",
    "monthly_series",
    "reconstruct_sessions",
    "summarize_period",
    "weekly_series",
]
