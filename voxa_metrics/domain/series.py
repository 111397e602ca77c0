"""Time-bucketed call statistics for dashboard charts"""

from datetime import date, timedelta
from typing import Dict, List, Optional
from voxa_metrics.domain.models import Call, DailyCallStats, WeeklyConversion, MonthlyRevenue
from voxa_metrics.domain.metrics import compute_conversion
from voxa_metrics.domain.exceptions import InvalidPeriodError
from voxa_metrics.utils.date_utils import (
    generate_date_range,
    start_of_week,
    start_of_month,
    end_of_month,
    add_months,
)
from voxa_metrics.utils.rounding import round_money


def validate_period(start: date, end: date) -> None:
    """Raises InvalidPeriodError when end is before start"""
    if start > end:
        raise InvalidPeriodError(f"Period end {end.isoformat()} is before start {start.isoformat()}")


def filter_calls_between(calls: List[Call], start: date, end: date) -> List[Call]:
    """Calls created on a day within [start, end]"""
    return [call for call in calls if start <= call.created_at.date() <= end]


def daily_call_series(calls: List[Call], start: date, end: date) -> List[DailyCallStats]:
    """
    One point per calendar day, days without calls included.

    Returns an empty list when end is before start.
    """
    calls_by_day: Dict[date, List[Call]] = {}
    for call in filter_calls_between(calls, start, end):
        calls_by_day.setdefault(call.created_at.date(), []).append(call)

    series = []
    for day in generate_date_range(start, end):
        day_calls = calls_by_day.get(day, [])
        seconds = sum(call.call_duration_seconds or 0 for call in day_calls)
        series.append(
            DailyCallStats(
                day=day,
                calls=len(day_calls),
                successful=sum(1 for call in day_calls if call.call_status == "completed"),
                failed=sum(1 for call in day_calls if call.call_status == "failed"),
                minutes=round_money(seconds / 60),
            )
        )

    return series


def weekly_conversion_series(calls: List[Call], as_of: date, weeks: int = 8) -> List[WeeklyConversion]:
    """
    Conversion rate per Sunday-started week, oldest first.

    The last point is the (possibly partial) week containing as_of.
    """
    current_week = start_of_week(as_of)
    series = []
    for offset in range(weeks - 1, -1, -1):
        week_start = current_week - timedelta(weeks=offset)
        week_calls = filter_calls_between(calls, week_start, week_start + timedelta(days=6))
        series.append(
            WeeklyConversion(
                week_start=week_start,
                conversion_rate=compute_conversion(week_calls).conversion_rate,
            )
        )
    return series


def monthly_revenue_series(
    calls: List[Call],
    deal_values: Dict[str, Optional[float]],
    as_of: date,
    months: int = 6,
) -> List[MonthlyRevenue]:
    """
    Call costs against appointment value per calendar month, oldest first.

    Args:
        calls: Calls across all clients
        deal_values: Average deal value keyed by client id
        as_of: Any day of the last month in the series
        months: Number of months to report
    """
    current_month = start_of_month(as_of)
    series = []
    for offset in range(months - 1, -1, -1):
        month_start = add_months(current_month, -offset)
        month_calls = filter_calls_between(calls, month_start, end_of_month(month_start))

        costs = sum(call.cost_eur or 0 for call in month_calls)
        value = sum(
            deal_values.get(call.client_id) or 0
            for call in month_calls
            if call.call_outcome == "appointment"
        )

        series.append(
            MonthlyRevenue(
                month=month_start,
                costs=round_money(costs),
                value=round_money(value),
                margin=round_money(value - costs),
            )
        )
    return series
