"""Call outcome metrics - conversion, golden window, revenue and sentiment"""

from typing import Dict, List, Optional
from voxa_metrics.domain.models import Call, GoldenWindowResult, ConversionResult, SentimentResult, Share
from voxa_metrics.utils.rounding import round_half_up, round_money, round_percentage, round_whole

GOLDEN_WINDOW_SECONDS = 60
MISSING_RESPONSE_TIME_SEC = 9999

# Both spellings occur in stored call outcomes
NOT_INTERESTED_OUTCOMES = {"not-interested", "not_interested", "other"}

TRACKED_OUTCOMES = ["appointment", "interested", "not-interested", "callback", "no-response"]
TRACKED_STATUSES = ["completed", "failed", "no-answer", "busy"]


def _median(values: List[float]) -> float:
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def compute_golden_window(
    calls: List[Call],
    window_seconds: float = GOLDEN_WINDOW_SECONDS,
    missing_response_time: float = MISSING_RESPONSE_TIME_SEC,
) -> GoldenWindowResult:
    """
    Share of calls placed within the golden window after the lead came in.

    Calls without a recorded response time count as the sentinel value:
    they stay in the total, land outside the window and take part in the
    median. Pre-filter the calls for a median over measured calls only.
    """
    total_calls = len(calls)
    if total_calls == 0:
        return GoldenWindowResult(percentage=0.0, within_window=0, outside_window=0, median_response_time=0)

    response_times = [
        call.response_time_sec if call.response_time_sec is not None else missing_response_time
        for call in calls
    ]

    within_window = sum(1 for seconds in response_times if seconds <= window_seconds)
    percentage = (within_window / total_calls) * 100

    return GoldenWindowResult(
        percentage=round_percentage(percentage),
        within_window=within_window,
        outside_window=total_calls - within_window,
        median_response_time=round_whole(_median(response_times)),
    )


def _is_not_interested(call: Call) -> bool:
    return call.call_outcome in NOT_INTERESTED_OUTCOMES or call.call_status == "failed"


def count_appointments(calls: List[Call]) -> int:
    return sum(1 for call in calls if call.call_outcome == "appointment")


def compute_conversion(calls: List[Call]) -> ConversionResult:
    """
    Appointment conversion over all calls.

    not_interested counts a call once when either its outcome (not-interested,
    other) or its status (failed) says so.
    """
    total_calls = len(calls)
    if total_calls == 0:
        return ConversionResult(conversion_rate=0.0, appointments=0, qualified=0, not_interested=0)

    appointments = count_appointments(calls)
    qualified = sum(1 for call in calls if call.call_outcome == "qualified")
    not_interested = sum(1 for call in calls if _is_not_interested(call))

    return ConversionResult(
        conversion_rate=round_percentage((appointments / total_calls) * 100),
        appointments=appointments,
        qualified=qualified,
        not_interested=not_interested,
    )


def estimate_revenue(calls: List[Call], avg_deal_value: Optional[float] = 0) -> float:
    """Every appointment is valued at the client's average deal value"""
    return round_money(count_appointments(calls) * (avg_deal_value or 0))


def compute_sentiment_distribution(calls: List[Call]) -> SentimentResult:
    """
    Bucket sentiment scores of the calls that have one.

    Buckets: >=0.7 positive, 0.4-0.7 neutral, <0.4 negative.
    """
    scores = [call.sentiment_score for call in calls if call.sentiment_score is not None]
    if not scores:
        return SentimentResult(positive=0, neutral=0, negative=0, average=0.0)

    positive = sum(1 for score in scores if score >= 0.7)
    neutral = sum(1 for score in scores if 0.4 <= score < 0.7)
    negative = sum(1 for score in scores if score < 0.4)

    return SentimentResult(
        positive=positive,
        neutral=neutral,
        negative=negative,
        average=round_half_up(sum(scores) / len(scores), 2),
    )


def total_minutes(calls: List[Call]) -> float:
    return round_money(sum(call.call_duration_seconds or 0 for call in calls) / 60)


def _distribution(values: List[Optional[str]], categories: List[str]) -> Dict[str, Share]:
    total = len(values)
    distribution = {}
    for category in categories:
        count = sum(1 for value in values if value == category)
        percentage = (count / total) * 100 if total > 0 else 0.0
        distribution[category] = Share(count=count, percentage=round_percentage(percentage))
    return distribution


def outcome_distribution(calls: List[Call]) -> Dict[str, Share]:
    """Count and share per tracked call outcome"""
    return _distribution([call.call_outcome for call in calls], TRACKED_OUTCOMES)


def status_distribution(calls: List[Call]) -> Dict[str, Share]:
    """Count and share per tracked call status"""
    return _distribution([call.call_status for call in calls], TRACKED_STATUSES)
