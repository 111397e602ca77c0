"""Webhook delivery statistics"""

from typing import List
from voxa_metrics.domain.models import WebhookLog, WebhookSummary
from voxa_metrics.utils.rounding import round_percentage, round_whole


def summarize_webhook_deliveries(logs: List[WebhookLog]) -> WebhookSummary:
    """
    Success/failure counts and success rate over the logs supplied.

    Statuses other than success and failure (e.g. pending) count towards
    the total only.
    """
    total = len(logs)
    success = sum(1 for log in logs if log.status == "success")
    failure = sum(1 for log in logs if log.status == "failure")

    success_rate = (success / total) * 100 if total > 0 else 0.0

    timings = [log.response_time_ms for log in logs if log.response_time_ms is not None]
    avg_response_time = sum(timings) / len(timings) if timings else 0

    return WebhookSummary(
        total=total,
        success=success,
        failure=failure,
        success_rate=round_percentage(success_rate),
        avg_response_time_ms=round_whole(avg_response_time),
    )
