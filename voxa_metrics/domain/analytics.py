"""Admin analytics overview assembled from the individual metrics"""

from datetime import date
from typing import List
from voxa_metrics.domain.models import Call, Client, Agent, AnalyticsOverview
from voxa_metrics.domain.metrics import (
    GOLDEN_WINDOW_SECONDS,
    MISSING_RESPONSE_TIME_SEC,
    compute_conversion,
    compute_golden_window,
    outcome_distribution,
    status_distribution,
    total_minutes,
)
from voxa_metrics.domain.performance import agent_performance, client_ranking
from voxa_metrics.domain.series import weekly_conversion_series, monthly_revenue_series
from voxa_metrics.utils.rounding import round_money


def build_overview(
    calls: List[Call],
    clients: List[Client],
    agents: List[Agent],
    as_of: date,
    weeks: int = 8,
    months: int = 6,
    window_seconds: float = GOLDEN_WINDOW_SECONDS,
    missing_response_time: float = MISSING_RESPONSE_TIME_SEC,
) -> AnalyticsOverview:
    """
    Compute every figure of the analytics view in one pass over the inputs.

    Total revenue is the sum of per-client estimates, each appointment valued
    at its own client's average deal value.
    """
    ranking = client_ranking(calls, clients)
    deal_values = {client.id: client.avg_deal_value for client in clients}

    return AnalyticsOverview(
        total_calls=len(calls),
        total_minutes=total_minutes(calls),
        conversion=compute_conversion(calls),
        golden_window=compute_golden_window(calls, window_seconds, missing_response_time),
        total_revenue=round_money(sum(c.revenue for c in ranking)),
        outcomes=outcome_distribution(calls),
        statuses=status_distribution(calls),
        agents=agent_performance(calls, agents, window_seconds, missing_response_time),
        clients=ranking,
        weekly_conversion=weekly_conversion_series(calls, as_of, weeks),
        monthly_revenue=monthly_revenue_series(calls, deal_values, as_of, months),
    )
