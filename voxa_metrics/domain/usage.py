"""Usage and billing engine - turns call records into minutes, cost and quota status"""

from datetime import date
from typing import Dict, List
from voxa_metrics.domain.models import (
    Plan,
    Client,
    Call,
    Agent,
    UsageResult,
    UsageProjection,
    AgentUsage,
    QuotaStatus,
)
from voxa_metrics.domain.exceptions import PlanMismatchError, CallOwnershipError
from voxa_metrics.utils.date_utils import start_of_month, end_of_month
from voxa_metrics.utils.rounding import round_half_up, round_money, round_percentage, round_whole


def classify_quota_status(percentage_used: float) -> QuotaStatus:
    """
    Map share of the included allowance to a quota status.

    Bands (lower bound inclusive, first match wins):
    - 100+:   exceeded
    - 90-100: danger
    - 70-90:  warning
    - <70:    normal
    """
    if percentage_used >= 100:
        return "exceeded"
    elif percentage_used >= 90:
        return "danger"
    elif percentage_used >= 70:
        return "warning"
    else:
        return "normal"


def compute_usage(client: Client, plan: Plan, calls: List[Call]) -> UsageResult:
    """
    Calculate billable usage for a client over the supplied calls.

    Requirements:
    - Client custom rate / included cost replace the plan values when set
    - Markup is applied to the excess over the allowance only
    - Zero included cost reports 0% used rather than dividing by zero

    The caller picks the billing period; every call passed in is counted.
    Durations are not validated, a negative duration lowers the total.

    Example:
        150 min at EUR 1.00/min, EUR 100 included, 20% markup
        used 150.00, raw overage 50.00, billable overage 60.00, 150.0% exceeded
    """
    total_seconds = sum(call.call_duration_seconds or 0 for call in calls)
    minutes = total_seconds / 60

    # Overrides take precedence even when set to 0
    rate = client.custom_rate_eur_per_min if client.custom_rate_eur_per_min is not None else plan.rate_eur_per_min
    included_cost = (
        client.custom_included_cost_eur
        if client.custom_included_cost_eur is not None
        else plan.included_cost_eur
    )

    used_cost = minutes * rate

    overage_cost_raw = max(0, used_cost - included_cost)
    overage_billable = overage_cost_raw * (1 + plan.overage_markup)

    percentage_used = (used_cost / included_cost) * 100 if included_cost > 0 else 0.0

    # Status is classified on the unrounded percentage
    status = classify_quota_status(percentage_used)

    return UsageResult(
        minutes=round_money(minutes),
        used_cost=round_money(used_cost),
        included_cost=round_money(included_cost),
        overage_cost_raw=round_money(overage_cost_raw),
        overage_billable=round_money(overage_billable),
        percentage_used=round_percentage(percentage_used),
        status=status,
        rate=rate,
    )


def validate_usage_inputs(client: Client, plan: Plan, calls: List[Call]) -> None:
    """
    Check that plan and calls belong to the client before billing.

    Raises:
        PlanMismatchError: plan is not the one the client is subscribed to
        CallOwnershipError: at least one call was placed for another client
    """
    if client.plan_id != plan.id:
        raise PlanMismatchError(f"Client {client.id} is on plan {client.plan_id}, not {plan.id}")

    foreign = [call.id for call in calls if call.client_id != client.id]
    if foreign:
        raise CallOwnershipError(
            f"{len(foreign)} call(s) do not belong to client {client.id}: {', '.join(foreign[:5])}"
        )


def project_usage(usage: UsageResult, plan: Plan, calls: List[Call], as_of: date) -> UsageProjection:
    """
    Extrapolate this month's usage to month end at the current daily pace.

    The daily average spreads usage.minutes over the days elapsed so far
    (as_of included), so usage should cover the month to date. Projected
    overage carries the plan markup like billed overage does.
    """
    month_start = start_of_month(as_of)
    days_elapsed = as_of.day
    days_remaining = end_of_month(as_of).day - as_of.day

    month_calls = sum(1 for call in calls if call.created_at.date() >= month_start)
    avg_calls_per_day = month_calls / days_elapsed
    avg_minutes_per_day = usage.minutes / days_elapsed

    projected_minutes = usage.minutes + avg_minutes_per_day * days_remaining
    projected_cost = projected_minutes * usage.rate
    projected_overage = max(0, (projected_cost - usage.included_cost) * (1 + plan.overage_markup))

    return UsageProjection(
        days_elapsed=days_elapsed,
        days_remaining=days_remaining,
        month_calls=month_calls,
        avg_calls_per_day=round_half_up(avg_calls_per_day, 2),
        avg_minutes_per_day=round_half_up(avg_minutes_per_day, 2),
        projected_minutes=round_money(projected_minutes),
        projected_cost=round_money(projected_cost),
        projected_overage=round_money(projected_overage),
    )


def agent_usage_breakdown(calls: List[Call], agents: List[Agent], rate: float) -> List[AgentUsage]:
    """
    Calls, minutes and cost per agent at the client's effective rate.

    Agents appear in the order of their first call; calls from agents
    missing in the list are reported under the name "Unknown".
    """
    names = {agent.id: agent.name for agent in agents}
    seconds_by_agent: Dict[str, int] = {}
    calls_by_agent: Dict[str, int] = {}

    for call in calls:
        seconds_by_agent[call.agent_id] = seconds_by_agent.get(call.agent_id, 0) + (call.call_duration_seconds or 0)
        calls_by_agent[call.agent_id] = calls_by_agent.get(call.agent_id, 0) + 1

    breakdown = []
    for agent_id, seconds in seconds_by_agent.items():
        minutes = seconds / 60
        breakdown.append(
            AgentUsage(
                agent_id=agent_id,
                name=names.get(agent_id, "Unknown"),
                calls=calls_by_agent[agent_id],
                minutes=round_money(minutes),
                cost=round_money(minutes * rate),
            )
        )
    return breakdown


def minute_quota_percentage(client: Client) -> int:
    """Share of the monthly minute limit used, 0 when no limit is set"""
    if client.monthly_minute_limit <= 0:
        return 0
    return round_whole((client.total_minutes_used / client.monthly_minute_limit) * 100)
