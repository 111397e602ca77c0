"""Per-agent and per-client performance rankings"""

from typing import List
from voxa_metrics.domain.models import Call, Agent, Client, AgentPerformance, ClientPerformance
from voxa_metrics.domain.metrics import (
    GOLDEN_WINDOW_SECONDS,
    MISSING_RESPONSE_TIME_SEC,
    compute_conversion,
    compute_golden_window,
    estimate_revenue,
)
from voxa_metrics.utils.rounding import round_whole


def agent_performance(
    calls: List[Call],
    agents: List[Agent],
    window_seconds: float = GOLDEN_WINDOW_SECONDS,
    missing_response_time: float = MISSING_RESPONSE_TIME_SEC,
) -> List[AgentPerformance]:
    """Stats per agent, busiest agent first"""
    stats = []
    for agent in agents:
        agent_calls = [call for call in calls if call.agent_id == agent.id]
        conversion = compute_conversion(agent_calls)
        golden_window = compute_golden_window(agent_calls, window_seconds, missing_response_time)
        seconds = sum(call.call_duration_seconds or 0 for call in agent_calls)

        stats.append(
            AgentPerformance(
                agent_id=agent.id,
                name=agent.name,
                total_calls=len(agent_calls),
                appointments=conversion.appointments,
                conversion_rate=conversion.conversion_rate,
                golden_window_percentage=golden_window.percentage,
                total_minutes=round_whole(seconds / 60),
            )
        )

    return sorted(stats, key=lambda s: s.total_calls, reverse=True)


def client_ranking(calls: List[Call], clients: List[Client]) -> List[ClientPerformance]:
    """Stats per client, highest estimated revenue first"""
    stats = []
    for client in clients:
        client_calls = [call for call in calls if call.client_id == client.id]
        conversion = compute_conversion(client_calls)

        stats.append(
            ClientPerformance(
                client_id=client.id,
                company_name=client.company_name,
                total_calls=len(client_calls),
                appointments=conversion.appointments,
                conversion_rate=conversion.conversion_rate,
                revenue=estimate_revenue(client_calls, client.avg_deal_value or 0),
            )
        )

    return sorted(stats, key=lambda s: s.revenue, reverse=True)
