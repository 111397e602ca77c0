"""Unit tests for agent and client rankings"""

from dataclasses import replace
from voxa_metrics.domain.models import Agent
from voxa_metrics.domain.performance import agent_performance, client_ranking


def test_agent_performance_sorted_by_call_volume(make_call):
    agents = [Agent(id="agent_1", name="Sophie"), Agent(id="agent_2", name="Daan")]
    calls = [
        make_call("c1", agent_id="agent_1", duration=90, outcome="appointment", response_time=20),
        make_call("c2", agent_id="agent_2", duration=60, response_time=200),
        make_call("c3", agent_id="agent_2", duration=60, outcome="appointment", response_time=40),
    ]

    stats = agent_performance(calls, agents)

    assert [s.agent_id for s in stats] == ["agent_2", "agent_1"]
    assert stats[0].total_calls == 2
    assert stats[0].appointments == 1
    assert stats[0].conversion_rate == 50.0
    assert stats[0].golden_window_percentage == 50.0
    assert stats[0].total_minutes == 2
    assert stats[1].total_minutes == 2  # 1.5 minutes rounds up


def test_agent_performance_agent_without_calls(make_call):
    stats = agent_performance([make_call("c1")], [Agent(id="agent_9", name="Idle")])

    assert stats[0].total_calls == 0
    assert stats[0].conversion_rate == 0
    assert stats[0].golden_window_percentage == 0


def test_client_ranking_sorted_by_revenue(tenant, make_call):
    small = replace(tenant, id="client_2", company_name="Loodgieter Bakker", avg_deal_value=250.0)
    unknown = replace(tenant, id="client_3", company_name="Nieuw BV", avg_deal_value=None)
    calls = [
        make_call("c1", client_id="client_2", outcome="appointment"),
        make_call("c2", client_id="client_2", outcome="appointment"),
        make_call("c3", client_id="client_1", outcome="appointment"),
        make_call("c4", client_id="client_1", outcome="interested"),
        make_call("c5", client_id="client_3", outcome="appointment"),
    ]

    ranking = client_ranking(calls, [small, unknown, tenant])

    assert [r.client_id for r in ranking] == ["client_1", "client_2", "client_3"]
    assert ranking[0].revenue == 1000.0
    assert ranking[0].conversion_rate == 50.0
    assert ranking[1].revenue == 500.0
    assert ranking[2].revenue == 0
