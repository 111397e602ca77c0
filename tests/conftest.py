"""Pytest fixtures for testing"""

import pytest
from datetime import datetime
from fastapi.testclient import TestClient
from voxa_metrics.api.main import create_app
from voxa_metrics.domain.models import Plan, Client, Call


def _make_call(
    call_id: str = "call_1",
    client_id: str = "client_1",
    agent_id: str = "agent_1",
    duration: int = 60,
    status: str = "completed",
    outcome: str | None = None,
    response_time: float | None = None,
    sentiment: float | None = None,
    created_at: datetime | None = None,
    cost_eur: float | None = None,
) -> Call:
    """Build a call record with sensible defaults"""
    return Call(
        id=call_id,
        client_id=client_id,
        agent_id=agent_id,
        call_duration_seconds=duration,
        call_status=status,
        created_at=created_at or datetime(2026, 10, 1, 9, 30),
        call_outcome=outcome,
        response_time_sec=response_time,
        sentiment_score=sentiment,
        cost_eur=cost_eur,
    )


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def plan() -> Plan:
    """Starter plan: EUR 100 included at EUR 1.00/min, 20% overage markup"""
    return Plan(
        id="plan_starter",
        name="Starter",
        included_cost_eur=100.0,
        rate_eur_per_min=1.0,
        overage_markup=0.2,
        reset_day=1,
    )


@pytest.fixture
def tenant(plan: Plan) -> Client:
    """Client subscribed to the starter plan without overrides"""
    return Client(
        id="client_1",
        company_name="Dakwerken Jansen",
        plan_id=plan.id,
        total_minutes_used=0,
        monthly_minute_limit=100,
        avg_deal_value=1000.0,
    )


@pytest.fixture
def sample_calls() -> list[Call]:
    """Mixed month of calls for one client"""
    return [
        _make_call("c1", duration=120, outcome="appointment", response_time=30, sentiment=0.9),
        _make_call("c2", duration=300, outcome="interested", response_time=45, sentiment=0.6),
        _make_call("c3", duration=0, status="no-answer", response_time=None),
        _make_call("c4", duration=180, outcome="not-interested", response_time=120, sentiment=0.2),
        _make_call("c5", duration=0, status="failed", response_time=None),
    ]


def _call_payload(call: Call) -> dict:
    return {
        "id": call.id,
        "client_id": call.client_id,
        "agent_id": call.agent_id,
        "call_duration_seconds": call.call_duration_seconds,
        "call_status": call.call_status,
        "call_outcome": call.call_outcome,
        "response_time_sec": call.response_time_sec,
        "sentiment_score": call.sentiment_score,
        "cost_eur": call.cost_eur,
        "created_at": call.created_at.isoformat(),
    }


@pytest.fixture
def make_call():
    """Factory for call records"""
    return _make_call


@pytest.fixture
def call_payload():
    """Serializer turning a call record into its JSON body"""
    return _call_payload
