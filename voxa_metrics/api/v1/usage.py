"""POST /v1/usage and /v1/usage/report - billable usage and quota status for one client"""

import time
import logging
from dataclasses import asdict
from datetime import date
from typing import List, Tuple
from fastapi import APIRouter, HTTPException, Request

from voxa_metrics.api.v1.schemas import (
    UsageRequest,
    UsageResponse,
    UsageReportRequest,
    UsageReportResponse,
    UsageProjectionSchema,
    AgentUsageSchema,
)
from voxa_metrics.api.dependencies import get_request_id
from voxa_metrics.domain.models import Client, Plan, Call, UsageResult
from voxa_metrics.domain.usage import (
    compute_usage,
    validate_usage_inputs,
    project_usage,
    agent_usage_breakdown,
    minute_quota_percentage,
)
from voxa_metrics.domain.exceptions import PlanMismatchError, CallOwnershipError
from voxa_metrics.infrastructure.observability.metrics import record_usage, rejected_request_counter
from voxa_metrics.infrastructure.observability.logging import log_usage_computed

router = APIRouter()


def _bill(request_body: UsageRequest, request: Request) -> Tuple[Client, Plan, List[Call], UsageResult]:
    """
    Shared flow of the usage endpoints.

    Flow:
    1. Convert payload to domain records
    2. Check the plan and every call belong to the client
    3. Compute minutes, cost, overage and quota status
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    client = request_body.client.to_domain()
    plan = request_body.plan.to_domain()
    calls = request_body.domain_calls()

    try:
        validate_usage_inputs(client, plan, calls)
    except PlanMismatchError as e:
        rejected_request_counter.labels(reason="plan_mismatch").inc()
        logging.warning(f"Plan mismatch: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except CallOwnershipError as e:
        rejected_request_counter.labels(reason="call_ownership").inc()
        logging.warning(f"Foreign calls in usage request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    usage = compute_usage(client, plan, calls)

    duration_ms = (time.time() - start_time) * 1000
    record_usage(usage.status, len(calls))
    log_usage_computed(request_id, client.id, usage.status, usage.percentage_used, len(calls), duration_ms)

    return client, plan, calls, usage


def _usage_response(client: Client, usage: UsageResult) -> UsageResponse:
    return UsageResponse(client_id=client.id, **asdict(usage))


@router.post("/usage", response_model=UsageResponse)
def calculate_usage(request_body: UsageRequest, request: Request):
    """Compute usage for a client over the calls of its billing period."""
    client, _, _, usage = _bill(request_body, request)
    return _usage_response(client, usage)


@router.post("/usage/report", response_model=UsageReportResponse)
def usage_report(request_body: UsageReportRequest, request: Request):
    """
    Usage plus month-end projection, per-agent cost and minute quota.

    The calls supplied are taken as the month to date; the projection
    extrapolates from as_of (default today).
    """
    client, plan, calls, usage = _bill(request_body, request)
    agents = [agent.to_domain() for agent in request_body.agents]

    projection = project_usage(usage, plan, calls, request_body.as_of or date.today())
    breakdown = agent_usage_breakdown(calls, agents, usage.rate)

    return UsageReportResponse(
        usage=_usage_response(client, usage),
        projection=UsageProjectionSchema(**asdict(projection)),
        agents=[AgentUsageSchema(**asdict(entry)) for entry in breakdown],
        minute_quota_percentage=minute_quota_percentage(client),
    )
