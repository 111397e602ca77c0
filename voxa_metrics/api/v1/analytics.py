"""POST /v1/analytics/* - admin overview and daily call series"""

import logging
from dataclasses import asdict
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request

from voxa_metrics.api.v1.schemas import (
    OverviewRequest,
    OverviewResponse,
    DailySeriesRequest,
    DailySeriesResponse,
    DailyCallStatsSchema,
)
from voxa_metrics.api.dependencies import get_request_id, get_settings
from voxa_metrics.config import Settings
from voxa_metrics.domain.analytics import build_overview
from voxa_metrics.domain.series import daily_call_series, validate_period
from voxa_metrics.domain.exceptions import InvalidPeriodError
from voxa_metrics.infrastructure.observability.metrics import record_calls_processed, rejected_request_counter

router = APIRouter()


@router.post("/analytics/overview", response_model=OverviewResponse)
def analytics_overview(request_body: OverviewRequest, settings: Settings = Depends(get_settings)):
    """
    Totals, distributions, rankings and chart series for the analytics view.

    Returns:
        Overview across all calls supplied, series ending at as_of (default today)
    """
    calls = request_body.domain_calls()
    record_calls_processed("overview", len(calls))

    overview = build_overview(
        calls,
        clients=[client.to_domain() for client in request_body.clients],
        agents=[agent.to_domain() for agent in request_body.agents],
        as_of=request_body.as_of or date.today(),
        weeks=settings.series_weeks,
        months=settings.series_months,
        window_seconds=settings.golden_window_seconds,
        missing_response_time=settings.missing_response_time_sec,
    )
    return OverviewResponse(**asdict(overview))


@router.post("/analytics/daily", response_model=DailySeriesResponse)
def daily_series(request_body: DailySeriesRequest, request: Request):
    """Calls, outcomes and minutes per day between start and end (inclusive)"""
    request_id = get_request_id(request)

    try:
        validate_period(request_body.start, request_body.end)
    except InvalidPeriodError as e:
        rejected_request_counter.labels(reason="invalid_period").inc()
        logging.warning(f"Invalid period: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    calls = request_body.domain_calls()
    record_calls_processed("daily", len(calls))

    days = [
        DailyCallStatsSchema(**asdict(point))
        for point in daily_call_series(calls, request_body.start, request_body.end)
    ]
    return DailySeriesResponse(start=request_body.start, end=request_body.end, days=days)
