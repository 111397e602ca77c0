"""POST /v1/metrics/* - call outcome metrics over a set of calls"""

from dataclasses import asdict
from fastapi import APIRouter, Depends

from voxa_metrics.api.v1.schemas import (
    CallsRequest,
    RevenueRequest,
    GoldenWindowResponse,
    ConversionResponse,
    RevenueResponse,
    SentimentResponse,
)
from voxa_metrics.api.dependencies import get_settings
from voxa_metrics.config import Settings
from voxa_metrics.domain.metrics import (
    compute_golden_window,
    compute_conversion,
    estimate_revenue,
    compute_sentiment_distribution,
)
from voxa_metrics.infrastructure.observability.metrics import record_calls_processed

router = APIRouter()


@router.post("/metrics/golden-window", response_model=GoldenWindowResponse)
def golden_window(request_body: CallsRequest, settings: Settings = Depends(get_settings)):
    """
    Share of calls placed within the golden window.

    Calls without a response time count as outside the window.
    """
    calls = request_body.domain_calls()
    record_calls_processed("golden_window", len(calls))
    result = compute_golden_window(
        calls,
        window_seconds=settings.golden_window_seconds,
        missing_response_time=settings.missing_response_time_sec,
    )
    return GoldenWindowResponse(**asdict(result))


@router.post("/metrics/conversion", response_model=ConversionResponse)
def conversion(request_body: CallsRequest):
    calls = request_body.domain_calls()
    record_calls_processed("conversion", len(calls))
    return ConversionResponse(**asdict(compute_conversion(calls)))


@router.post("/metrics/revenue", response_model=RevenueResponse)
def revenue(request_body: RevenueRequest):
    """Estimated revenue: appointments times average deal value"""
    calls = request_body.domain_calls()
    record_calls_processed("revenue", len(calls))
    return RevenueResponse(revenue=estimate_revenue(calls, request_body.avg_deal_value))


@router.post("/metrics/sentiment", response_model=SentimentResponse)
def sentiment(request_body: CallsRequest):
    calls = request_body.domain_calls()
    record_calls_processed("sentiment", len(calls))
    return SentimentResponse(**asdict(compute_sentiment_distribution(calls)))
