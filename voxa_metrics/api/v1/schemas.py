"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from typing import Dict, List, Optional

from voxa_metrics.domain.models import Plan, Client, Agent, Call, WebhookLog


class RecordSchema(BaseModel):
    """Base for inbound records, rejects inf and NaN in float fields"""

    model_config = ConfigDict(allow_inf_nan=False)


class PlanSchema(RecordSchema):
    """Plan tier as stored by the dashboard backend"""

    id: str = Field(..., min_length=1)
    name: str
    included_cost_eur: float = Field(..., ge=0)
    rate_eur_per_min: float = Field(..., ge=0)
    overage_markup: float = Field(0, ge=0, description="Fraction added to overage, 0.2 = 20%")
    reset_day: int = Field(1, ge=1, le=31)

    def to_domain(self) -> Plan:
        return Plan(**self.model_dump())


class ClientSchema(RecordSchema):
    """Client with optional per-client pricing overrides"""

    id: str = Field(..., min_length=1)
    company_name: str
    plan_id: str
    custom_rate_eur_per_min: Optional[float] = Field(None, ge=0)
    custom_included_cost_eur: Optional[float] = Field(None, ge=0)
    total_minutes_used: float = 0
    monthly_minute_limit: float = 0
    avg_deal_value: Optional[float] = Field(None, ge=0)

    def to_domain(self) -> Client:
        return Client(**self.model_dump())


class AgentSchema(BaseModel):
    id: str = Field(..., min_length=1)
    name: str

    def to_domain(self) -> Agent:
        return Agent(**self.model_dump())


class CallSchema(RecordSchema):
    """Single AI call record"""

    id: str = Field(..., min_length=1)
    client_id: str
    agent_id: str
    call_duration_seconds: int = Field(0, ge=0, description="0 when no connection was made")
    call_status: str
    call_outcome: Optional[str] = None
    response_time_sec: Optional[float] = Field(None, ge=0, description="Seconds from lead signal to call")
    sentiment_score: Optional[float] = Field(None, ge=0, le=1)
    cost_eur: Optional[float] = None
    created_at: datetime

    def to_domain(self) -> Call:
        return Call(**self.model_dump())


class WebhookLogSchema(RecordSchema):
    id: str = Field(..., min_length=1)
    client_id: Optional[str] = None
    event_type: Optional[str] = None
    status: str
    response_time_ms: Optional[float] = Field(None, ge=0)
    created_at: datetime

    def to_domain(self) -> WebhookLog:
        return WebhookLog(**self.model_dump())


class CallsRequest(RecordSchema):
    """Request body carrying a set of calls"""

    calls: List[CallSchema] = Field(default_factory=list)

    def domain_calls(self) -> List[Call]:
        return [call.to_domain() for call in self.calls]


class UsageRequest(CallsRequest):
    """Request body for POST /v1/usage"""

    client: ClientSchema
    plan: PlanSchema


class UsageResponse(BaseModel):
    """Response for POST /v1/usage"""

    client_id: str
    minutes: float
    used_cost: float
    included_cost: float
    overage_cost_raw: float
    overage_billable: float
    percentage_used: float
    status: str
    rate: float


class UsageReportRequest(UsageRequest):
    """Request body for POST /v1/usage/report"""

    agents: List[AgentSchema] = Field(default_factory=list)
    as_of: Optional[date] = Field(None, description="Day the month-end projection starts from, defaults to today")


class UsageProjectionSchema(BaseModel):
    days_elapsed: int
    days_remaining: int
    month_calls: int
    avg_calls_per_day: float
    avg_minutes_per_day: float
    projected_minutes: float
    projected_cost: float
    projected_overage: float


class AgentUsageSchema(BaseModel):
    agent_id: str
    name: str
    calls: int
    minutes: float
    cost: float


class UsageReportResponse(BaseModel):
    """Response for POST /v1/usage/report"""

    usage: UsageResponse
    projection: UsageProjectionSchema
    agents: List[AgentUsageSchema]
    minute_quota_percentage: int


class GoldenWindowResponse(BaseModel):
    percentage: float
    within_window: int
    outside_window: int
    median_response_time: int


class ConversionResponse(BaseModel):
    conversion_rate: float
    appointments: int
    qualified: int
    not_interested: int


class RevenueRequest(CallsRequest):
    """Request body for POST /v1/metrics/revenue"""

    avg_deal_value: Optional[float] = Field(0, ge=0)


class RevenueResponse(BaseModel):
    revenue: float


class SentimentResponse(BaseModel):
    positive: int
    neutral: int
    negative: int
    average: float


class ShareSchema(BaseModel):
    count: int
    percentage: float


class AgentPerformanceSchema(BaseModel):
    agent_id: str
    name: str
    total_calls: int
    appointments: int
    conversion_rate: float
    golden_window_percentage: float
    total_minutes: int


class ClientPerformanceSchema(BaseModel):
    client_id: str
    company_name: str
    total_calls: int
    appointments: int
    conversion_rate: float
    revenue: float


class WeeklyConversionSchema(BaseModel):
    week_start: date
    conversion_rate: float


class MonthlyRevenueSchema(BaseModel):
    month: date
    costs: float
    value: float
    margin: float


class OverviewRequest(CallsRequest):
    """Request body for POST /v1/analytics/overview"""

    clients: List[ClientSchema] = Field(default_factory=list)
    agents: List[AgentSchema] = Field(default_factory=list)
    as_of: Optional[date] = Field(None, description="Reference day for the series, defaults to today")


class OverviewResponse(BaseModel):
    """Response for POST /v1/analytics/overview"""

    total_calls: int
    total_minutes: float
    conversion: ConversionResponse
    golden_window: GoldenWindowResponse
    total_revenue: float
    outcomes: Dict[str, ShareSchema]
    statuses: Dict[str, ShareSchema]
    agents: List[AgentPerformanceSchema]
    clients: List[ClientPerformanceSchema]
    weekly_conversion: List[WeeklyConversionSchema]
    monthly_revenue: List[MonthlyRevenueSchema]


class DailySeriesRequest(CallsRequest):
    """Request body for POST /v1/analytics/daily"""

    start: date
    end: date


class DailyCallStatsSchema(BaseModel):
    day: date
    calls: int
    successful: int
    failed: int
    minutes: float


class DailySeriesResponse(BaseModel):
    start: date
    end: date
    days: List[DailyCallStatsSchema]


class WebhookSummaryRequest(BaseModel):
    """Request body for POST /v1/webhooks/summary"""

    logs: List[WebhookLogSchema] = Field(default_factory=list)


class WebhookSummaryResponse(BaseModel):
    total: int
    success: int
    failure: int
    success_rate: float
    avg_response_time_ms: int
