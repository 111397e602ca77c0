"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, List, Literal, Optional

QuotaStatus = Literal["normal", "warning", "danger", "exceeded"]


@dataclass(frozen=True)
class Plan:
    """Subscription tier with its bundled allowance and per-minute rate"""

    id: str
    name: str
    included_cost_eur: float
    rate_eur_per_min: float
    overage_markup: float  # 0.2 = 20% on top of the excess
    reset_day: int = 1  # Informational, counters are reset externally


@dataclass(frozen=True)
class Client:
    """Tenant of the calling service"""

    id: str
    company_name: str
    plan_id: str
    custom_rate_eur_per_min: Optional[float] = None
    custom_included_cost_eur: Optional[float] = None
    total_minutes_used: float = 0
    monthly_minute_limit: float = 0
    avg_deal_value: Optional[float] = None


@dataclass(frozen=True)
class Agent:
    """Voice agent placing calls on behalf of clients"""

    id: str
    name: str


@dataclass(frozen=True)
class Call:
    """Single AI call record"""

    id: str
    client_id: str
    agent_id: str
    call_duration_seconds: int
    call_status: str  # "completed", "failed", "no-answer", "busy", ...
    created_at: datetime
    call_outcome: Optional[str] = None
    response_time_sec: Optional[float] = None
    sentiment_score: Optional[float] = None
    cost_eur: Optional[float] = None


@dataclass(frozen=True)
class WebhookLog:
    """Outbound webhook delivery attempt"""

    id: str
    client_id: Optional[str]
    event_type: Optional[str]
    status: str  # "success" or "failure"
    created_at: datetime
    response_time_ms: Optional[float] = None


@dataclass
class UsageResult:
    """Billable usage for one client over the calls supplied"""

    minutes: float
    used_cost: float
    included_cost: float
    overage_cost_raw: float
    overage_billable: float
    percentage_used: float
    status: QuotaStatus
    rate: float


@dataclass
class UsageProjection:
    """Month-end estimate extrapolated from the daily average so far"""

    days_elapsed: int
    days_remaining: int
    month_calls: int
    avg_calls_per_day: float
    avg_minutes_per_day: float
    projected_minutes: float
    projected_cost: float
    projected_overage: float


@dataclass
class AgentUsage:
    """Billable usage attributed to one agent"""

    agent_id: str
    name: str
    calls: int
    minutes: float
    cost: float

@dataclass
class GoldenWindowResult:
    """Response-latency compliance"""

    percentage: float
    within_window: int
    outside_window: int
    median_response_time: int


@dataclass
class ConversionResult:
    conversion_rate: float
    appointments: int
    qualified: int
    not_interested: int


@dataclass
class SentimentResult:
    positive: int
    neutral: int
    negative: int
    average: float


@dataclass
class Share:
    """Count of calls in a category and its share of the total"""

    count: int
    percentage: float


@dataclass
class AgentPerformance:
    agent_id: str
    name: str
    total_calls: int
    appointments: int
    conversion_rate: float
    golden_window_percentage: float
    total_minutes: int


@dataclass
class ClientPerformance:
    client_id: str
    company_name: str
    total_calls: int
    appointments: int
    conversion_rate: float
    revenue: float


@dataclass
class DailyCallStats:
    day: date
    calls: int
    successful: int
    failed: int
    minutes: float


@dataclass
class WeeklyConversion:
    week_start: date
    conversion_rate: float


@dataclass
class MonthlyRevenue:
    month: date  # First day of the month
    costs: float
    value: float
    margin: float


@dataclass
class WebhookSummary:
    total: int
    success: int
    failure: int
    success_rate: float
    avg_response_time_ms: int


@dataclass
class AnalyticsOverview:
    """Everything the admin analytics view shows for a set of calls"""

    total_calls: int
    total_minutes: float
    conversion: ConversionResult
    golden_window: GoldenWindowResult
    total_revenue: float
    outcomes: Dict[str, Share]
    statuses: Dict[str, Share]
    agents: List[AgentPerformance]
    clients: List[ClientPerformance]
    weekly_conversion: List[WeeklyConversion]
    monthly_revenue: List[MonthlyRevenue]
