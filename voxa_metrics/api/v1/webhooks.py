"""POST /v1/webhooks/summary - webhook delivery statistics"""

from dataclasses import asdict
from fastapi import APIRouter

from voxa_metrics.api.v1.schemas import WebhookSummaryRequest, WebhookSummaryResponse
from voxa_metrics.domain.webhooks import summarize_webhook_deliveries

router = APIRouter()


@router.post("/webhooks/summary", response_model=WebhookSummaryResponse)
def webhook_summary(request_body: WebhookSummaryRequest):
    """
    Success and failure counts over the webhook logs supplied.

    Returns:
        Totals, success rate and mean response time in ms
    """
    logs = [log.to_domain() for log in request_body.logs]
    return WebhookSummaryResponse(**asdict(summarize_webhook_deliveries(logs)))
