from fastapi import APIRouter
from pydantic import BaseModel

from app.models.common import RequestContext
from app.models.insight import DecisionAction, Insight
from app.services.insight_service import dashboard_insight, market_advisory

router = APIRouter(prefix="/insights", tags=["Insights"])


class DashboardInsightResponse(BaseModel):
    action: DecisionAction
    insight: Insight


class MarketAdvisoryResponse(BaseModel):
    advisory: str


@router.post("/dashboard", response_model=DashboardInsightResponse)
async def get_dashboard_insight(context: RequestContext):
    """
    Sell/hold verdict, price flow and weather impact for the selected district and crop.
    """
    insight = await dashboard_insight(context)
    return DashboardInsightResponse(action=insight.action, insight=insight)


@router.post("/market-advisory", response_model=MarketAdvisoryResponse)
async def get_market_advisory(context: RequestContext):
    return MarketAdvisoryResponse(advisory=await market_advisory(context))
