from typing import List

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.models.common import RequestContext
from app.models.mandi import PriceQuote
from app.services.fallbacks import mock_prices
from app.services.insight_service import mandi_prices

router = APIRouter(prefix="/mandi", tags=["Mandi"])


class MandiPricesRequest(BaseModel):
    context: RequestContext = Field(default_factory=RequestContext)
    limit: int = Field(default=8, ge=1, le=20)


class MandiPricesResponse(BaseModel):
    prices: List[PriceQuote]
    fallback: bool = Field(
        default=False, description="True when the list is indicative sample data"
    )


@router.post("/prices", response_model=MandiPricesResponse)
async def get_mandi_prices(request: MandiPricesRequest):
    """
    Latest modal prices around the selected district, replaced wholesale on every call.
    """
    prices = await mandi_prices(request.context, limit=request.limit)
    if not prices:
        return MandiPricesResponse(prices=mock_prices(), fallback=True)
    return MandiPricesResponse(prices=prices)
