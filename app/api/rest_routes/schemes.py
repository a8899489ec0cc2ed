from typing import List

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.models.common import RequestContext
from app.models.scheme import Scheme, SchemeProfile
from app.services.fallbacks import SCHEMES
from app.services.insight_service import scheme_recommendation

router = APIRouter(prefix="/schemes", tags=["Schemes"])


class SchemeRecommendationRequest(BaseModel):
    profile: SchemeProfile
    context: RequestContext = Field(default_factory=RequestContext)


class SchemeRecommendationResponse(BaseModel):
    recommendation: str


@router.get("/", response_model=List[Scheme], response_model_exclude_none=True)
async def list_schemes():
    return SCHEMES


@router.post("/recommendation", response_model=SchemeRecommendationResponse)
async def recommend_schemes(request: SchemeRecommendationRequest):
    """
    Free-text eligibility advice for the given farmer profile.
    """
    recommendation = await scheme_recommendation(request.profile, request.context)
    return SchemeRecommendationResponse(recommendation=recommendation)
