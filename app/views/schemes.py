from typing import Optional

from app.models.scheme import Scheme, SchemeProfile
from app.services.fallbacks import SCHEMES
from app.services.insight_service import scheme_recommendation
from app.views.base import BaseView


class SchemesView(BaseView):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.schemes: list[Scheme] = list(SCHEMES)
        self.recommendation: Optional[str] = None

    async def check_eligibility(self, profile: SchemeProfile) -> bool:
        ticket = self._guard.begin("recommendation")
        self.loading = True
        recommendation = await scheme_recommendation(profile, self.context)
        if not self._guard.is_current("recommendation", ticket):
            return False
        self.recommendation = recommendation
        self.loading = False
        return True
