from typing import Optional

from app.models.common import Language
from app.models.insight import Insight
from app.services.fallbacks import placeholder_insight
from app.services.insight_service import dashboard_insight, market_advisory
from app.views.base import BaseView, next_language


class HomeView(BaseView):
    """Dashboard: verdict card, price flow and risk radar for one district and crop."""

    def __init__(
        self,
        language: Language = Language.ENGLISH,
        district: str = "Mandya",
        crop: str = "Sugarcane",
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> None:
        super().__init__(language, district, crop, latitude, longitude)
        self.insight: Insight = placeholder_insight(language)
        self.advisory: Optional[str] = None

    async def refresh(self) -> bool:
        """Fetch a fresh insight. Returns False when a newer refresh superseded this one."""
        ticket = self._guard.begin("insight")
        self.loading = True
        insight = await dashboard_insight(self.context)
        if not self._guard.is_current("insight", ticket):
            return False
        self.insight = insight
        self.loading = False
        return True

    async def load_advisory(self) -> bool:
        ticket = self._guard.begin("advisory")
        advisory = await market_advisory(self.context)
        if not self._guard.is_current("advisory", ticket):
            return False
        self.advisory = advisory
        return True

    async def toggle_language(self) -> bool:
        self.set_language(next_language(self.language))
        return await self.refresh()

    async def select_district(self, district: str, crop: Optional[str] = None) -> bool:
        update = {"district": district}
        if crop:
            update["crop"] = crop
        self.context = self.context.model_copy(update=update)
        return await self.refresh()

    async def select_crop(self, crop: str) -> bool:
        self.context = self.context.model_copy(update={"crop": crop})
        return await self.refresh()
