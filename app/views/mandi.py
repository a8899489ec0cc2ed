from app.models.mandi import PriceQuote
from app.services.fallbacks import mock_prices
from app.services.insight_service import mandi_prices
from app.views.base import BaseView


class MandiView(BaseView):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.prices: list[PriceQuote] = mock_prices()

    @property
    def chart_data(self) -> list[dict]:
        return [
            {"name": quote.crop[:3], "price": quote.price, "full_name": quote.crop}
            for quote in self.prices
        ]

    async def refresh(self) -> bool:
        ticket = self._guard.begin("prices")
        self.loading = True
        prices = await mandi_prices(self.context)
        if not self._guard.is_current("prices", ticket):
            return False
        # An empty result keeps whatever list is on screen
        if prices:
            self.prices = prices
        self.loading = False
        return True
