from app.models.weather import WeatherSnapshot
from app.services.fallbacks import default_weather
from app.services.insight_service import weather_snapshot
from app.views.base import BaseView


class WeatherView(BaseView):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.weather: WeatherSnapshot = default_weather(self.language)

    async def refresh(self) -> bool:
        ticket = self._guard.begin("weather")
        self.loading = True
        weather = await weather_snapshot(self.context)
        if not self._guard.is_current("weather", ticket):
            return False
        self.weather = weather
        self.loading = False
        return True
