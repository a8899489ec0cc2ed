from typing import Optional

from pydantic import BaseModel, Field


class WeatherSnapshot(BaseModel):
    temp: int = Field(..., description="Temperature in Celsius")
    condition: str = Field(..., min_length=1)
    humidity: int = Field(..., description="Relative humidity percentage")
    wind_speed: int = Field(..., description="Wind speed in km/h")
    advisory: str = Field(..., description="One line farming advisory for the conditions")
    rain_chance: Optional[int] = Field(default=None, description="Chance of rain percentage")
