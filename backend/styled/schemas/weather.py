"""
Weather schemas.
"""
from typing import List

from pydantic import BaseModel, Field


class WeatherData(BaseModel):
    """Current weather in imperial units"""
    temperature: int = Field(..., description="Temperature in °F")
    feels_like: int = Field(..., description="Apparent temperature in °F")
    condition: str
    description: str
    humidity: int
    wind_speed: int = Field(..., description="Wind speed in mph")
    icon: str
    city: str
    country: str


class WeatherResponse(BaseModel):
    success: bool = True
    weather: WeatherData
    is_fallback: bool = False


class ClothingSuggestions(BaseModel):
    """Temperature-band clothing guidance"""
    layers: str
    fabric_suggestions: List[str]
    avoid_items: List[str]
    accessories: List[str]


class WeatherAdviceResponse(WeatherResponse):
    suggestions: ClothingSuggestions
    rationale: str
