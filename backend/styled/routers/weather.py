from typing import Optional

from fastapi import APIRouter, Query

from styled.schemas import WeatherAdviceResponse, WeatherResponse
from styled.utils.weather import fetch_weather, generate_weather_rationale, get_weather_clothing_suggestions

router = APIRouter()


@router.get("", response_model=WeatherResponse)
def get_weather(
    city: Optional[str] = Query(None, description="City name, e.g. 'Denver'"),
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lon: Optional[float] = Query(None, ge=-180, le=180),
):
    """Current weather; coordinates win over city. Falls back to a fixed record on any upstream failure."""
    result = fetch_weather(city=city, lat=lat, lon=lon)
    return WeatherResponse(weather=result.weather, is_fallback=result.is_fallback)


@router.get("/advice", response_model=WeatherAdviceResponse)
def get_weather_advice(
    city: Optional[str] = Query(None),
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lon: Optional[float] = Query(None, ge=-180, le=180),
):
    """Current weather plus clothing suggestions and a short rationale."""
    result = fetch_weather(city=city, lat=lat, lon=lon)
    return WeatherAdviceResponse(
        weather=result.weather,
        is_fallback=result.is_fallback,
        suggestions=get_weather_clothing_suggestions(result.weather),
        rationale=generate_weather_rationale(result.weather),
    )
