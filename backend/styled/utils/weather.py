"""
Current weather lookup (OpenWeatherMap) and weather-driven clothing advice.

Lookups never fail hard: a missing API key, an unknown city, a timeout or an
upstream error all degrade to a fixed fallback record flagged is_fallback.
"""
import logging
from typing import NamedTuple, Optional

import requests

from styled.config import settings
from styled.core.exceptions import ValidationError
from styled.schemas.weather import ClothingSuggestions, WeatherData
from styled.utils.cache import get_cached_weather, set_cached_weather, weather_cache_key

logger = logging.getLogger(__name__)

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class WeatherResult(NamedTuple):
    weather: WeatherData
    is_fallback: bool


def get_fallback_weather(city: str) -> WeatherData:
    return WeatherData(
        temperature=72,
        feels_like=74,
        condition="Clear",
        description="clear sky",
        humidity=50,
        wind_speed=5,
        icon="01d",
        city=city,
        country="US",
    )


def _fallback(city: str) -> WeatherResult:
    return WeatherResult(get_fallback_weather(city), True)


def _parse_openweather(data: dict) -> WeatherData:
    condition = (data.get("weather") or [{}])[0]
    main = data.get("main") or {}
    return WeatherData(
        temperature=round(main["temp"]),
        feels_like=round(main.get("feels_like", main["temp"])),
        condition=condition.get("main", "Clear"),
        description=condition.get("description", ""),
        humidity=main.get("humidity", 0),
        wind_speed=round((data.get("wind") or {}).get("speed", 0)),
        icon=condition.get("icon", "01d"),
        city=data.get("name", ""),
        country=(data.get("sys") or {}).get("country", ""),
    )


def fetch_weather(city: Optional[str] = None, lat: Optional[float] = None, lon: Optional[float] = None) -> WeatherResult:
    """
    Current weather in imperial units; coordinates win over city when both are given.

    Raises:
        ValidationError: neither a city nor a full coordinate pair was provided
    """
    if not settings.OPENWEATHER_API_KEY:
        return _fallback(city or "Unknown")

    params = {"appid": settings.OPENWEATHER_API_KEY, "units": "imperial"}
    if lat is not None and lon is not None:
        params.update(lat=lat, lon=lon)
    elif city:
        params["q"] = city
    else:
        raise ValidationError("City or coordinates required")

    key = weather_cache_key(city, lat, lon)
    cached = get_cached_weather(key)
    if cached:
        return WeatherResult(WeatherData(**cached), False)

    try:
        response = requests.get(OPENWEATHER_URL, params=params, timeout=settings.WEATHER_TIMEOUT)
    except requests.RequestException as e:
        logger.warning(f"Weather API timeout or connection error, using fallback weather: {e}")
        return _fallback(city or "Miami")

    if response.status_code == 404:
        logger.info(f"City not found ({city}), using fallback weather")
        return _fallback(city or "Unknown")
    if response.status_code != 200:
        logger.error(f"Weather API error: {response.status_code}")
        return _fallback(city or "Miami")

    try:
        weather = _parse_openweather(response.json())
    except (ValueError, KeyError, TypeError) as e:
        logger.error(f"Unexpected weather payload: {e}")
        return _fallback(city or "Miami")

    set_cached_weather(key, weather.model_dump())
    return WeatherResult(weather, False)


def get_weather_clothing_suggestions(weather: WeatherData) -> ClothingSuggestions:
    temp = weather.temperature

    if temp >= 85:
        return ClothingSuggestions(
            layers="Single light layer",
            fabric_suggestions=["linen", "cotton", "lightweight breathable fabrics"],
            avoid_items=["jackets", "sweaters", "heavy fabrics", "dark colors"],
            accessories=["sunglasses", "hat", "light scarf for sun protection"],
        )
    if temp >= 70:
        return ClothingSuggestions(
            layers="Light layers, optional light jacket for evening",
            fabric_suggestions=["cotton", "light blends", "chambray"],
            avoid_items=["heavy coats", "wool", "thick sweaters"],
            accessories=["sunglasses", "light cardigan"],
        )
    if temp >= 55:
        return ClothingSuggestions(
            layers="Medium layers, bring a jacket",
            fabric_suggestions=["cotton", "light wool", "denim", "knits"],
            avoid_items=["tank tops alone", "shorts", "sandals"],
            accessories=["light jacket", "scarf"],
        )
    if temp >= 40:
        return ClothingSuggestions(
            layers="Multiple warm layers",
            fabric_suggestions=["wool", "cashmere", "fleece", "heavy cotton"],
            avoid_items=["light summer fabrics", "open-toe shoes"],
            accessories=["warm coat", "scarf", "gloves optional"],
        )
    return ClothingSuggestions(
        layers="Heavy insulated layers",
        fabric_suggestions=["wool", "down", "thermal fabrics", "fleece"],
        avoid_items=["thin fabrics", "exposed skin"],
        accessories=["heavy coat", "scarf", "gloves", "hat", "warm boots"],
    )


def generate_weather_rationale(weather: WeatherData) -> str:
    """One paragraph of weather advice to show alongside an outfit"""
    suggestions = get_weather_clothing_suggestions(weather)
    condition = weather.condition.lower()

    rationale = f"Current weather in {weather.city}: {weather.temperature}°F and {weather.description}. "
    if abs(weather.feels_like - weather.temperature) >= 5:
        rationale += f"Feels like {weather.feels_like}°F. "
    rationale += f"Recommended: {suggestions.layers}. "

    if "rain" in condition or "drizzle" in condition:
        rationale += "Consider water-resistant outerwear and closed-toe shoes. "
    elif "snow" in condition:
        rationale += "Waterproof boots and warm layers essential. "
    elif "wind" in condition:
        rationale += "A wind-resistant outer layer recommended. "
    elif "clear" in condition or "sun" in condition:
        rationale += "Great day for your favorite pieces! "

    return rationale.strip()
