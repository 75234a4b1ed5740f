"""
Weather Service (v1.0.0)
Open-Meteo integration (geocoding + current forecast) for outfit recommendations.

Lookups never raise: any failure degrades to a default observation so the
user always gets a recommendation.
"""
import math
import logging
from typing import Optional, Tuple

import httpx
import requests

from outfit_service.config import get_settings
from outfit_service.core.models import WeatherObservation
from outfit_service.core.rules import Condition
from outfit_service.observability import record_weather_lookup

logger = logging.getLogger(__name__)

# Weather codes in [200, 600) are thunderstorm / drizzle / rain
RAIN_CODE_MIN = 200
RAIN_CODE_MAX = 600

HOT_MIN_TEMP = 30
WARM_MIN_TEMP = 22
MILD_MIN_TEMP = 12

WEATHER_ICONS = {
    Condition.HOT: "🌡️",
    Condition.WARM: "☀️",
    Condition.MILD: "🌤️",
    Condition.COLD: "❄️",
    Condition.RAINY: "🌧️",
}

DESCRIPTION_TEMPLATES = {
    Condition.HOT: "Hot day at {t}°C - stay cool!",
    Condition.WARM: "Warm and pleasant at {t}°C",
    Condition.MILD: "Comfortable {t}°C - perfect for layers",
    Condition.COLD: "Chilly {t}°C - bundle up!",
    Condition.RAINY: "Rainy conditions at {t}°C - bring an umbrella",
}

FORECAST_FIELDS = "temperature_2m,relative_humidity_2m,weather_code"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (22.5 -> 23)."""
    return int(math.floor(value + 0.5))


def classify_condition(temperature: float, weather_code: int) -> Condition:
    """
    Derive the weather bucket from temperature and weather code.

    Rain codes win over temperature. Temperature bounds are inclusive.
    """
    if RAIN_CODE_MIN <= weather_code < RAIN_CODE_MAX:
        return Condition.RAINY

    if temperature >= HOT_MIN_TEMP:
        return Condition.HOT
    if temperature >= WARM_MIN_TEMP:
        return Condition.WARM
    if temperature >= MILD_MIN_TEMP:
        return Condition.MILD
    return Condition.COLD


def weather_icon(condition: Condition) -> str:
    return WEATHER_ICONS[condition]


def describe_weather(condition: Condition, temperature: int) -> str:
    """Human-readable weather line, e.g. "Chilly 5°C - bundle up!"."""
    return DESCRIPTION_TEMPLATES[condition].format(t=temperature)


def default_observation(city: str) -> WeatherObservation:
    """Fallback weather used whenever a lookup fails."""
    return WeatherObservation(
        temperature=22,
        condition=Condition.MILD,
        description="Pleasant weather",
        humidity=50,
        city=city,
        icon=weather_icon(Condition.MILD),
    )


def build_observation(
    temperature: float,
    humidity: float,
    weather_code: int,
    city: str
) -> WeatherObservation:
    """Normalize raw forecast values into a WeatherObservation."""
    rounded = round_half_up(temperature)
    condition = classify_condition(rounded, int(weather_code))

    return WeatherObservation(
        temperature=rounded,
        condition=condition,
        description=describe_weather(condition, rounded),
        humidity=round_half_up(humidity),
        city=city,
        icon=weather_icon(condition),
    )


def _geocode_params(location: str) -> dict:
    return {"name": location, "count": 1, "language": "en", "format": "json"}


def _forecast_params(latitude: float, longitude: float) -> dict:
    return {
        "latitude": latitude,
        "longitude": longitude,
        "current": FORECAST_FIELDS,
        "timezone": "auto",
    }


def _parse_geocode(data: dict) -> Optional[Tuple[float, float, str]]:
    """Return (latitude, longitude, name) of the first match, or None."""
    results = data.get("results") or []
    if not results:
        return None

    first = results[0]
    return float(first["latitude"]), float(first["longitude"]), first["name"]


def _parse_forecast(data: dict, city: str) -> WeatherObservation:
    current = data["current"]
    return build_observation(
        temperature=current["temperature_2m"],
        humidity=current["relative_humidity_2m"],
        weather_code=current["weather_code"],
        city=city,
    )


async def _fetch_weather(client: httpx.AsyncClient, location: str) -> Optional[WeatherObservation]:
    settings = get_settings()

    geo_response = await client.get(settings.geocoding_url, params=_geocode_params(location))
    if not geo_response.is_success:
        logger.error(f"Geocoding failed for {location}: HTTP {geo_response.status_code}")
        return None

    match = _parse_geocode(geo_response.json())
    if match is None:
        logger.warning(f'City "{location}" not found, using defaults')
        return None

    latitude, longitude, name = match

    forecast_response = await client.get(
        settings.forecast_url,
        params=_forecast_params(latitude, longitude)
    )
    if not forecast_response.is_success:
        logger.error(f"Weather fetch failed for {name}: HTTP {forecast_response.status_code}")
        return None

    return _parse_forecast(forecast_response.json(), name)


async def resolve_weather(
    location: str,
    client: Optional[httpx.AsyncClient] = None
) -> WeatherObservation:
    """
    Fetch current weather for a free-text location.

    Args:
        location: Place name (e.g., "Istanbul", "London", "New York")
        client: Optional shared httpx client, one is created per call otherwise

    Returns:
        WeatherObservation for the resolved city, or the default
        observation (with city=location) if any lookup fails
    """
    observation = None

    try:
        if client is not None:
            observation = await _fetch_weather(client, location)
        else:
            async with httpx.AsyncClient(timeout=get_settings().http_timeout) as own_client:
                observation = await _fetch_weather(own_client, location)

    except httpx.TimeoutException:
        logger.warning(f"Weather API timeout for {location}")
    except httpx.HTTPError as e:
        logger.error(f"Weather API error for {location}: {e}")
    except (ValueError, KeyError, TypeError) as e:
        logger.error(f"Unexpected weather payload for {location}: {e}")
    except Exception as e:
        logger.error(f"Weather API error for {location}: {e}")

    record_weather_lookup(fallback=observation is None)

    if observation is None:
        return default_observation(location)

    logger.info(f"Weather: {observation.city} - {observation.temperature}°C, {observation.condition.value}")
    return observation


def resolve_weather_sync(location: str) -> WeatherObservation:
    """
    Synchronous version of resolve_weather.
    Uses requests instead of httpx for sync context.
    """
    settings = get_settings()
    observation = None

    try:
        geo_response = requests.get(
            settings.geocoding_url,
            params=_geocode_params(location),
            timeout=settings.http_timeout
        )

        if geo_response.ok:
            match = _parse_geocode(geo_response.json())
            if match is None:
                logger.warning(f'City "{location}" not found, using defaults')
            else:
                latitude, longitude, name = match
                forecast_response = requests.get(
                    settings.forecast_url,
                    params=_forecast_params(latitude, longitude),
                    timeout=settings.http_timeout
                )
                if forecast_response.ok:
                    observation = _parse_forecast(forecast_response.json(), name)
                else:
                    logger.error(f"Weather fetch failed for {name}: HTTP {forecast_response.status_code}")
        else:
            logger.error(f"Geocoding failed for {location}: HTTP {geo_response.status_code}")

    except requests.RequestException as e:
        logger.error(f"Weather sync error for {location}: {e}")
    except (ValueError, KeyError, TypeError) as e:
        logger.error(f"Unexpected weather payload for {location}: {e}")
    except Exception as e:
        logger.error(f"Weather API error for {location}: {e}")

    record_weather_lookup(fallback=observation is None)

    if observation is None:
        return default_observation(location)
    return observation
