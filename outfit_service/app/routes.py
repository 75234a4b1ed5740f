"""
API Routes for Outfit Service v1.0.0
Weather lookup, outfit recommendation and regeneration.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from outfit_service.config import get_settings
from outfit_service.core.rules import get_options
from outfit_service.core.validation import (
    ValidationError,
    parse_user_inputs,
    parse_weather,
    parse_recommendation,
    normalize_location,
)
from outfit_service.core.orchestrator import recommend, regenerate
from outfit_service.services.weather import resolve_weather
from outfit_service.observability import get_metrics, is_logging_enabled

logger = logging.getLogger(__name__)

router = APIRouter()

VERSION = "1.0.0"


# ==================== REQUEST MODELS ====================

class RecommendationRequest(BaseModel):
    location: str = ""
    occasion: str
    style_preference: str
    mood: Optional[str] = None


class WeatherPayload(BaseModel):
    temperature: int
    condition: str
    description: str
    humidity: int
    city: str
    icon: str


class RecommendationPayload(BaseModel):
    title: str
    description: str
    items: List[str]
    tips: List[str]
    color_palette: List[str]


class ShuffleRequest(BaseModel):
    inputs: RecommendationRequest
    weather: WeatherPayload
    previous: Optional[RecommendationPayload] = None


def _parse_inputs(body: RecommendationRequest):
    return parse_user_inputs(
        location=body.location,
        occasion=body.occasion,
        style_preference=body.style_preference,
        mood=body.mood,
    )


# ==================== PUBLIC ENDPOINTS ====================

@router.get("/health")
async def health_check():
    """Health check with observability info."""
    settings = get_settings()
    metrics = get_metrics()

    return {
        "status": "ok",
        "version": VERSION,
        "weather": {
            "geocoding_url": settings.geocoding_url,
            "forecast_url": settings.forecast_url,
            "timeout": settings.http_timeout,
        },
        "observability": {
            "logging_enabled": is_logging_enabled(),
            "recommendations": metrics["recommendations"],
            "weather_fallback_ratio": metrics["weather_fallback_ratio"],
        },
    }


@router.get("/metrics")
async def get_metrics_endpoint():
    """Get detailed metrics for monitoring."""
    return JSONResponse(content=get_metrics())


@router.get("/api/options")
async def list_options():
    """Selectable occasions, styles and moods with display labels."""
    return get_options()


# ==================== WEATHER ====================

@router.get("/api/weather")
async def get_weather_endpoint(location: str = Query("", description="City or place name")):
    """Current weather for a location. Falls back to defaults, never errors."""
    weather = await resolve_weather(normalize_location(location))
    return weather.to_dict()


# ==================== RECOMMENDATIONS ====================

@router.post("/api/recommendation")
async def create_recommendation(body: RecommendationRequest):
    """Resolve weather for the location and generate an outfit."""
    try:
        inputs = _parse_inputs(body)
    except ValidationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    weather, recommendation = await recommend(inputs)

    return {
        "inputs": inputs.to_dict(),
        "weather": weather.to_dict(),
        "recommendation": recommendation.to_dict(),
    }


@router.post("/api/recommendation/shuffle")
async def shuffle_recommendation_endpoint(body: ShuffleRequest):
    """Regenerate an outfit for the same inputs and weather in a new order."""
    try:
        inputs = _parse_inputs(body.inputs)
        weather = parse_weather(body.weather.model_dump())
        previous = parse_recommendation(body.previous.model_dump()) if body.previous else None
    except ValidationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    recommendation = regenerate(inputs, weather, previous)

    return {
        "inputs": inputs.to_dict(),
        "weather": weather.to_dict(),
        "recommendation": recommendation.to_dict(),
    }
