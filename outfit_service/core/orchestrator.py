"""
Recommendation Orchestrator (v1.0.0)
Runs the full flow: resolve weather -> generate outfit, plus regeneration.
"""
import time
import uuid
import random
import logging
from typing import Optional, Tuple

import httpx

from outfit_service.core.models import UserInputs, WeatherObservation, OutfitRecommendation
from outfit_service.core.recommender import generate_recommendation, shuffle_recommendation
from outfit_service.services.weather import resolve_weather, default_observation
from outfit_service.observability import log_request, record_recommendation

logger = logging.getLogger(__name__)


def _is_fallback(inputs: UserInputs, weather: WeatherObservation) -> bool:
    return weather == default_observation(inputs.location)


async def recommend(
    inputs: UserInputs,
    client: Optional[httpx.AsyncClient] = None
) -> Tuple[WeatherObservation, OutfitRecommendation]:
    """
    Resolve weather for the user's location and generate a recommendation.

    Args:
        inputs: Parsed user inputs
        client: Optional httpx client passed through to the weather lookup

    Returns:
        (weather, recommendation)
    """
    request_id = uuid.uuid4().hex[:12]
    start = time.time()

    weather = await resolve_weather(inputs.location, client=client)

    try:
        recommendation = generate_recommendation(inputs, weather)
    except Exception as e:
        log_request(
            request_id=request_id,
            kind="recommend",
            location=inputs.location,
            city=weather.city,
            condition=weather.condition.value,
            weather_fallback=_is_fallback(inputs, weather),
            latency_ms=int((time.time() - start) * 1000),
            status="fail",
            error=str(e),
        )
        logger.error(f"[{request_id}] Recommendation failed: {e}")
        raise

    latency_ms = int((time.time() - start) * 1000)
    record_recommendation(inputs.occasion.value)
    log_request(
        request_id=request_id,
        kind="recommend",
        location=inputs.location,
        city=weather.city,
        condition=weather.condition.value,
        weather_fallback=_is_fallback(inputs, weather),
        latency_ms=latency_ms,
        status="success",
    )

    logger.info(f"[{request_id}] {recommendation.title} for {weather.city} ({latency_ms}ms)")
    return weather, recommendation


def regenerate(
    inputs: UserInputs,
    weather: WeatherObservation,
    previous: Optional[OutfitRecommendation] = None,
    rng: Optional[random.Random] = None
) -> OutfitRecommendation:
    """Shuffle a recommendation for the same inputs and weather. No network calls."""
    request_id = uuid.uuid4().hex[:12]
    start = time.time()

    try:
        recommendation = shuffle_recommendation(inputs, weather, previous, rng=rng)
    except Exception as e:
        log_request(
            request_id=request_id,
            kind="shuffle",
            location=inputs.location,
            city=weather.city,
            condition=weather.condition.value,
            weather_fallback=_is_fallback(inputs, weather),
            latency_ms=int((time.time() - start) * 1000),
            status="fail",
            error=str(e),
        )
        logger.error(f"[{request_id}] Shuffle failed: {e}")
        raise

    record_recommendation(inputs.occasion.value, shuffled=True)
    log_request(
        request_id=request_id,
        kind="shuffle",
        location=inputs.location,
        city=weather.city,
        condition=weather.condition.value,
        weather_fallback=_is_fallback(inputs, weather),
        latency_ms=int((time.time() - start) * 1000),
        status="success",
    )
    return recommendation
