"""
Outfit Recommender (v1.0.0)
Combines weather, occasion, style and mood rules into an outfit suggestion.

generate_recommendation() is deterministic.
shuffle_recommendation() reorders items and tips for a "regenerate" action.
"""
import random
import logging
from typing import Optional

from outfit_service.core.models import UserInputs, WeatherObservation, OutfitRecommendation
from outfit_service.core.rules import (
    Condition,
    StyleModifier,
    WEATHER_RULES,
    OCCASION_RULES,
    STYLE_MODIFIERS,
    MOOD_TIPS,
)

logger = logging.getLogger(__name__)

# How many entries each rule contributes
BASE_ITEM_COUNT = 2
OCCASION_ITEM_COUNT = 2
ACCESSORY_COUNT = 1
OCCASION_TIP_COUNT = 2
MOOD_TIP_COUNT = 1


def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def generate_title(inputs: UserInputs) -> str:
    """Build e.g. "Polished Work Look"."""
    style_word = STYLE_MODIFIERS[inputs.style_preference].adjectives[0]
    occasion_word = _capitalize_first(inputs.occasion.value)
    return f"{_capitalize_first(style_word)} {occasion_word} Look"


def generate_description(
    inputs: UserInputs,
    weather: WeatherObservation,
    style: StyleModifier
) -> str:
    """Build the main description sentence for the outfit."""
    if weather.condition is Condition.RAINY:
        weather_phrase = "rain-ready"
    elif weather.condition is Condition.COLD:
        weather_phrase = "cozy and warm"
    else:
        weather_phrase = "weather-appropriate"

    return (
        f"A {style.adjectives[0]} outfit perfect for {inputs.occasion.value}. "
        f"This {weather_phrase} ensemble combines comfort with style, "
        f"featuring versatile pieces that work beautifully together."
    )


def generate_recommendation(
    inputs: UserInputs,
    weather: WeatherObservation
) -> OutfitRecommendation:
    """
    Generate an outfit recommendation from user inputs and weather.

    Args:
        inputs: Occasion, style preference and mood chosen by the user
        weather: Current weather observation for the user's location

    Returns:
        OutfitRecommendation (same inputs always give the same result)
    """
    weather_clothing = WEATHER_RULES[weather.condition]
    occasion_rules = OCCASION_RULES[inputs.occasion]
    style = STYLE_MODIFIERS[inputs.style_preference]
    mood_tips = MOOD_TIPS[inputs.mood]

    items = (
        weather_clothing.base[:BASE_ITEM_COUNT]
        + occasion_rules.items[:OCCASION_ITEM_COUNT]
        + weather_clothing.accessories[:ACCESSORY_COUNT]
    )

    # Only tips are filtered for empty entries, items are kept as-is
    tips = (
        occasion_rules.tips[:OCCASION_TIP_COUNT]
        + mood_tips[:MOOD_TIP_COUNT]
        + (f"Consider {style.adjectives[0]} pieces for your {inputs.style_preference.value} style.",)
    )
    tips = tuple(tip for tip in tips if tip)

    recommendation = OutfitRecommendation(
        title=generate_title(inputs),
        description=generate_description(inputs, weather, style),
        items=items,
        tips=tips,
        color_palette=style.colors,
    )

    logger.debug(
        f"Generated '{recommendation.title}' for {weather.condition.value} weather "
        f"({len(items)} items, {len(tips)} tips)"
    )
    return recommendation


def shuffle_recommendation(
    inputs: UserInputs,
    weather: WeatherObservation,
    previous: Optional[OutfitRecommendation] = None,
    rng: Optional[random.Random] = None
) -> OutfitRecommendation:
    """
    Regenerate a recommendation with items and tips in a new random order.

    Args:
        inputs: Same inputs used for the previous recommendation
        weather: Same weather used for the previous recommendation
        previous: The recommendation being replaced (not used for content)
        rng: Random source, anything with a shuffle(list) method

    Returns:
        OutfitRecommendation with the same title, description and palette
    """
    rng = rng or random
    fresh = generate_recommendation(inputs, weather)

    items = list(fresh.items)
    tips = list(fresh.tips)
    rng.shuffle(items)
    rng.shuffle(tips)

    return OutfitRecommendation(
        title=fresh.title,
        description=fresh.description,
        items=tuple(items),
        tips=tuple(tips),
        color_palette=fresh.color_palette,
    )
