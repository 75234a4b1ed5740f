"""
Input Validation Module (v1.0.0)
Turns raw request values into UserInputs before they reach the engine.
"""
import logging
from enum import Enum
from typing import Optional, Type, TypeVar

from outfit_service.config import get_settings
from outfit_service.core.models import UserInputs, WeatherObservation, OutfitRecommendation
from outfit_service.core.rules import Occasion, StylePreference, Mood, Condition

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Accepted spellings of "no mood preference"
NO_MOOD_VALUES = {"", "none", "no preference"}


class ValidationError(Exception):
    """Custom exception for validation errors."""
    def __init__(self, message: str, status_code: int = 422):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


def parse_enum(enum_type: Type[E], value: Optional[str], field: str) -> E:
    """
    Parse a case/whitespace-insensitive enum value.

    Raises:
        ValidationError: If value is not a member of enum_type
    """
    normalized = (value or "").strip().lower()
    try:
        return enum_type(normalized)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type if member.value)
        raise ValidationError(f"Invalid {field}: {value!r}. Allowed: {allowed}")


def parse_mood(value: Optional[str]) -> Mood:
    if value is None or value.strip().lower() in NO_MOOD_VALUES:
        return Mood.NONE
    return parse_enum(Mood, value, "mood")


def normalize_location(location: Optional[str]) -> str:
    """Trim the location, falling back to the configured default when blank."""
    stripped = (location or "").strip()
    return stripped or get_settings().default_location


def parse_user_inputs(
    location: Optional[str],
    occasion: Optional[str],
    style_preference: Optional[str],
    mood: Optional[str] = None
) -> UserInputs:
    """
    Build UserInputs from raw request values.

    Raises:
        ValidationError: If occasion, style or mood is outside its domain
    """
    inputs = UserInputs(
        location=normalize_location(location),
        occasion=parse_enum(Occasion, occasion, "occasion"),
        style_preference=parse_enum(StylePreference, style_preference, "style_preference"),
        mood=parse_mood(mood),
    )
    logger.debug(f"Parsed inputs: {inputs.to_dict()}")
    return inputs


def parse_weather(data: dict) -> WeatherObservation:
    """
    Rebuild a WeatherObservation sent back by a client (used by shuffle).

    Raises:
        ValidationError: If fields are missing or the condition is unknown
    """
    try:
        return WeatherObservation(
            temperature=int(data["temperature"]),
            condition=parse_enum(Condition, data["condition"], "condition"),
            description=str(data["description"]),
            humidity=int(data["humidity"]),
            city=str(data["city"]),
            icon=str(data["icon"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid weather: {e}")


def parse_recommendation(data: dict) -> OutfitRecommendation:
    """
    Rebuild an OutfitRecommendation sent back by a client.

    Raises:
        ValidationError: If fields are missing
    """
    try:
        return OutfitRecommendation(
            title=str(data["title"]),
            description=str(data["description"]),
            items=tuple(data["items"]),
            tips=tuple(data["tips"]),
            color_palette=tuple(data["color_palette"]),
        )
    except (KeyError, TypeError) as e:
        raise ValidationError(f"Invalid recommendation: {e}")
