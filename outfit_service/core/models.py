"""
Recommendation Data Model (v1.0.0)
Immutable value types passed between the weather resolver and the engine.
"""
from dataclasses import dataclass
from typing import Tuple

from outfit_service.core.rules import Occasion, StylePreference, Mood, Condition


@dataclass(frozen=True)
class UserInputs:
    """One request's worth of user choices."""
    location: str
    occasion: Occasion
    style_preference: StylePreference
    mood: Mood = Mood.NONE

    def to_dict(self) -> dict:
        return {
            "location": self.location,
            "occasion": self.occasion.value,
            "style_preference": self.style_preference.value,
            "mood": self.mood.value,
        }


@dataclass(frozen=True)
class WeatherObservation:
    """Normalized current weather for a location."""
    temperature: int  # °C, rounded
    condition: Condition
    description: str
    humidity: int  # percent
    city: str
    icon: str

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature,
            "condition": self.condition.value,
            "description": self.description,
            "humidity": self.humidity,
            "city": self.city,
            "icon": self.icon,
        }


@dataclass(frozen=True)
class OutfitRecommendation:
    """A generated outfit suggestion."""
    title: str
    description: str
    items: Tuple[str, ...]
    tips: Tuple[str, ...]
    color_palette: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "items": list(self.items),
            "tips": list(self.tips),
            "color_palette": list(self.color_palette),
        }
