# Core module
from outfit_service.core.rules import (
    Occasion,
    StylePreference,
    Mood,
    Condition,
    RuleTableError,
    WEATHER_RULES,
    OCCASION_RULES,
    STYLE_MODIFIERS,
    MOOD_TIPS,
    get_options,
)
from outfit_service.core.models import UserInputs, WeatherObservation, OutfitRecommendation
from outfit_service.core.recommender import generate_recommendation, shuffle_recommendation
from outfit_service.core.validation import (
    ValidationError,
    parse_user_inputs,
    parse_weather,
    parse_recommendation,
)
