"""
Rule Tables (v1.0.0)
Static lookup tables that drive outfit recommendations.

Each table is keyed by a closed enum and must cover every member of it.
Tables are built once at import and exposed read-only.
"""
import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

logger = logging.getLogger(__name__)


# ==================== ENUMS ====================

class Occasion(Enum):
    """What the outfit is for."""
    COLLEGE = "college"
    WORK = "work"
    CASUAL = "casual"
    EVENT = "event"


class StylePreference(Enum):
    """Aesthetic the user is going for."""
    CASUAL = "casual"
    FORMAL = "formal"
    COMFORTABLE = "comfortable"
    TRENDY = "trendy"


class Mood(Enum):
    """Optional emotional tone. NONE means no preference."""
    NONE = ""
    CONFIDENT = "confident"
    RELAXED = "relaxed"
    ENERGETIC = "energetic"
    SOPHISTICATED = "sophisticated"


class Condition(Enum):
    """Weather bucket derived from temperature and weather code."""
    HOT = "hot"
    WARM = "warm"
    MILD = "mild"
    COLD = "cold"
    RAINY = "rainy"


class RuleTableError(Exception):
    """Raised when a rule table does not cover its key enum exactly."""


# ==================== RULE SHAPES ====================

class WeatherRule(NamedTuple):
    base: Tuple[str, ...]
    accessories: Tuple[str, ...]


class OccasionRule(NamedTuple):
    items: Tuple[str, ...]
    tips: Tuple[str, ...]


class StyleModifier(NamedTuple):
    adjectives: Tuple[str, ...]
    colors: Tuple[str, ...]


# ==================== TABLES ====================

WEATHER_RULES: Mapping[Condition, WeatherRule] = MappingProxyType({
    Condition.HOT: WeatherRule(
        base=("Light cotton shirt", "Breathable linen pants", "Shorts", "Flowy dress", "Tank top"),
        accessories=("Sunglasses", "Sun hat", "Light scarf"),
    ),
    Condition.WARM: WeatherRule(
        base=("Cotton t-shirt", "Light blouse", "Chinos", "Midi skirt", "Short-sleeve button-up"),
        accessories=("Sunglasses", "Light cardigan for evening"),
    ),
    Condition.MILD: WeatherRule(
        base=("Long-sleeve shirt", "Light sweater", "Jeans", "Blazer", "Cardigan"),
        accessories=("Light jacket", "Scarf"),
    ),
    Condition.COLD: WeatherRule(
        base=("Warm sweater", "Wool coat", "Layered top", "Thermal base", "Heavy jeans"),
        accessories=("Warm scarf", "Beanie", "Gloves", "Warm boots"),
    ),
    Condition.RAINY: WeatherRule(
        base=("Water-resistant jacket", "Quick-dry pants", "Layered outfit"),
        accessories=("Umbrella", "Waterproof boots", "Rain hat"),
    ),
})

OCCASION_RULES: Mapping[Occasion, OccasionRule] = MappingProxyType({
    Occasion.COLLEGE: OccasionRule(
        items=("Comfortable sneakers", "Backpack-friendly layers", "Casual denim"),
        tips=("Prioritize comfort for long days", "Choose versatile pieces", "Easy to wash fabrics"),
    ),
    Occasion.WORK: OccasionRule(
        items=("Tailored trousers", "Collared shirt", "Blazer", "Loafers or dress shoes"),
        tips=("Keep it professional yet comfortable", "Neutral colors are safe choices", "Iron your clothes"),
    ),
    Occasion.CASUAL: OccasionRule(
        items=("Relaxed jeans", "Comfortable tee", "Sneakers", "Hoodie"),
        tips=("Express your personal style", "Mix patterns if you feel bold", "Comfort is key"),
    ),
    Occasion.EVENT: OccasionRule(
        items=("Elegant dress or suit", "Statement piece", "Dress shoes", "Minimal jewelry"),
        tips=("Check the dress code", "Choose quality over quantity", "Add one statement accessory"),
    ),
})

STYLE_MODIFIERS: Mapping[StylePreference, StyleModifier] = MappingProxyType({
    StylePreference.CASUAL: StyleModifier(
        adjectives=("relaxed", "effortless", "easy-going"),
        colors=("Denim blue", "White", "Earth tones", "Soft grey"),
    ),
    StylePreference.FORMAL: StyleModifier(
        adjectives=("polished", "sophisticated", "refined"),
        colors=("Navy", "Charcoal", "Burgundy", "Classic black"),
    ),
    StylePreference.COMFORTABLE: StyleModifier(
        adjectives=("cozy", "soft", "stretchy"),
        colors=("Cream", "Soft pastels", "Warm neutrals", "Olive"),
    ),
    StylePreference.TRENDY: StyleModifier(
        adjectives=("bold", "statement-making", "contemporary"),
        colors=("Trending colors", "Bold patterns", "Mixed textures", "Metallics"),
    ),
})

MOOD_TIPS: Mapping[Mood, Tuple[str, ...]] = MappingProxyType({
    Mood.CONFIDENT: ("Power colors like red or black", "Well-fitted silhouettes", "Statement accessories"),
    Mood.RELAXED: ("Flowing fabrics", "Neutral tones", "Comfortable fits"),
    Mood.ENERGETIC: ("Bright colors", "Bold patterns", "Athletic-inspired pieces"),
    Mood.SOPHISTICATED: ("Monochromatic looks", "Quality fabrics", "Minimal jewelry"),
    Mood.NONE: (),
})


# ==================== DISPLAY LABELS ====================

OCCASION_LABELS: Mapping[Occasion, str] = MappingProxyType({
    Occasion.COLLEGE: "College",
    Occasion.WORK: "Work",
    Occasion.CASUAL: "Casual Day",
    Occasion.EVENT: "Special Event",
})

STYLE_LABELS: Mapping[StylePreference, str] = MappingProxyType({
    StylePreference.CASUAL: "Casual",
    StylePreference.FORMAL: "Formal",
    StylePreference.COMFORTABLE: "Comfortable",
    StylePreference.TRENDY: "Trendy",
})

MOOD_LABELS: Mapping[Mood, str] = MappingProxyType({
    Mood.NONE: "No preference",
    Mood.CONFIDENT: "Confident",
    Mood.RELAXED: "Relaxed",
    Mood.ENERGETIC: "Energetic",
    Mood.SOPHISTICATED: "Sophisticated",
})


def check_totality(name: str, table: Mapping, key_type: type) -> None:
    """
    Verify a table has exactly one entry per member of its key enum.

    Raises:
        RuleTableError: If any member is missing or a foreign key is present
    """
    expected = set(key_type)
    actual = set(table.keys())
    missing = expected - actual
    extra = actual - expected
    if missing or extra:
        raise RuleTableError(
            f"{name} is not total over {key_type.__name__}: "
            f"missing={sorted(m.value for m in missing)}, extra={sorted(map(str, extra))}"
        )


_TABLES = (
    ("WEATHER_RULES", WEATHER_RULES, Condition),
    ("OCCASION_RULES", OCCASION_RULES, Occasion),
    ("STYLE_MODIFIERS", STYLE_MODIFIERS, StylePreference),
    ("MOOD_TIPS", MOOD_TIPS, Mood),
    ("OCCASION_LABELS", OCCASION_LABELS, Occasion),
    ("STYLE_LABELS", STYLE_LABELS, StylePreference),
    ("MOOD_LABELS", MOOD_LABELS, Mood),
)

for _name, _table, _key_type in _TABLES:
    check_totality(_name, _table, _key_type)

logger.debug("Rule tables loaded")


def get_options() -> dict:
    """List every selectable value with its display label."""
    return {
        "occasions": [{"value": o.value, "label": OCCASION_LABELS[o]} for o in Occasion],
        "styles": [{"value": s.value, "label": STYLE_LABELS[s]} for s in StylePreference],
        "moods": [{"value": m.value, "label": MOOD_LABELS[m]} for m in Mood],
    }
