"""
Rule Table Tests
Every enum member must have exactly one entry in its table.
"""
import pytest
from pathlib import Path
from types import MappingProxyType

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

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
    check_totality,
    get_options,
)


class TestTotality:
    """Tables cover their key enums exactly."""

    @pytest.mark.parametrize("table,key_type", [
        (WEATHER_RULES, Condition),
        (OCCASION_RULES, Occasion),
        (STYLE_MODIFIERS, StylePreference),
        (MOOD_TIPS, Mood),
    ])
    def test_every_member_has_one_entry(self, table, key_type):
        assert set(table.keys()) == set(key_type)
        assert len(table) == len(key_type)

    def test_no_mood_maps_to_empty_tips(self):
        assert MOOD_TIPS[Mood.NONE] == ()

    def test_missing_key_rejected(self):
        partial = {Occasion.WORK: None, Occasion.COLLEGE: None}
        with pytest.raises(RuleTableError) as exc:
            check_totality("PARTIAL", partial, Occasion)
        assert "casual" in str(exc.value)

    def test_foreign_key_rejected(self):
        table = {c: None for c in Condition}
        table["snowy"] = None
        with pytest.raises(RuleTableError):
            check_totality("EXTRA", table, Condition)


class TestTableShape:
    """Tables are read-only and large enough for the fixed slices."""

    def test_tables_are_read_only(self):
        assert isinstance(WEATHER_RULES, MappingProxyType)
        with pytest.raises(TypeError):
            OCCASION_RULES[Occasion.WORK] = None

    def test_slices_always_full(self):
        for rule in WEATHER_RULES.values():
            assert len(rule.base) >= 2
            assert len(rule.accessories) >= 1
        for rule in OCCASION_RULES.values():
            assert len(rule.items) >= 2
            assert len(rule.tips) >= 2
        for modifier in STYLE_MODIFIERS.values():
            assert modifier.adjectives
            assert modifier.colors


class TestOptions:
    """Options listing used by form-rendering callers."""

    def test_options_cover_all_values(self):
        options = get_options()
        assert [o["value"] for o in options["occasions"]] == ["college", "work", "casual", "event"]
        assert len(options["styles"]) == 4
        assert {"value": "", "label": "No preference"} in options["moods"]

    def test_labels(self):
        options = get_options()
        labels = {o["value"]: o["label"] for o in options["occasions"]}
        assert labels["casual"] == "Casual Day"
        assert labels["event"] == "Special Event"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
