"""
Metrics Module (v1.0.0)
Track recommendation counts and weather lookup health.
"""
import threading
from typing import Dict, Any


def _empty_metrics() -> Dict[str, Any]:
    return {
        "recommendations": 0,
        "shuffles": 0,
        "weather_lookups": 0,
        "weather_fallbacks": 0,
        "requests_by_occasion": {},
    }


# Thread-safe metrics storage
_lock = threading.Lock()
_metrics = _empty_metrics()


def record_weather_lookup(fallback: bool):
    """Record one weather resolution and whether it fell back to defaults."""
    with _lock:
        _metrics["weather_lookups"] += 1
        if fallback:
            _metrics["weather_fallbacks"] += 1


def record_recommendation(occasion: str, shuffled: bool = False):
    """
    Record a generated recommendation.

    Args:
        occasion: Occasion value the outfit was generated for
        shuffled: True for a regenerate (shuffle) request
    """
    with _lock:
        if shuffled:
            _metrics["shuffles"] += 1
        else:
            _metrics["recommendations"] += 1

        by_occasion = _metrics["requests_by_occasion"]
        by_occasion[occasion] = by_occasion.get(occasion, 0) + 1


def get_metrics() -> Dict[str, Any]:
    """Get current metrics snapshot."""
    with _lock:
        lookups = _metrics["weather_lookups"]
        fallbacks = _metrics["weather_fallbacks"]

        return {
            "recommendations": _metrics["recommendations"],
            "shuffles": _metrics["shuffles"],
            "weather_lookups": lookups,
            "weather_fallbacks": fallbacks,
            "weather_fallback_ratio": round(fallbacks / lookups, 3) if lookups > 0 else 0.0,
            "requests_by_occasion": dict(_metrics["requests_by_occasion"]),
        }


def reset_metrics():
    """Reset all metrics (for testing)."""
    global _metrics
    with _lock:
        _metrics = _empty_metrics()
