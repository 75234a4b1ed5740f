"""
Request Logger (v1.0.0)
Structured logging for request tracking and observability.
"""
import json
import logging
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional

from outfit_service.config import get_settings

# Ensure logs directory exists
LOGS_DIR = Path(__file__).parent.parent.parent / "logs"
LOGS_DIR.mkdir(parents=True, exist_ok=True)

REQUEST_LOG_FILE = LOGS_DIR / "requests.log"

# Configure request logger
request_logger = logging.getLogger("outfit.requests")
request_logger.setLevel(logging.INFO)

# File handler for requests
file_handler = logging.FileHandler(REQUEST_LOG_FILE, encoding="utf-8")
file_handler.setFormatter(logging.Formatter("%(message)s"))
request_logger.addHandler(file_handler)

# Prevent propagation to root logger
request_logger.propagate = False


def log_request(
    request_id: str,
    kind: str,
    location: str,
    city: str,
    condition: str,
    weather_fallback: bool,
    latency_ms: int,
    status: str,
    error: Optional[str] = None
):
    """
    Log a structured request entry.

    Args:
        request_id: Unique request identifier
        kind: "recommend" or "shuffle"
        location: Location as entered by the user
        city: City the weather was resolved for
        condition: Weather condition used for the recommendation
        weather_fallback: Whether the default weather was used
        latency_ms: Request latency in milliseconds
        status: success or fail
        error: Error message if failed
    """
    if not is_logging_enabled():
        return

    entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "request_id": request_id,
        "kind": kind,
        "location": location,
        "city": city,
        "condition": condition,
        "weather_fallback": weather_fallback,
        "latency_ms": latency_ms,
        "status": status,
    }

    if error:
        entry["error"] = error

    request_logger.info(json.dumps(entry, ensure_ascii=False))


def is_logging_enabled() -> bool:
    """Check if request logging is enabled."""
    return get_settings().logging_enabled
