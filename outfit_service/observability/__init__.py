# Observability module
from outfit_service.observability.logger import log_request, is_logging_enabled
from outfit_service.observability.metrics import (
    record_weather_lookup,
    record_recommendation,
    get_metrics,
    reset_metrics,
)
