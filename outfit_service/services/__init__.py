# Services module
from outfit_service.services.weather import (
    resolve_weather,
    resolve_weather_sync,
    classify_condition,
    describe_weather,
    weather_icon,
    default_observation,
)
