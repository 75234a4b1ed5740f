# Config module
from outfit_service.config.settings import (
    get_settings,
    reload_settings,
    Settings,
    DEFAULT_LOCATION,
    OPEN_METEO_GEOCODING_URL,
    OPEN_METEO_FORECAST_URL,
)
