"""
Weather Service Tests
Classification, formatting and fallback behavior of the Open-Meteo lookups.
"""
import asyncio
import pytest
from pathlib import Path
from unittest.mock import patch, MagicMock

import httpx
import requests

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from outfit_service.core.rules import Condition
from outfit_service.services.weather import (
    classify_condition,
    describe_weather,
    weather_icon,
    default_observation,
    build_observation,
    round_half_up,
    resolve_weather,
    resolve_weather_sync,
)
from outfit_service.observability import get_metrics, reset_metrics

GEOCODE_HOST = "geocoding-api.open-meteo.com"

LONDON_GEOCODE = {"results": [{"name": "London", "latitude": 51.5, "longitude": -0.12}]}


def _forecast(temperature=15.4, humidity=71, code=3):
    return {
        "current": {
            "temperature_2m": temperature,
            "relative_humidity_2m": humidity,
            "weather_code": code,
        }
    }


def _resolve(location, handler):
    """Run resolve_weather against a mock transport."""
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await resolve_weather(location, client=client)
    return asyncio.run(run())


def _handler(geocode=None, forecast=None, geocode_status=200, forecast_status=200):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if request.url.host == GEOCODE_HOST:
            return httpx.Response(geocode_status, json=geocode if geocode is not None else {})
        return httpx.Response(forecast_status, json=forecast if forecast is not None else {})

    handler.calls = calls
    return handler


@pytest.fixture(autouse=True)
def clean_metrics():
    reset_metrics()
    yield
    reset_metrics()


# ==================== CLASSIFICATION ====================

class TestClassification:
    """Tests for classify_condition()."""

    @pytest.mark.parametrize("temperature", [-10, 5, 15, 25, 31, 45])
    def test_rain_code_wins(self, temperature):
        assert classify_condition(temperature, 201) is Condition.RAINY

    @pytest.mark.parametrize("code,expected", [
        (199, Condition.MILD),
        (200, Condition.RAINY),
        (599, Condition.RAINY),
        (600, Condition.MILD),
    ])
    def test_rain_range_half_open(self, code, expected):
        assert classify_condition(15, code) is expected

    @pytest.mark.parametrize("temperature,expected", [
        (31, Condition.HOT),
        (25, Condition.WARM),
        (15, Condition.MILD),
        (5, Condition.COLD),
        (30, Condition.HOT),
        (22, Condition.WARM),
        (12, Condition.MILD),
        (11, Condition.COLD),
    ])
    def test_temperature_buckets(self, temperature, expected):
        assert classify_condition(temperature, 0) is expected


class TestFormatting:
    """Tests for description, icon and rounding helpers."""

    def test_descriptions(self):
        assert describe_weather(Condition.COLD, 5) == "Chilly 5°C - bundle up!"
        assert describe_weather(Condition.HOT, 33) == "Hot day at 33°C - stay cool!"
        assert describe_weather(Condition.RAINY, 14) == "Rainy conditions at 14°C - bring an umbrella"

    def test_icons(self):
        assert weather_icon(Condition.HOT) == "🌡️"
        assert weather_icon(Condition.RAINY) == "🌧️"
        assert weather_icon(Condition.COLD) == "❄️"

    @pytest.mark.parametrize("value,expected", [(22.5, 23), (22.4, 22), (-0.5, 0), (-1.6, -2)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_rounding_happens_before_classification(self):
        obs = build_observation(temperature=29.5, humidity=40.2, weather_code=0, city="Cairo")
        assert obs.temperature == 30
        assert obs.condition is Condition.HOT
        assert obs.humidity == 40

    def test_default_observation(self):
        obs = default_observation("Somewhere")
        assert obs.temperature == 22
        assert obs.condition is Condition.MILD
        assert obs.humidity == 50
        assert obs.description == "Pleasant weather"
        assert obs.icon == "🌤️"
        assert obs.city == "Somewhere"


# ==================== ASYNC LOOKUP ====================

class TestResolveWeather:
    """Tests for resolve_weather() with a mocked transport."""

    def test_success_uses_resolved_city(self):
        handler = _handler(geocode=LONDON_GEOCODE, forecast=_forecast())
        obs = _resolve("london", handler)

        assert obs.city == "London"
        assert obs.temperature == 15
        assert obs.condition is Condition.MILD
        assert obs.humidity == 71
        assert obs.description == "Comfortable 15°C - perfect for layers"
        assert len(handler.calls) == 2

    def test_forecast_request_uses_coordinates(self):
        handler = _handler(geocode=LONDON_GEOCODE, forecast=_forecast())
        _resolve("london", handler)

        forecast_request = handler.calls[1]
        assert forecast_request.url.params["latitude"] == "51.5"
        assert forecast_request.url.params["longitude"] == "-0.12"
        assert "weather_code" in forecast_request.url.params["current"]

    def test_no_results_falls_back(self):
        handler = _handler(geocode={"results": []})
        obs = _resolve("Zzyzxville", handler)

        assert obs == default_observation("Zzyzxville")
        assert len(handler.calls) == 1

    def test_missing_results_key_falls_back(self):
        obs = _resolve("Zzyzxville", _handler(geocode={"generationtime_ms": 0.3}))
        assert obs == default_observation("Zzyzxville")

    def test_geocode_error_status_falls_back(self):
        handler = _handler(geocode=LONDON_GEOCODE, geocode_status=500)
        obs = _resolve("London", handler)
        assert obs == default_observation("London")
        assert len(handler.calls) == 1

    def test_forecast_error_status_keeps_raw_city(self):
        handler = _handler(geocode=LONDON_GEOCODE, forecast_status=503)
        obs = _resolve("london", handler)
        assert obs == default_observation("london")

    def test_network_error_falls_back(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        assert _resolve("Berlin", handler) == default_observation("Berlin")

    def test_malformed_forecast_falls_back(self):
        handler = _handler(geocode=LONDON_GEOCODE, forecast={"current": {}})
        assert _resolve("London", handler) == default_observation("London")

    def test_rainy_code(self):
        handler = _handler(geocode=LONDON_GEOCODE, forecast=_forecast(temperature=31, code=501))
        obs = _resolve("London", handler)
        assert obs.condition is Condition.RAINY
        assert obs.icon == "🌧️"

    def test_metrics_count_fallbacks(self):
        _resolve("London", _handler(geocode=LONDON_GEOCODE, forecast=_forecast()))
        _resolve("Zzyzxville", _handler(geocode={"results": []}))

        metrics = get_metrics()
        assert metrics["weather_lookups"] == 2
        assert metrics["weather_fallbacks"] == 1

    def test_non_object_geocode_body_falls_back(self):
        obs = _resolve("Oslo", lambda request: httpx.Response(200, json=[]))

        assert obs == default_observation("Oslo")
        assert get_metrics()["weather_fallbacks"] == 1

    def test_non_object_forecast_body_falls_back(self):
        handler = _handler(geocode=LONDON_GEOCODE, forecast=["x"])
        assert _resolve("london", handler) == default_observation("london")


# ==================== SYNC LOOKUP ====================

def _response(ok=True, payload=None, status_code=200):
    response = MagicMock()
    response.ok = ok
    response.status_code = status_code
    response.json.return_value = payload
    return response


class TestResolveWeatherSync:
    """Tests for resolve_weather_sync() with requests patched."""

    def test_success(self):
        responses = [_response(payload=LONDON_GEOCODE), _response(payload=_forecast(temperature=4.6))]
        with patch("outfit_service.services.weather.requests.get", side_effect=responses) as mock_get:
            obs = resolve_weather_sync("london")

        assert obs.city == "London"
        assert obs.temperature == 5
        assert obs.condition is Condition.COLD
        assert mock_get.call_count == 2

    def test_no_results(self):
        with patch("outfit_service.services.weather.requests.get",
                   return_value=_response(payload={"results": []})):
            assert resolve_weather_sync("Zzyzxville") == default_observation("Zzyzxville")

    def test_request_exception(self):
        with patch("outfit_service.services.weather.requests.get",
                   side_effect=requests.ConnectionError("down")):
            assert resolve_weather_sync("Oslo") == default_observation("Oslo")

    def test_forecast_failure(self):
        responses = [_response(payload=LONDON_GEOCODE), _response(ok=False, status_code=500)]
        with patch("outfit_service.services.weather.requests.get", side_effect=responses):
            assert resolve_weather_sync("london") == default_observation("london")

    def test_non_object_geocode_body_falls_back(self):
        with patch("outfit_service.services.weather.requests.get",
                   return_value=_response(payload=["x"])):
            obs = resolve_weather_sync("Oslo")

        assert obs == default_observation("Oslo")
        assert get_metrics()["weather_fallbacks"] == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
