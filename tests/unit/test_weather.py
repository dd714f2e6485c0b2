import httpx
import pytest

from core.errors import ErrorCode, WeatherError
from core.models import GeoLocation
from core.services.weather import UNKNOWN_CONDITION, condition_for, get_weather

BASE = "https://open-meteo.test"
PANAJI = GeoLocation(lat=15.49, lon=73.83, name="Panaji")


def _payload(days=8):
    dates = [f"2026-10-{19 + i:02d}" for i in range(days)]
    return {
        "current": {
            "temperature_2m": 29.5,
            "apparent_temperature": 33.4,
            "relative_humidity_2m": 78,
            "wind_speed_10m": 12.6,
            "weather_code": 2,
        },
        "daily": {
            "time": dates,
            "weather_code": [61] + [0] * (days - 1),
            "temperature_2m_max": [31.0] * days,
            "temperature_2m_min": [24.0] * days,
            "apparent_temperature_max": [35.0] * days,
            "relative_humidity_2m_max": [90] * days,
            "wind_speed_10m_max": [18.4] * days,
        },
    }


def _client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_condition_for_known_and_unknown_codes():
    assert condition_for(0) == ("Clear", "clear sky", "01d")
    assert condition_for(95)[0] == "Thunderstorm"
    assert condition_for(42) == UNKNOWN_CONDITION
    assert condition_for(None) == UNKNOWN_CONDITION


def test_get_weather_maps_current_and_daily():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=_payload())

    report = get_weather(_client(handler), BASE, PANAJI)

    assert seen["path"] == "/v1/forecast"
    assert seen["params"]["timezone"] == "auto"
    assert seen["params"]["latitude"] == "15.49"

    assert report.current.temp == 30
    assert report.current.feels_like == 33
    assert report.current.wind_speed == 13
    assert report.current.condition == "Clouds"
    assert report.current.description == "partly cloudy"

    assert len(report.daily) == 7
    first = report.daily[0]
    assert first.date == "Mon"
    assert first.temp == 28
    assert first.temp_min == 24
    assert first.temp_max == 31
    assert first.wind_speed == 18
    assert first.condition == "Rain"
    assert report.alerts == []
    assert report.location == PANAJI


def test_daily_serializes_camel_case():
    def handler(request):
        return httpx.Response(200, json=_payload())

    report = get_weather(_client(handler), BASE, PANAJI)
    dumped = report.model_dump(mode="json", by_alias=True)["daily"][0]

    assert {"tempMin", "tempMax", "windSpeed"} <= set(dumped)


def test_get_weather_api_error():
    def handler(request):
        return httpx.Response(500, text="down")

    with pytest.raises(WeatherError) as exc_info:
        get_weather(_client(handler), BASE, PANAJI)

    assert exc_info.value.code == ErrorCode.WEATHER_FAILED


def test_get_weather_malformed_payload():
    def handler(request):
        return httpx.Response(200, json={"current": {}})

    with pytest.raises(WeatherError):
        get_weather(_client(handler), BASE, PANAJI)
