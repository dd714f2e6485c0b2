"""Current conditions and 7-day forecast via Open-Meteo."""

import logging
from datetime import date
from typing import Any

import httpx

from core.errors import ErrorCode, WeatherError
from core.metrics import round_half_up
from core.models.external import CurrentWeather, DailyForecast, GeoLocation, WeatherReport

logger = logging.getLogger(__name__)

FORECAST_DAYS = 7

# WMO weather code -> (main, description, icon)
WEATHER_CODES: dict[int, tuple[str, str, str]] = {
    0: ("Clear", "clear sky", "01d"),
    1: ("Clear", "mainly clear", "01d"),
    2: ("Clouds", "partly cloudy", "02d"),
    3: ("Clouds", "overcast", "03d"),
    45: ("Fog", "fog", "50d"),
    48: ("Fog", "depositing rime fog", "50d"),
    51: ("Drizzle", "light drizzle", "09d"),
    53: ("Drizzle", "moderate drizzle", "09d"),
    55: ("Drizzle", "dense drizzle", "09d"),
    61: ("Rain", "slight rain", "10d"),
    63: ("Rain", "moderate rain", "10d"),
    65: ("Rain", "heavy rain", "10d"),
    71: ("Snow", "slight snow", "13d"),
    73: ("Snow", "moderate snow", "13d"),
    75: ("Snow", "heavy snow", "13d"),
    80: ("Rain", "slight rain showers", "09d"),
    81: ("Rain", "moderate rain showers", "09d"),
    82: ("Rain", "violent rain showers", "09d"),
    95: ("Thunderstorm", "thunderstorm", "11d"),
    96: ("Thunderstorm", "thunderstorm with hail", "11d"),
    99: ("Thunderstorm", "severe thunderstorm", "11d"),
}
UNKNOWN_CONDITION = ("Unknown", "unknown", "01d")

_CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,apparent_temperature,weather_code,wind_speed_10m"
_DAILY_FIELDS = (
    "weather_code,temperature_2m_max,temperature_2m_min,"
    "apparent_temperature_max,relative_humidity_2m_max,wind_speed_10m_max"
)


def condition_for(code: int | None) -> tuple[str, str, str]:
    if code is None:
        return UNKNOWN_CONDITION
    return WEATHER_CODES.get(code, UNKNOWN_CONDITION)


def _current(data: dict[str, Any]) -> CurrentWeather:
    main, description, icon = condition_for(data.get("weather_code"))
    return CurrentWeather(
        temp=round_half_up(data["temperature_2m"]),
        feels_like=round_half_up(data["apparent_temperature"]),
        humidity=data["relative_humidity_2m"],
        wind_speed=round_half_up(data["wind_speed_10m"]),
        condition=main,
        description=description,
        icon=icon,
    )


def _daily(data: dict[str, Any]) -> list[DailyForecast]:
    days = []
    for i, day in enumerate(data["time"][:FORECAST_DAYS]):
        main, description, icon = condition_for(data["weather_code"][i])
        t_max = data["temperature_2m_max"][i]
        t_min = data["temperature_2m_min"][i]
        days.append(
            DailyForecast(
                date=date.fromisoformat(day).strftime("%a"),
                temp=round_half_up((t_max + t_min) / 2),
                temp_min=round_half_up(t_min),
                temp_max=round_half_up(t_max),
                humidity=data["relative_humidity_2m_max"][i],
                wind_speed=round_half_up(data["wind_speed_10m_max"][i]),
                condition=main,
                description=description,
                icon=icon,
            )
        )
    return days


def get_weather(http_client: httpx.Client, base_url: str, location: GeoLocation) -> WeatherReport:
    try:
        response = http_client.get(
            f"{base_url}/v1/forecast",
            params={
                "latitude": location.lat,
                "longitude": location.lon,
                "current": _CURRENT_FIELDS,
                "daily": _DAILY_FIELDS,
                "timezone": "auto",
            },
        )
    except httpx.HTTPError as e:
        raise WeatherError(f"Open-Meteo request failed: {e}", code=ErrorCode.WEATHER_FAILED) from e

    if not response.is_success:
        logger.error("Open-Meteo API error: %s %s", response.status_code, response.text)
        raise WeatherError(f"Weather API error: {response.status_code}", code=ErrorCode.WEATHER_FAILED)

    try:
        data = response.json()
        report = WeatherReport(current=_current(data["current"]), daily=_daily(data["daily"]), location=location)
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise WeatherError(f"Unexpected Open-Meteo payload: {e}", code=ErrorCode.WEATHER_FAILED) from e

    logger.info("Returning weather data for %s", location.name)
    return report
