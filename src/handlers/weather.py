"""Weather handler: current conditions and 7-day forecast for coordinates or a place name."""

from typing import Any

from core.clients import get_http_client
from core.config import get_config
from core.errors import ErrorCode, GeocodingError, ValidationError
from core.http import http_handler, parse_request
from core.models.external import GeoLocation
from core.models.requests import WeatherRequest
from core.services.geocoding import geocode
from core.services.weather import get_weather


@http_handler
def handler(event: dict[str, Any], body: dict[str, Any]) -> Any:
    request = parse_request(WeatherRequest, body)
    config = get_config()
    client = get_http_client()

    if request.lat is not None and request.lon is not None:
        location = GeoLocation(lat=request.lat, lon=request.lon, name=request.location or "Unknown")
    elif request.location:
        found = geocode(request.location, client, config.nominatim_url)
        if found is None:
            raise GeocodingError(f"No match for {request.location!r}", code=ErrorCode.LOCATION_NOT_FOUND)
        location = found
    else:
        raise ValidationError("Neither coordinates nor location given", code=ErrorCode.COORDINATES_REQUIRED)

    return get_weather(client, config.open_meteo_url, location)
