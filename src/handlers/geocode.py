"""Geocoding handler: free-text place name to coordinates."""

from typing import Any

from core.clients import get_http_client
from core.config import get_config
from core.errors import ErrorCode, GeocodingError
from core.http import http_handler, parse_request
from core.models.requests import GeocodeRequest
from core.services.geocoding import geocode


@http_handler
def handler(event: dict[str, Any], body: dict[str, Any]) -> Any:
    request = parse_request(GeocodeRequest, body)
    location = geocode(request.query, get_http_client(), get_config().nominatim_url)
    if location is None:
        raise GeocodingError(f"No match for {request.query!r}", code=ErrorCode.LOCATION_NOT_FOUND)
    return location
