"""Route handler: distance, duration, cost and CO2 estimate between two places."""

from typing import Any

from core.clients import get_http_client
from core.config import get_config
from core.errors import ErrorCode, GeocodingError
from core.http import http_handler, parse_request
from core.metrics import estimate_route, great_circle_km, round_half_up
from core.models.requests import RouteRequest
from core.services.geocoding import geocode


@http_handler
def handler(event: dict[str, Any], body: dict[str, Any]) -> Any:
    request = parse_request(RouteRequest, body)
    config = get_config()
    client = get_http_client()

    ends = []
    for place in (request.origin, request.destination):
        found = geocode(place, client, config.nominatim_url)
        if found is None:
            raise GeocodingError(f"No match for {place!r}", code=ErrorCode.LOCATION_NOT_FOUND)
        ends.append(found)

    origin, destination = ends
    distance = round_half_up(great_circle_km(origin.lat, origin.lon, destination.lat, destination.lon))
    return {
        "origin": origin,
        "destination": destination,
        "estimate": estimate_route(distance, request.mode),
    }
