"""Places handler: nearby points of interest."""

from typing import Any

from core.clients import get_http_client
from core.config import get_config
from core.http import http_handler, parse_request
from core.models.requests import PlacesRequest
from core.services.places import search_places


@http_handler
def handler(event: dict[str, Any], body: dict[str, Any]) -> Any:
    request = parse_request(PlacesRequest, body)
    config = get_config()
    return search_places(
        get_http_client(),
        config.geoapify_url,
        config.geoapify_api_key,
        lat=request.lat,
        lon=request.lon,
        categories=request.categories,
        radius=request.radius,
    )
