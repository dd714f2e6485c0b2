"""Deals handler: AI-generated travel offers for a destination."""

from typing import Any

from core.clients import get_http_client
from core.config import get_config
from core.http import http_handler, parse_request
from core.models.requests import DealsRequest
from core.services.generation import generate_deals


@http_handler
def handler(event: dict[str, Any], body: dict[str, Any]) -> Any:
    request = parse_request(DealsRequest, body)
    deals = generate_deals(get_http_client(), get_config(), request.destination, request.type)
    return {"deals": deals}
