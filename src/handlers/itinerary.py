"""Itinerary handler: AI-generated day-by-day plan."""

from typing import Any

from core.clients import get_http_client
from core.config import get_config
from core.http import http_handler, parse_request
from core.models.requests import ItineraryRequest
from core.services.generation import generate_itinerary


@http_handler
def handler(event: dict[str, Any], body: dict[str, Any]) -> Any:
    request = parse_request(ItineraryRequest, body)
    itinerary = generate_itinerary(
        get_http_client(),
        get_config(),
        request.destination,
        request.days,
        mood=request.mood,
        food_preference=request.food_preference,
    )
    return {"itinerary": itinerary}
