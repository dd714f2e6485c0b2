"""Nearby points of interest via the Geoapify Places API."""

import logging
import secrets
import string
from typing import Any

import httpx

from core.errors import ErrorCode, PlacesError
from core.models.external import Place

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_M = 3000
RESULT_LIMIT = 50

_ID_ALPHABET = string.ascii_lowercase + string.digits


def _fallback_id() -> str:
    return "place-" + "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))


def _to_place(feature: dict[str, Any]) -> Place:
    props = feature.get("properties", {})
    categories = props.get("categories") or []
    return Place(
        id=props.get("place_id") or _fallback_id(),
        name=props.get("name") or props.get("address_line1") or "Unknown Place",
        lat=props["lat"],
        lon=props["lon"],
        address=props.get("formatted") or props.get("address_line2") or "",
        category=categories[0] if categories else "unknown",
    )


def search_places(
    http_client: httpx.Client,
    base_url: str,
    api_key: str,
    lat: float,
    lon: float,
    categories: list[str],
    radius: float | None = None,
) -> list[Place]:
    if not api_key:
        raise PlacesError("GEOAPIFY_API_KEY not configured", code=ErrorCode.NOT_CONFIGURED)

    search_radius = radius if radius and radius > 0 else DEFAULT_RADIUS_M
    params = {
        "categories": ",".join(categories),
        # Geoapify circle filters take lon before lat
        "filter": f"circle:{lon},{lat},{search_radius:g}",
        "limit": RESULT_LIMIT,
        "apiKey": api_key,
    }
    logger.info("Fetching places near %s,%s within %sm for %s", lat, lon, search_radius, params["categories"])

    try:
        response = http_client.get(f"{base_url}/v2/places", params=params)
    except httpx.HTTPError as e:
        raise PlacesError(f"Geoapify request failed: {e}".replace(api_key, "REDACTED"), code=ErrorCode.PLACES_FAILED) from e

    if not response.is_success:
        logger.error("Geoapify API error: %s %s", response.status_code, response.text)
        raise PlacesError(f"Geoapify API error: {response.status_code}", code=ErrorCode.PLACES_FAILED)

    try:
        features = response.json().get("features") or []
        places = [_to_place(feature) for feature in features]
    except (ValueError, KeyError, AttributeError) as e:
        raise PlacesError(f"Unexpected Geoapify payload: {e}", code=ErrorCode.PLACES_FAILED) from e

    logger.info("Geoapify returned %d results", len(places))
    return places
