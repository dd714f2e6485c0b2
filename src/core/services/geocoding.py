"""Place-name geocoding via OpenStreetMap Nominatim."""

import logging

import httpx

from core.errors import ErrorCode, GeocodingError
from core.models.external import GeoLocation

logger = logging.getLogger(__name__)


def geocode(query: str, http_client: httpx.Client, base_url: str) -> GeoLocation | None:
    """Return the single best match for query, or None when Nominatim finds nothing."""
    try:
        response = http_client.get(
            f"{base_url}/search",
            params={"format": "json", "q": query, "limit": 1},
        )
        response.raise_for_status()
        results = response.json()
        if not results:
            logger.info("No geocoding match for %r", query)
            return None

        match = results[0]
        name = (match.get("display_name") or "").split(",")[0].strip() or query
        location = GeoLocation(lat=float(match["lat"]), lon=float(match["lon"]), name=name)
    except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
        raise GeocodingError(f"Geocoding failed for {query!r}: {e}", code=ErrorCode.GEOCODING_FAILED) from e

    logger.info("Geocoded %r to %s, %s", query, location.lat, location.lon)
    return location
