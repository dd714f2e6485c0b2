"""
Generated travel content via an OpenAI-compatible chat-completions gateway.

The gateway's reply is free text. Deals are asked for as a bare JSON array;
extract_json tolerates the markdown code fences models add anyway, but
nothing beyond the JSON shape is checked.
"""

import json
import logging
import re
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from core.config import Config
from core.errors import ErrorCode, GenerationError
from core.models.external import Deal

logger = logging.getLogger(__name__)

DEAL_COUNT = 6
DEAL_TYPES = ("all", "flight", "hotel", "activity")

_FENCE_RE = re.compile(r"```(?:json)?\n?")

_DEALS_SYSTEM = (
    "You are a travel deals API. Return only valid JSON arrays with travel deals. "
    "No markdown, no explanations."
)
_ITINERARY_SYSTEM = (
    "You are an expert travel planner. Write practical day-by-day itineraries "
    "with timings, local food suggestions and budget tips."
)


def extract_json(text: str) -> Any:
    cleaned = _FENCE_RE.sub("", text).strip()
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise GenerationError(f"Gateway reply is not JSON: {e}", code=ErrorCode.INVALID_RESPONSE) from e


def _chat(http_client: httpx.Client, config: Config, system: str, prompt: str) -> str:
    if not config.ai_gateway_api_key:
        raise GenerationError("AI_GATEWAY_API_KEY not configured", code=ErrorCode.NOT_CONFIGURED)

    try:
        response = http_client.post(
            config.ai_gateway_url,
            headers={"Authorization": f"Bearer {config.ai_gateway_api_key}"},
            json={
                "model": config.ai_model,
                "messages": [
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
            },
        )
    except httpx.HTTPError as e:
        raise GenerationError(f"Gateway request failed: {e}", code=ErrorCode.GENERATION_FAILED) from e

    if response.status_code == 429:
        raise GenerationError("Gateway rate limit exceeded", code=ErrorCode.RATE_LIMITED)
    if response.status_code == 402:
        raise GenerationError("Gateway credits exhausted", code=ErrorCode.CREDITS_EXHAUSTED)
    if not response.is_success:
        logger.error("AI gateway error: %s %s", response.status_code, response.text)
        raise GenerationError(f"Gateway error: {response.status_code}", code=ErrorCode.GENERATION_FAILED)

    try:
        return response.json()["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise GenerationError(f"Unexpected gateway payload: {e}", code=ErrorCode.INVALID_RESPONSE) from e


def _deals_prompt(destination: str | None, deal_type: str) -> str:
    focus = (
        "Include flights, hotels, and activities."
        if deal_type == "all"
        else f"Focus on {deal_type} deals only."
    )
    return f"""Generate {DEAL_COUNT} realistic travel deals for {destination or 'popular destinations'}.
{focus}

Return a JSON array with this exact structure:
[
  {{
    "id": "unique_id",
    "type": "flight" | "hotel" | "activity",
    "provider": "realistic provider name",
    "title": "deal title",
    "description": "brief description",
    "originalPrice": number,
    "discountedPrice": number,
    "currency": "INR",
    "rating": number between 4.0-5.0,
    "dealType": "flash-sale" | "early-bird" | "last-minute" | "exclusive",
    "imageUrl": "unsplash image url related to the destination/type"
  }}
]

Use realistic prices in INR. Make deals attractive with 15-50% discounts.
Only return the JSON array, no other text."""


def generate_deals(
    http_client: httpx.Client,
    config: Config,
    destination: str | None,
    deal_type: str = "all",
) -> list[Deal]:
    logger.info("Generating deals for %s, type %s", destination, deal_type)
    reply = _chat(http_client, config, _DEALS_SYSTEM, _deals_prompt(destination, deal_type))
    raw = extract_json(reply)
    if not isinstance(raw, list):
        raise GenerationError("Gateway reply is not a JSON array", code=ErrorCode.INVALID_RESPONSE)
    try:
        return [Deal.model_validate(item) for item in raw]
    except PydanticValidationError as e:
        raise GenerationError(f"Malformed deal in gateway reply: {e}", code=ErrorCode.INVALID_RESPONSE) from e


def generate_itinerary(
    http_client: httpx.Client,
    config: Config,
    destination: str,
    days: int,
    mood: str = "balanced",
    food_preference: str = "any",
) -> str:
    logger.info("Generating %d-day itinerary for %s", days, destination)
    prompt = (
        f"Create a {days}-day travel itinerary for {destination}.\n"
        f"Travel mood: {mood}. Food preference: {food_preference}.\n"
        "For each day give morning, afternoon and evening plans, where to eat, "
        "an estimated daily cost in INR and one local tip. Use markdown headings per day."
    )
    return _chat(http_client, config, _ITINERARY_SYSTEM, prompt).strip()
