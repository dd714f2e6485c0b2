"""
API Gateway proxy plumbing shared by the HTTP Lambda handlers.

Handlers decorated with @http_handler receive the parsed JSON body and
return any JSON-able value (pydantic models included). CORS preflight,
error envelopes and serialization are handled here.

Usage:
    @http_handler
    def handler(event: dict[str, Any], body: dict[str, Any]) -> Any:
        request = parse_request(WeatherRequest, body)
        ...
"""

import base64
import functools
import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.errors import AuthenticationError, EnviroAIError, ErrorCode, ValidationError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, PATCH, DELETE, OPTIONS",
}

R = TypeVar("R", bound=BaseModel)


class Response:
    """Explicit status code for a handler result; bare return values are 200."""

    def __init__(self, body: Any, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code


def to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    return value


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {**CORS_HEADERS, "Content-Type": "application/json"},
        "body": json.dumps(to_jsonable(body)),
    }


def error_response(error: EnviroAIError) -> dict[str, Any]:
    return json_response(error.status_code, {"error": error.user_message, "code": error.code.value})


def http_method(event: dict[str, Any]) -> str:
    method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method", "")
    return method.upper()


def parse_body(event: dict[str, Any]) -> dict[str, Any]:
    raw = event.get("body")
    if not raw:
        return {}
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    try:
        body = json.loads(raw)
    except ValueError as e:
        raise ValidationError(f"Request body is not JSON: {e}", code=ErrorCode.INVALID_REQUEST) from e
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object", code=ErrorCode.INVALID_REQUEST)
    return body


def parse_request(model: type[R], data: dict[str, Any]) -> R:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {model.__name__}: {e}") from e


def current_user_id(event: dict[str, Any]) -> str:
    """User id placed in the request context by the Lambda authorizer."""
    user_id = (event.get("requestContext", {}).get("authorizer") or {}).get("userId")
    if not user_id:
        raise AuthenticationError("Missing authorizer context", code=ErrorCode.AUTH_FAILED)
    return user_id


def http_handler(fn: Callable[[dict[str, Any], dict[str, Any]], Any]) -> Callable[[dict[str, Any], object], dict[str, Any]]:
    @functools.wraps(fn)
    def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
        if http_method(event) == "OPTIONS":
            return {"statusCode": 200, "headers": CORS_HEADERS, "body": ""}
        try:
            result = fn(event, parse_body(event))
        except EnviroAIError as e:
            logger.warning("%s failed [%s]: %s", fn.__module__, e.code.value, e.message)
            return error_response(e)
        except Exception:
            logger.exception("Unhandled error in %s", fn.__module__)
            return error_response(EnviroAIError("Unhandled error"))
        if isinstance(result, Response):
            return json_response(result.status_code, result.body)
        return json_response(200, result)

    return handler
