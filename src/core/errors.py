"""
Custom exceptions and error handling for EnviroAI.

Defines application-specific exceptions with error codes for consistent
error handling across Lambda functions and client communication.

Usage:
    from core.errors import WeatherError, ErrorCode

    raise WeatherError("Open-Meteo returned 503", code=ErrorCode.WEATHER_FAILED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Authentication errors
    AUTH_FAILED = "AUTH_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Location errors
    LOCATION_NOT_FOUND = "LOCATION_NOT_FOUND"
    COORDINATES_REQUIRED = "COORDINATES_REQUIRED"
    GEOCODING_FAILED = "GEOCODING_FAILED"

    # Weather and places errors
    WEATHER_FAILED = "WEATHER_FAILED"
    PLACES_FAILED = "PLACES_FAILED"

    # Generation errors
    GENERATION_FAILED = "GENERATION_FAILED"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    RATE_LIMITED = "RATE_LIMITED"
    CREDITS_EXHAUSTED = "CREDITS_EXHAUSTED"
    NOT_CONFIGURED = "NOT_CONFIGURED"

    # Records errors
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"
    RECORDS_FAILED = "RECORDS_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.AUTH_FAILED: "Authentication failed. Please sign in again.",
    ErrorCode.INVALID_TOKEN: "Your session has expired. Please sign in again.",
    ErrorCode.LOCATION_NOT_FOUND: "Location not found. Please try a different city name.",
    ErrorCode.COORDINATES_REQUIRED: "Coordinates required. Please provide a location.",
    ErrorCode.GEOCODING_FAILED: "Unable to look up that location. Please try again.",
    ErrorCode.WEATHER_FAILED: "Unable to fetch the weather right now. Please try again.",
    ErrorCode.PLACES_FAILED: "Unable to find nearby places. Please try again.",
    ErrorCode.GENERATION_FAILED: "Unable to generate suggestions. Please try again.",
    ErrorCode.INVALID_RESPONSE: "The assistant returned an unreadable answer. Please try again.",
    ErrorCode.RATE_LIMITED: "Rate limit exceeded. Please try again later.",
    ErrorCode.CREDITS_EXHAUSTED: "AI credits exhausted. Please add credits to continue.",
    ErrorCode.NOT_CONFIGURED: "This feature is not configured. Please contact support.",
    ErrorCode.RECORD_NOT_FOUND: "That item no longer exists.",
    ErrorCode.RECORDS_FAILED: "Unable to save your changes. Please try again.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}

STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.AUTH_FAILED: 401,
    ErrorCode.INVALID_TOKEN: 401,
    ErrorCode.LOCATION_NOT_FOUND: 404,
    ErrorCode.COORDINATES_REQUIRED: 400,
    ErrorCode.RATE_LIMITED: 429,
    ErrorCode.CREDITS_EXHAUSTED: 402,
    ErrorCode.RECORD_NOT_FOUND: 404,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_REQUEST: 400,
}


class EnviroAIError(Exception):
    """Base exception for all EnviroAI errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])

    @property
    def status_code(self) -> int:
        return STATUS_CODES.get(self.code, 500)


class AuthenticationError(EnviroAIError):
    """Authentication or authorization failed."""

    pass


class ValidationError(EnviroAIError):
    """Input validation failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code=code)


class GeocodingError(EnviroAIError):
    """Place-name lookup failed."""

    pass


class WeatherError(EnviroAIError):
    """Weather forecast lookup failed."""

    pass


class PlacesError(EnviroAIError):
    """Nearby places search failed."""

    pass


class GenerationError(EnviroAIError):
    """Generative-text gateway call or reply parsing failed."""

    pass


class RecordsError(EnviroAIError):
    """Remote records database operation failed."""

    pass
