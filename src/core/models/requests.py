"""Pydantic models for HTTP handler request bodies."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from core.models.records import TransportMode


class GeocodeRequest(BaseModel):
    query: str = Field(..., min_length=1)


class WeatherRequest(BaseModel):
    lat: float | None = None
    lon: float | None = None
    location: str | None = None


class PlacesRequest(BaseModel):
    lat: float = Field(..., strict=True)
    lon: float = Field(..., strict=True)
    radius: float | None = None
    categories: list[str] = Field(..., min_length=1)


class DealsRequest(BaseModel):
    destination: str | None = None
    type: Literal["all", "flight", "hotel", "activity"] = "all"


class ItineraryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    destination: str = Field(..., min_length=1)
    days: int = Field(..., ge=1, le=30)
    mood: str = "balanced"
    food_preference: str = Field(default="any", alias="foodPreference")


class RouteRequest(BaseModel):
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    mode: TransportMode
