"""Pydantic models for geocoding, weather, places and generated content."""

from pydantic import BaseModel, ConfigDict, Field


class GeoLocation(BaseModel):
    lat: float
    lon: float
    name: str


class CurrentWeather(BaseModel):
    temp: int
    feels_like: int
    humidity: float
    wind_speed: int
    condition: str
    description: str
    icon: str


class DailyForecast(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    temp: int
    temp_min: int = Field(..., serialization_alias="tempMin")
    temp_max: int = Field(..., serialization_alias="tempMax")
    humidity: float
    wind_speed: int = Field(..., serialization_alias="windSpeed")
    condition: str
    description: str
    icon: str


class WeatherReport(BaseModel):
    current: CurrentWeather
    daily: list[DailyForecast]
    alerts: list[str] = []
    location: GeoLocation


class Place(BaseModel):
    id: str
    name: str
    lat: float
    lon: float
    address: str
    category: str


class Deal(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    type: str = Field(..., pattern="^(flight|hotel|activity)$")
    provider: str
    title: str
    description: str
    original_price: float = Field(..., alias="originalPrice")
    discounted_price: float = Field(..., alias="discountedPrice")
    currency: str = "INR"
    rating: float | None = None
    deal_type: str = Field(..., alias="dealType")
    image_url: str | None = Field(default=None, alias="imageUrl")
    external_url: str | None = Field(default=None, alias="externalUrl")
