"""
Pydantic models for EnviroAI.
"""

from core.models.external import CurrentWeather, DailyForecast, Deal, GeoLocation, Place, WeatherReport
from core.models.records import (
    BudgetCategory,
    BudgetItem,
    EmergencyContact,
    JournalEntry,
    Profile,
    TransportMode,
    Trip,
    TripStatus,
)
from core.models.stats import BudgetSummary, ModeShare, RouteEstimate, TripStats

__all__ = [
    "BudgetCategory",
    "BudgetItem",
    "BudgetSummary",
    "CurrentWeather",
    "DailyForecast",
    "Deal",
    "EmergencyContact",
    "GeoLocation",
    "JournalEntry",
    "ModeShare",
    "Place",
    "Profile",
    "RouteEstimate",
    "TransportMode",
    "Trip",
    "TripStats",
    "TripStatus",
    "WeatherReport",
]
