"""Pydantic models for aggregated trip and budget statistics."""

from pydantic import BaseModel

from core.models.records import BudgetCategory, TransportMode


class ModeShare(BaseModel):
    count: int
    percentage: int


class TripStats(BaseModel):
    total_trips: int = 0
    upcoming_count: int = 0
    completed_count: int = 0
    total_distance_km: float = 0
    total_spend: float = 0
    co2_footprint_kg: float = 0
    unique_destination_count: int = 0
    transport_mode_breakdown: dict[TransportMode, ModeShare] = {}
    average_trip_cost: int = 0


class BudgetSummary(BaseModel):
    trip_id: str | None
    estimated_budget: float
    total_spent: float
    percentage_used: float
    remaining: float
    category_totals: dict[BudgetCategory, float]


class RouteEstimate(BaseModel):
    mode: TransportMode
    distance_km: float
    duration_hours: int
    cost: int
    co2_kg: int
