"""
Trip and budget statistics for the dashboard, analytics, budget and route views.

Every function here is a pure reduction over the collections it is given:
input order never changes the result and empty inputs yield zeroed output.
Amounts are summed as-is, without currency conversion.
"""

import math
from collections import Counter
from collections.abc import Iterable

from core.models.records import BudgetCategory, BudgetItem, TransportMode, Trip, TripStatus
from core.models.stats import BudgetSummary, ModeShare, RouteEstimate, TripStats

# kg CO2 per km
EMISSION_FACTORS: dict[TransportMode, float] = {
    TransportMode.FLIGHT: 0.255,
    TransportMode.CAR: 0.21,
}
DEFAULT_EMISSION_FACTOR = 0.05

# (average speed km/h, cost per km)
ROUTE_PROFILES: dict[TransportMode, tuple[float, float]] = {
    TransportMode.FLIGHT: (800, 8),
    TransportMode.TRAIN: (100, 2),
    TransportMode.BUS: (60, 1.5),
    TransportMode.CAR: (80, 5),
    TransportMode.BIKE: (40, 2),
}

DEFAULT_ESTIMATED_BUDGET = 25000

_UPCOMING_STATUSES = {TripStatus.PLANNING, TripStatus.UPCOMING}


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def emission_factor(mode: TransportMode) -> float:
    return EMISSION_FACTORS.get(mode, DEFAULT_EMISSION_FACTOR)


def trip_emissions(trip: Trip) -> float:
    return (trip.distance or 0) * emission_factor(trip.transport_mode)


def mode_breakdown(trips: Iterable[Trip]) -> dict[TransportMode, ModeShare]:
    counts = Counter(t.transport_mode for t in trips)
    total = sum(counts.values())
    if total == 0:
        return {}
    return {
        mode: ModeShare(count=count, percentage=round_half_up(count / total * 100))
        for mode, count in sorted(counts.items(), key=lambda item: item[0].value)
    }


def compute_trip_stats(trips: Iterable[Trip], budget_items: Iterable[BudgetItem] = ()) -> TripStats:
    trips = list(trips)
    total_spend = sum(item.amount for item in budget_items)

    return TripStats(
        total_trips=len(trips),
        upcoming_count=sum(1 for t in trips if t.status in _UPCOMING_STATUSES),
        completed_count=sum(1 for t in trips if t.status == TripStatus.COMPLETED),
        total_distance_km=sum(t.distance or 0 for t in trips),
        total_spend=total_spend,
        co2_footprint_kg=sum(trip_emissions(t) for t in trips),
        unique_destination_count=len({t.destination for t in trips}),
        transport_mode_breakdown=mode_breakdown(trips),
        average_trip_cost=round_half_up(total_spend / max(len(trips), 1)),
    )


def summarize_budget(
    trips: Iterable[Trip],
    budget_items: Iterable[BudgetItem],
    trip_id: str | None = None,
) -> BudgetSummary:
    """Spend against the estimated budget for one trip, or for all trips when trip_id is None.

    The estimate falls back to DEFAULT_ESTIMATED_BUDGET when the trip (or every
    trip) has no estimated cost.
    """
    trips = list(trips)
    if trip_id is None:
        items = list(budget_items)
        estimated = sum(t.estimated_cost or 0 for t in trips)
    else:
        items = [item for item in budget_items if item.trip_id == trip_id]
        trip = next((t for t in trips if t.id == trip_id), None)
        estimated = (trip.estimated_cost or 0) if trip else 0
    estimated = estimated or DEFAULT_ESTIMATED_BUDGET

    spent = sum(item.amount for item in items)
    totals = {category: 0.0 for category in BudgetCategory}
    for item in items:
        totals[item.category] += item.amount

    return BudgetSummary(
        trip_id=trip_id,
        estimated_budget=estimated,
        total_spent=spent,
        percentage_used=min(spent / estimated * 100, 100),
        remaining=estimated - spent,
        category_totals=totals,
    )


def estimate_route(distance_km: float, mode: TransportMode) -> RouteEstimate:
    speed, cost_per_km = ROUTE_PROFILES[mode]
    return RouteEstimate(
        mode=mode,
        distance_km=distance_km,
        duration_hours=round_half_up(distance_km / speed),
        cost=round_half_up(distance_km * cost_per_km),
        co2_kg=round_half_up(distance_km * emission_factor(mode)),
    )


def great_circle_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance on a 6371 km sphere."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 6371 * 2 * math.asin(math.sqrt(a))
