#!/usr/bin/env python3
"""Seed the local trip store with demo data for development.

This script writes a few trips, budget items, journal entries and an emergency
contact into the local store directory (STORE_DIR), then prints the dashboard
stats computed from them.

Usage:
    python scripts/seed_demo_store.py
    python scripts/seed_demo_store.py --reset
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config
from core.metrics import compute_trip_stats, summarize_budget
from core.models import BudgetItem, EmergencyContact, JournalEntry, Trip
from core.store import LocalStorage, TripStore

DEMO_USER = "local_user"


def demo_trips():
    return [
        Trip(
            user_id=DEMO_USER,
            origin="Mumbai",
            destination="Goa",
            departure_date=date(2026, 12, 20),
            return_date=date(2026, 12, 24),
            transport_mode="train",
            distance=590,
            estimated_cost=18000,
            status="upcoming",
        ),
        Trip(
            user_id=DEMO_USER,
            origin="Delhi",
            destination="Jaipur",
            departure_date=date(2026, 3, 7),
            transport_mode="car",
            distance=280,
            estimated_cost=9000,
            status="completed",
        ),
        Trip(
            user_id=DEMO_USER,
            origin="Bengaluru",
            destination="Leh",
            departure_date=date(2026, 6, 12),
            transport_mode="flight",
            distance=2700,
            estimated_cost=42000,
            status="completed",
        ),
    ]


def seed(store):
    """Add demo records for each trip."""
    goa, jaipur, leh = demo_trips()
    for trip in (goa, jaipur, leh):
        store.add_trip(trip)
    print(f"✓ Added {len(store.state.trips)} trips")

    for trip_id, category, amount, day in [
        (goa.id, "transport", 1450, date(2026, 12, 20)),
        (goa.id, "stay", 7200, date(2026, 12, 20)),
        (jaipur.id, "food", 1800, date(2026, 3, 8)),
        (leh.id, "activities", 6500, date(2026, 6, 14)),
    ]:
        store.add_budget_item(
            BudgetItem(user_id=DEMO_USER, trip_id=trip_id, category=category, amount=amount, date=day)
        )
    print(f"✓ Added {len(store.state.budget_items)} budget items")

    store.add_journal_entry(
        JournalEntry(
            user_id=DEMO_USER,
            trip_id=jaipur.id,
            title="Amber Fort at sunrise",
            content="Beat the crowds by getting there at 7.",
            mood="happy",
            location="Jaipur",
            rating=5,
            date=date(2026, 3, 8),
        )
    )
    store.add_emergency_contact(
        EmergencyContact(user_id=DEMO_USER, name="Asha", phone="+91 98200 00000", relationship="Sister")
    )
    store.set_current_trip(goa.id)
    print("✓ Added journal entry and emergency contact")


def main():
    """Seed the store and print the resulting stats."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--reset", action="store_true", help="discard the existing snapshot first")
    args = parser.parse_args()

    config = get_config()
    storage = LocalStorage(config.store_dir)

    if args.reset:
        storage.remove_item(config.storage_key)
        print(f"✓ Cleared {config.storage_key}")

    store = TripStore.load(storage, key=config.storage_key)
    print(f"Seeding local store at {config.store_dir}...")
    print()

    seed(store)

    state = store.state
    stats = compute_trip_stats(state.trips, state.budget_items)
    budget = summarize_budget(state.trips, state.budget_items)

    print()
    print(f"Trips: {stats.total_trips} ({stats.upcoming_count} upcoming, {stats.completed_count} completed)")
    print(f"Distance: {stats.total_distance_km:.0f} km, CO2: {stats.co2_footprint_kg:.1f} kg")
    print(f"Spent: {budget.total_spent:.0f} of {budget.estimated_budget:.0f} ({budget.percentage_used:.0f}%)")
    print()
    print("✅ Local store ready")


if __name__ == "__main__":
    main()
