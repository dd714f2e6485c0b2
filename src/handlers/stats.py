"""Stats handler: dashboard and analytics figures from the user's remote records."""

from typing import Any

from core.config import get_config
from core.db import RecordKind, RecordsClient
from core.http import current_user_id, http_handler
from core.metrics import compute_trip_stats, summarize_budget


@http_handler
def handler(event: dict[str, Any], body: dict[str, Any]) -> Any:
    user_id = current_user_id(event)
    trip_id = (event.get("queryStringParameters") or {}).get("tripId")

    with RecordsClient(get_config()) as records:
        trips = records.list_records(RecordKind.TRIPS, user_id)
        budget_items = records.list_records(RecordKind.BUDGET_ITEMS, user_id)

    return {
        "stats": compute_trip_stats(trips, budget_items),
        "budget": summarize_budget(trips, budget_items, trip_id=trip_id),
    }
