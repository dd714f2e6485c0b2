"""
Local trip store: offline copy of the user's trips, contacts, budget and journal.

Every mutation replaces the in-memory snapshot, notifies subscribers and
writes the whole snapshot to LocalStorage under a single key. On start the
store rehydrates from that key, or begins from the defaults when nothing
usable is stored.

Usage:
    from core.store import LocalStorage, TripStore

    store = TripStore.load(LocalStorage(".enviroai"))
    store.add_trip(trip)
    store.delete_trip(trip.id)  # also drops the trip's budget items and journal entries
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.errors import ValidationError
from core.models.records import BudgetItem, EmergencyContact, JournalEntry, Trip, utcnow

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "enviroai-storage"
STATE_VERSION = 0


class StoreState(BaseModel):
    trips: list[Trip] = []
    emergency_contacts: list[EmergencyContact] = []
    budget_items: list[BudgetItem] = []
    journal_entries: list[JournalEntry] = []
    current_trip_id: str | None = None
    user_name: str = "Traveler"


class LocalStorage:
    """Key-value string storage backed by one file per key."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)

    def remove_item(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


Listener = Callable[[StoreState], None]

M = TypeVar("M", bound=BaseModel)


def _merged(record: M, fields: dict[str, Any]) -> M:
    """Copy of record with fields applied and the result revalidated.

    Raises ValidationError when a field is unknown or a value is rejected,
    before anything in the store changes.
    """
    model = type(record)
    unknown = set(fields) - (set(model.model_fields) - {"id"})
    if unknown:
        raise ValidationError(f"Cannot update {model.__name__} fields: {', '.join(sorted(unknown))}")
    try:
        return model.model_validate({**record.model_dump(), **fields})
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {model.__name__} update: {e}") from e


def serialize_state(state: StoreState) -> str:
    return json.dumps({"state": state.model_dump(mode="json"), "version": STATE_VERSION})


def deserialize_state(raw: str) -> StoreState:
    payload = json.loads(raw)
    return StoreState.model_validate(payload["state"])


class TripStore:
    def __init__(
        self,
        storage: LocalStorage | None = None,
        key: str = DEFAULT_STORAGE_KEY,
        state: StoreState | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._state = state or StoreState()
        self._listeners: list[Listener] = []

    @classmethod
    def load(cls, storage: LocalStorage, key: str = DEFAULT_STORAGE_KEY) -> "TripStore":
        """Rehydrate from storage, falling back to defaults if nothing usable is stored."""
        state = StoreState()
        try:
            raw = storage.get_item(key)
            if raw is not None:
                state = deserialize_state(raw)
        except (OSError, ValueError, KeyError, TypeError, PydanticValidationError):
            logger.warning("Discarding unreadable store snapshot under key %s", key, exc_info=True)
        return cls(storage=storage, key=key, state=state)

    @property
    def state(self) -> StoreState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)
        self._persist()
        for listener in list(self._listeners):
            listener(self._state)

    def _persist(self) -> None:
        if self._storage is None:
            return
        try:
            self._storage.set_item(self._key, serialize_state(self._state))
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to persist store snapshot under key %s", self._key)

    # Trips

    def get_trip(self, trip_id: str) -> Trip | None:
        return next((t for t in self._state.trips if t.id == trip_id), None)

    def add_trip(self, trip: Trip) -> None:
        self._set(trips=[*self._state.trips, trip])

    def update_trip(self, trip_id: str, **fields: Any) -> None:
        trip = self.get_trip(trip_id)
        if trip is None:
            return
        updated = _merged(trip, {**fields, "updated_at": utcnow()})
        self._set(trips=[updated if t.id == trip_id else t for t in self._state.trips])

    def delete_trip(self, trip_id: str) -> None:
        if self.get_trip(trip_id) is None:
            return
        self._set(
            trips=[t for t in self._state.trips if t.id != trip_id],
            **self._without_trip_dependents(trip_id),
        )

    def _without_trip_dependents(self, trip_id: str) -> dict[str, Any]:
        """Budget items and journal entries with every row referencing trip_id removed."""
        return {
            "budget_items": [b for b in self._state.budget_items if b.trip_id != trip_id],
            "journal_entries": [j for j in self._state.journal_entries if j.trip_id != trip_id],
        }

    def set_current_trip(self, trip_id: str | None) -> None:
        self._set(current_trip_id=trip_id)

    # Emergency contacts

    def add_emergency_contact(self, contact: EmergencyContact) -> None:
        self._set(emergency_contacts=[*self._state.emergency_contacts, contact])

    def remove_emergency_contact(self, contact_id: str) -> None:
        self._set(emergency_contacts=[c for c in self._state.emergency_contacts if c.id != contact_id])

    # Budget

    def budget_items_for(self, trip_id: str) -> list[BudgetItem]:
        return [b for b in self._state.budget_items if b.trip_id == trip_id]

    def add_budget_item(self, item: BudgetItem) -> None:
        self._set(budget_items=[*self._state.budget_items, item])

    def remove_budget_item(self, item_id: str) -> None:
        self._set(budget_items=[b for b in self._state.budget_items if b.id != item_id])

    # Journal

    def journal_entries_for(self, trip_id: str) -> list[JournalEntry]:
        return [j for j in self._state.journal_entries if j.trip_id == trip_id]

    def add_journal_entry(self, entry: JournalEntry) -> None:
        self._set(journal_entries=[*self._state.journal_entries, entry])

    def update_journal_entry(self, entry_id: str, **fields: Any) -> None:
        entry = next((j for j in self._state.journal_entries if j.id == entry_id), None)
        if entry is None:
            return
        updated = _merged(entry, fields)
        self._set(journal_entries=[updated if j.id == entry_id else j for j in self._state.journal_entries])

    def remove_journal_entry(self, entry_id: str) -> None:
        self._set(journal_entries=[j for j in self._state.journal_entries if j.id != entry_id])

    # User

    def set_user_name(self, name: str) -> None:
        self._set(user_name=name)
