import json
from datetime import timedelta

import pytest

from core.errors import ValidationError
from core.metrics import compute_trip_stats
from core.models import TransportMode, TripStatus
from core.store import (
    DEFAULT_STORAGE_KEY,
    LocalStorage,
    StoreState,
    TripStore,
    deserialize_state,
    serialize_state,
)


def test_defaults():
    store = TripStore()
    assert store.state.trips == []
    assert store.state.budget_items == []
    assert store.state.current_trip_id is None
    assert store.state.user_name == "Traveler"


def test_add_and_get_trip(make_trip):
    store = TripStore()
    trip = make_trip()

    store.add_trip(trip)

    assert store.get_trip(trip.id) == trip
    assert store.get_trip("missing") is None


def test_update_trip_merges_fields_and_refreshes_updated_at(make_trip):
    trip = make_trip()
    trip = trip.model_copy(update={"updated_at": trip.updated_at - timedelta(days=1)})
    store = TripStore()
    store.add_trip(trip)

    store.update_trip(trip.id, notes="Window seat")

    updated = store.get_trip(trip.id)
    assert updated.notes == "Window seat"
    assert updated.destination == "Goa"
    assert updated.updated_at > trip.updated_at


def test_update_trip_with_no_fields_only_touches_updated_at(make_trip):
    trip = make_trip()
    trip = trip.model_copy(update={"updated_at": trip.updated_at - timedelta(days=1)})
    store = TripStore()
    store.add_trip(trip)

    store.update_trip(trip.id)

    updated = store.get_trip(trip.id)
    assert updated.model_dump(exclude={"updated_at"}) == trip.model_dump(exclude={"updated_at"})
    assert updated.updated_at > trip.updated_at


def test_update_missing_trip_is_noop(make_trip):
    store = TripStore()
    store.add_trip(make_trip())
    before = store.state
    calls = []
    store.subscribe(calls.append)

    store.update_trip("missing", notes="x")

    assert store.state is before
    assert calls == []


def test_delete_trip_cascades_to_budget_and_journal(make_trip, make_budget_item, make_journal_entry):
    goa = make_trip()
    kerala = make_trip(destination="Kochi")
    store = TripStore()
    store.add_trip(goa)
    store.add_trip(kerala)
    store.add_budget_item(make_budget_item(trip_id=goa.id))
    kept_item = make_budget_item(trip_id=kerala.id)
    store.add_budget_item(kept_item)
    loose_item = make_budget_item(trip_id=None)
    store.add_budget_item(loose_item)
    store.add_journal_entry(make_journal_entry(trip_id=goa.id))
    kept_entry = make_journal_entry(trip_id=kerala.id)
    store.add_journal_entry(kept_entry)

    store.delete_trip(goa.id)

    assert [t.id for t in store.state.trips] == [kerala.id]
    assert store.state.budget_items == [kept_item, loose_item]
    assert store.state.journal_entries == [kept_entry]


def test_delete_missing_trip_is_noop(make_trip, make_budget_item):
    store = TripStore()
    store.add_trip(make_trip())
    store.add_budget_item(make_budget_item())
    before = store.state

    store.delete_trip("missing")

    assert store.state is before


def test_budget_and_journal_filters(make_trip, make_budget_item, make_journal_entry):
    trip = make_trip()
    store = TripStore()
    item = make_budget_item(trip_id=trip.id)
    store.add_budget_item(item)
    store.add_budget_item(make_budget_item(trip_id="other"))
    entry = make_journal_entry(trip_id=trip.id)
    store.add_journal_entry(entry)

    assert store.budget_items_for(trip.id) == [item]
    assert store.journal_entries_for(trip.id) == [entry]

    store.remove_budget_item(item.id)
    assert store.budget_items_for(trip.id) == []


def test_update_and_remove_journal_entry(make_journal_entry):
    store = TripStore()
    entry = make_journal_entry()
    store.add_journal_entry(entry)

    store.update_journal_entry(entry.id, mood="happy", rating=5)
    assert store.state.journal_entries[0].mood == "happy"
    assert store.state.journal_entries[0].rating == 5

    store.remove_journal_entry(entry.id)
    assert store.state.journal_entries == []


def test_emergency_contacts_and_user_name():
    from core.models import EmergencyContact

    store = TripStore()
    contact = EmergencyContact(user_id="user_123", name="Asha", phone="+91 98200 00000")

    store.add_emergency_contact(contact)
    store.set_user_name("Ravi")
    assert store.state.emergency_contacts == [contact]
    assert store.state.user_name == "Ravi"

    store.remove_emergency_contact(contact.id)
    assert store.state.emergency_contacts == []


def test_subscribe_and_unsubscribe(make_trip):
    store = TripStore()
    seen = []
    unsubscribe = store.subscribe(seen.append)

    store.set_current_trip("abc")
    unsubscribe()
    store.set_current_trip(None)

    assert len(seen) == 1
    assert seen[0].current_trip_id == "abc"
    unsubscribe()


def test_persists_under_storage_key(tmp_path, make_trip):
    storage = LocalStorage(tmp_path)
    store = TripStore(storage=storage)
    trip = make_trip()

    store.add_trip(trip)

    payload = json.loads((tmp_path / f"{DEFAULT_STORAGE_KEY}.json").read_text())
    assert payload["version"] == 0
    assert payload["state"]["trips"][0]["id"] == trip.id


def test_rehydrates_from_storage(tmp_path, make_trip, make_budget_item):
    storage = LocalStorage(tmp_path)
    store = TripStore(storage=storage)
    trip = make_trip(status="completed", estimated_cost=12000)
    store.add_trip(trip)
    store.add_budget_item(make_budget_item(trip_id=trip.id))
    store.set_user_name("Ravi")

    restored = TripStore.load(storage)

    assert restored.state == store.state
    assert restored.get_trip(trip.id).status == "completed"


def test_load_without_snapshot_uses_defaults(tmp_path):
    store = TripStore.load(LocalStorage(tmp_path))
    assert store.state == StoreState()


def test_load_corrupt_snapshot_falls_back_to_defaults(tmp_path):
    storage = LocalStorage(tmp_path)
    storage.set_item(DEFAULT_STORAGE_KEY, "{not json")

    store = TripStore.load(storage)

    assert store.state == StoreState()


def test_load_snapshot_missing_state_falls_back_to_defaults(tmp_path):
    storage = LocalStorage(tmp_path)
    storage.set_item(DEFAULT_STORAGE_KEY, json.dumps({"version": 0}))

    assert TripStore.load(storage).state == StoreState()


def test_serialize_round_trip(make_trip):
    state = StoreState(trips=[make_trip()], current_trip_id="x")
    assert deserialize_state(serialize_state(state)) == state


def test_local_storage_remove_item(tmp_path):
    storage = LocalStorage(tmp_path)
    storage.set_item("k", "v")
    assert storage.get_item("k") == "v"

    storage.remove_item("k")
    storage.remove_item("k")

    assert storage.get_item("k") is None


def test_update_trip_coerces_wire_values(tmp_path, make_trip):
    storage = LocalStorage(tmp_path)
    store = TripStore(storage=storage)
    trip = make_trip()
    store.add_trip(trip)

    store.update_trip(trip.id, transport_mode="flight", status="completed", distance="1000")

    updated = store.get_trip(trip.id)
    assert updated.transport_mode is TransportMode.FLIGHT
    assert updated.status is TripStatus.COMPLETED
    assert updated.distance == 1000

    stats = compute_trip_stats(store.state.trips)
    assert stats.transport_mode_breakdown[TransportMode.FLIGHT].count == 1
    assert stats.co2_footprint_kg == pytest.approx(255)
    assert TripStore.load(storage).state == store.state


def test_update_trip_rejects_invalid_values(tmp_path, make_trip):
    storage = LocalStorage(tmp_path)
    store = TripStore(storage=storage)
    trip = make_trip()
    store.add_trip(trip)
    before = store.state
    calls = []
    store.subscribe(calls.append)

    with pytest.raises(ValidationError):
        store.update_trip(trip.id, distance="far")
    with pytest.raises(ValidationError):
        store.update_trip(trip.id, transport_mode="boat")

    assert store.state is before
    assert calls == []
    assert [t.id for t in TripStore.load(storage).state.trips] == [trip.id]


def test_update_trip_rejects_unknown_and_id_fields(make_trip):
    store = TripStore()
    trip = make_trip()
    store.add_trip(trip)

    with pytest.raises(ValidationError, match="seats"):
        store.update_trip(trip.id, seats=2)
    with pytest.raises(ValidationError, match="id"):
        store.update_trip(trip.id, id="other")

    assert store.get_trip(trip.id) == trip


def test_update_journal_entry_coerces_and_persists(tmp_path, make_journal_entry):
    storage = LocalStorage(tmp_path)
    store = TripStore(storage=storage)
    entry = make_journal_entry()
    store.add_journal_entry(entry)

    store.update_journal_entry(entry.id, rating="4", date="2026-12-22")

    updated = store.state.journal_entries[0]
    assert updated.rating == 4
    assert updated.date.isoformat() == "2026-12-22"
    assert TripStore.load(storage).state == store.state


def test_update_journal_entry_rejects_invalid_values(tmp_path, make_journal_entry):
    storage = LocalStorage(tmp_path)
    store = TripStore(storage=storage)
    entry = make_journal_entry()
    store.add_journal_entry(entry)

    with pytest.raises(ValidationError):
        store.update_journal_entry(entry.id, rating=9)

    assert store.state.journal_entries == [entry]
    assert TripStore.load(storage).state.journal_entries == [entry]


def test_update_missing_journal_entry_is_noop(make_journal_entry):
    store = TripStore()
    store.add_journal_entry(make_journal_entry())
    before = store.state

    store.update_journal_entry("missing", rating=9)

    assert store.state is before
