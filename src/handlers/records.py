"""Records handler: per-user CRUD for trips, budget items, journal entries and emergency contacts.

Routes (REST API proxy, kind in {trips, budget_items, journal_entries, emergency_contacts}):
    GET    /{kind}          list, newest first
    GET    /{kind}/{id}     fetch one
    POST   /{kind}          create
    PATCH  /{kind}/{id}     update fields
    DELETE /{kind}/{id}     delete (trips do not cascade)
"""

from typing import Any

from core.config import get_config
from core.db import RecordKind, RecordsClient, model_for
from core.errors import ErrorCode, RecordsError, ValidationError
from core.http import Response, current_user_id, http_handler, http_method, parse_request


def _kind(event: dict[str, Any]) -> RecordKind:
    raw = (event.get("pathParameters") or {}).get("kind", "")
    try:
        return RecordKind(raw)
    except ValueError as e:
        raise ValidationError(f"Unknown record kind {raw!r}", code=ErrorCode.INVALID_REQUEST) from e


def _not_found(kind: RecordKind, record_id: str) -> RecordsError:
    return RecordsError(f"No {kind.value} row {record_id}", code=ErrorCode.RECORD_NOT_FOUND)


@http_handler
def handler(event: dict[str, Any], body: dict[str, Any]) -> Any:
    user_id = current_user_id(event)
    kind = _kind(event)
    record_id = (event.get("pathParameters") or {}).get("id")
    method = http_method(event)

    if method in ("PATCH", "DELETE") and not record_id:
        raise ValidationError(f"{method} requires a record id", code=ErrorCode.INVALID_REQUEST)

    with RecordsClient(get_config()) as records:
        if method == "GET" and record_id:
            record = records.get_record(kind, user_id, record_id)
            if record is None:
                raise _not_found(kind, record_id)
            return record

        if method == "GET":
            return records.list_records(kind, user_id)

        if method == "POST":
            record = parse_request(model_for(kind), {**body, "user_id": user_id})
            return Response(records.insert_record(kind, record), status_code=201)

        if method == "PATCH":
            updated = records.update_record(kind, user_id, record_id, body)
            if updated is None:
                raise _not_found(kind, record_id)
            return updated

        if method == "DELETE":
            if not records.delete_record(kind, user_id, record_id):
                raise _not_found(kind, record_id)
            return {"deleted": record_id}

    raise ValidationError(f"Unsupported method {method}", code=ErrorCode.INVALID_REQUEST)
