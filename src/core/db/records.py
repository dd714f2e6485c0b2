"""PostgreSQL records client: per-user CRUD over trips, budget, journal and contacts."""

import json
import logging
from enum import Enum
from typing import Any, NamedTuple, TypeVar
from uuid import UUID

import boto3
import psycopg
from psycopg import sql
from psycopg.rows import dict_row
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.config import Config
from core.errors import EnviroAIError, ErrorCode, RecordsError, ValidationError
from core.models.records import BudgetItem, EmergencyContact, JournalEntry, Profile, Trip

logger = logging.getLogger(__name__)


class RecordKind(str, Enum):
    TRIPS = "trips"
    BUDGET_ITEMS = "budget_items"
    JOURNAL_ENTRIES = "journal_entries"
    EMERGENCY_CONTACTS = "emergency_contacts"


class _TableSpec(NamedTuple):
    model: type[BaseModel]
    order_by: str
    has_updated_at: bool


_TABLES: dict[RecordKind, _TableSpec] = {
    RecordKind.TRIPS: _TableSpec(Trip, "created_at", True),
    RecordKind.BUDGET_ITEMS: _TableSpec(BudgetItem, "created_at", False),
    RecordKind.JOURNAL_ENTRIES: _TableSpec(JournalEntry, "date", True),
    RecordKind.EMERGENCY_CONTACTS: _TableSpec(EmergencyContact, "created_at", False),
}

M = TypeVar("M", bound=BaseModel)

_IMMUTABLE_FIELDS = {"id", "user_id", "created_at", "updated_at"}


def model_for(kind: RecordKind) -> type[BaseModel]:
    return _TABLES[kind].model


def _to_db(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _from_row(model: type[M], row: dict[str, Any]) -> M:
    return model.model_validate({k: str(v) if isinstance(v, UUID) else v for k, v in row.items()})


class RecordsClient:
    def __init__(self, config: Config) -> None:
        self._config = config
        self._conn: psycopg.Connection | None = None
        self._secret_cache: dict[str, str] | None = None

    def _get_credentials(self) -> dict[str, str]:
        if self._config.db_secret_arn:
            if self._secret_cache is None:
                client = boto3.client("secretsmanager", region_name=self._config.aws_region)
                secret = client.get_secret_value(SecretId=self._config.db_secret_arn)
                self._secret_cache = json.loads(secret["SecretString"])
            return self._secret_cache
        return {
            "host": self._config.db_host,
            "port": str(self._config.db_port),
            "dbname": self._config.db_name,
            "user": self._config.db_user,
            "password": self._config.db_password,
        }

    def connect(self) -> None:
        creds = self._get_credentials()
        self._conn = psycopg.connect(
            host=creds.get("host", self._config.db_host),
            port=int(creds.get("port", self._config.db_port)),
            dbname=creds.get("dbname", self._config.db_name),
            user=creds.get("username", creds.get("user", self._config.db_user)),
            password=creds.get("password", self._config.db_password),
            row_factory=dict_row,
        )

    def disconnect(self) -> None:
        if self._conn and not self._conn.closed:
            self._conn.close()
        self._conn = None

    def _require_connection(self) -> psycopg.Connection:
        """Return the active connection or raise if not connected."""
        if self._conn is None or self._conn.closed:
            raise EnviroAIError("RecordsClient is not connected. Call connect() first.")
        return self._conn

    def health_check(self) -> bool:
        try:
            conn = self._require_connection()
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
            return True
        except Exception:
            return False

    def _execute(self, query: sql.Composable, params: tuple[Any, ...], write: bool = False) -> list[dict[str, Any]]:
        conn = self._require_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(query, params)
                rows = cur.fetchall() if cur.description else []
            if write:
                conn.commit()
            return rows
        except psycopg.Error as e:
            conn.rollback()
            raise RecordsError(f"Records query failed: {e}", code=ErrorCode.RECORDS_FAILED) from e

    def list_records(self, kind: RecordKind, user_id: str) -> list[BaseModel]:
        spec = _TABLES[kind]
        query = sql.SQL("SELECT * FROM {} WHERE user_id = %s ORDER BY {} DESC").format(
            sql.Identifier(kind.value), sql.Identifier(spec.order_by)
        )
        return [_from_row(spec.model, row) for row in self._execute(query, (user_id,))]

    def insert_record(self, kind: RecordKind, record: BaseModel) -> BaseModel:
        spec = _TABLES[kind]
        if not isinstance(record, spec.model):
            raise ValidationError(f"{kind.value} expects {spec.model.__name__}, got {type(record).__name__}")
        values = {k: _to_db(v) for k, v in record.model_dump().items()}
        query = sql.SQL("INSERT INTO {} ({}) VALUES ({}) RETURNING *").format(
            sql.Identifier(kind.value),
            sql.SQL(", ").join(map(sql.Identifier, values)),
            sql.SQL(", ").join(sql.Placeholder() * len(values)),
        )
        rows = self._execute(query, tuple(values.values()), write=True)
        return _from_row(spec.model, rows[0])

    def get_record(self, kind: RecordKind, user_id: str, record_id: str) -> BaseModel | None:
        spec = _TABLES[kind]
        query = sql.SQL("SELECT * FROM {} WHERE user_id = %s AND id = %s").format(sql.Identifier(kind.value))
        rows = self._execute(query, (user_id, record_id))
        return _from_row(spec.model, rows[0]) if rows else None

    def update_record(
        self, kind: RecordKind, user_id: str, record_id: str, fields: dict[str, Any]
    ) -> BaseModel | None:
        """Apply fields to one of the user's rows; returns None when no such row exists."""
        spec = _TABLES[kind]
        unknown = set(fields) - (set(spec.model.model_fields) - _IMMUTABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Cannot update {kind.value} fields: {', '.join(sorted(unknown))}")

        existing = self.get_record(kind, user_id, record_id)
        if existing is None:
            return None
        try:
            merged = spec.model.model_validate({**existing.model_dump(), **fields})
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid {kind.value} update: {e}") from e

        assignments = [sql.SQL("{} = %s").format(sql.Identifier(name)) for name in fields]
        if spec.has_updated_at:
            assignments.append(sql.SQL("updated_at = NOW()"))
        if not assignments:
            return existing

        query = sql.SQL("UPDATE {} SET {} WHERE user_id = %s AND id = %s RETURNING *").format(
            sql.Identifier(kind.value), sql.SQL(", ").join(assignments)
        )
        params = (*(_to_db(getattr(merged, name)) for name in fields), user_id, record_id)
        rows = self._execute(query, params, write=True)
        return _from_row(spec.model, rows[0]) if rows else None

    def delete_record(self, kind: RecordKind, user_id: str, record_id: str) -> bool:
        """Delete one row. Deleting a trip leaves its budget items and journal entries behind."""
        query = sql.SQL("DELETE FROM {} WHERE user_id = %s AND id = %s RETURNING id").format(
            sql.Identifier(kind.value)
        )
        deleted = bool(self._execute(query, (user_id, record_id), write=True))
        logger.info("Delete %s %s for %s: %s", kind.value, record_id, user_id, "done" if deleted else "not found")
        return deleted

    def get_profile(self, user_id: str) -> Profile | None:
        rows = self._execute(sql.SQL("SELECT * FROM profiles WHERE user_id = %s"), (user_id,))
        return _from_row(Profile, rows[0]) if rows else None

    def upsert_profile(self, profile: Profile) -> Profile:
        query = sql.SQL(
            """
            INSERT INTO profiles (id, user_id, name, avatar_url)
            VALUES (%s, %s, %s, %s)
            ON CONFLICT (user_id)
            DO UPDATE SET name = EXCLUDED.name, avatar_url = EXCLUDED.avatar_url, updated_at = NOW()
            RETURNING *
            """
        )
        rows = self._execute(query, (profile.id, profile.user_id, profile.name, profile.avatar_url), write=True)
        return _from_row(Profile, rows[0])

    def __enter__(self) -> "RecordsClient":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
