"""
Database ORM models and clients for EnviroAI.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from core.db.records import RecordKind, RecordsClient, model_for
from core.db.schemas.base import Base
from core.db.schemas.budget_item import BudgetItemRow
from core.db.schemas.emergency_contact import EmergencyContactRow
from core.db.schemas.journal_entry import JournalEntryRow
from core.db.schemas.profile import ProfileRow
from core.db.schemas.trip import TripRow

__all__ = [
    "Base",
    "BudgetItemRow",
    "EmergencyContactRow",
    "JournalEntryRow",
    "ProfileRow",
    "RecordKind",
    "RecordsClient",
    "model_for",
    "TripRow",
]
