"""Shared test fixtures for EnviroAI."""

import sys
from datetime import date
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def make_trip():
    from core.models import Trip

    def _make(**overrides):
        fields = dict(
            user_id="user_123",
            origin="Mumbai",
            destination="Goa",
            departure_date=date(2026, 12, 20),
            transport_mode="train",
            distance=600,
        )
        return Trip(**{**fields, **overrides})

    return _make


@pytest.fixture
def make_budget_item():
    from core.models import BudgetItem

    def _make(**overrides):
        fields = dict(user_id="user_123", category="food", amount=500, date=date(2026, 12, 21))
        return BudgetItem(**{**fields, **overrides})

    return _make


@pytest.fixture
def make_journal_entry():
    from core.models import JournalEntry

    def _make(**overrides):
        fields = dict(user_id="user_123", title="Day one", content="Beach sunset.", date=date(2026, 12, 21))
        return JournalEntry(**{**fields, **overrides})

    return _make


# PostgreSQL fixtures
@pytest.fixture
def pg_connection():
    """Provide a PostgreSQL connection for integration tests."""
    import psycopg
    from core.config import get_config

    config = get_config()
    conn_str = (
        f"host={config.db_host} port={config.db_port} "
        f"dbname={config.db_name} user={config.db_user} "
        f"password={config.db_password}"
    )

    conn = psycopg.connect(conn_str)
    yield conn

    # Rollback any uncommitted changes
    conn.rollback()
    conn.close()


@pytest.fixture
def records_client():
    """Connected RecordsClient; rows written under the test user are removed afterwards."""
    from core.config import get_config
    from core.db import RecordKind, RecordsClient

    with RecordsClient(get_config()) as client:
        yield client
        for kind in RecordKind:
            for record in client.list_records(kind, "it_user"):
                client.delete_record(kind, "it_user", record.id)
