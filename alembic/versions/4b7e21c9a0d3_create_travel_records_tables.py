"""create_travel_records_tables

Revision ID: 4b7e21c9a0d3
Revises: 
Create Date: 2026-10-18 09:12:44.218305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7e21c9a0d3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid()
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")

    op.execute("""
        CREATE TABLE trips (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id VARCHAR(255) NOT NULL,
            origin TEXT NOT NULL,
            destination TEXT NOT NULL,
            departure_date DATE NOT NULL,
            return_date DATE,
            transport_mode VARCHAR(20) NOT NULL,
            distance DOUBLE PRECISION,
            duration VARCHAR(50),
            estimated_cost DOUBLE PRECISION,
            currency VARCHAR(3) NOT NULL DEFAULT 'INR',
            status VARCHAR(20) NOT NULL DEFAULT 'planning',
            co2_footprint DOUBLE PRECISION,
            notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT chk_trips_transport_mode
                CHECK (transport_mode IN ('flight', 'train', 'bus', 'car', 'bike')),
            CONSTRAINT chk_trips_status
                CHECK (status IN ('planning', 'upcoming', 'ongoing', 'completed', 'cancelled'))
        )
    """)
    op.execute("CREATE INDEX idx_trips_user_id ON trips (user_id)")

    # trip_id is deliberately not a foreign key: trip deletes do not cascade here
    op.execute("""
        CREATE TABLE budget_items (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id VARCHAR(255) NOT NULL,
            trip_id UUID,
            category VARCHAR(20) NOT NULL,
            amount DOUBLE PRECISION NOT NULL,
            currency VARCHAR(3) NOT NULL DEFAULT 'INR',
            description TEXT,
            date DATE NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT chk_budget_items_category
                CHECK (category IN ('transport', 'stay', 'food', 'activities', 'shopping', 'other')),
            CONSTRAINT chk_budget_items_amount CHECK (amount >= 0)
        )
    """)
    op.execute("CREATE INDEX idx_budget_items_user_id ON budget_items (user_id)")
    op.execute("CREATE INDEX idx_budget_items_trip_id ON budget_items (trip_id)")

    op.execute("""
        CREATE TABLE journal_entries (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id VARCHAR(255) NOT NULL,
            trip_id UUID,
            title VARCHAR(255) NOT NULL,
            content TEXT NOT NULL,
            mood VARCHAR(50),
            location VARCHAR(255),
            photos TEXT[],
            rating INTEGER,
            date DATE NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT chk_journal_entries_rating CHECK (rating IS NULL OR rating BETWEEN 1 AND 5)
        )
    """)
    op.execute("CREATE INDEX idx_journal_entries_user_id ON journal_entries (user_id)")

    op.execute("""
        CREATE TABLE emergency_contacts (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id VARCHAR(255) NOT NULL,
            name VARCHAR(255) NOT NULL,
            phone VARCHAR(50) NOT NULL,
            relationship VARCHAR(50) NOT NULL DEFAULT 'Other',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("CREATE INDEX idx_emergency_contacts_user_id ON emergency_contacts (user_id)")

    op.execute("""
        CREATE TABLE profiles (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id VARCHAR(255) NOT NULL UNIQUE,
            name VARCHAR(255) NOT NULL,
            avatar_url TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)


def downgrade() -> None:
    """Downgrade schema."""
    for table in ("profiles", "emergency_contacts", "journal_entries", "budget_items", "trips"):
        op.execute(f"DROP TABLE IF EXISTS {table}")
