"""SQLAlchemy ORM model for the journal_entries table."""

from sqlalchemy import ARRAY, CheckConstraint, Date, Index, Integer, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from core.db.schemas.base import Base


class JournalEntryRow(Base):
    __tablename__ = "journal_entries"

    id: Mapped[str] = mapped_column(UUID, primary_key=True, server_default=text("gen_random_uuid()"))
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    trip_id: Mapped[str | None] = mapped_column(UUID)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    mood: Mapped[str | None] = mapped_column(String(50))
    location: Mapped[str | None] = mapped_column(String(255))
    photos = mapped_column(ARRAY(Text))
    rating: Mapped[int | None] = mapped_column(Integer)
    date = mapped_column(Date, nullable=False)
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))
    updated_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    __table_args__ = (
        CheckConstraint("rating IS NULL OR rating BETWEEN 1 AND 5", name="chk_journal_entries_rating"),
        Index("idx_journal_entries_user_id", "user_id"),
    )
