"""SQLAlchemy ORM model for the trips table."""

from sqlalchemy import CheckConstraint, Date, Float, Index, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from core.db.schemas.base import Base


class TripRow(Base):
    __tablename__ = "trips"

    id: Mapped[str] = mapped_column(UUID, primary_key=True, server_default=text("gen_random_uuid()"))
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    origin: Mapped[str] = mapped_column(Text, nullable=False)
    destination: Mapped[str] = mapped_column(Text, nullable=False)
    departure_date = mapped_column(Date, nullable=False)
    return_date = mapped_column(Date)
    transport_mode: Mapped[str] = mapped_column(String(20), nullable=False)
    distance: Mapped[float | None] = mapped_column(Float)
    duration: Mapped[str | None] = mapped_column(String(50))
    estimated_cost: Mapped[float | None] = mapped_column(Float)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, server_default="INR")
    status: Mapped[str] = mapped_column(String(20), nullable=False, server_default="planning")
    co2_footprint: Mapped[float | None] = mapped_column(Float)
    notes: Mapped[str | None] = mapped_column(Text)
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))
    updated_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    __table_args__ = (
        CheckConstraint("transport_mode IN ('flight', 'train', 'bus', 'car', 'bike')", name="chk_trips_transport_mode"),
        CheckConstraint(
            "status IN ('planning', 'upcoming', 'ongoing', 'completed', 'cancelled')", name="chk_trips_status"
        ),
        Index("idx_trips_user_id", "user_id"),
    )
