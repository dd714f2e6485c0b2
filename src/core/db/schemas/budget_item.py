"""SQLAlchemy ORM model for the budget_items table."""

from sqlalchemy import CheckConstraint, Date, Float, Index, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from core.db.schemas.base import Base


class BudgetItemRow(Base):
    __tablename__ = "budget_items"

    id: Mapped[str] = mapped_column(UUID, primary_key=True, server_default=text("gen_random_uuid()"))
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    # No foreign key: deleting a trip leaves its budget items in place
    trip_id: Mapped[str | None] = mapped_column(UUID)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, server_default="INR")
    description: Mapped[str | None] = mapped_column(Text)
    date = mapped_column(Date, nullable=False)
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    __table_args__ = (
        CheckConstraint(
            "category IN ('transport', 'stay', 'food', 'activities', 'shopping', 'other')",
            name="chk_budget_items_category",
        ),
        CheckConstraint("amount >= 0", name="chk_budget_items_amount"),
        Index("idx_budget_items_user_id", "user_id"),
        Index("idx_budget_items_trip_id", "trip_id"),
    )
