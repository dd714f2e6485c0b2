"""Pydantic models for the user's travel records."""

from datetime import date, datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field


def _new_id() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TransportMode(str, Enum):
    FLIGHT = "flight"
    TRAIN = "train"
    BUS = "bus"
    CAR = "car"
    BIKE = "bike"


class TripStatus(str, Enum):
    PLANNING = "planning"
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BudgetCategory(str, Enum):
    TRANSPORT = "transport"
    STAY = "stay"
    FOOD = "food"
    ACTIVITIES = "activities"
    SHOPPING = "shopping"
    OTHER = "other"


class Trip(BaseModel):
    id: str = Field(default_factory=_new_id)
    user_id: str
    origin: str
    destination: str
    departure_date: date
    return_date: date | None = None
    transport_mode: TransportMode
    distance: float | None = Field(default=None, ge=0)
    duration: str | None = None
    estimated_cost: float | None = None
    currency: str = "INR"
    status: TripStatus = TripStatus.PLANNING
    co2_footprint: float | None = None
    notes: str | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class BudgetItem(BaseModel):
    id: str = Field(default_factory=_new_id)
    user_id: str
    trip_id: str | None = None
    category: BudgetCategory
    amount: float = Field(..., ge=0)
    currency: str = "INR"
    description: str | None = None
    date: date
    created_at: datetime = Field(default_factory=utcnow)


class JournalEntry(BaseModel):
    id: str = Field(default_factory=_new_id)
    user_id: str
    trip_id: str | None = None
    title: str
    content: str
    mood: str | None = None
    location: str | None = None
    photos: list[str] | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    date: date
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class EmergencyContact(BaseModel):
    id: str = Field(default_factory=_new_id)
    user_id: str
    name: str
    phone: str
    relationship: str = "Other"
    created_at: datetime = Field(default_factory=utcnow)


class Profile(BaseModel):
    id: str = Field(default_factory=_new_id)
    user_id: str
    name: str
    avatar_url: str | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
