"""Pydantic schemas for calendar events (bookings independent of photo jobs)."""

from pydantic import BaseModel, ConfigDict, Field

from photodesk.schemas.types import UtcDateTime


class EventIn(BaseModel):
    """Event fields accepted from the API."""

    title: str = Field(..., min_length=1, max_length=255)
    date: UtcDateTime
    end_date: UtcDateTime | None = None
    client_id: int | None = None
    equipment_ids: list[int] | None = None
    notes: str | None = None


class EventCreate(EventIn):
    """Store input for a new event."""

    user_id: int


class EventUpdate(BaseModel):
    """Partial update; None keeps the stored value."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    date: UtcDateTime | None = None
    end_date: UtcDateTime | None = None
    client_id: int | None = None
    equipment_ids: list[int] | None = None
    notes: str | None = None


class Event(EventCreate):
    """Stored event record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
