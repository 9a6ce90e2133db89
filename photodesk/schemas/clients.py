"""Pydantic schemas for clients (the photographer's customers)."""

from pydantic import BaseModel, ConfigDict, Field


class ClientIn(BaseModel):
    """Client fields accepted from the API; the owner comes from the bearer token."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    phone: str | None = None
    notes: str | None = None
    address: str | None = None
    vat_number: str | None = None


class ClientCreate(ClientIn):
    """Store input for a new client."""

    user_id: int


class ClientUpdate(BaseModel):
    """Partial update; None keeps the stored value."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, min_length=3, max_length=255)
    phone: str | None = None
    notes: str | None = None
    address: str | None = None
    vat_number: str | None = None


class Client(ClientCreate):
    """Stored client record."""

    model_config = ConfigDict(from_attributes=True)

    id: int


class ClientSummary(BaseModel):
    """Name and email of a job's client, joined into job payloads."""

    name: str
    email: str
