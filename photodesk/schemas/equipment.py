"""Pydantic schemas for equipment inventory."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

EquipmentStatus = Literal["available", "in_use", "maintenance"]


class EquipmentIn(BaseModel):
    """Equipment fields accepted from the API."""

    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100, description="Free-form category (camera, lens, ...).")
    status: EquipmentStatus = "available"


class EquipmentCreate(EquipmentIn):
    """Store input for a new equipment item."""

    user_id: int


class EquipmentUpdate(BaseModel):
    """Partial update; None keeps the stored value."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    type: str | None = Field(default=None, min_length=1, max_length=100)
    status: EquipmentStatus | None = None


class Equipment(EquipmentCreate):
    """Stored equipment record."""

    model_config = ConfigDict(from_attributes=True)

    id: int


class EquipmentPresetIn(BaseModel):
    """A named bundle of equipment items, e.g. "Wedding kit"."""

    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100, description="Free-form shoot type (wedding, studio, ...).")
    equipment_ids: list[int] = Field(default_factory=list)


class EquipmentPresetCreate(EquipmentPresetIn):
    user_id: int


class EquipmentPresetUpdate(BaseModel):
    """Partial update; None keeps the stored value, an empty list empties the bundle."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    type: str | None = Field(default=None, min_length=1, max_length=100)
    equipment_ids: list[int] | None = None


class EquipmentPreset(EquipmentPresetCreate):
    """Stored equipment preset."""

    model_config = ConfigDict(from_attributes=True)

    id: int
