"""Pydantic schemas for user accounts: stored record, store input and public read model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UserRole = Literal["admin", "photographer", "assistant"]

USER_ROLE_VALUES: frozenset[str] = frozenset({"admin", "photographer", "assistant"})


class UserCreate(BaseModel):
    """Store input for a new user. The password is already hashed by the caller."""

    username: str = Field(..., min_length=1, max_length=64)
    email: str = Field(..., min_length=3, max_length=255)
    password_hash: str = Field(..., min_length=1)
    role: UserRole = "photographer"
    team_id: int | None = None
    iban: str | None = None
    bank_name: str | None = None
    bank_address: str | None = None
    bic_code: str | None = None


class User(UserCreate):
    """Stored user record."""

    model_config = ConfigDict(from_attributes=True)

    id: int


class UserRead(BaseModel):
    """User as returned by the API (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: UserRole
    team_id: int | None = None
    iban: str | None = None
    bank_name: str | None = None
    bank_address: str | None = None
    bic_code: str | None = None


class UserProfileUpdate(BaseModel):
    """Profile settings a user may change on their own account; None keeps the stored value."""

    iban: str | None = Field(default=None, max_length=64)
    bank_name: str | None = Field(default=None, max_length=255)
    bank_address: str | None = Field(default=None, max_length=1024)
    bic_code: str | None = Field(default=None, max_length=32)
