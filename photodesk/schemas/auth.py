"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from photodesk.schemas.users import UserRole


class RegisterRequest(BaseModel):
    """Self-registration of a photographer account."""

    username: str = Field(..., min_length=3, max_length=64, description="Username")
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=8, max_length=128, description="Password")
    role: UserRole = Field(default="photographer")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=64, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class CurrentUser(BaseModel):
    """Authenticated user (id, username, role) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: UserRole
