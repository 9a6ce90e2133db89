"""Pydantic schemas for photo-job comments."""

from pydantic import BaseModel, ConfigDict, Field

from photodesk.schemas.types import UtcDateTime


class CommentIn(BaseModel):
    """Body of an owner-channel comment."""

    content: str = Field(default="", max_length=5000)


class PhotoJobCommentCreate(BaseModel):
    """Store input for a new comment."""

    job_id: int
    content: str
    is_from_client: bool = False


class PhotoJobCommentUpdate(BaseModel):
    """Partial update; None keeps the stored value."""

    content: str | None = None
    is_from_client: bool | None = None


class PhotoJobComment(PhotoJobCommentCreate):
    """Stored comment record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: UtcDateTime
    updated_at: UtcDateTime
