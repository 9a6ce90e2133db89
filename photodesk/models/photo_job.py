"""ORM models for photo jobs and their comments."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from photodesk.models.base import Base


class PhotoJob(Base):
    """
    Photo job owned by user_id.

    password stores the bcrypt hash of the client portal password (NULL = open portal).
    client_id is set to NULL when the client is deleted.
    """

    __tablename__ = "photo_jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    client_id = Column(
        Integer, ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(32), nullable=False, default="TBC", index=True)
    amount = Column(Integer, nullable=True)
    job_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    download_link = Column(String(1024), nullable=True)
    download_expiry = Column(DateTime(timezone=True), nullable=True)
    password = Column(String(255), nullable=True)
    equipment_ids = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    comments = relationship(
        "PhotoJobComment",
        back_populates="job",
        cascade="all, delete-orphan",
    )


class PhotoJobComment(Base):
    __tablename__ = "photo_job_comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_id = Column(
        Integer, ForeignKey("photo_jobs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content = Column(Text, nullable=False)
    is_from_client = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    job = relationship("PhotoJob", back_populates="comments")
