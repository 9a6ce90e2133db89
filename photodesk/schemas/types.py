"""Shared pydantic field types."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# SQLite drops the offset of DateTime(timezone=True) columns; every schema datetime goes
# through this so both storage backends return aware UTC values.
UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]
