"""Owner checks for the authenticated channel."""

from typing import TypeVar

from photodesk.core.errors import ForbiddenError, NotFoundError

RecordT = TypeVar("RecordT")


def ensure_owner(
    record: RecordT | None,
    caller_user_id: int,
    what: str,
    owner_field: str = "user_id",
) -> RecordT:
    """
    Return record if caller_user_id owns it.

    Raises NotFoundError when record is None and ForbiddenError when it belongs to someone else.
    """
    if record is None:
        raise NotFoundError(f"{what} not found")
    if getattr(record, owner_field) != caller_user_id:
        raise ForbiddenError(f"Not authorized to access this {what.lower()}")
    return record
