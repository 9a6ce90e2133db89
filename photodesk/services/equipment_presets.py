"""Equipment presets: bundles may only reference the caller's own equipment."""

from photodesk.core.errors import ValidationError
from photodesk.storage.base import Storage


def check_equipment_ids(store: Storage, equipment_ids: list[int] | None, caller_user_id: int) -> None:
    """Raise ValidationError if any id is unknown or belongs to another user."""
    if not equipment_ids:
        return
    owned = {e.id for e in store.list_equipment_by_user(caller_user_id)}
    unknown = sorted(set(equipment_ids) - owned)
    if unknown:
        raise ValidationError(f"Unknown equipment ids: {', '.join(str(i) for i in unknown)}")
