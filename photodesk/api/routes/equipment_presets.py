"""Equipment presets of the authenticated photographer."""

from typing import Annotated

from fastapi import APIRouter, Depends

from photodesk.api.routes.auth import get_current_user
from photodesk.schemas.auth import CurrentUser
from photodesk.schemas.equipment import (
    EquipmentPreset,
    EquipmentPresetCreate,
    EquipmentPresetIn,
    EquipmentPresetUpdate,
)
from photodesk.services.equipment_presets import check_equipment_ids
from photodesk.services.ownership import ensure_owner
from photodesk.storage import Storage, get_storage

router = APIRouter()


@router.get("", response_model=list[EquipmentPreset])
def list_equipment_presets(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> list[EquipmentPreset]:
    return store.list_equipment_presets_by_user(user.id)


@router.post("", response_model=EquipmentPreset)
def create_equipment_preset(
    body: EquipmentPresetIn,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> EquipmentPreset:
    check_equipment_ids(store, body.equipment_ids, user.id)
    return store.create_equipment_preset(EquipmentPresetCreate(**body.model_dump(), user_id=user.id))


@router.get("/{preset_id}", response_model=EquipmentPreset)
def get_equipment_preset(
    preset_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> EquipmentPreset:
    return ensure_owner(store.get_equipment_preset(preset_id), user.id, "Equipment preset")


@router.patch("/{preset_id}", response_model=EquipmentPreset)
def update_equipment_preset(
    preset_id: int,
    body: EquipmentPresetUpdate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> EquipmentPreset:
    ensure_owner(store.get_equipment_preset(preset_id), user.id, "Equipment preset")
    check_equipment_ids(store, body.equipment_ids, user.id)
    return store.update_equipment_preset(preset_id, body)


@router.delete("/{preset_id}")
def delete_equipment_preset(
    preset_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> dict[str, bool]:
    ensure_owner(store.get_equipment_preset(preset_id), user.id, "Equipment preset")
    store.delete_equipment_preset(preset_id)
    return {"success": True}
