"""Equipment inventory of the authenticated photographer."""

from typing import Annotated

from fastapi import APIRouter, Depends

from photodesk.api.routes.auth import get_current_user
from photodesk.schemas.auth import CurrentUser
from photodesk.schemas.equipment import Equipment, EquipmentCreate, EquipmentIn, EquipmentUpdate
from photodesk.services.ownership import ensure_owner
from photodesk.storage import Storage, get_storage

router = APIRouter()


@router.get("", response_model=list[Equipment])
def list_equipment(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> list[Equipment]:
    return store.list_equipment_by_user(user.id)


@router.post("", response_model=Equipment)
def create_equipment(
    body: EquipmentIn,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> Equipment:
    return store.create_equipment(EquipmentCreate(**body.model_dump(), user_id=user.id))


@router.get("/{equipment_id}", response_model=Equipment)
def get_equipment(
    equipment_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> Equipment:
    return ensure_owner(store.get_equipment(equipment_id), user.id, "Equipment")


@router.patch("/{equipment_id}", response_model=Equipment)
def update_equipment(
    equipment_id: int,
    body: EquipmentUpdate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> Equipment:
    ensure_owner(store.get_equipment(equipment_id), user.id, "Equipment")
    return store.update_equipment(equipment_id, body)


@router.delete("/{equipment_id}")
def delete_equipment(
    equipment_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> dict[str, bool]:
    ensure_owner(store.get_equipment(equipment_id), user.id, "Equipment")
    store.delete_equipment(equipment_id)
    return {"success": True}
