"""Client records of the authenticated photographer."""

from typing import Annotated

from fastapi import APIRouter, Depends

from photodesk.api.routes.auth import get_current_user
from photodesk.schemas.auth import CurrentUser
from photodesk.schemas.clients import Client, ClientCreate, ClientIn, ClientUpdate
from photodesk.services.ownership import ensure_owner
from photodesk.storage import Storage, get_storage

router = APIRouter()


@router.get("", response_model=list[Client])
def list_clients(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> list[Client]:
    return store.list_clients_by_user(user.id)


@router.post("", response_model=Client)
def create_client(
    body: ClientIn,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> Client:
    return store.create_client(ClientCreate(**body.model_dump(), user_id=user.id))


@router.get("/{client_id}", response_model=Client)
def get_client(
    client_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> Client:
    return ensure_owner(store.get_client(client_id), user.id, "Client")


@router.patch("/{client_id}", response_model=Client)
def update_client(
    client_id: int,
    body: ClientUpdate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> Client:
    ensure_owner(store.get_client(client_id), user.id, "Client")
    return store.update_client(client_id, body)


@router.delete("/{client_id}")
def delete_client(
    client_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> dict[str, bool]:
    """Delete a client; its events and photo jobs are kept with client_id cleared."""
    ensure_owner(store.get_client(client_id), user.id, "Client")
    store.delete_client(client_id)
    return {"success": True}
