"""Calendar events of the authenticated photographer."""

from typing import Annotated

from fastapi import APIRouter, Depends

from photodesk.api.routes.auth import get_current_user
from photodesk.schemas.auth import CurrentUser
from photodesk.schemas.events import Event, EventCreate, EventIn, EventUpdate
from photodesk.services.ownership import ensure_owner
from photodesk.storage import Storage, get_storage

router = APIRouter()


@router.get("", response_model=list[Event])
def list_events(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> list[Event]:
    return store.list_events_by_user(user.id)


@router.post("", response_model=Event)
def create_event(
    body: EventIn,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> Event:
    """Book an event; a client_id, when given, must be one of the caller's clients."""
    if body.client_id is not None:
        ensure_owner(store.get_client(body.client_id), user.id, "Client")
    return store.create_event(EventCreate(**body.model_dump(), user_id=user.id))


@router.get("/{event_id}", response_model=Event)
def get_event(
    event_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> Event:
    return ensure_owner(store.get_event(event_id), user.id, "Event")


@router.patch("/{event_id}", response_model=Event)
def update_event(
    event_id: int,
    body: EventUpdate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> Event:
    ensure_owner(store.get_event(event_id), user.id, "Event")
    if body.client_id is not None:
        ensure_owner(store.get_client(body.client_id), user.id, "Client")
    return store.update_event(event_id, body)


@router.delete("/{event_id}")
def delete_event(
    event_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> dict[str, bool]:
    ensure_owner(store.get_event(event_id), user.id, "Event")
    store.delete_event(event_id)
    return {"success": True}
