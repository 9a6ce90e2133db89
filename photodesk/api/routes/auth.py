"""Registration, JWT login and the get_current_user dependency for the owner channel."""

import logging
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from photodesk.core.errors import ValidationError
from photodesk.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    token_user_id,
    verify_password,
)
from photodesk.schemas.auth import CurrentUser, LoginRequest, RegisterRequest, TokenResponse
from photodesk.schemas.users import UserCreate, UserProfileUpdate, UserRead
from photodesk.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    store: Annotated[Storage, Depends(get_storage)],
) -> UserRead:
    """Create an account. Username and email must both be unused."""
    if store.get_user_by_username(body.username) is not None:
        raise ValidationError("Username already taken")
    if store.get_user_by_email(body.email) is not None:
        raise ValidationError("Email already registered")
    user = store.create_user(
        UserCreate(
            username=body.username,
            email=body.email,
            password_hash=hash_password(body.password),
            role=body.role,
        )
    )
    logger.info("User registered: id=%s username=%s", user.id, user.username)
    return UserRead.model_validate(user.model_dump())


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    store: Annotated[Storage, Depends(get_storage)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    user = store.get_user_by_username(body.username)
    if user is None or not verify_password(body.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password.",
        )
    token = create_access_token(sub=user.id, role=user.role)
    return TokenResponse(access_token=token, token_type="bearer")


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    store: Annotated[Storage, Depends(get_storage)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user_id = token_user_id(payload)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user = store.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return CurrentUser(id=user.id, username=user.username, role=user.role)


@router.get("/me", response_model=UserRead)
def read_me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> UserRead:
    """Profile of the authenticated user (no password hash)."""
    user = store.get_user(current_user.id)
    return UserRead.model_validate(user.model_dump())


@router.patch("/me", response_model=UserRead)
def update_me(
    body: UserProfileUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> UserRead:
    """Update the caller's banking details; omitted or null fields keep their stored value."""
    user = store.update_user(current_user.id, body)
    logger.info("Profile settings updated: id=%s", user.id)
    return UserRead.model_validate(user.model_dump())
