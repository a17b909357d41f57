"""Session-based authentication endpoints."""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from starlette.concurrency import run_in_threadpool

from campus_events.core.config import settings
from campus_events.core.rate_limit import limiter
from campus_events.core.security import (
    authenticate_user,
    end_session,
    get_current_user,
    hash_password,
    start_session,
)
from campus_events.core.storage import MemStorage, get_storage
from campus_events.schemas.userSchema import LoginRequest, User, UserCreate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def register_user(
    request: Request,
    payload: UserCreate,
    storage: MemStorage = Depends(get_storage)
):
    """
    Create an account and start a session for it.
    Email must be unique; password and confirmPassword must match.
    """
    # bcrypt is CPU-bound; keep it off the event loop
    password_hash = await run_in_threadpool(hash_password, payload.password)
    user = storage.create_user(payload, password_hash=password_hash)
    start_session(request, user)
    return user


@router.post("/login", response_model=UserResponse)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def login(
    request: Request,
    payload: LoginRequest,
    storage: MemStorage = Depends(get_storage)
):
    """Check credentials and start a session."""
    user = await run_in_threadpool(authenticate_user, storage, payload.email, payload.password)
    start_session(request, user)
    logger.info(f"User {user.id} logged in")
    return user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(request: Request):
    """End the current session. Safe to call without one."""
    end_session(request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/user", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """Return the session user."""
    return current_user
