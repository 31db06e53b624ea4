"""
FastAPI dependencies shared by the routers.

The caller identity is resolved once per request by
middleware.authentication.AuthenticationMiddleware and read back here.
"""

from typing import AsyncIterator

from fastapi import HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from db import get_db_session
from models.user import UserPublicDTO

UNAUTHORIZED_MESSAGE = "Unauthorized"


async def get_session() -> AsyncIterator[AsyncSession]:
    async with get_db_session() as session:
        yield session


def get_optional_user(request: Request) -> UserPublicDTO | None:
    return getattr(request.state, "user", None)


def get_current_user(request: Request) -> UserPublicDTO:
    """Same as get_optional_user, but anonymous callers get a 401."""
    user = get_optional_user(request)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED_MESSAGE)
    return user
