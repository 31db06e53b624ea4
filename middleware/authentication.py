"""Authentication Middleware

Resolves the caller of every request from an optional bearer token.

The middleware never rejects a request. It only stores the caller on
request.state.user (UserPublicDTO, or None for anonymous callers and for
missing, malformed, expired or orphaned tokens). Routes that require a
user enforce it with the get_current_user dependency; routes that merely
use one read get_optional_user.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from db import get_db_session
from services.auth import AuthService

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Middleware that attaches the authenticated user (or None) to the request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request.state.user = None

        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is not None:
            async with get_db_session() as session:
                request.state.user = await AuthService.authenticate_token(token, session)
            if request.state.user is None:
                logger.debug(f"[Auth] {request.method} {request.url.path}: bearer token not accepted, continuing anonymously")

        return await call_next(request)
