"""FastAPI dependencies shared by the REST routers."""

from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..errors import ExpiredTokenError, InvalidTokenError
from ..runtime.dependencies import RuntimeDeps
from ..security.tokens import TokenPayload, verify_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenPayload:
    """Resolve the caller from ``Authorization: Bearer <jwt>``.

    Raises:
        HTTPException: 401 when the header is missing or the token fails
            verification.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authorized, no token")
    try:
        return verify_token(credentials.credentials)
    except ExpiredTokenError as exc:
        logger.info("REST auth rejected: %s", exc.message)
        raise _unauthorized("Not authorized, token expired") from exc
    except InvalidTokenError as exc:
        logger.info("REST auth rejected: %s", exc.message)
        raise _unauthorized("Not authorized, token invalid") from exc


def get_runtime_deps(request: Request) -> RuntimeDeps:
    return request.app.state.runtime_deps


__all__ = ["bearer_scheme", "get_current_user", "get_runtime_deps"]
