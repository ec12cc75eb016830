"""JWT issuance and verification.

Tokens are HS256 JWTs with the claims the auth service has always issued::

    {"userId": "...", "email": "...", "iat": 1700000000, "exp": 1700086400}

``verify_token`` is the single verification entry point shared by the
WebSocket handshake and the REST security dependency. Every failure is
normalized to ``InvalidTokenError`` (``ExpiredTokenError`` for expiry) so
callers never need to know PyJWT's exception tree.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

import jwt

from ..config.secrets import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRES_IN
from ..errors import ExpiredTokenError, InvalidTokenError
from ..helpers.durations import parse_duration


@dataclass(frozen=True, slots=True)
class TokenPayload:
    """Identity decoded from a verified token."""

    user_id: str
    email: str | None = None


def issue_token(
    user_id: str,
    email: str | None = None,
    *,
    expires_in: str | int | None = None,
    secret: str | None = None,
    now: float | None = None,
) -> str:
    """Sign a token for ``user_id``.

    Args:
        user_id: Subject stored in the ``userId`` claim.
        email: Optional ``email`` claim.
        expires_in: Lifetime as seconds or a duration string; defaults to
            JWT_EXPIRES_IN.
        secret: Signing key override (defaults to JWT_SECRET).
        now: Issue time override in epoch seconds.

    Returns:
        The encoded JWT.
    """
    issued_at = int(now if now is not None else time.time())
    lifetime = parse_duration(expires_in if expires_in is not None else JWT_EXPIRES_IN)
    claims: dict[str, object] = {
        "userId": user_id,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    if email is not None:
        claims["email"] = email
    return jwt.encode(claims, secret or JWT_SECRET, algorithm=JWT_ALGORITHM)


def verify_token(token: str, *, secret: str | None = None) -> TokenPayload:
    """Decode and verify ``token``.

    Raises:
        ExpiredTokenError: The ``exp`` claim has passed.
        InvalidTokenError: Any other decoding or claim failure.
    """
    try:
        claims = jwt.decode(
            token,
            secret or JWT_SECRET,
            algorithms=[JWT_ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise ExpiredTokenError("token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidTokenError(f"token invalid: {exc}") from exc

    user_id = claims.get("userId")
    if not isinstance(user_id, str) or not user_id:
        raise InvalidTokenError("token missing userId claim")
    email = claims.get("email")
    return TokenPayload(user_id=user_id, email=email if isinstance(email, str) else None)


__all__ = ["TokenPayload", "issue_token", "verify_token"]
