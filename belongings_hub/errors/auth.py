"""Authentication failures raised while verifying bearer tokens.

Each exception carries a machine-readable ``error_code`` that the WebSocket
handshake and the REST security dependency turn into client responses.
"""


class AuthError(Exception):
    """Base class for token problems.

    Attributes:
        error_code: Machine-parseable error identifier.
        message: Human-readable error description.
    """

    error_code = "auth_failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or "authentication failed"
        super().__init__(self.message)


class MissingTokenError(AuthError):
    """No token was supplied with the request."""

    error_code = "token_required"


class InvalidTokenError(AuthError):
    """The token could not be decoded, verified or lacks required claims."""

    error_code = "invalid_token"


class ExpiredTokenError(InvalidTokenError):
    """The token signature is fine but its ``exp`` claim has passed."""

    error_code = "token_expired"


__all__ = [
    "AuthError",
    "MissingTokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
]
