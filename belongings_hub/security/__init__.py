"""Bearer token handling."""

from .tokens import TokenPayload, issue_token, verify_token

__all__ = ["TokenPayload", "issue_token", "verify_token"]
