"""Secrets and authentication related configuration."""

import os


JWT_DEV_SECRET = "your-default-super-secret-key-for-dev"

# Shared with the auth service that issues tokens
JWT_SECRET = os.getenv("JWT_SECRET") or JWT_DEV_SECRET
JWT_ALGORITHM = (os.getenv("JWT_ALGORITHM", "HS256") or "HS256").upper()
JWT_EXPIRES_IN = os.getenv("JWT_EXPIRES_IN", "1d")  # e.g. 1h, 7d, 30m

SUPPORTED_JWT_ALGORITHMS = ("HS256", "HS384", "HS512")


__all__ = [
    "JWT_DEV_SECRET",
    "JWT_SECRET",
    "JWT_ALGORITHM",
    "JWT_EXPIRES_IN",
    "SUPPORTED_JWT_ALGORITHMS",
]
