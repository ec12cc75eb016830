"""Deployment environment values."""

import os


APP_ENV = (os.getenv("APP_ENV", "development") or "development").lower()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))


__all__ = ["APP_ENV", "HOST", "PORT"]
