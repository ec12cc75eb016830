"""Authenticated REST routers."""

from fastapi import APIRouter

from .chat import router as chat_router
from .badges import router as badges_router
from .gamification import router as gamification_router
from .activity import router as activity_router

api_router = APIRouter()
api_router.include_router(chat_router)
api_router.include_router(badges_router)
api_router.include_router(gamification_router)
api_router.include_router(activity_router)

__all__ = ["api_router"]
