"""API routers."""

from .events import router as events_router

__all__ = ["events_router"]
