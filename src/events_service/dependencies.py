"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from .database import Neo4jDatabase
from .repositories.event_repo import EventRepository
from .services.event_service import EventService


def get_database(request: Request) -> Neo4jDatabase:
    """Database opened by the application lifespan."""
    return request.app.state.database


def get_event_service(request: Request) -> EventService:
    """Event service bound to the application database."""
    return EventService(EventRepository(get_database(request)))
