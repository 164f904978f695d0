"""Repository modules for Neo4j operations."""

from .event_repo import EventRepository

__all__ = ["EventRepository"]
