"""Business logic services."""

from .event_service import EventService, normalize_tags, parse_event_id

__all__ = ["EventService", "normalize_tags", "parse_event_id"]
