"""Pydantic models for events and callers."""

from .event import (
    DEFAULT_LOCATION,
    EVENT_CATEGORIES,
    CreatorRef,
    Event,
    EventCategory,
    EventCreate,
    EventCreated,
    EventDeleted,
    EventSort,
    EventUpdate,
    EventUpdated,
)
from .identity import GUEST_ROLE, Identity

__all__ = [
    "DEFAULT_LOCATION",
    "EVENT_CATEGORIES",
    "CreatorRef",
    "Event",
    "EventCategory",
    "EventCreate",
    "EventCreated",
    "EventDeleted",
    "EventSort",
    "EventUpdate",
    "EventUpdated",
    "GUEST_ROLE",
    "Identity",
]
