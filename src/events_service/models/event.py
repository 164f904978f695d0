"""Event document models."""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class EventCategory(str, Enum):
    """Allowed event categories."""

    CONFERENCE = "conference"
    WORKSHOP = "workshop"
    WEBINAR = "webinar"
    MEETUP = "meetup"


EVENT_CATEGORIES = frozenset(category.value for category in EventCategory)

DEFAULT_LOCATION = "Online"


class EventSort(str, Enum):
    """Orderings accepted by the list endpoint."""

    NEWEST = "newest"
    OLDEST = "oldest"
    ATTENDEES = "attendees"

    @classmethod
    def parse(cls, value: Optional[str]) -> "EventSort":
        """Resolve a query value, falling back to newest first."""
        try:
            return cls(value)
        except ValueError:
            return cls.NEWEST


class EventCreate(BaseModel):
    """Payload for creating an event.

    Presence and category rules are checked by the service so that missing
    fields produce the API's own 400 message instead of a schema error.
    ``tags`` may be a list of strings or a comma-separated string.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    category: Optional[str] = None
    tags: Any = None


class EventUpdate(BaseModel):
    """Payload for updating an event.

    The new name may arrive as ``eventName`` or ``name``.
    """

    name: Any = None
    event_name: Any = Field(None, alias="eventName")
    description: Optional[str] = None
    date: Optional[datetime] = None
    category: Optional[str] = None


class CreatorRef(BaseModel):
    """Creator id with the display name resolved from the user store."""

    id: str
    name: Optional[str] = None


class Event(BaseModel):
    """Stored event."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    date: datetime
    location: str = DEFAULT_LOCATION
    category: str
    tags: list[str] = Field(default_factory=list)
    created_by: CreatorRef = Field(alias="createdBy")
    attendees: list[str] = Field(default_factory=list)


class EventCreated(BaseModel):
    message: str
    event: Event


class EventUpdated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    updated_event: Event = Field(alias="updatedEvent")


class EventDeleted(BaseModel):
    message: str
    event: Event
