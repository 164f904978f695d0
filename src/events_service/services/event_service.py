"""Event business logic service."""

import logging
from typing import Any, Optional
from uuid import UUID

from ..errors import NotFoundError, ValidationError
from ..models.event import (
    DEFAULT_LOCATION,
    EVENT_CATEGORIES,
    Event,
    EventCreate,
    EventSort,
    EventUpdate,
)
from ..repositories.event_repo import EventRepository

logger = logging.getLogger(__name__)


def normalize_tags(tags: Any) -> list[str]:
    """
    Resolve tag input into a clean, ordered list.

    Three shapes are accepted:

    - a sequence: each string element is trimmed
    - a delimited string: split on commas, each piece trimmed
    - anything else counts as absent and yields no tags

    Entries that are empty after trimming are dropped.
    """
    if isinstance(tags, (list, tuple)):
        pieces = [tag for tag in tags if isinstance(tag, str)]
    elif isinstance(tags, str):
        pieces = tags.split(",")
    else:
        pieces = []

    return [piece.strip() for piece in pieces if piece.strip()]


def parse_event_id(raw: Optional[str]) -> str:
    """Validate an event id and return its canonical form."""
    try:
        return str(UUID((raw or "").strip()))
    except ValueError:
        raise ValidationError("Invalid event ID format") from None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class EventService:
    """Service for event-related business logic."""

    def __init__(self, repository: EventRepository) -> None:
        self._repository = repository

    async def create(self, data: EventCreate, caller_id: str) -> Event:
        """
        Create a new event owned by the caller.

        Args:
            data: Event creation payload
            caller_id: Id of the authenticated caller, stored as the creator

        Returns:
            The persisted event

        Raises:
            ValidationError: If a required field is missing or the category is unknown
        """
        required = (data.name, data.description, data.date, data.category)
        if any(_is_blank(value) for value in required):
            raise ValidationError("All fields except tags and location are required.")

        category = data.category.strip().lower()
        if category not in EVENT_CATEGORIES:
            raise ValidationError("Invalid category selected")

        event = await self._repository.create(
            name=data.name,
            description=data.description,
            date=data.date,
            location=data.location if not _is_blank(data.location) else DEFAULT_LOCATION,
            category=category,
            tags=normalize_tags(data.tags),
            created_by=caller_id,
            attendees=[],
        )
        logger.info(f"Event {event.id} created by {caller_id}")
        return event

    async def list_all(
        self,
        search: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> list[Event]:
        """List events matching ``search``, ordered by ``sort``."""
        return await self._repository.list_all(
            search=search or None,
            sort=EventSort.parse(sort),
        )

    async def get(self, event_id: str) -> Event:
        """Get a single event by id."""
        event_id = parse_event_id(event_id)

        event = await self._repository.get_by_id(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return event

    async def update(self, event_id: str, data: EventUpdate, caller_id: str) -> Event:
        """
        Update name, description, date and category of an event.

        The name is read from ``eventName`` first, then ``name``. The
        category is stored as given.
        """
        event_id = parse_event_id(event_id)

        new_name = next(
            (
                value.strip()
                for value in (data.event_name, data.name)
                if isinstance(value, str) and value.strip()
            ),
            None,
        )
        if new_name is None:
            raise ValidationError("Event name is required and must be a string")

        updates: dict[str, Any] = {"name": new_name}
        for field in ("description", "date", "category"):
            value = getattr(data, field)
            if value is not None:
                updates[field] = value

        event = await self._repository.update(event_id, updates)
        if not event:
            raise NotFoundError("Event not found")

        logger.info(f"Event {event_id} updated by {caller_id}")
        return event

    async def delete(self, event_id: str) -> Event:
        """Delete an event and return its last known state."""
        if not (event_id or "").strip():
            raise ValidationError("Event ID is required")
        event_id = parse_event_id(event_id)

        event = await self._repository.delete(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return event
