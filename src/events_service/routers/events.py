"""Event API endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..auth import require_event_actor
from ..dependencies import get_event_service
from ..errors import EventsServiceError, InternalError
from ..models.event import (
    Event,
    EventCreate,
    EventCreated,
    EventDeleted,
    EventUpdate,
    EventUpdated,
)
from ..models.identity import Identity
from ..services.event_service import EventService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["Events"])


@router.post("/create", response_model=EventCreated, status_code=201)
async def create_event(
    data: EventCreate,
    identity: Identity = Depends(require_event_actor),
    service: EventService = Depends(get_event_service),
) -> EventCreated:
    """Create an event owned by the caller."""
    try:
        event = await service.create(data, identity.id)
    except EventsServiceError:
        raise
    except Exception as e:
        logger.exception("Error in creating event")
        raise InternalError("Server Error", str(e)) from e
    return EventCreated(message="Event created successfully", event=event)


@router.get("", response_model=list[Event])
async def list_events(
    search: Optional[str] = Query(None),
    sort: Optional[str] = Query(None),
    service: EventService = Depends(get_event_service),
) -> list[Event]:
    """List events, filtered by name and sorted by date or attendance."""
    try:
        return await service.list_all(search=search, sort=sort)
    except EventsServiceError:
        raise
    except Exception as e:
        logger.exception("Error fetching events")
        raise InternalError("Error fetching events", str(e)) from e


@router.get("/{event_id}", response_model=Event)
async def get_event(
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> Event:
    """Get an event by ID."""
    try:
        return await service.get(event_id)
    except EventsServiceError:
        raise
    except Exception as e:
        logger.exception("Error fetching event")
        raise InternalError("Error fetching event", str(e)) from e


@router.put("/{event_id}", response_model=EventUpdated)
async def update_event(
    event_id: str,
    data: EventUpdate,
    identity: Identity = Depends(require_event_actor),
    service: EventService = Depends(get_event_service),
) -> EventUpdated:
    """Update an event."""
    try:
        event = await service.update(event_id, data, identity.id)
    except EventsServiceError:
        raise
    except Exception as e:
        logger.exception("Error updating event")
        raise InternalError("Error updating event", str(e)) from e
    return EventUpdated(message="Event updated successfully", updated_event=event)


@router.delete("/{event_id}", response_model=EventDeleted)
async def delete_event(
    event_id: str,
    identity: Identity = Depends(require_event_actor),
    service: EventService = Depends(get_event_service),
) -> EventDeleted:
    """Delete an event."""
    try:
        event = await service.delete(event_id)
    except EventsServiceError:
        raise
    except Exception as e:
        logger.exception("Error deleting event")
        raise InternalError("Internal server error", str(e)) from e
    logger.info(f"Event {event.id} deleted by {identity.id}")
    return EventDeleted(message="Event deleted successfully", event=event)
