"""Event repository for Neo4j operations."""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional
from uuid import uuid4

from ..database import Neo4jDatabase
from ..models.event import DEFAULT_LOCATION, CreatorRef, Event, EventSort

# Clauses are picked from this table only, never built from request input
ORDER_BY = {
    EventSort.NEWEST: "e.date DESC",
    EventSort.OLDEST: "e.date ASC",
    EventSort.ATTENDEES: "size(e.attendees) DESC",
}

CREATOR_MATCH = "OPTIONAL MATCH (u:User {id: e.created_by})"


def serialize_date(value: datetime) -> str:
    """Store dates as UTC ISO strings so lexical order is chronological."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="microseconds")


def record_to_event(node: Mapping[str, Any], creator_name: Optional[str]) -> Event:
    """Map an Event node (or its property map) to the model."""
    return Event(
        id=node["id"],
        name=node["name"],
        description=node["description"],
        date=datetime.fromisoformat(node["date"]),
        location=node.get("location") or DEFAULT_LOCATION,
        category=node["category"],
        tags=list(node.get("tags") or []),
        created_by=CreatorRef(id=node["created_by"], name=creator_name),
        attendees=list(node.get("attendees") or []),
    )


class EventRepository:
    """Repository for Event node operations.

    Each method runs one auto-commit query in its own session.
    """

    def __init__(self, database: Neo4jDatabase) -> None:
        self._database = database

    async def create(
        self,
        *,
        name: str,
        description: str,
        date: datetime,
        location: str,
        category: str,
        tags: list[str],
        created_by: str,
        attendees: Optional[list[str]] = None,
    ) -> Event:
        """Create a new Event node and return it with its generated id."""
        query = f"""
        CREATE (e:Event {{
            id: $id,
            name: $name,
            description: $description,
            date: $date,
            location: $location,
            category: $category,
            tags: $tags,
            created_by: $created_by,
            attendees: $attendees
        }})
        WITH e
        {CREATOR_MATCH}
        RETURN e, u.name AS creator_name
        """

        async with self._database.session() as session:
            result = await session.run(
                query,
                id=str(uuid4()),
                name=name,
                description=description,
                date=serialize_date(date),
                location=location,
                category=category,
                tags=tags,
                created_by=created_by,
                attendees=attendees or [],
            )
            record = await result.single()

        return record_to_event(record["e"], record["creator_name"])

    async def get_by_id(self, event_id: str) -> Optional[Event]:
        """Get an Event by ID."""
        query = f"""
        MATCH (e:Event {{id: $id}})
        {CREATOR_MATCH}
        RETURN e, u.name AS creator_name
        """

        async with self._database.session() as session:
            result = await session.run(query, id=event_id)
            record = await result.single()

        if not record:
            return None
        return record_to_event(record["e"], record["creator_name"])

    async def list_all(
        self,
        search: Optional[str] = None,
        sort: EventSort = EventSort.NEWEST,
    ) -> list[Event]:
        """List Events, optionally filtered by a name substring."""
        query = f"""
        MATCH (e:Event)
        WHERE $search IS NULL OR toLower(e.name) CONTAINS toLower($search)
        {CREATOR_MATCH}
        RETURN e, u.name AS creator_name
        ORDER BY {ORDER_BY[sort]}
        """

        async with self._database.session() as session:
            result = await session.run(query, search=search)
            records = await result.data()

        return [record_to_event(r["e"], r["creator_name"]) for r in records]

    async def update(self, event_id: str, updates: dict[str, Any]) -> Optional[Event]:
        """Apply a partial update to an Event."""
        updates = dict(updates)
        if isinstance(updates.get("date"), datetime):
            updates["date"] = serialize_date(updates["date"])

        query = f"""
        MATCH (e:Event {{id: $id}})
        SET e += $updates
        WITH e
        {CREATOR_MATCH}
        RETURN e, u.name AS creator_name
        """

        async with self._database.session() as session:
            result = await session.run(query, id=event_id, updates=updates)
            record = await result.single()

        if not record:
            return None
        return record_to_event(record["e"], record["creator_name"])

    async def delete(self, event_id: str) -> Optional[Event]:
        """Delete an Event and return its last stored state."""
        query = f"""
        MATCH (e:Event {{id: $id}})
        {CREATOR_MATCH}
        WITH e, properties(e) AS snapshot, u.name AS creator_name
        DETACH DELETE e
        RETURN snapshot, creator_name
        """

        async with self._database.session() as session:
            result = await session.run(query, id=event_id)
            record = await result.single()

        if not record:
            return None
        return record_to_event(record["snapshot"], record["creator_name"])
