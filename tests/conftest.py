"""Pytest configuration and fixtures."""

from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import jwt
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from events_service.config import Settings, get_settings
from events_service.dependencies import get_event_service
from events_service.main import create_app
from events_service.models.event import CreatorRef, Event, EventSort
from events_service.repositories.event_repo import serialize_date
from events_service.services.event_service import EventService

TEST_SECRET = "test-secret-key-with-at-least-32-bytes!"


def _utc(value: datetime) -> datetime:
    return datetime.fromisoformat(serialize_date(value))


class FakeEventRepository:
    """In-memory stand-in for EventRepository."""

    def __init__(self) -> None:
        self.events: dict[str, Event] = {}
        self.users: dict[str, str] = {}

    def _with_creator(self, event: Event) -> Event:
        name = self.users.get(event.created_by.id)
        return event.model_copy(
            update={"created_by": CreatorRef(id=event.created_by.id, name=name)},
            deep=True,
        )

    def add_event(self, **fields: Any) -> Event:
        """Insert an event directly, bypassing validation."""
        data = {
            "id": str(uuid4()),
            "name": "Sample",
            "description": "Sample event",
            "date": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "category": "meetup",
            "created_by": CreatorRef(id="user-1"),
        }
        data.update(fields)
        data["date"] = _utc(data["date"])
        event = Event(**data)
        self.events[event.id] = event
        return self._with_creator(event)

    async def create(self, *, created_by: str, date: datetime, **fields: Any) -> Event:
        event = Event(
            id=str(uuid4()),
            date=_utc(date),
            created_by=CreatorRef(id=created_by),
            **fields,
        )
        self.events[event.id] = event
        return self._with_creator(event)

    async def get_by_id(self, event_id: str) -> Optional[Event]:
        event = self.events.get(event_id)
        return self._with_creator(event) if event else None

    async def list_all(
        self,
        search: Optional[str] = None,
        sort: EventSort = EventSort.NEWEST,
    ) -> list[Event]:
        events = [
            e
            for e in self.events.values()
            if search is None or search.lower() in e.name.lower()
        ]
        if sort == EventSort.OLDEST:
            events.sort(key=lambda e: e.date)
        elif sort == EventSort.ATTENDEES:
            events.sort(key=lambda e: len(e.attendees), reverse=True)
        else:
            events.sort(key=lambda e: e.date, reverse=True)
        return [self._with_creator(e) for e in events]

    async def update(self, event_id: str, updates: dict[str, Any]) -> Optional[Event]:
        event = self.events.get(event_id)
        if not event:
            return None
        updates = dict(updates)
        if "date" in updates:
            updates["date"] = _utc(updates["date"])
        event = event.model_copy(update=updates)
        self.events[event_id] = event
        return self._with_creator(event)

    async def delete(self, event_id: str) -> Optional[Event]:
        event = self.events.pop(event_id, None)
        return self._with_creator(event) if event else None


@pytest.fixture
def repository() -> FakeEventRepository:
    repo = FakeEventRepository()
    repo.users["user-1"] = "Ada Lovelace"
    return repo


@pytest.fixture
def service(repository: FakeEventRepository) -> EventService:
    return EventService(repository)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, jwt_secret=TEST_SECRET)


@pytest.fixture
def make_token():
    """Factory for signed bearer tokens."""

    def _make_token(
        user_id: Any = "user-1",
        role: Optional[str] = "user",
        secret: str = TEST_SECRET,
        expires_in: timedelta = timedelta(hours=1),
        **claims: Any,
    ) -> str:
        payload = {"exp": datetime.now(timezone.utc) + expires_in, **claims}
        if user_id is not None:
            payload["id"] = user_id
        if role is not None:
            payload["role"] = role
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make_token


@pytest.fixture
def auth_headers(make_token):
    def _auth_headers(**kwargs: Any) -> dict:
        return {"Authorization": f"Bearer {make_token(**kwargs)}"}

    return _auth_headers


@pytest.fixture
def client(settings: Settings, service: EventService) -> TestClient:
    """API client wired to the in-memory repository.

    The lifespan is not entered, so no Neo4j connection is made.
    """
    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_event_service] = lambda: service
    return TestClient(app)


@pytest.fixture
def neo4j_session() -> AsyncMock:
    """Mock Neo4j session; tests set ``session.run.return_value``."""
    session = AsyncMock()
    session.run = AsyncMock(return_value=MagicMock())
    return session


@pytest_asyncio.fixture
async def database(neo4j_session: AsyncMock):
    """Database double handing out the mocked session."""

    class _Database:
        @asynccontextmanager
        async def session(self):
            yield neo4j_session

    yield _Database()
