"""Tests for application startup and logging setup."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from events_service.database import Neo4jDatabase
from events_service.logging_config import setup_logging
from events_service.main import create_app


def test_startup_fails_when_store_unreachable(settings, monkeypatch):
    """Lifespan re-raises connection errors after closing the driver."""
    connect = AsyncMock(side_effect=RuntimeError("neo4j down"))
    disconnect = AsyncMock()
    monkeypatch.setattr(Neo4jDatabase, "connect", connect)
    monkeypatch.setattr(Neo4jDatabase, "disconnect", disconnect)
    app = create_app(settings)

    with pytest.raises(RuntimeError, match="neo4j down"):
        with TestClient(app):
            pass

    connect.assert_awaited_once()
    disconnect.assert_awaited_once()
    assert not hasattr(app.state, "database")


@pytest.fixture
def root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_setup_logging_applies_level_on_each_call(root_level):
    setup_logging("debug")
    assert root_level.level == logging.DEBUG

    setup_logging("WARNING")
    assert root_level.level == logging.WARNING
    assert logging.getLogger("neo4j").level == logging.WARNING


def test_create_app_applies_configured_log_level(settings, root_level):
    create_app(settings.model_copy(update={"log_level": "ERROR"}))

    assert root_level.level == logging.ERROR


@pytest.mark.asyncio
async def test_database_connect_logs_uri(settings, monkeypatch, caplog):
    driver = MagicMock()
    driver.verify_connectivity = AsyncMock()
    driver.close = AsyncMock()
    monkeypatch.setattr(
        "events_service.database.AsyncGraphDatabase.driver",
        MagicMock(return_value=driver),
    )
    database = Neo4jDatabase(settings)

    with caplog.at_level(logging.INFO, logger="events_service.database"):
        await database.connect()
        await database.disconnect()

    assert f"Connected to Neo4j at {settings.neo4j_uri}" in caplog.messages
    assert "Disconnected from Neo4j" in caplog.messages
    driver.close.assert_awaited_once()
