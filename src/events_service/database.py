"""Neo4j database connection and session management."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from neo4j import AsyncDriver, AsyncGraphDatabase, AsyncSession

from .config import Settings

logger = logging.getLogger(__name__)


class Neo4jDatabase:
    """Neo4j database connection manager."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._driver: AsyncDriver | None = None

    async def connect(self) -> None:
        """Establish connection to Neo4j."""
        self._driver = AsyncGraphDatabase.driver(
            self._settings.neo4j_uri,
            auth=(self._settings.neo4j_user, self._settings.neo4j_password),
        )
        # Verify connection
        await self._driver.verify_connectivity()
        logger.info(f"Connected to Neo4j at {self._settings.neo4j_uri}")

    async def disconnect(self) -> None:
        """Close Neo4j connection."""
        if self._driver:
            await self._driver.close()
            self._driver = None
            logger.info("Disconnected from Neo4j")

    @property
    def driver(self) -> AsyncDriver:
        """Get Neo4j driver instance."""
        if not self._driver:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._driver

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a Neo4j session as async context manager."""
        session = self.driver.session()
        try:
            yield session
        finally:
            await session.close()


async def init_constraints(database: Neo4jDatabase) -> None:
    """Initialize database constraints and indexes."""
    async with database.session() as session:
        constraints = [
            "CREATE CONSTRAINT event_id IF NOT EXISTS FOR (e:Event) REQUIRE e.id IS UNIQUE",
            "CREATE CONSTRAINT user_id IF NOT EXISTS FOR (u:User) REQUIRE u.id IS UNIQUE",
        ]

        for constraint in constraints:
            await session.run(constraint)

        # Indexes for list sorting and creator lookups
        indexes = [
            "CREATE INDEX event_date IF NOT EXISTS FOR (e:Event) ON (e.date)",
            "CREATE INDEX event_created_by IF NOT EXISTS FOR (e:Event) ON (e.created_by)",
        ]

        for index in indexes:
            await session.run(index)
