"""Seed script for local development data."""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from events_service.config import get_settings
from events_service.database import Neo4jDatabase, init_constraints
from events_service.repositories.event_repo import EventRepository


async def seed_data():
    """Seed Neo4j with users and events."""
    database = Neo4jDatabase(get_settings())
    await database.connect()
    await init_constraints(database)

    try:
        async with database.session() as session:
            # Clear existing data
            await session.run("MATCH (n) WHERE n:Event OR n:User DETACH DELETE n")
            print("🧹 Cleared existing events and users")

            users = [
                {"id": str(uuid4()), "name": "Grace Hopper", "role": "organizer"},
                {"id": str(uuid4()), "name": "Alan Turing", "role": "organizer"},
                {"id": str(uuid4()), "name": "Visitor", "role": "guest"},
            ]
            for u in users:
                await session.run("CREATE (u:User {id: $id, name: $name, role: $role})", **u)
            print(f"👤 Created {len(users)} users")

        repo = EventRepository(database)
        now = datetime.now(timezone.utc)
        events = [
            {
                "name": "PyData Conference",
                "description": "Two days of talks on data tooling",
                "date": now + timedelta(days=30),
                "location": "Berlin",
                "category": "conference",
                "tags": ["python", "data"],
                "created_by": users[0]["id"],
                "attendees": [users[1]["id"], users[2]["id"]],
            },
            {
                "name": "Async Python Workshop",
                "description": "Hands-on asyncio session",
                "date": now + timedelta(days=7),
                "location": "Online",
                "category": "workshop",
                "tags": ["python", "asyncio"],
                "created_by": users[1]["id"],
                "attendees": [users[0]["id"]],
            },
            {
                "name": "Graph Databases Meetup",
                "description": "Lightning talks about Neo4j in production",
                "date": now - timedelta(days=14),
                "location": "Oslo",
                "category": "meetup",
                "tags": ["neo4j"],
                "created_by": users[0]["id"],
            },
        ]
        for e in events:
            await repo.create(**e)
        print(f"📅 Created {len(events)} events")
    finally:
        await database.disconnect()

    print("\n✅ Seed completed!")
    for u in users:
        print(f"   {u['role']:<10} {u['name']:<15} id={u['id']}")


if __name__ == "__main__":
    asyncio.run(seed_data())
