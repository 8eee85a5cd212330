"""
BARRIER TRACKER Planner API - Database Module

MongoDB connection management using Motor (async driver).
Repositories are the only code that touches collections directly.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from barrier_tracker.config import settings

logger = logging.getLogger(__name__)

# (collection, keys, unique) created at startup
INDEXES = (
    ("checkins", [("owner_id", 1), ("checkin_date", 1)], True),
    ("tasks", [("owner_id", 1), ("checkin_date", 1), ("sort_order", 1)], False),
    ("energy_schedules", [("owner_id", 1), ("start_time_minutes", 1)], False),
)


class Database:
    """MongoDB database connection manager."""

    client: AsyncIOMotorClient | None = None
    db: AsyncIOMotorDatabase | None = None

    async def connect(self) -> None:
        self.client = AsyncIOMotorClient(settings.MONGODB_URI, tz_aware=True)
        self.db = self.client[settings.MONGODB_DATABASE]
        logger.info(f"Connected to MongoDB database '{settings.MONGODB_DATABASE}'")

    async def ensure_indexes(self) -> None:
        """Create the indexes repositories rely on. Safe to call on every start."""
        db = self.get_database()
        for collection, keys, unique in INDEXES:
            await db[collection].create_index(keys, unique=unique)
        logger.info(f"Ensured {len(INDEXES)} MongoDB indexes")

    async def disconnect(self) -> None:
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Disconnected from MongoDB")

    def get_database(self) -> AsyncIOMotorDatabase:
        """Get the database instance."""
        if self.db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.db


# Singleton database instance
database = Database()


async def get_database() -> AsyncIOMotorDatabase:
    """Dependency to get the database instance."""
    return database.get_database()
