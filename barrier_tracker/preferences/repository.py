"""
BARRIER TRACKER Planner API - Preferences Repository

Preferences documents are keyed by owner_id.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from barrier_tracker.preferences.models import Preferences


class PreferencesRepositoryInterface(ABC):

    @abstractmethod
    async def get(self, owner_id: str) -> Optional[Preferences]:
        pass

    @abstractmethod
    async def save(self, preferences: Preferences) -> Preferences:
        pass


class PreferencesRepository(PreferencesRepositoryInterface):
    """MongoDB implementation of the preferences repository."""

    COLLECTION_NAME = "preferences"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def get(self, owner_id: str) -> Optional[Preferences]:
        doc = await self.collection.find_one({"_id": owner_id})
        if doc is None:
            return None
        return Preferences.from_dict(doc)

    async def save(self, preferences: Preferences) -> Preferences:
        preferences.updated_at = datetime.now(timezone.utc)
        await self.collection.replace_one(
            {"_id": preferences.owner_id},
            preferences.to_dict(),
            upsert=True,
        )
        return preferences


class InMemoryPreferencesRepository(PreferencesRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._preferences: dict[str, Preferences] = {}

    def clear(self) -> None:
        self._preferences.clear()

    async def get(self, owner_id: str) -> Optional[Preferences]:
        return self._preferences.get(owner_id)

    async def save(self, preferences: Preferences) -> Preferences:
        preferences.updated_at = datetime.now(timezone.utc)
        self._preferences[preferences.owner_id] = preferences
        return preferences
