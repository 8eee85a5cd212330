"""
BARRIER TRACKER Planner API - Energy Schedule Repository
"""

from abc import ABC, abstractmethod
from typing import List

from motor.motor_asyncio import AsyncIOMotorDatabase

from barrier_tracker.schedule.models import EnergyScheduleBlock


class ScheduleRepositoryInterface(ABC):
    """Schedule storage, scoped by owner_id."""

    @abstractmethod
    async def list_for_owner(self, owner_id: str) -> List[EnergyScheduleBlock]:
        pass

    @abstractmethod
    async def replace_for_owner(
        self,
        owner_id: str,
        blocks: List[EnergyScheduleBlock],
    ) -> List[EnergyScheduleBlock]:
        """Swap the owner's whole schedule for the given blocks."""
        pass


class ScheduleRepository(ScheduleRepositoryInterface):
    """MongoDB implementation of the schedule repository."""

    COLLECTION_NAME = "energy_schedules"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def list_for_owner(self, owner_id: str) -> List[EnergyScheduleBlock]:
        cursor = self.collection.find({"owner_id": owner_id}).sort("start_time_minutes", 1)
        blocks: List[EnergyScheduleBlock] = []
        async for doc in cursor:
            blocks.append(EnergyScheduleBlock.from_dict(doc))
        return blocks

    async def replace_for_owner(
        self,
        owner_id: str,
        blocks: List[EnergyScheduleBlock],
    ) -> List[EnergyScheduleBlock]:
        await self.collection.delete_many({"owner_id": owner_id})
        if blocks:
            await self.collection.insert_many([b.to_dict() for b in blocks])
        return sorted(blocks, key=lambda b: b.start_time_minutes)


class InMemoryScheduleRepository(ScheduleRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._blocks: dict[str, List[EnergyScheduleBlock]] = {}

    def clear(self) -> None:
        self._blocks.clear()

    async def list_for_owner(self, owner_id: str) -> List[EnergyScheduleBlock]:
        return sorted(self._blocks.get(owner_id, []), key=lambda b: b.start_time_minutes)

    async def replace_for_owner(
        self,
        owner_id: str,
        blocks: List[EnergyScheduleBlock],
    ) -> List[EnergyScheduleBlock]:
        self._blocks[owner_id] = list(blocks)
        return await self.list_for_owner(owner_id)
