"""
BARRIER TRACKER Planner API - Check-in Repository

One check-in per owner per day. Saving again replaces the day's energy.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timezone
from typing import Optional
import uuid

from motor.motor_asyncio import AsyncIOMotorDatabase

from barrier_tracker.capacity.enums import EnergyLevel
from barrier_tracker.checkins.models import CheckIn


class CheckInRepositoryInterface(ABC):
    """Abstract interface for check-in storage, scoped by owner_id."""

    @abstractmethod
    async def get_for_day(self, owner_id: str, checkin_date: date) -> Optional[CheckIn]:
        pass

    @abstractmethod
    async def upsert(
        self,
        owner_id: str,
        checkin_date: date,
        internal_weather: EnergyLevel,
        forecast_note: Optional[str] = None,
    ) -> CheckIn:
        pass

    @abstractmethod
    async def delete_for_day(self, owner_id: str, checkin_date: date) -> bool:
        pass


class CheckInRepository(CheckInRepositoryInterface):
    """MongoDB implementation of the check-in repository."""

    COLLECTION_NAME = "checkins"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def get_for_day(self, owner_id: str, checkin_date: date) -> Optional[CheckIn]:
        doc = await self.collection.find_one(
            {"owner_id": owner_id, "checkin_date": checkin_date.isoformat()}
        )
        if doc is None:
            return None
        return CheckIn.from_dict(doc)

    async def upsert(
        self,
        owner_id: str,
        checkin_date: date,
        internal_weather: EnergyLevel,
        forecast_note: Optional[str] = None,
    ) -> CheckIn:
        now = datetime.now(timezone.utc)
        result = await self.collection.find_one_and_update(
            {"owner_id": owner_id, "checkin_date": checkin_date.isoformat()},
            {
                "$set": {
                    "internal_weather": internal_weather.value,
                    "forecast_note": forecast_note,
                    "updated_at": now,
                },
                "$setOnInsert": {"_id": str(uuid.uuid4()), "created_at": now},
            },
            upsert=True,
            return_document=True,
        )
        return CheckIn.from_dict(result)

    async def delete_for_day(self, owner_id: str, checkin_date: date) -> bool:
        result = await self.collection.delete_one(
            {"owner_id": owner_id, "checkin_date": checkin_date.isoformat()}
        )
        return result.deleted_count > 0


class InMemoryCheckInRepository(CheckInRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._checkins: dict[tuple[str, date], CheckIn] = {}

    def clear(self) -> None:
        self._checkins.clear()

    async def get_for_day(self, owner_id: str, checkin_date: date) -> Optional[CheckIn]:
        return self._checkins.get((owner_id, checkin_date))

    async def upsert(
        self,
        owner_id: str,
        checkin_date: date,
        internal_weather: EnergyLevel,
        forecast_note: Optional[str] = None,
    ) -> CheckIn:
        existing = self._checkins.get((owner_id, checkin_date))
        if existing is None:
            checkin = CheckIn.create(owner_id, checkin_date, internal_weather, forecast_note)
            self._checkins[(owner_id, checkin_date)] = checkin
            return checkin

        existing.internal_weather = internal_weather
        existing.forecast_note = forecast_note
        existing.updated_at = datetime.now(timezone.utc)
        return existing

    async def delete_for_day(self, owner_id: str, checkin_date: date) -> bool:
        return self._checkins.pop((owner_id, checkin_date), None) is not None
