"""MongoDB implementation of IStatsStore.

One document per user in the "user_stats" collection, keyed by user_id.
"""

from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient

from nutricoach.domain.gamification.core.entities.user_stats import StatsUpdate, UserStats
from nutricoach.domain.gamification.core.ports.stores import IStatsStore
from nutricoach.domain.shared.errors import StatsStoreError
from nutricoach.infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoStatsStore(MongoBaseRepository[UserStats], IStatsStore):
    """User stats persisted in MongoDB."""

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        super().__init__(client)

    @property
    def collection_name(self) -> str:
        return "user_stats"

    def to_document(self, entity: UserStats) -> Dict[str, Any]:
        """
        Schema:
            {
                "_id": "user123",
                "xp_points": 120,
                "daily_streak": 3,
                "last_activity_date": "2024-01-15",
                "total_foods_contributed": 1,
                "created_at": "2024-01-10T08:00:00+00:00",
                "updated_at": "2024-01-15T09:30:00+00:00"
            }
        """
        return {
            "_id": entity.user_id,
            "xp_points": entity.xp_points,
            "daily_streak": entity.daily_streak,
            "last_activity_date": (
                entity.last_activity_date.isoformat() if entity.last_activity_date else None
            ),
            "total_foods_contributed": entity.total_foods_contributed,
            "created_at": self.datetime_to_iso(entity.created_at),
            "updated_at": self.datetime_to_iso(entity.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> UserStats:
        last_activity = doc.get("last_activity_date")
        return UserStats(
            user_id=doc["_id"],
            xp_points=int(doc.get("xp_points", 0)),
            daily_streak=int(doc.get("daily_streak", 0)),
            last_activity_date=date.fromisoformat(last_activity) if last_activity else None,
            total_foods_contributed=int(doc.get("total_foods_contributed", 0)),
            created_at=self.iso_to_datetime(doc["created_at"]),
            updated_at=self.iso_to_datetime(doc["updated_at"]),
        )

    async def get(self, user_id: str) -> UserStats:
        defaults = self.to_document(UserStats.new(user_id))
        defaults.pop("_id")
        doc = await self._upsert_defaults({"_id": user_id}, defaults)
        return self.from_document(doc)

    async def update(self, user_id: str, update: StatsUpdate) -> UserStats:
        fields: Dict[str, Any] = {"updated_at": self.datetime_to_iso(datetime.now(timezone.utc))}
        if update.xp_points is not None:
            fields["xp_points"] = update.xp_points
        if update.daily_streak is not None:
            fields["daily_streak"] = update.daily_streak
        if update.last_activity_date is not None:
            fields["last_activity_date"] = update.last_activity_date.isoformat()
        if update.total_foods_contributed is not None:
            fields["total_foods_contributed"] = update.total_foods_contributed

        doc = await self._find_one_and_set({"_id": user_id}, fields)
        if doc is None:
            raise StatsStoreError(f"No stats for user {user_id}")
        return self.from_document(doc)

    async def top_by_contributions(self, limit: int) -> list[UserStats]:
        docs = await self._find_many({}, sort=[("total_foods_contributed", -1)], limit=limit)
        return [self.from_document(doc) for doc in docs]

    async def count_with_more_contributions(self, contributions: int) -> int:
        return await self._count({"total_foods_contributed": {"$gt": contributions}})
