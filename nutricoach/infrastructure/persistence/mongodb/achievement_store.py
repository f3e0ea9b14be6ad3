"""MongoDB implementation of IAchievementStore.

Collection "user_achievements"; _id is "{user_id}:{achievement_type}" so
the one-per-user-and-type rule is enforced by the primary key.
"""

from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import DuplicateKeyError

from nutricoach.domain.gamification.core.entities.user_stats import Achievement
from nutricoach.domain.gamification.core.ports.stores import IAchievementStore
from nutricoach.domain.gamification.core.value_objects.achievement_type import AchievementType
from nutricoach.domain.shared.errors import AchievementUnlockError
from nutricoach.infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoAchievementStore(MongoBaseRepository[Achievement], IAchievementStore):
    """Unlocked achievements persisted in MongoDB."""

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        super().__init__(client)

    @property
    def collection_name(self) -> str:
        return "user_achievements"

    @staticmethod
    def document_id(user_id: str, achievement_type: AchievementType) -> str:
        return f"{user_id}:{achievement_type.value}"

    def to_document(self, entity: Achievement) -> Dict[str, Any]:
        return {
            "_id": self.document_id(entity.user_id, entity.achievement_type),
            "user_id": entity.user_id,
            "achievement_type": entity.achievement_type.value,
            "unlocked_at": self.datetime_to_iso(entity.unlocked_at),
            "metadata": dict(entity.metadata),
        }

    def from_document(self, doc: Dict[str, Any]) -> Achievement:
        return Achievement(
            user_id=doc["user_id"],
            achievement_type=AchievementType(doc["achievement_type"]),
            unlocked_at=self.iso_to_datetime(doc["unlocked_at"]),
            metadata=doc.get("metadata") or {},
        )

    async def exists(self, user_id: str, achievement_type: AchievementType) -> bool:
        count = await self._count({"_id": self.document_id(user_id, achievement_type)})
        return count > 0

    async def insert(self, achievement: Achievement) -> None:
        try:
            await self._insert_one(self.to_document(achievement))
        except DuplicateKeyError as e:
            raise AchievementUnlockError(
                f"Achievement {achievement.achievement_type.value} already unlocked "
                f"for {achievement.user_id}"
            ) from e

    async def list_for_user(self, user_id: str) -> list[Achievement]:
        docs = await self._find_many({"user_id": user_id}, sort=[("unlocked_at", -1)])
        return [self.from_document(doc) for doc in docs]
