"""Base MongoDB repository with reusable patterns.

Connection handling, document mapping hooks and logged error handling
shared by every MongoDB store. Subclasses provide collection_name,
to_document() and from_document().
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ReturnDocument

from nutricoach.infrastructure.config import get_mongodb_database, get_mongodb_uri

TEntity = TypeVar("TEntity")

logger = structlog.get_logger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB stores.

    Every helper logs the failing operation with its collection and
    filter, then re-raises.

    Example:
        class MongoStatsStore(MongoBaseRepository[UserStats], IStatsStore):
            @property
            def collection_name(self) -> str:
                return "user_stats"
    """

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)

        Raises:
            ValueError: If no client is given and MONGODB_URI is not set
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
        else:
            self._client = client

        self._db = self._client[get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.info(
            "Mongo repository initialized",
            repository=self.__class__.__name__,
            collection=self.collection_name,
        )

    # ============================================================
    # Abstract Properties/Methods (must be implemented)
    # ============================================================

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        return self._collection

    @staticmethod
    def iso_to_datetime(iso_str: str) -> datetime:
        """Parse ISO string, assuming UTC when no timezone is present."""
        dt = datetime.fromisoformat(iso_str)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    @staticmethod
    def datetime_to_iso(dt: datetime) -> str:
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return dt.isoformat()

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        try:
            cursor = self._collection.find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            if limit:
                cursor = cursor.limit(limit)
            return await cursor.to_list(length=limit)
        except Exception as e:
            logger.error(
                "find_many failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        try:
            await self._collection.insert_one(document)
        except Exception as e:
            logger.error("insert_one failed", collection=self.collection_name, error=str(e))
            raise

    async def _upsert_defaults(
        self, filter_dict: Dict[str, Any], defaults: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Return the matching document, inserting defaults when missing."""
        try:
            return await self._collection.find_one_and_update(
                filter_dict,
                {"$setOnInsert": defaults},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            logger.error(
                "upsert failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _find_one_and_set(
        self, filter_dict: Dict[str, Any], fields: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Apply $set and return the updated document (None when no match)."""
        try:
            return await self._collection.find_one_and_update(
                filter_dict,
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            logger.error(
                "find_one_and_update failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _count(self, filter_dict: Dict[str, Any]) -> int:
        try:
            return await self._collection.count_documents(filter_dict)
        except Exception as e:
            logger.error(
                "count failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise
