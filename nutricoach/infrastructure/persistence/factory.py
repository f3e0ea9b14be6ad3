"""Store factory for gamification persistence.

Environment-based store selection:
- REPOSITORY_BACKEND=inmemory (default): fast, transient
- REPOSITORY_BACKEND=mongodb: persistent, requires MONGODB_URI

Usage:
    from nutricoach.infrastructure.persistence.factory import get_stats_store

    store = get_stats_store()  # Singleton, backend chosen from env
"""

from typing import Optional

from nutricoach.domain.gamification.core.ports.stores import IAchievementStore, IStatsStore
from nutricoach.infrastructure.config import get_mongodb_uri, get_repository_backend
from nutricoach.infrastructure.persistence.in_memory.achievement_store import (
    InMemoryAchievementStore,
)
from nutricoach.infrastructure.persistence.in_memory.stats_store import InMemoryStatsStore


def _use_mongodb() -> bool:
    backend = get_repository_backend()
    if backend == "mongodb":
        if not get_mongodb_uri():
            raise ValueError(
                "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
                "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
            )
        return True
    if backend != "inmemory":
        raise ValueError(f"Unknown REPOSITORY_BACKEND: {backend!r}")
    return False


def create_stats_store() -> IStatsStore:
    """Create stats store based on REPOSITORY_BACKEND.

    Raises:
        ValueError: If mongodb is selected without MONGODB_URI, or the
            backend name is unknown
    """
    if _use_mongodb():
        from nutricoach.infrastructure.persistence.mongodb.stats_store import MongoStatsStore

        return MongoStatsStore()
    return InMemoryStatsStore()


def create_achievement_store() -> IAchievementStore:
    """Create achievement store based on REPOSITORY_BACKEND."""
    if _use_mongodb():
        from nutricoach.infrastructure.persistence.mongodb.achievement_store import (
            MongoAchievementStore,
        )

        return MongoAchievementStore()
    return InMemoryAchievementStore()


# Singleton instances (lazy initialization)
_stats_store: Optional[IStatsStore] = None
_achievement_store: Optional[IAchievementStore] = None


def get_stats_store() -> IStatsStore:
    global _stats_store
    if _stats_store is None:
        _stats_store = create_stats_store()
    return _stats_store


def get_achievement_store() -> IAchievementStore:
    global _achievement_store
    if _achievement_store is None:
        _achievement_store = create_achievement_store()
    return _achievement_store


def reset_repositories() -> None:
    """Reset singletons so the next getter re-reads the environment (tests)."""
    global _stats_store, _achievement_store
    _stats_store = None
    _achievement_store = None
