"""Unit tests for in-memory persistence adapters."""

from datetime import date, timedelta

import pytest

from nutricoach.domain.coach.core.entities.candidates import ExerciseCandidate
from nutricoach.domain.coach.core.value_objects.enums import FoodSource
from nutricoach.domain.gamification.core.entities.user_stats import Achievement, StatsUpdate
from nutricoach.domain.gamification.core.value_objects.achievement_type import AchievementType
from nutricoach.domain.shared.errors import AchievementUnlockError, StatsStoreError
from nutricoach.infrastructure.persistence.in_memory.achievement_store import (
    InMemoryAchievementStore,
)
from nutricoach.infrastructure.persistence.in_memory.activity_log_repository import (
    InMemoryActivityLogRepository,
)
from nutricoach.infrastructure.persistence.in_memory.exercise_catalog import (
    InMemoryExerciseCatalog,
)
from nutricoach.infrastructure.persistence.in_memory.food_catalog import (
    InMemoryFoodCatalogReader,
    UserFood,
)
from nutricoach.infrastructure.persistence.in_memory.food_log_repository import (
    FoodLogEntry,
    InMemoryFoodLogRepository,
)
from nutricoach.infrastructure.persistence.in_memory.stats_store import InMemoryStatsStore

USER = "user123"
TODAY = date(2024, 3, 15)


# ============================================
# Gamification stores
# ============================================


class TestInMemoryStatsStore:
    """Test lazy creation and partial updates."""

    @pytest.mark.asyncio
    async def test_get_creates_zeroed_stats(self) -> None:
        store = InMemoryStatsStore()

        stats = await store.get(USER)

        assert stats.xp_points == 0
        assert stats.daily_streak == 0
        assert stats.last_activity_date is None
        assert store.count() == 1

    @pytest.mark.asyncio
    async def test_update_applies_only_given_fields(self) -> None:
        store = InMemoryStatsStore()
        await store.get(USER)

        updated = await store.update(USER, StatsUpdate(xp_points=60, last_activity_date=TODAY))

        assert updated.xp_points == 60
        assert updated.last_activity_date == TODAY
        assert updated.daily_streak == 0

    @pytest.mark.asyncio
    async def test_update_unknown_user(self) -> None:
        with pytest.raises(StatsStoreError):
            await InMemoryStatsStore().update("ghost", StatsUpdate(xp_points=1))

    @pytest.mark.asyncio
    async def test_returned_copies_are_isolated(self) -> None:
        store = InMemoryStatsStore()
        first = await store.get(USER)
        await store.update(USER, StatsUpdate(xp_points=10))

        assert first.xp_points == 0
        assert (await store.get(USER)).xp_points == 10

    @pytest.mark.asyncio
    async def test_contribution_queries(self) -> None:
        store = InMemoryStatsStore()
        for user_id, total in (("a", 3), ("b", 8), ("c", 1)):
            await store.get(user_id)
            await store.update(user_id, StatsUpdate(total_foods_contributed=total))

        top = await store.top_by_contributions(2)

        assert [s.user_id for s in top] == ["b", "a"]
        assert await store.count_with_more_contributions(1) == 2
        assert await store.count_with_more_contributions(8) == 0

    @pytest.mark.asyncio
    async def test_clear(self) -> None:
        store = InMemoryStatsStore()
        await store.get(USER)

        store.clear()

        assert store.count() == 0


class TestInMemoryAchievementStore:
    @pytest.mark.asyncio
    async def test_insert_and_exists(self) -> None:
        store = InMemoryAchievementStore()
        await store.insert(Achievement(USER, AchievementType.WEEK_STREAK))

        assert await store.exists(USER, AchievementType.WEEK_STREAK)
        assert not await store.exists(USER, AchievementType.MONTH_STREAK)
        assert not await store.exists("other", AchievementType.WEEK_STREAK)

    @pytest.mark.asyncio
    async def test_duplicate_insert_rejected(self) -> None:
        store = InMemoryAchievementStore()
        await store.insert(Achievement(USER, AchievementType.WEEK_STREAK))

        with pytest.raises(AchievementUnlockError, match="already unlocked"):
            await store.insert(Achievement(USER, AchievementType.WEEK_STREAK))

    @pytest.mark.asyncio
    async def test_list_for_user(self) -> None:
        store = InMemoryAchievementStore()
        await store.insert(Achievement(USER, AchievementType.WEEK_STREAK))
        await store.insert(Achievement("other", AchievementType.WEEK_STREAK))

        owned = await store.list_for_user(USER)

        assert [a.user_id for a in owned] == [USER]


# ============================================
# Coach catalogs
# ============================================


class TestFoodLogHistory:
    """Test history aggregation used by the coach."""

    @pytest.mark.asyncio
    async def test_count_for_day(self) -> None:
        repo = InMemoryFoodLogRepository()
        await repo.add(FoodLogEntry(USER, TODAY, "Arroz", 130, 2.7, 28, 0.3))
        await repo.add(FoodLogEntry(USER, TODAY, "Pollo", 165, 31, 0, 3.6))

        assert await repo.count_for_day(USER, TODAY) == 2
        assert await repo.count_for_day(USER, TODAY - timedelta(days=1)) == 0
        assert await repo.count_for_day("other", TODAY) == 0

    @pytest.mark.asyncio
    async def test_aggregates_by_name(self) -> None:
        repo = InMemoryFoodLogRepository()
        await repo.add(FoodLogEntry(USER, TODAY, "Arroz", 130, 2.7, 28, 0.3))
        await repo.add(FoodLogEntry(USER, TODAY - timedelta(days=3), "Arroz", 131, 2.5, 29, 0.4))
        await repo.add(FoodLogEntry(USER, TODAY - timedelta(days=1), "Pollo", 165, 31, 0, 3.6))
        await repo.add(FoodLogEntry(USER, TODAY - timedelta(days=45), "Pizza", 266, 11, 33, 10))
        await repo.add(FoodLogEntry("other", TODAY, "Atún", 132, 28, 0, 1))

        foods = await repo.unique_foods_from_history(USER, 30, TODAY)

        assert [f.name for f in foods] == ["Arroz", "Pollo"]
        rice = foods[0]
        assert rice.source is FoodSource.HISTORY
        assert rice.times_eaten == 2
        assert rice.last_eaten == TODAY
        # mean(130, 131) = 130.5 rounds half up
        assert rice.kcal_100g == 131
        assert rice.carbs_100g == 29

    @pytest.mark.asyncio
    async def test_limit(self) -> None:
        repo = InMemoryFoodLogRepository()
        await repo.add(FoodLogEntry(USER, TODAY, "Arroz", 130, 2.7, 28, 0.3))
        await repo.add(FoodLogEntry(USER, TODAY, "Pollo", 165, 31, 0, 3.6))

        assert len(await repo.unique_foods_from_history(USER, 30, TODAY, limit=1)) == 1


class TestInMemoryFoodCatalogReader:
    """Test the three food sources."""

    def test_user_food_normalized_per_100g(self) -> None:
        bowl = UserFood("Bowl", calories=500, protein_g=30, carbs_g=60, fat_g=15, portion_base=250)

        candidate = bowl.to_candidate()

        assert candidate.source is FoodSource.USER_FOOD
        assert candidate.kcal_100g == 200
        assert candidate.protein_100g == 12
        assert candidate.unit_label == "g"

    @pytest.mark.asyncio
    async def test_search_user_recipes(self) -> None:
        reader = InMemoryFoodCatalogReader(
            USER,
            user_foods=[
                UserFood("Bowl de quinoa", 150, 12, 20, 4),
                UserFood("Batido verde", 60, 2, 12, 0.5),
            ],
        )

        assert len(await reader.search_user_recipes()) == 2
        assert [f.name for f in await reader.search_user_recipes("QUINOA")] == ["Bowl de quinoa"]

    @pytest.mark.asyncio
    async def test_generic_rows_are_tagged_generic(self, make_food) -> None:
        reader = InMemoryFoodCatalogReader(
            USER, generic_foods=[make_food("Avena", FoodSource.HISTORY, kcal_100g=389)]
        )

        foods = await reader.get_all_generic()

        assert foods[0].source is FoodSource.GENERIC

    @pytest.mark.asyncio
    async def test_search_generic_by_tags(self, chicken, lentils, make_food) -> None:
        rice = make_food("Arroz", kcal_100g=130, tags=["carb"])
        reader = InMemoryFoodCatalogReader(USER, generic_foods=[chicken, rice, lentils])

        protein = await reader.search_generic_by_tags(["Protein", "proteina"], 50)
        limited = await reader.search_generic_by_tags(["protein"], 1)

        assert [f.name for f in protein] == ["Pechuga de pollo", "Lentejas cocidas"]
        assert [f.name for f in limited] == ["Pechuga de pollo"]

    @pytest.mark.asyncio
    async def test_search_history_uses_today(self) -> None:
        logs = InMemoryFoodLogRepository()
        await logs.add(FoodLogEntry(USER, TODAY - timedelta(days=2), "Arroz", 130, 2.7, 28, 0.3))
        reader = InMemoryFoodCatalogReader(USER, food_logs=logs, today=lambda: TODAY)

        history = await reader.search_history(30)

        assert [f.name for f in history] == ["Arroz"]
        assert history[0].last_eaten == TODAY - timedelta(days=2)


class TestInMemoryExerciseCatalog:
    @pytest.mark.asyncio
    async def test_list_all_sorted_by_name(self, exercises) -> None:
        catalog = InMemoryExerciseCatalog(exercises)
        catalog.add(ExerciseCandidate(id="swim", name="Nadar", met_value=6))

        names = [e.name for e in await catalog.list_all()]

        assert names == sorted(names)
        assert "Nadar" in names


class TestActivityLog:
    @pytest.mark.asyncio
    async def test_burned_per_user_and_day(self) -> None:
        repo = InMemoryActivityLogRepository()
        await repo.log(USER, TODAY, 120)
        await repo.log(USER, TODAY, 30)
        await repo.log(USER, TODAY - timedelta(days=1), 400)

        reader = repo.reader_for(USER)

        assert await reader.get_today_burned_calories(TODAY) == 150
        assert await repo.reader_for("other").get_today_burned_calories(TODAY) == 0

    @pytest.mark.asyncio
    async def test_negative_calories_rejected(self) -> None:
        with pytest.raises(ValueError):
            await InMemoryActivityLogRepository().log(USER, TODAY, -5)
