"""Catalog ports.

Read-only access to the data the coach chooses from. Implementations
raise on read failure; the engine decides how a failure degrades.
"""

from datetime import date
from typing import Protocol, runtime_checkable

from nutricoach.domain.coach.core.entities.candidates import ExerciseCandidate, FoodCandidate


@runtime_checkable
class IFoodCatalogReader(Protocol):
    """
    Port for the three food sources plus the full generic catalog.

    Every returned candidate has nutrients expressed per 100 g.
    """

    async def search_user_recipes(self, query: str = "") -> list[FoodCandidate]:
        """User-created foods/recipes matching query ("" = all).

        Returns:
            Candidates with source=USER_FOOD, normalized to per-100 g
        """
        ...

    async def search_history(self, days_back: int) -> list[FoodCandidate]:
        """Foods the user ate in the last days_back days, aggregated by name.

        Returns:
            Candidates with source=HISTORY, ordered by times_eaten descending
        """
        ...

    async def search_generic_by_tags(self, tags: list[str], limit: int) -> list[FoodCandidate]:
        """Generic catalog rows having any of tags, at most limit rows."""
        ...

    async def get_all_generic(self) -> list[FoodCandidate]:
        """Every generic catalog row, in catalog order."""
        ...


@runtime_checkable
class IExerciseCatalogReader(Protocol):
    """Port for the exercise catalog."""

    async def list_all(self) -> list[ExerciseCandidate]:
        """All exercises, ordered by name."""
        ...


@runtime_checkable
class IActivityReader(Protocol):
    """Port for calories burned through tracked physical activity."""

    async def get_today_burned_calories(self, day: date) -> float:
        """Calories burned on day; 0 when nothing was tracked."""
        ...
