"""In-memory food log with history aggregation."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from nutricoach.domain.coach.core.entities.candidates import FoodCandidate
from nutricoach.domain.coach.core.value_objects.enums import FoodSource
from nutricoach.domain.shared.rounding import round_half_up


@dataclass(frozen=True)
class FoodLogEntry:
    """One logged food.

    Nutrient values are the ones stored on the log row; history
    candidates reuse them as their per-100 g values.
    """

    user_id: str
    day: date
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


class InMemoryFoodLogRepository:
    """
    Food log storage. Implements IFoodLogReader.

    Suitable for testing and development. Data is lost when the
    application stops.
    """

    def __init__(self) -> None:
        self._entries: list[FoodLogEntry] = []

    async def add(self, entry: FoodLogEntry) -> None:
        self._entries.append(entry)

    async def count_for_day(self, user_id: str, day: date) -> int:
        return sum(1 for e in self._entries if e.user_id == user_id and e.day == day)

    async def unique_foods_from_history(
        self,
        user_id: str,
        days_back: int,
        today: date,
        limit: Optional[int] = None,
    ) -> list[FoodCandidate]:
        """
        Aggregate a user's recent logs by food name.

        Nutrients are averaged (half-up rounded), times_eaten counts the
        logs and last_eaten is the latest day. Most eaten first.

        Args:
            user_id: Owner of the logs
            days_back: Look-back window in days (inclusive of today)
            today: Reference day
            limit: Max foods returned, None for all
        """
        since = today - timedelta(days=days_back)
        grouped: dict[str, list[FoodLogEntry]] = defaultdict(list)
        for entry in self._entries:
            if entry.user_id == user_id and since <= entry.day <= today:
                grouped[entry.name].append(entry)

        foods = [
            FoodCandidate(
                name=name,
                source=FoodSource.HISTORY,
                protein_100g=round_half_up(sum(e.protein_g for e in entries) / len(entries)),
                carbs_100g=round_half_up(sum(e.carbs_g for e in entries) / len(entries)),
                fat_100g=round_half_up(sum(e.fat_g for e in entries) / len(entries)),
                kcal_100g=round_half_up(sum(e.calories for e in entries) / len(entries)),
                times_eaten=len(entries),
                last_eaten=max(e.day for e in entries),
            )
            for name, entries in grouped.items()
        ]
        foods.sort(key=lambda f: f.times_eaten or 0, reverse=True)
        return foods[:limit] if limit is not None else foods

    def clear(self) -> None:
        self._entries.clear()

    def count(self) -> int:
        return len(self._entries)
