"""In-memory food catalog reader (user recipes, history, generic foods)."""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, Optional

from nutricoach.domain.coach.core.entities.candidates import FoodCandidate
from nutricoach.domain.coach.core.value_objects.enums import FoodSource
from nutricoach.infrastructure.persistence.in_memory.food_log_repository import (
    InMemoryFoodLogRepository,
)


@dataclass(frozen=True)
class UserFood:
    """A food or recipe created by the user.

    Nutrients are given for portion_base units of portion_unit
    (e.g. 250 g); the reader normalizes them to per 100 g.
    """

    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    portion_base: float = 100.0
    portion_unit: str = "g"

    def to_candidate(self) -> FoodCandidate:
        factor = 100 / (self.portion_base or 100)
        return FoodCandidate(
            name=self.name,
            source=FoodSource.USER_FOOD,
            protein_100g=self.protein_g * factor,
            carbs_100g=self.carbs_g * factor,
            fat_100g=self.fat_g * factor,
            kcal_100g=self.calories * factor,
            unit_label=self.portion_unit,
        )


class InMemoryFoodCatalogReader:
    """
    IFoodCatalogReader for one user backed by in-memory data.

    Args:
        user_id: User whose recipes and history are read
        generic_foods: Generic catalog rows, in catalog order
        user_foods: The user's own foods/recipes
        food_logs: Food log repository used for history
        today: Provider for the reference day of history look-backs
    """

    def __init__(
        self,
        user_id: str,
        generic_foods: Iterable[FoodCandidate] = (),
        user_foods: Iterable[UserFood] = (),
        food_logs: Optional[InMemoryFoodLogRepository] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self._user_id = user_id
        self._generic = [
            food.model_copy(update={"source": FoodSource.GENERIC}) for food in generic_foods
        ]
        self._user_foods = list(user_foods)
        self._food_logs = food_logs or InMemoryFoodLogRepository()
        self._today = today or date.today

    async def search_user_recipes(self, query: str = "") -> list[FoodCandidate]:
        needle = query.strip().lower()
        return [
            food.to_candidate() for food in self._user_foods if needle in food.name.lower()
        ]

    async def search_history(self, days_back: int) -> list[FoodCandidate]:
        return await self._food_logs.unique_foods_from_history(
            self._user_id, days_back, self._today()
        )

    async def search_generic_by_tags(self, tags: list[str], limit: int) -> list[FoodCandidate]:
        wanted = {tag.lower() for tag in tags}
        matches = [food for food in self._generic if wanted.intersection(food.tags)]
        return matches[:limit]

    async def get_all_generic(self) -> list[FoodCandidate]:
        return list(self._generic)
