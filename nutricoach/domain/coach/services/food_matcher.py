"""Food search across the user's recipes, history and the generic catalog.

The matcher reads every source once per search, keeps the candidates
that fit the user's diet and have a positive value for the nutrient
being optimized, and ranks them with history first.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from nutricoach.domain.coach.core.entities.candidates import FoodCandidate
from nutricoach.domain.coach.core.ports.catalogs import IFoodCatalogReader
from nutricoach.domain.coach.core.value_objects.enums import (
    DietaryPreference,
    FoodSource,
    MacroKey,
)
from nutricoach.domain.coach.services.dietary_filter import is_compatible
from nutricoach.domain.shared.errors import CatalogUnavailableError

logger = structlog.get_logger(__name__)

HISTORY_DAYS_BACK = 30
GENERIC_SEARCH_LIMIT = 50

# A gap above this on any dimension justifies the full-catalog fallback
SIGNIFICANT_GAP = 10

GENERIC_TAGS_BY_KEY: dict[MacroKey, list[str]] = {
    MacroKey.PROTEIN: ["protein", "proteina"],
    MacroKey.CARBS: ["carb", "carbohidrato", "fruit"],
    MacroKey.FAT: ["fat", "grasa", "dairy"],
    MacroKey.CALORIES: ["fat", "grasa", "dairy"],
}

# Seasonings and garnish vegetables never make a useful recommendation
GENERIC_NAME_DENYLIST = (
    "zanahoria", "lechuga", "apio", "pepino", "tomate", "cebolla", "ajo", "perejil",
    "cilantro", "sal", "pimienta", "condimento", "aderezo", "salsa",
)


@dataclass(frozen=True)
class FoodGaps:
    """Remaining amounts per nutrient for the current search."""

    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    calories: float = 0.0

    def is_significant(self) -> bool:
        return any(
            gap > SIGNIFICANT_GAP for gap in (self.protein, self.carbs, self.fat, self.calories)
        )


def is_low_density(food: FoodCandidate, key: MacroKey) -> bool:
    """Generic rows too poor in the searched nutrient to be worth suggesting."""
    kcal = food.kcal_100g or 0
    if kcal < 30:
        return True
    if key is MacroKey.PROTEIN:
        return (food.protein_100g or 0) < 2
    if key is MacroKey.CARBS:
        return (food.carbs_100g or 0) < 5
    if key is MacroKey.FAT:
        return (food.fat_100g or 0) < 1
    return kcal < 50


def is_denylisted(name: str) -> bool:
    lowered = name.lower()
    return any(fragment in lowered for fragment in GENERIC_NAME_DENYLIST)


class FoodMatcher:
    """
    Finds the best food to close a gap.

    Individual source failures are logged and skipped. When every read
    failed, or the sources returned no rows at all, the catalog is
    considered unavailable.

    Example:
        >>> matcher = FoodMatcher(food_catalog)
        >>> food = await matcher.find_best_match(
        ...     FoodGaps(protein=90, calories=500),
        ...     MacroKey.PROTEIN,
        ...     preference=DietaryPreference.VEGETARIAN,
        ... )
    """

    def __init__(self, catalog: IFoodCatalogReader) -> None:
        self._catalog = catalog

    async def find_best_match(
        self,
        gaps: FoodGaps,
        key: MacroKey,
        preference: Optional[DietaryPreference] = None,
    ) -> Optional[FoodCandidate]:
        """Best candidate for key, or None when nothing qualifies.

        Args:
            gaps: Current gaps, used to decide on the fallback scan
            key: Nutrient to optimize for
            preference: Dietary preference applied to every source

        Raises:
            CatalogUnavailableError: If no source could provide any row
        """
        failures = 0
        raw_rows = 0
        matches: list[FoodCandidate] = []

        # 1. User recipes
        try:
            recipes = await self._catalog.search_user_recipes("")
            raw_rows += len(recipes)
            matches.extend(
                food
                for food in recipes
                if is_compatible(food.name, preference, food.tags)
                and (food.value_for(key) or 0) > 0
            )
        except Exception as e:
            failures += 1
            logger.warning("User recipes search failed", error=str(e))

        # 2. Consumption history
        try:
            history = await self._catalog.search_history(HISTORY_DAYS_BACK)
            raw_rows += len(history)
            matches.extend(
                food
                for food in history
                if is_compatible(food.name, preference, food.tags)
                and (food.value_for(key) or 0) > 0
            )
        except Exception as e:
            failures += 1
            logger.warning("History search failed", error=str(e))

        # 3. Generic catalog by tags
        try:
            generic = await self._catalog.search_generic_by_tags(
                GENERIC_TAGS_BY_KEY[key], GENERIC_SEARCH_LIMIT
            )
            raw_rows += len(generic)
            matches.extend(food for food in generic if self._accept_generic(food, key, preference))
        except Exception as e:
            failures += 1
            logger.warning("Generic tag search failed", error=str(e), key=key.value)

        if failures == 3:
            raise CatalogUnavailableError("No se pudo leer ningún catálogo de alimentos")

        if matches:
            return self._rank(matches, key)[0]

        if not gaps.is_significant():
            if raw_rows == 0:
                raise CatalogUnavailableError("No hay alimentos disponibles en el catálogo")
            return None

        return await self._fallback_scan(key, preference, raw_rows)

    @staticmethod
    def _accept_generic(
        food: FoodCandidate, key: MacroKey, preference: Optional[DietaryPreference]
    ) -> bool:
        # Missing or zero macros mean unreliable catalog data
        if not food.kcal_100g or food.kcal_100g <= 0:
            return False
        if not food.protein_100g or not food.carbs_100g or not food.fat_100g:
            return False
        if not is_compatible(food.name, preference, food.tags):
            return False
        if is_low_density(food, key) or is_denylisted(food.name):
            return False
        return (food.value_for(key) or 0) > 0

    @staticmethod
    def _rank(matches: list[FoodCandidate], key: MacroKey) -> list[FoodCandidate]:
        """History first, then density for key descending, deduplicated by name."""
        ordered = sorted(
            matches,
            key=lambda food: (
                0 if food.source is FoodSource.HISTORY else 1,
                -(food.value_for(key) or 0),
            ),
        )
        seen: set[str] = set()
        unique: list[FoodCandidate] = []
        for food in ordered:
            name = food.name.strip().casefold()
            if name in seen:
                continue
            seen.add(name)
            unique.append(food)
        return unique

    async def _fallback_scan(
        self, key: MacroKey, preference: Optional[DietaryPreference], raw_rows: int
    ) -> Optional[FoodCandidate]:
        """First generic row, in catalog order, usable for key."""
        try:
            catalog = await self._catalog.get_all_generic()
        except Exception as e:
            logger.warning("Full generic catalog read failed", error=str(e))
            if raw_rows == 0:
                raise CatalogUnavailableError(
                    "No se pudo leer el catálogo de alimentos"
                ) from e
            return None

        if raw_rows == 0 and not catalog:
            raise CatalogUnavailableError("No hay alimentos disponibles en el catálogo")

        for food in catalog:
            if not food.kcal_100g or food.kcal_100g <= 0 or not food.has_complete_macros():
                continue
            if not is_compatible(food.name, preference, food.tags):
                continue
            if (food.value_for(key) or 0) > 0:
                logger.info("Fallback food selected", food=food.name, key=key.value)
                return food
        return None
