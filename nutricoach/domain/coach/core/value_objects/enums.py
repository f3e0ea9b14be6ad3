"""Enumerations for the coach domain."""

from enum import Enum
from typing import Optional


class DietaryPreference(str, Enum):
    """User dietary preference."""

    OMNIVORE = "omnivore"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    PESCATARIAN = "pescatarian"

    @classmethod
    def parse(cls, value: Optional[str]) -> "DietaryPreference":
        """Parse a stored preference; missing or unknown values mean omnivore."""
        if not value:
            return cls.OMNIVORE
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.OMNIVORE


class MacroKey(str, Enum):
    """Nutrient the food search is optimizing for."""

    PROTEIN = "protein"
    CARBS = "carbs"
    FAT = "fat"
    CALORIES = "calories"

    @property
    def label_es(self) -> str:
        """Spanish label used in coach messages."""
        return _MACRO_LABELS[self]


_MACRO_LABELS = {
    MacroKey.PROTEIN: "Proteína",
    MacroKey.CARBS: "Carbohidratos",
    MacroKey.FAT: "Grasas",
    MacroKey.CALORIES: "Calorías",
}


class FoodSource(str, Enum):
    """Where a food candidate comes from."""

    HISTORY = "history"
    GENERIC = "generic"
    USER_FOOD = "user_food"


class MealSlot(str, Enum):
    """Meal of the day, chosen from the local hour."""

    DESAYUNO = "DESAYUNO"
    ALMUERZO = "ALMUERZO"
    MERIENDA = "MERIENDA"
    CENA = "CENA"

    @classmethod
    def from_hour(cls, hour: int) -> "MealSlot":
        """Map a local hour (0-23) to a meal slot.

        Example:
            >>> MealSlot.from_hour(7)
            <MealSlot.DESAYUNO: 'DESAYUNO'>
        """
        if 5 <= hour <= 10:
            return cls.DESAYUNO
        if 11 <= hour <= 14:
            return cls.ALMUERZO
        if 15 <= hour <= 18:
            return cls.MERIENDA
        return cls.CENA


class DayPeriod(str, Enum):
    """Time band used to pick exercise message wording."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"

    @classmethod
    def from_hour(cls, hour: int) -> "DayPeriod":
        if 5 <= hour < 12:
            return cls.MORNING
        if 12 <= hour < 20:
            return cls.AFTERNOON
        return cls.NIGHT
