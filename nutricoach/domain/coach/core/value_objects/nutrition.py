"""Nutrition target and progress value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionTarget:
    """Daily nutrition targets.

    A target with any value <= 0 is considered not configured; the coach
    cannot make a recommendation against it.

    Attributes:
        calories: Daily calorie target (kcal)
        protein_g: Daily protein target in grams
        carbs_g: Daily carbohydrates target in grams
        fat_g: Daily fat target in grams
    """

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float

    def __post_init__(self) -> None:
        """Validate targets are non-negative.

        Raises:
            ValueError: If any target is negative
        """
        for field_name in ("calories", "protein_g", "carbs_g", "fat_g"):
            value = getattr(self, field_name)
            if value < 0:
                raise ValueError(f"{field_name} must be non-negative, got {value}")

    @property
    def is_configured(self) -> bool:
        """True when all four targets are strictly positive."""
        return self.calories > 0 and self.protein_g > 0 and self.carbs_g > 0 and self.fat_g > 0


@dataclass(frozen=True)
class NutritionProgress:
    """What the user has consumed so far today."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0

    def __post_init__(self) -> None:
        for field_name in ("calories", "protein_g", "carbs_g", "fat_g"):
            value = getattr(self, field_name)
            if value < 0:
                raise ValueError(f"{field_name} must be non-negative, got {value}")

    def is_empty(self) -> bool:
        """True when nothing meaningful was logged yet today.

        Example:
            >>> NutritionProgress(calories=15, protein_g=1).is_empty()
            True
        """
        return (
            self.calories < 20 and self.protein_g < 5 and self.carbs_g < 5 and self.fat_g < 5
        )
