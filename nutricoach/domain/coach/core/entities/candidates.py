"""
Candidate models.

Foods and exercises the engine can choose from, as delivered by the
catalog ports. Nutrient values are always expressed per 100 g.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nutricoach.domain.coach.core.value_objects.enums import FoodSource, MacroKey


class FoodCandidate(BaseModel):
    """
    A food the coach may recommend.

    Generic catalog rows can have missing nutrient data, so every nutrient
    is optional. History rows carry last_eaten / times_eaten; generic rows
    may carry a household unit (e.g. "huevo" = 50 g).

    Example:
        >>> egg = FoodCandidate(
        ...     name="Huevo",
        ...     source=FoodSource.GENERIC,
        ...     protein_100g=13,
        ...     carbs_100g=1.1,
        ...     fat_100g=11,
        ...     kcal_100g=155,
        ...     unit_label="huevos",
        ...     grams_per_unit=50,
        ...     tags=["protein", "huevo"],
        ... )
        >>> egg.value_for(MacroKey.CALORIES)
        155.0
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Display name")
    source: FoodSource = Field(..., description="Origin of the candidate")

    protein_100g: Optional[float] = Field(None, description="Protein g per 100 g")
    carbs_100g: Optional[float] = Field(None, description="Carbs g per 100 g")
    fat_100g: Optional[float] = Field(None, description="Fat g per 100 g")
    kcal_100g: Optional[float] = Field(None, description="kcal per 100 g")

    unit_label: Optional[str] = Field(None, description="Household unit label")
    grams_per_unit: Optional[float] = Field(None, description="Grams in one unit")

    last_eaten: Optional[date] = Field(None, description="Last day eaten (history)")
    times_eaten: Optional[int] = Field(None, ge=0, description="Times eaten (history)")

    tags: tuple[str, ...] = Field(default_factory=tuple, description="Catalog tags")

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: object) -> tuple[str, ...]:
        """Accept any iterable of tags, store as lower-case tuple."""
        if v is None:
            return ()
        if isinstance(v, str):
            return (v.lower(),)
        return tuple(str(tag).lower() for tag in v)  # type: ignore[attr-defined]

    def value_for(self, key: MacroKey) -> Optional[float]:
        """Per-100 g value of the nutrient the search optimizes for."""
        if key is MacroKey.PROTEIN:
            return self.protein_100g
        if key is MacroKey.CARBS:
            return self.carbs_100g
        if key is MacroKey.FAT:
            return self.fat_100g
        return self.kcal_100g

    def has_complete_macros(self) -> bool:
        """True when protein, carbs and fat are all present."""
        return (
            self.protein_100g is not None
            and self.carbs_100g is not None
            and self.fat_100g is not None
        )


class ExerciseCandidate(BaseModel):
    """
    An activity from the exercise catalog.

    Example:
        >>> ExerciseCandidate(id="ex1", name="Caminar", met_value="3.5", icon_name="walk")
        ExerciseCandidate(id='ex1', name='Caminar', met_value=3.5, icon_name='walk')
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(..., min_length=1)
    met_value: float = Field(..., description="Metabolic equivalent of task")
    icon_name: Optional[str] = None

    @field_validator("met_value", mode="before")
    @classmethod
    def coerce_met(cls, v: object) -> float:
        """Catalog rows sometimes store MET as a string."""
        return float(v)  # type: ignore[arg-type]
