"""CoachProfile value object - validated user configuration."""

from dataclasses import dataclass
from typing import Optional

from nutricoach.domain.coach.core.value_objects.enums import DietaryPreference
from nutricoach.domain.coach.core.value_objects.nutrition import NutritionTarget
from nutricoach.domain.shared.errors import CoachNotConfiguredError

WEIGHT_NOT_CONFIGURED = "El peso del usuario no está configurado"
TARGETS_NOT_CONFIGURED = "Los objetivos nutricionales no están configurados"


@dataclass(frozen=True)
class CoachProfile:
    """Everything the engine needs to know about the user.

    Built once at the entry point through from_raw(); an instance is
    always a valid configuration, so the decision flow never re-checks
    weight or targets.

    Attributes:
        weight_kg: Body weight in kilograms (> 0)
        target: Configured daily targets
        dietary_preference: Dietary restriction applied to every food
        is_premium: Premium users get the activity offset on surplus days
    """

    weight_kg: float
    target: NutritionTarget
    dietary_preference: DietaryPreference = DietaryPreference.OMNIVORE
    is_premium: bool = False

    def __post_init__(self) -> None:
        if self.weight_kg <= 0:
            raise CoachNotConfiguredError(WEIGHT_NOT_CONFIGURED)
        if not self.target.is_configured:
            raise CoachNotConfiguredError(TARGETS_NOT_CONFIGURED)

    @classmethod
    def from_raw(
        cls,
        weight_kg: Optional[float],
        calories_target: Optional[float],
        protein_target: Optional[float],
        carbs_target: Optional[float],
        fat_target: Optional[float],
        dietary_preference: Optional[str] = None,
        is_premium: bool = False,
    ) -> "CoachProfile":
        """Build a profile from optional stored values.

        Raises:
            CoachNotConfiguredError: If weight or any target is missing or <= 0
        """
        if weight_kg is None or weight_kg <= 0:
            raise CoachNotConfiguredError(WEIGHT_NOT_CONFIGURED)

        targets = (calories_target, protein_target, carbs_target, fat_target)
        if any(value is None or value <= 0 for value in targets):
            raise CoachNotConfiguredError(TARGETS_NOT_CONFIGURED)

        return cls(
            weight_kg=weight_kg,
            target=NutritionTarget(
                calories=calories_target,  # type: ignore[arg-type]
                protein_g=protein_target,  # type: ignore[arg-type]
                carbs_g=carbs_target,  # type: ignore[arg-type]
                fat_g=fat_target,  # type: ignore[arg-type]
            ),
            dietary_preference=DietaryPreference.parse(dietary_preference),
            is_premium=is_premium,
        )
