"""Exercise selection for calorie surplus days."""

import random
from typing import Optional

from nutricoach.domain.coach.core.entities.candidates import ExerciseCandidate
from nutricoach.domain.coach.core.recommendations import ExerciseSuggestion
from nutricoach.domain.coach.services.portion_calculator import minutes_to_burn

MIN_MET = 2.0
NIGHT_MAX_MET = 4.5
MAX_SUGGESTIONS = 2


def is_night(hour: int) -> bool:
    """Night window is 20:00-04:59."""
    return hour >= 20 or hour < 5


def filter_by_intensity(exercises: list[ExerciseCandidate], hour: int) -> list[ExerciseCandidate]:
    """Keep exercises suited to the time of day.

    Night keeps light activities (MET 2-4.5), daytime anything from MET 2.
    Falls back to the full list when nothing survives.
    """
    if is_night(hour):
        filtered = [e for e in exercises if MIN_MET <= e.met_value <= NIGHT_MAX_MET]
    else:
        filtered = [e for e in exercises if e.met_value >= MIN_MET]
    return filtered or list(exercises)


class ExercisePlanner:
    """Picks up to two exercises and computes the minutes each needs.

    Args:
        rng: Random source used for the shuffle; inject a seeded
            random.Random for deterministic selection.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def plan(
        self,
        exercises: list[ExerciseCandidate],
        excess_kcal: float,
        weight_kg: float,
        hour: int,
    ) -> list[ExerciseSuggestion]:
        """Suggestions sorted ascending by minutes needed."""
        pool = filter_by_intensity(exercises, hour)
        self._rng.shuffle(pool)

        suggestions = [
            ExerciseSuggestion(
                id=exercise.id,
                name=exercise.name,
                met=exercise.met_value,
                icon=exercise.icon_name,
                minutes_needed=minutes_to_burn(excess_kcal, exercise.met_value, weight_kg),
            )
            for exercise in pool[:MAX_SUGGESTIONS]
        ]
        return sorted(suggestions, key=lambda s: s.minutes_needed)
