"""Coach entities."""

from nutricoach.domain.coach.core.entities.candidates import ExerciseCandidate, FoodCandidate

__all__ = ["ExerciseCandidate", "FoodCandidate"]
