"""In-memory exercise catalog."""

from typing import Iterable

from nutricoach.domain.coach.core.entities.candidates import ExerciseCandidate


class InMemoryExerciseCatalog:
    """IExerciseCatalogReader over a fixed list, returned ordered by name."""

    def __init__(self, exercises: Iterable[ExerciseCandidate] = ()) -> None:
        self._exercises = list(exercises)

    def add(self, exercise: ExerciseCandidate) -> None:
        self._exercises.append(exercise)

    async def list_all(self) -> list[ExerciseCandidate]:
        return sorted(self._exercises, key=lambda e: e.name)
