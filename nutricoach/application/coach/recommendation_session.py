"""
Recommendation session.

Owns the re-entrancy rules around the engine for one user session. The
state is either Idle or Evaluating(snapshot); a generation counter acts
as the compare-and-swap token, so when inputs change mid-evaluation the
newest evaluation wins and stale results are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import structlog

from nutricoach.application.coach.queries.get_recommendation import (
    GetRecommendationHandler,
    GetRecommendationQuery,
)
from nutricoach.domain.coach.core.recommendations import CoachOutcome, OutcomeStatus

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class InputSnapshot:
    """Inputs that decide whether a re-evaluation is needed."""

    consumed_calories: float
    calories_target: Optional[float]

    @classmethod
    def of(cls, query: GetRecommendationQuery) -> "InputSnapshot":
        return cls(query.consumed_calories, query.calories_target)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Evaluating:
    snapshot: InputSnapshot
    generation: int


SessionState = Union[Idle, Evaluating]


class EvaluationStatus(str, Enum):
    """What happened to a request."""

    APPLIED = "applied"
    SKIPPED_IN_FLIGHT = "skipped_in_flight"
    SKIPPED_MEMOIZED = "skipped_memoized"
    SUPERSEDED = "superseded"


@dataclass(frozen=True)
class SessionResult:
    status: EvaluationStatus
    outcome: Optional[CoachOutcome] = None


class RecommendationSession:
    """
    Serializes coach evaluations for a single user.

    - Same inputs as the evaluation in flight: skipped.
    - Different inputs while evaluating: a new evaluation starts; the
      older one completes its reads but its outcome is discarded.
    - Same inputs as the last completed evaluation: memoized no-op,
      until invalidate() is called.

    Example:
        >>> session = RecommendationSession(handler)
        >>> result = await session.request(query)
        >>> session.current  # latest applied outcome
    """

    def __init__(self, handler: GetRecommendationHandler) -> None:
        self._handler = handler
        self._state: SessionState = Idle()
        self._generation = 0
        self._last_completed: Optional[InputSnapshot] = None
        self._current: Optional[CoachOutcome] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current(self) -> Optional[CoachOutcome]:
        """Outcome of the most recent applied evaluation."""
        return self._current

    def invalidate(self) -> None:
        """Force the next request to evaluate (e.g. screen regained focus)."""
        self._last_completed = None
        self._state = Idle()

    async def request(self, query: GetRecommendationQuery) -> SessionResult:
        snapshot = InputSnapshot.of(query)
        state = self._state

        if isinstance(state, Evaluating) and state.snapshot == snapshot:
            logger.debug("Evaluation already in flight", generation=state.generation)
            return SessionResult(EvaluationStatus.SKIPPED_IN_FLIGHT)

        if isinstance(state, Idle) and snapshot == self._last_completed:
            return SessionResult(EvaluationStatus.SKIPPED_MEMOIZED, self._current)

        self._generation += 1
        generation = self._generation
        self._state = Evaluating(snapshot, generation)

        try:
            outcome = await self._handler.handle(query)
        finally:
            current = self._state
            if isinstance(current, Evaluating) and current.generation == generation:
                self._state = Idle()

        if generation != self._generation:
            logger.debug(
                "Discarding stale evaluation", generation=generation, latest=self._generation
            )
            return SessionResult(EvaluationStatus.SUPERSEDED, outcome)

        # weight and targets are not in the snapshot, so a missing profile is never memoized
        if outcome.status is not OutcomeStatus.NOT_CONFIGURED:
            self._last_completed = snapshot
        self._current = outcome
        return SessionResult(EvaluationStatus.APPLIED, outcome)
