"""Unit tests for RecommendationSession re-entrancy rules."""

import asyncio
from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from nutricoach.application.coach.queries.get_recommendation import (
    GetRecommendationHandler,
    GetRecommendationQuery,
)
from nutricoach.application.coach.recommendation_session import (
    EvaluationStatus,
    Evaluating,
    Idle,
    InputSnapshot,
    RecommendationSession,
)
from nutricoach.domain.coach.core.recommendations import CoachOutcome, OutcomeStatus

NOW = datetime(2024, 3, 15, 13, 0)


def _query(consumed: float, target: float = 2000) -> GetRecommendationQuery:
    return GetRecommendationQuery(
        now=NOW,
        weight_kg=70,
        calories_target=target,
        protein_target=150,
        carbs_target=200,
        fat_target=60,
        consumed_calories=consumed,
    )


class GatedHandler:
    """Handler stub whose evaluations block until released."""

    def __init__(self) -> None:
        self.gates: dict[float, asyncio.Event] = {}
        self.calls: list[float] = []

    def gate(self, consumed: float) -> asyncio.Event:
        return self.gates.setdefault(consumed, asyncio.Event())

    async def handle(self, query: GetRecommendationQuery) -> CoachOutcome:
        self.calls.append(query.consumed_calories)
        await self.gate(query.consumed_calories).wait()
        return CoachOutcome.not_configured(f"consumed={query.consumed_calories}")


@pytest.fixture
def handler() -> AsyncMock:
    mock = AsyncMock(spec=GetRecommendationHandler)
    mock.handle.return_value = CoachOutcome.no_action()
    return mock


class TestInputSnapshot:
    def test_from_query(self) -> None:
        assert InputSnapshot.of(_query(1200)) == InputSnapshot(1200, 2000)


class TestSequentialRequests:
    """Requests that never overlap."""

    @pytest.mark.asyncio
    async def test_first_request_applies(self, handler) -> None:
        session = RecommendationSession(handler)

        result = await session.request(_query(1200))

        assert result.status is EvaluationStatus.APPLIED
        assert session.current == result.outcome
        assert isinstance(session.state, Idle)

    @pytest.mark.asyncio
    async def test_same_inputs_are_memoized(self, handler) -> None:
        session = RecommendationSession(handler)
        first = await session.request(_query(1200))

        second = await session.request(_query(1200))

        assert second.status is EvaluationStatus.SKIPPED_MEMOIZED
        assert second.outcome == first.outcome
        handler.handle.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_changed_inputs_reevaluate(self, handler) -> None:
        session = RecommendationSession(handler)
        await session.request(_query(1200))

        result = await session.request(_query(1400))

        assert result.status is EvaluationStatus.APPLIED
        assert handler.handle.await_count == 2

    @pytest.mark.asyncio
    async def test_target_change_reevaluates(self, handler) -> None:
        session = RecommendationSession(handler)
        await session.request(_query(1200))

        result = await session.request(_query(1200, target=2200))

        assert result.status is EvaluationStatus.APPLIED

    @pytest.mark.asyncio
    async def test_invalidate_forces_evaluation(self, handler) -> None:
        session = RecommendationSession(handler)
        await session.request(_query(1200))

        session.invalidate()
        result = await session.request(_query(1200))

        assert result.status is EvaluationStatus.APPLIED
        assert handler.handle.await_count == 2

    @pytest.mark.asyncio
    async def test_not_configured_is_not_memoized(self, handler) -> None:
        handler.handle.side_effect = [
            CoachOutcome.not_configured("El peso del usuario no está configurado"),
            CoachOutcome.no_action(),
        ]
        session = RecommendationSession(handler)
        first = await session.request(_query(2100))

        second = await session.request(_query(2100))

        assert first.outcome.status is OutcomeStatus.NOT_CONFIGURED
        assert second.status is EvaluationStatus.APPLIED
        assert session.current.status is OutcomeStatus.NO_ACTION
        assert handler.handle.await_count == 2

    @pytest.mark.asyncio
    async def test_failure_returns_to_idle(self, handler) -> None:
        handler.handle.side_effect = RuntimeError("boom")
        session = RecommendationSession(handler)

        with pytest.raises(RuntimeError):
            await session.request(_query(1200))

        assert isinstance(session.state, Idle)
        assert session.current is None

        handler.handle.side_effect = None
        result = await session.request(_query(1200))
        assert result.status is EvaluationStatus.APPLIED


class TestOverlappingRequests:
    """Requests issued while an evaluation is in flight."""

    @pytest.mark.asyncio
    async def test_same_inputs_in_flight_are_skipped(self) -> None:
        handler = GatedHandler()
        session = RecommendationSession(handler)

        first = asyncio.create_task(session.request(_query(1200)))
        await asyncio.sleep(0)
        assert isinstance(session.state, Evaluating)

        skipped = await session.request(_query(1200))
        handler.gate(1200).set()
        applied = await first

        assert skipped.status is EvaluationStatus.SKIPPED_IN_FLIGHT
        assert skipped.outcome is None
        assert applied.status is EvaluationStatus.APPLIED
        assert handler.calls == [1200]

    @pytest.mark.asyncio
    async def test_newer_inputs_supersede(self) -> None:
        handler = GatedHandler()
        session = RecommendationSession(handler)

        older = asyncio.create_task(session.request(_query(1200)))
        await asyncio.sleep(0)
        newer = asyncio.create_task(session.request(_query(1500)))
        await asyncio.sleep(0)

        handler.gate(1500).set()
        newer_result = await newer
        assert isinstance(session.state, Idle)

        handler.gate(1200).set()
        older_result = await older

        assert newer_result.status is EvaluationStatus.APPLIED
        assert older_result.status is EvaluationStatus.SUPERSEDED
        assert session.current == newer_result.outcome
        assert session.current.error == "consumed=1500"

    @pytest.mark.asyncio
    async def test_stale_completion_keeps_newer_in_flight(self) -> None:
        handler = GatedHandler()
        session = RecommendationSession(handler)

        older = asyncio.create_task(session.request(_query(1200)))
        await asyncio.sleep(0)
        newer = asyncio.create_task(session.request(_query(1500)))
        await asyncio.sleep(0)

        handler.gate(1200).set()
        older_result = await older

        assert older_result.status is EvaluationStatus.SUPERSEDED
        assert isinstance(session.state, Evaluating)
        assert session.state.snapshot == InputSnapshot(1500, 2000)
        assert session.current is None

        handler.gate(1500).set()
        assert (await newer).status is EvaluationStatus.APPLIED
