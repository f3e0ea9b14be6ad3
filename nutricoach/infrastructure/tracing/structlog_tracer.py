"""ICoachTracer adapter backed by structlog."""

from typing import Any

import structlog


class StructlogCoachTracer:
    """Logs each engine decision as a structured "coach_decision" event.

    Example:
        >>> tracer = StructlogCoachTracer(user_id="user123")
        >>> tracer.decision("surplus", excess=320)
    """

    def __init__(self, **context: Any) -> None:
        self._logger = structlog.get_logger("nutricoach.coach.decisions").bind(**context)

    def decision(self, step: str, **fields: Any) -> None:
        self._logger.info("coach_decision", step=step, **fields)
