"""Decision tracing port."""

from typing import Any, Protocol


class ICoachTracer(Protocol):
    """Receives one event per decision point of an evaluation.

    Example:
        >>> tracer.decision("surplus_detected", excess=320)
    """

    def decision(self, step: str, **fields: Any) -> None:
        ...


class NullCoachTracer:
    """Tracer that discards every event."""

    def decision(self, step: str, **fields: Any) -> None:
        return None
