"""Coach ports."""

from nutricoach.domain.coach.core.ports.catalogs import (
    IActivityReader,
    IExerciseCatalogReader,
    IFoodCatalogReader,
)
from nutricoach.domain.coach.core.ports.tracer import ICoachTracer, NullCoachTracer

__all__ = [
    "IActivityReader",
    "ICoachTracer",
    "IExerciseCatalogReader",
    "IFoodCatalogReader",
    "NullCoachTracer",
]
