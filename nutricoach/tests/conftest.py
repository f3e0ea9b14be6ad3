"""Shared fixtures for unit tests.

Everything here is in-memory; no test touches a real database.
"""

from datetime import date, datetime

import pytest

from nutricoach.domain.coach.core.entities.candidates import ExerciseCandidate, FoodCandidate
from nutricoach.domain.coach.core.value_objects.coach_profile import CoachProfile
from nutricoach.domain.coach.core.value_objects.enums import DietaryPreference, FoodSource
from nutricoach.domain.coach.core.value_objects.nutrition import NutritionTarget

TODAY = date(2024, 3, 15)


def _make_food(name: str, source: FoodSource = FoodSource.GENERIC, **kwargs) -> FoodCandidate:
    return FoodCandidate(name=name, source=source, **kwargs)


def _at_hour(hour: int) -> datetime:
    return datetime(TODAY.year, TODAY.month, TODAY.day, hour, 0)


@pytest.fixture
def make_food():
    """Factory for FoodCandidate (generic source by default)."""
    return _make_food


@pytest.fixture
def at_hour():
    """Factory for a local datetime on TODAY at the given hour."""
    return _at_hour


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def target() -> NutritionTarget:
    return NutritionTarget(calories=2000, protein_g=150, carbs_g=200, fat_g=60)


@pytest.fixture
def profile(target: NutritionTarget) -> CoachProfile:
    return CoachProfile(weight_kg=70, target=target)


@pytest.fixture
def premium_profile(target: NutritionTarget) -> CoachProfile:
    return CoachProfile(weight_kg=70, target=target, is_premium=True)


@pytest.fixture
def vegan_profile(target: NutritionTarget) -> CoachProfile:
    return CoachProfile(
        weight_kg=70, target=target, dietary_preference=DietaryPreference.VEGAN
    )


@pytest.fixture
def chicken() -> FoodCandidate:
    return _make_food(
        "Pechuga de pollo",
        protein_100g=31,
        carbs_100g=0.5,
        fat_100g=3.6,
        kcal_100g=165,
        tags=["protein", "carne"],
    )


@pytest.fixture
def lentils() -> FoodCandidate:
    return _make_food(
        "Lentejas cocidas",
        protein_100g=9,
        carbs_100g=20,
        fat_100g=0.4,
        kcal_100g=116,
        tags=["protein", "legumbre"],
    )


@pytest.fixture
def exercises() -> list[ExerciseCandidate]:
    return [
        ExerciseCandidate(id="walk", name="Caminar", met_value=3.5, icon_name="walk"),
        ExerciseCandidate(id="run", name="Correr", met_value=9.8, icon_name="run"),
        ExerciseCandidate(id="yoga", name="Yoga", met_value=2.5, icon_name="yoga"),
        ExerciseCandidate(id="stretch", name="Estiramientos", met_value=1.5, icon_name="stretch"),
    ]
