"""Achievement catalog."""

from enum import Enum


class AchievementType(str, Enum):
    """Known achievements with their Spanish title and description."""

    FIRST_CONTRIBUTION = "first_contribution"
    COMMUNITY_CHEF = "community_chef"
    WEEK_STREAK = "week_streak"
    MONTH_STREAK = "month_streak"

    @property
    def title(self) -> str:
        return _CATALOG[self][0]

    @property
    def description(self) -> str:
        return _CATALOG[self][1]


_CATALOG = {
    AchievementType.FIRST_CONTRIBUTION: (
        "Primer Aporte",
        "Agregaste tu primer alimento a la comunidad",
    ),
    AchievementType.COMMUNITY_CHEF: (
        "Chef de la Comunidad",
        "Has aportado 10 alimentos a la comunidad",
    ),
    AchievementType.WEEK_STREAK: ("Racha Semanal", "7 días consecutivos registrando comidas"),
    AchievementType.MONTH_STREAK: ("Racha Mensual", "30 días consecutivos registrando comidas"),
}
