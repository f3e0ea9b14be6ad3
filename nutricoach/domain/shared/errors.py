"""
Domain exceptions.

Typed exceptions for explicit error handling across the coach and
gamification domains.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# COACH DOMAIN EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class CoachDomainError(DomainError):
    """Base exception for the recommendation (coach) domain."""

    pass


class CoachNotConfiguredError(CoachDomainError):
    """
    User profile is missing data required to coach.

    Raised when:
    - Body weight is missing or <= 0
    - Any of the four daily targets is missing or <= 0

    Example:
        >>> raise CoachNotConfiguredError("El peso del usuario no está configurado")
    """

    pass


class CatalogUnavailableError(CoachDomainError):
    """
    A catalog needed to build a recommendation could not be read.

    Raised when:
    - Every food source failed to load
    - The exercise catalog failed to load or is empty

    Example:
        >>> raise CatalogUnavailableError("No hay ejercicios disponibles")
    """

    pass


# ═══════════════════════════════════════════════════════════
# GAMIFICATION DOMAIN EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class GamificationDomainError(DomainError):
    """Base exception for gamification domain."""

    pass


class StatsStoreError(GamificationDomainError):
    """
    Reading or writing user stats failed.

    Example:
        >>> raise StatsStoreError("Error updating stats for user123")
    """

    pass


class AchievementUnlockError(GamificationDomainError):
    """Inserting an achievement failed."""

    pass
