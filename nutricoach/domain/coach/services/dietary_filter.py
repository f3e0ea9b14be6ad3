"""Dietary compatibility rules.

A food is checked by keyword on its lower-cased name and by substring on
its catalog tags. Keyword matching is substring based: "res" also matches
"fresa". That over-exclusion is accepted, the filter errs on the side of
never recommending a forbidden food.
"""

from typing import Iterable, Optional

from nutricoach.domain.coach.core.value_objects.enums import DietaryPreference

MEAT_KEYWORDS = (
    "carne", "vacuno", "res", "cerdo", "cordero", "pollo", "pavo", "pato", "ave",
    "chorizo", "jamon", "jamón", "bacon", "tocino", "salchicha", "vísceras", "visceras",
)
FISH_KEYWORDS = (
    "pescado", "atun", "atún", "salmon", "salmón", "mariscos", "camarón", "camaron",
    "langosta", "calamar", "pulpo",
)
DAIRY_EGG_KEYWORDS = ("leche", "queso", "mantequilla", "crema", "yogur", "huevo", "huevos")

MEAT_TAGS = ("carne", "meat", "pollo", "cerdo")
FISH_TAGS = ("pescado", "fish", "marisco")
DAIRY_EGG_TAGS = ("dairy", "lacteo", "huevo", "egg")


def _contains_any(text: str, fragments: Iterable[str]) -> bool:
    return any(fragment in text for fragment in fragments)


def _any_tag_contains(tags: Iterable[str], fragments: Iterable[str]) -> bool:
    return any(_contains_any(tag, fragments) for tag in tags)


def is_compatible(
    food_name: str,
    preference: Optional[DietaryPreference],
    tags: Optional[Iterable[str]] = None,
) -> bool:
    """Check whether a food fits a dietary preference.

    Args:
        food_name: Display name of the food
        preference: User preference (None = omnivore)
        tags: Optional catalog tags

    Returns:
        False when the food falls into a category the preference excludes

    Example:
        >>> is_compatible("Pechuga de pollo", DietaryPreference.VEGETARIAN)
        False
        >>> is_compatible("Lentejas", DietaryPreference.VEGAN, ["legumbre"])
        True
    """
    if preference is None or preference is DietaryPreference.OMNIVORE:
        return True

    name = food_name.lower().strip()
    tag_list = [tag.lower() for tag in tags] if tags else []

    is_meat = _contains_any(name, MEAT_KEYWORDS) or _any_tag_contains(tag_list, MEAT_TAGS)
    is_fish = _contains_any(name, FISH_KEYWORDS) or _any_tag_contains(tag_list, FISH_TAGS)
    is_dairy_egg = _contains_any(name, DAIRY_EGG_KEYWORDS) or _any_tag_contains(
        tag_list, DAIRY_EGG_TAGS
    )

    if preference is DietaryPreference.VEGAN:
        return not (is_meat or is_fish or is_dairy_egg)
    if preference is DietaryPreference.VEGETARIAN:
        return not (is_meat or is_fish)
    if preference is DietaryPreference.PESCATARIAN:
        return not is_meat
    return True
