"""Spanish message templates shown to the user.

Numbers are formatted by the caller; templates only interpolate.
"""

from nutricoach.domain.coach.core.value_objects.enums import DayPeriod, FoodSource, MealSlot


def first_meal_message(slot: MealSlot) -> str:
    return (
        f"¡Estrenemos tu plan Pro! Para empezar tu {slot.value} con energía, te recomiendo:"
    )


def macro_message(
    source: FoodSource,
    food_name: str,
    amount: str,
    macro_label: str,
    days_text: str | None = None,
) -> str:
    """Macro gap message; history wording needs days_text."""
    if source is FoodSource.HISTORY and days_text is not None:
        return (
            f"Coach dice: Come {amount} de {food_name} para completar tus "
            f"{macro_label} de hoy (lo comiste {days_text})."
        )
    if source is FoodSource.USER_FOOD:
        return (
            f'Coach dice: Tu receta "{food_name}" es perfecta. Come {amount} '
            f"para completar tus {macro_label}."
        )
    return f"Coach dice: Come {amount} de {food_name} para completar tus {macro_label} de hoy."


def calorie_message(
    calorie_gap: int,
    food_name: str,
    amount: str,
    source: FoodSource,
    days_text: str | None = None,
) -> str:
    base = (
        f"Te faltan {calorie_gap} kcal. Según tu historial, comer {amount} de {food_name} "
        f"es tu mejor opción"
    )
    if source is FoodSource.HISTORY and days_text is not None:
        return f"{base} (lo comiste {days_text})."
    return f"{base}."


def exercise_message(
    period: DayPeriod,
    excess: int,
    exercise_name: str,
    minutes: int,
    activity_burned: int = 0,
) -> str:
    """Surplus message by time of day and already-burned activity."""
    if activity_burned > 0:
        burned = f"Ya quemaste {activity_burned} kcal con actividad física."
        if period is DayPeriod.MORNING:
            return (
                f"Te pasaste por {excess} kcal hoy. {burned} {exercise_name} por "
                f"{minutes} minutos completará el equilibrio."
            )
        if period is DayPeriod.AFTERNOON:
            return (
                f"Has consumido {excess} kcal extra. {burned} ¿Qué tal {exercise_name} "
                f"por {minutes} minutos?"
            )
        return (
            f"Te pasaste por {excess} kcal hoy. {burned} Una caminata suave de "
            f"{minutes} minutos completará el equilibrio."
        )

    if period is DayPeriod.MORNING:
        return (
            f"Te pasaste por {excess} kcal. {exercise_name} por {minutes} minutos "
            f"te ayudará a equilibrar."
        )
    if period is DayPeriod.AFTERNOON:
        return f"Has consumido {excess} kcal extra. ¿Qué tal {exercise_name} por {minutes} minutos?"
    return (
        f"Te pasaste por {excess} kcal. Una caminata suave de {minutes} minutos "
        f"te ayudará a equilibrar."
    )
