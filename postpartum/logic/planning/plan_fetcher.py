"""Generate the meal plan of one program day."""
import logging
from numbers import Number
from typing import Any, List

from postpartum.api.api_ai import GenerationRequest, DAILY_PLAN
from postpartum.api.errors import GenerationFailure, MalformedResponse
from postpartum.domain.DailyPlan import DailyPlan
from postpartum.domain.Meal import Meal, meal_id
from postpartum.domain.Settings import Settings
from postpartum.logic.program.phase import classify
from postpartum.logic.program.seed import daily_plan_seed
from postpartum.utilities.constants import (
    MEAL_SLOTS, PLAN_SYSTEM_PROMPT, PLAN_USER_PROMPT, PLAN_JSON_FORMAT,
    LACTATION_SUPPORT_POLICY, NO_LACTATION_POLICY
)

logger = logging.getLogger(__name__)


def _or_none(terms) -> str:
    return ", ".join(terms) or "none"


def build_plan_request(day: int, settings: Settings) -> GenerationRequest:
    phase = classify(day)
    prompt = PLAN_USER_PROMPT.format(
        day=day,
        phase_name=phase.name,
        phase_focus=phase.focus,
        dislikes=_or_none(settings.dislikes),
        allergies=_or_none(settings.allergies),
        lactation_policy=LACTATION_SUPPORT_POLICY if settings.lactation_support else NO_LACTATION_POLICY,
        slots=", ".join(MEAL_SLOTS),
    )
    return GenerationRequest(
        kind=DAILY_PLAN,
        system_instruction=PLAN_SYSTEM_PROMPT,
        user_instruction=prompt + PLAN_JSON_FORMAT,
        seed=daily_plan_seed(settings.start_date, day),
    )


def _to_meal(entry: Any, day: int, index: int, seed: int) -> Meal:
    if not isinstance(entry, dict):
        raise MalformedResponse(f"Meal entry {index} is not an object")
    calories = entry.get("calories")
    if isinstance(calories, bool) or not isinstance(calories, Number):
        calories = None
    tags = entry.get("tags") or []
    if not isinstance(tags, list):
        tags = [tags]
    return Meal(
        id=meal_id(day, index, seed),
        name=str(entry.get("name") or ""),
        type=str(entry.get("type") or ""),
        description=str(entry.get("description") or ""),
        calories=calories,
        tags=tuple(str(t) for t in tags),
        is_completed=False,
    )


def plan_from_response(data: Any, day: int, seed: int) -> DailyPlan:
    """Map a generator reply onto a DailyPlan. Slot count is not enforced."""
    if not isinstance(data, dict):
        raise MalformedResponse("Daily plan reply is not a JSON object")
    entries = data.get("meals") or []
    if not isinstance(entries, list):
        raise MalformedResponse("'meals' is not a list")
    meals: List[Meal] = [_to_meal(e, day, i, seed) for i, e in enumerate(entries)]
    return DailyPlan(day=day, phase=classify(day).name, meals=tuple(meals))


class PlanFetcher:
    def __init__(self, generator):
        self.generator = generator

    async def fetch(self, day: int, settings: Settings) -> DailyPlan:
        """Generate the plan for `day`. Raises a GenerationFailure; never yields a partial plan."""
        request = build_plan_request(day, settings)
        try:
            data = await self.generator.generate(request)
            plan = plan_from_response(data, day, request.seed)
        except GenerationFailure:
            logger.exception("Plan generation failed for day %s", day)
            raise
        logger.info("Generated plan for day %s with %d meals (seed=%s)", day, len(plan.meals), request.seed)
        return plan


__all__ = ['PlanFetcher', 'build_plan_request', 'plan_from_response']
