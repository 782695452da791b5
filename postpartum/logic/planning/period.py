"""Collect the meals of a window of program days."""
import asyncio
import logging
from typing import List

from postpartum.api.errors import GenerationFailure, MissingCredential
from postpartum.domain.Settings import Settings
from postpartum.events.event_helpers import publish_aggregation_degraded
from postpartum.logic.planning.plan_cache import PlanCache
from postpartum.utilities.constants import PROGRAM_LENGTH_DAYS

logger = logging.getLogger(__name__)


def window_days(days: int, anchor_day: int) -> List[int]:
    """Target days of the window; saturates at the last program day instead of running past it."""
    return [min(anchor_day + i, PROGRAM_LENGTH_DAYS) for i in range(max(days, 0))]


async def _resolved(plan):
    return plan


async def aggregate_meal_names(days: int, anchor_day: int, settings: Settings, cache: PlanCache,
                               fetcher, partial_results: bool = False, bus=None) -> List[str]:
    """Meal names of `days` consecutive program days starting at `anchor_day`, in day order.

    A day held by the cache is reused; every other day is fetched, all fetches
    running concurrently and joined before returning. If any fetch fails the
    whole window yields [] (or, with partial_results, the days that loaded).
    A missing API key, or any error that is not a GenerationFailure, propagates.
    """
    targets = window_days(days, anchor_day)
    if not targets:
        return []

    tasks = []
    for day in targets:
        cached = cache.get(day)
        if cached is not None:
            tasks.append(_resolved(cached))
        else:
            tasks.append(fetcher.fetch(day, settings))

    outcomes = await asyncio.gather(*tasks, return_exceptions=True)

    # A missing key or a bug is not a degraded day
    for outcome in outcomes:
        if isinstance(outcome, MissingCredential) or (
                isinstance(outcome, BaseException) and not isinstance(outcome, GenerationFailure)):
            raise outcome

    failed_days = [day for day, outcome in zip(targets, outcomes) if isinstance(outcome, BaseException)]
    if failed_days:
        for day, outcome in zip(targets, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning("Could not fetch day %s for the period: %s", day, outcome)
        publish_aggregation_degraded(targets, failed_days, partial_results, bus=bus)
        if not partial_results:
            logger.warning("Could not fetch all %d days (failed: %s); period has no meals",
                           len(targets), failed_days)
            return []

    names: List[str] = []
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            continue
        names.extend(outcome.meal_names())
    return names


__all__ = ['aggregate_meal_names', 'window_days']
