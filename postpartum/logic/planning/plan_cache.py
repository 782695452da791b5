"""Single-slot cache for the materialized daily plan."""
import logging
from typing import Optional

from postpartum.domain.DailyPlan import DailyPlan
from postpartum.domain.Settings import Settings

logger = logging.getLogger(__name__)


class PlanCache:
    """Holds at most one DailyPlan.

    A lookup hits only when the stored plan is for the requested day. There is
    no expiry by wall-clock time: staleness comes from the generation inputs
    changing, which the owner signals with invalidate().
    """

    def __init__(self, plan: Optional[DailyPlan] = None):
        self._plan = plan

    @property
    def plan(self) -> Optional[DailyPlan]:
        return self._plan

    def get(self, day: int) -> Optional[DailyPlan]:
        if self._plan is not None and self._plan.day == day:
            return self._plan
        return None

    def set(self, plan: DailyPlan) -> None:
        self._plan = plan

    def invalidate(self) -> None:
        if self._plan is not None:
            logger.info("Cached plan for day %s invalidated", self._plan.day)
        self._plan = None

    def __bool__(self) -> bool:
        return self._plan is not None


def requires_regeneration(old: Settings, new: Settings) -> bool:
    """True when a settings change alters the generation inputs.

    Only the start date and the dislikes count. Lactation support and senior
    mode are soft preferences and keep the cached plan.
    """
    if old.start_date != new.start_date:
        return True
    return set(old.dislikes) != set(new.dislikes)


__all__ = ['PlanCache', 'requires_regeneration']
