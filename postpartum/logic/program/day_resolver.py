"""Program day resolution and viewing-day navigation."""
from datetime import date, datetime
from typing import Union

from postpartum.utilities.constants import FIRST_DAY, PROGRAM_LENGTH_DAYS


def clamp_day(day: int) -> int:
    return min(max(int(day), FIRST_DAY), PROGRAM_LENGTH_DAYS)


def _as_date(value: Union[date, datetime]) -> date:
    # datetime is a date subclass, check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def resolve_current_day(start_date: Union[date, datetime], now: Union[date, datetime]) -> int:
    """Whole calendar days elapsed since start_date plus one (start date is day 1), clamped to [1, 30].

    Both ends are normalized to midnight, so the time of day never matters.
    """
    elapsed = (_as_date(now) - _as_date(start_date)).days
    return clamp_day(elapsed + 1)


class DayNavigator:
    """The program day the user is browsing, independent of the real current day."""

    def __init__(self, day: int):
        self.day = clamp_day(day)

    def next(self) -> int:
        if self.day < PROGRAM_LENGTH_DAYS:
            self.day += 1
        return self.day

    def previous(self) -> int:
        if self.day > FIRST_DAY:
            self.day -= 1
        return self.day

    def jump_to(self, day: int) -> int:
        self.day = clamp_day(day)
        return self.day

    def reset(self, current_day: int) -> int:
        return self.jump_to(current_day)

    def on_start_date_changed(self, current_day: int, has_cached_plan: bool) -> int:
        '''Follow the new timeline unless a plan is on screen (keeps a user mid-browse in place).'''
        if not has_cached_plan:
            self.reset(current_day)
        return self.day

    def __repr__(self) -> str:
        return f"DayNavigator(day={self.day})"


__all__ = ['clamp_day', 'resolve_current_day', 'DayNavigator']
