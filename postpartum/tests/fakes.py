"""Test doubles for the content generator and the plan fetcher."""
import asyncio
import re
from datetime import datetime

from postpartum.api.api_ai import DAILY_PLAN, RECIPE_DETAIL, SHOPPING_LIST
from postpartum.api.errors import TransportFailure
from postpartum.domain.DailyPlan import DailyPlan
from postpartum.domain.Meal import Meal
from postpartum.logic.program.phase import classify

_DAY_RE = re.compile(r"postpartum day (\d+)")


def day_of(request) -> int:
    return int(_DAY_RE.search(request.user_instruction).group(1))


def plan_reply(day: int, count: int = 5):
    return {"meals": [
        {"name": f"Dish {day}.{i}", "type": "Lunch", "description": "warming", "calories": 300, "tags": ["qi"]}
        for i in range(count)
    ]}


def shopping_reply():
    return {"items": [
        {"name": "Eggs", "amount": "10", "category": "Other"},
        {"name": "Ginger", "amount": "1 piece", "category": "Vegetables"},
        {"name": "Crucian carp", "amount": "2", "category": "Seafood"},
    ]}


def recipe_reply():
    return {
        "ingredients": ["millet 50g", "brown sugar 10g"],
        "steps": ["rinse", "simmer 30 minutes"],
        "tips": ["warms the stomach"],
        "nutritionHighlights": "easy to digest",
    }


class FakeGenerator:
    """Answers each request kind with a canned reply and records every request.

    `fail_days` makes daily-plan requests for those days raise TransportFailure;
    `fail_kinds` does the same for whole request kinds.
    """

    def __init__(self, fail_days=(), fail_kinds=(), plan_size=5):
        self.requests = []
        self.fail_days = set(fail_days)
        self.fail_kinds = set(fail_kinds)
        self.plan_size = plan_size

    def kinds(self):
        return [r.kind for r in self.requests]

    def plan_days(self):
        return [day_of(r) for r in self.requests if r.kind == DAILY_PLAN]

    async def generate(self, request):
        self.requests.append(request)
        await asyncio.sleep(0)
        if request.kind in self.fail_kinds:
            raise TransportFailure(f"{request.kind} unavailable")
        if request.kind == DAILY_PLAN:
            day = day_of(request)
            if day in self.fail_days:
                raise TransportFailure(f"day {day} unavailable")
            return plan_reply(day, self.plan_size)
        if request.kind == SHOPPING_LIST:
            return shopping_reply()
        if request.kind == RECIPE_DETAIL:
            return recipe_reply()
        raise AssertionError(f"unexpected request kind {request.kind}")


class FakeFetcher:
    """Stands in for PlanFetcher; records which days were fetched.

    Days in `fail_days` raise `error` (TransportFailure unless given).
    """

    def __init__(self, fail_days=(), error=TransportFailure):
        self.fetched = []
        self.fail_days = set(fail_days)
        self.error = error

    async def fetch(self, day, settings):
        self.fetched.append(day)
        await asyncio.sleep(0)
        if day in self.fail_days:
            raise self.error(f"day {day} unavailable")
        return make_plan(day, names=[f"Dish {day}.a", f"Dish {day}.b"])


def make_plan(day, names=("Millet porridge", "Red date tea")):
    meals = tuple(Meal(id=f"{day}-{i}-1", name=n, type="Breakfast") for i, n in enumerate(names))
    return DailyPlan(day=day, phase=classify(day).name, meals=meals)


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self):
        return self.now
