"""Program session: the application root that owns all program state.

Settings, the cached daily plan, the viewing day and the shopping list are held
here and nowhere else. Views get values, never references they could mutate;
every change replaces a whole value and is persisted right away.
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from postpartum.domain.DailyPlan import DailyPlan
from postpartum.domain.RecipeDetails import RecipeDetails
from postpartum.domain.Settings import Settings
from postpartum.domain.ShoppingList import ShoppingList
from postpartum.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from postpartum.events.event_helpers import (
    publish_settings_updated, publish_plan_cached, publish_plan_invalidated,
    publish_shopping_list_generated, publish_shopping_list_cleared
)
from postpartum.infra.Plan_Repository import PlanRepository
from postpartum.infra.Settings_Repository import SettingsRepository
from postpartum.infra.ShoppingList_Repository import ShoppingListRepository
from postpartum.logic.planning.period import aggregate_meal_names
from postpartum.logic.planning.plan_cache import PlanCache, requires_regeneration
from postpartum.logic.planning.plan_fetcher import PlanFetcher
from postpartum.logic.program.day_resolver import DayNavigator, resolve_current_day
from postpartum.logic.program.phase import Phase, classify
from postpartum.logic.recipes.details import fetch_recipe_details
from postpartum.logic.shopping.list_builder import ShoppingListBuilder, toggle_item, clear_list

logger = logging.getLogger(__name__)


class ProgramSession:
    def __init__(self, generator,
                 settings_repo: Optional[SettingsRepository] = None,
                 plan_repo: Optional[PlanRepository] = None,
                 shopping_repo: Optional[ShoppingListRepository] = None,
                 clock: Optional[Callable[[], datetime]] = None,
                 partial_results: bool = False,
                 bus: Optional[EventBus] = None):
        self.generator = generator
        self.settings_repo = settings_repo or SettingsRepository()
        self.plan_repo = plan_repo or PlanRepository()
        self.shopping_repo = shopping_repo or ShoppingListRepository()
        self.clock = clock or datetime.now
        self.partial_results = partial_results
        self.bus = bus if bus is not None else GLOBAL_EVENT_BUS

        self.fetcher = PlanFetcher(generator)
        self.list_builder = ShoppingListBuilder(generator, clock=self.clock)

        # Read once at startup; absent snapshots are a valid initial state
        self._settings = self.settings_repo.load(today=self.clock().date())
        self.cache = PlanCache(self.plan_repo.load())
        self._shopping_list = self.shopping_repo.load()
        self.navigator = DayNavigator(self.current_day)

    # --- Day state ---------------------------------------------------------
    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def current_day(self) -> int:
        return resolve_current_day(self._settings.start_date, self.clock())

    @property
    def viewing_day(self) -> int:
        return self.navigator.day

    @property
    def is_viewing_today(self) -> bool:
        return self.viewing_day == self.current_day

    @property
    def phase(self) -> Phase:
        return classify(self.viewing_day)

    def next_day(self) -> int:
        return self.navigator.next()

    def previous_day(self) -> int:
        return self.navigator.previous()

    def jump_to_day(self, day: int) -> int:
        return self.navigator.jump_to(day)

    def back_to_today(self) -> int:
        return self.navigator.reset(self.current_day)

    # --- Settings ------------------------------------------------------------
    def update_settings(self, new_settings: Settings) -> Settings:
        """Replace the settings; drop the cached plan when generation inputs changed."""
        old = self._settings
        self._settings = new_settings
        self.settings_repo.save(new_settings)

        invalidated = requires_regeneration(old, new_settings)
        if invalidated:
            self._invalidate_plan("settings changed")
        if old.start_date != new_settings.start_date:
            self.navigator.on_start_date_changed(self.current_day, has_cached_plan=bool(self.cache))

        logger.info("Settings updated (plan invalidated: %s)", invalidated)
        publish_settings_updated(new_settings, invalidated, bus=self.bus)
        return new_settings

    def _invalidate_plan(self, reason: str) -> None:
        day = self.cache.plan.day if self.cache.plan else None
        self.cache.invalidate()
        self.plan_repo.clear()
        publish_plan_invalidated(day, reason, bus=self.bus)

    # --- Daily plan ----------------------------------------------------------
    @property
    def cached_plan(self) -> Optional[DailyPlan]:
        return self.cache.plan

    async def load_plan(self, force: bool = False) -> DailyPlan:
        """Plan for the viewing day: the cached one when it matches, otherwise freshly generated.

        A failed generation raises and leaves the cache exactly as it was.
        """
        day = self.viewing_day
        if not force:
            cached = self.cache.get(day)
            if cached is not None:
                return cached
        plan = await self.fetcher.fetch(day, self._settings)
        self.cache.set(plan)
        self.plan_repo.save(plan)
        publish_plan_cached(plan, bus=self.bus)
        return plan

    async def recipe_details(self, dish_name: str) -> RecipeDetails:
        return await fetch_recipe_details(self.generator, dish_name)

    # --- Shopping list -------------------------------------------------------
    @property
    def shopping_list(self) -> Optional[ShoppingList]:
        return self._shopping_list

    async def generate_shopping_list(self, days: int) -> ShoppingList:
        """Fresh, fully unchecked list for `days` days starting at the real current day."""
        meal_names = await aggregate_meal_names(
            days, self.current_day, self._settings, self.cache, self.fetcher,
            partial_results=self.partial_results, bus=self.bus,
        )
        shopping_list = await self.list_builder.build(meal_names, days)
        self._shopping_list = shopping_list
        self.shopping_repo.save(shopping_list)
        publish_shopping_list_generated(shopping_list, bus=self.bus)
        return shopping_list

    def toggle_shopping_item(self, index: int) -> ShoppingList:
        if self._shopping_list is None:
            raise LookupError("There is no shopping list")
        updated = toggle_item(self._shopping_list, index)
        self._shopping_list = updated
        self.shopping_repo.save(updated)
        return updated

    def clear_shopping_list(self) -> None:
        self._shopping_list = clear_list()
        self.shopping_repo.clear()
        publish_shopping_list_cleared(bus=self.bus)


__all__ = ['ProgramSession']
