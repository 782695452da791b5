import unittest
from datetime import date
from postpartum.api.errors import MissingCredential
from postpartum.domain.Settings import Settings
from postpartum.events.Event_Bus import EventBus, AGGREGATION_DEGRADED
from postpartum.logic.planning.period import aggregate_meal_names, window_days
from postpartum.logic.planning.plan_cache import PlanCache
from postpartum.tests.fakes import FakeFetcher, make_plan


class TestWindowDays(unittest.TestCase):

    def test_saturates_at_day_thirty(self):
        self.assertEqual(window_days(7, 28), [28, 29, 30, 30, 30, 30, 30])

    def test_regular_window(self):
        self.assertEqual(window_days(3, 5), [5, 6, 7])

    def test_empty_window(self):
        self.assertEqual(window_days(0, 5), [])


class TestAggregateMealNames(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.settings = Settings(start_date=date(2024, 4, 1))
        self.cache = PlanCache()
        self.bus = EventBus()
        self.events = []
        self.bus.subscribe(AGGREGATION_DEGRADED, lambda name, payload: self.events.append(payload))

    async def test_cached_day_is_not_refetched(self):
        self.cache.set(make_plan(5, names=["Cached porridge"]))
        fetcher = FakeFetcher()
        names = await aggregate_meal_names(3, 5, self.settings, self.cache, fetcher, bus=self.bus)
        self.assertEqual(sorted(fetcher.fetched), [6, 7])
        self.assertEqual(names, ["Cached porridge", "Dish 6.a", "Dish 6.b", "Dish 7.a", "Dish 7.b"])

    async def test_saturating_window_requests(self):
        fetcher = FakeFetcher()
        names = await aggregate_meal_names(7, 28, self.settings, self.cache, fetcher, bus=self.bus)
        self.assertEqual(sorted(fetcher.fetched), [28, 29, 30, 30, 30, 30, 30])
        self.assertEqual(len(names), 14)
        self.assertEqual(names[:2], ["Dish 28.a", "Dish 28.b"])
        self.assertEqual(names[-2:], ["Dish 30.a", "Dish 30.b"])

    async def test_any_failure_empties_the_batch(self):
        fetcher = FakeFetcher(fail_days={6})
        names = await aggregate_meal_names(3, 5, self.settings, self.cache, fetcher, bus=self.bus)
        self.assertEqual(names, [])
        self.assertEqual(sorted(fetcher.fetched), [5, 6, 7])
        self.assertEqual(self.events, [{"days": [5, 6, 7], "failed_days": [6], "partial_results": False}])

    async def test_partial_results_keeps_loaded_days(self):
        fetcher = FakeFetcher(fail_days={6})
        names = await aggregate_meal_names(3, 5, self.settings, self.cache, fetcher,
                                           partial_results=True, bus=self.bus)
        self.assertEqual(names, ["Dish 5.a", "Dish 5.b", "Dish 7.a", "Dish 7.b"])
        self.assertEqual(self.events[0]["partial_results"], True)

    async def test_fetched_days_are_not_cached(self):
        fetcher = FakeFetcher()
        await aggregate_meal_names(2, 1, self.settings, self.cache, fetcher, bus=self.bus)
        self.assertIsNone(self.cache.plan)

    async def test_zero_days(self):
        fetcher = FakeFetcher()
        self.assertEqual(await aggregate_meal_names(0, 3, self.settings, self.cache, fetcher), [])
        self.assertEqual(fetcher.fetched, [])

    async def test_missing_credential_propagates(self):
        fetcher = FakeFetcher(fail_days={6}, error=MissingCredential)
        with self.assertRaises(MissingCredential):
            await aggregate_meal_names(3, 5, self.settings, self.cache, fetcher,
                                       partial_results=True, bus=self.bus)
        self.assertEqual(self.events, [])

    async def test_unexpected_error_is_not_a_degraded_day(self):
        fetcher = FakeFetcher(fail_days={7}, error=KeyError)
        with self.assertRaises(KeyError):
            await aggregate_meal_names(3, 5, self.settings, self.cache, fetcher, bus=self.bus)
        self.assertEqual(self.events, [])
