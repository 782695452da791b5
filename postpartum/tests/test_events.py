import unittest
from datetime import date

from postpartum.domain.Settings import Settings
from postpartum.events import web_observers
from postpartum.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS, SETTINGS_UPDATED, SHOPPING_LIST_CLEARED
from postpartum.events.event_helpers import publish_settings_updated, publish_shopping_list_cleared


class TestEventBus(unittest.TestCase):

    def test_failing_observer_does_not_stop_others(self):
        bus = EventBus()
        seen = []

        def broken(name, payload):
            raise RuntimeError("observer bug")

        bus.subscribe(SHOPPING_LIST_CLEARED, broken)
        bus.subscribe(SHOPPING_LIST_CLEARED, lambda name, payload: seen.append(name))
        publish_shopping_list_cleared(bus=bus)
        self.assertEqual(seen, [SHOPPING_LIST_CLEARED])

    def test_unsubscribe(self):
        bus = EventBus()
        seen = []
        callback = lambda name, payload: seen.append(payload)
        bus.subscribe(SETTINGS_UPDATED, callback)
        bus.subscribe(SETTINGS_UPDATED, callback)
        bus.publish(SETTINGS_UPDATED, 1)
        bus.unsubscribe(SETTINGS_UPDATED, callback)
        bus.unsubscribe(SETTINGS_UPDATED, callback)
        bus.publish(SETTINGS_UPDATED, 2)
        self.assertEqual(seen, [1])


class TestWebObservers(unittest.TestCase):

    def test_events_are_buffered_with_cursor(self):
        web_observers.start()
        web_observers.start()
        cursor = web_observers.get_events()['next_cursor']
        publish_settings_updated(Settings(start_date=date(2024, 6, 1)), True, bus=GLOBAL_EVENT_BUS)
        result = web_observers.get_events(since=cursor)
        self.assertEqual(len(result['events']), 1)
        event = result['events'][0]
        self.assertEqual(event['type'], SETTINGS_UPDATED)
        self.assertEqual(event['settings']['start_date'], '2024-06-01')
        self.assertTrue(event['plan_invalidated'])
        self.assertEqual(web_observers.get_events(since=result['next_cursor'])['events'], [])
