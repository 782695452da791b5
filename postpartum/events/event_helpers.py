"""Event helper utilities.

Thin publishers for program events so callers don't build payloads by hand.
Every helper accepts an optional `bus`; without it the global bus is used.

Quick import:
    from postpartum.events.event_helpers import (
        publish_settings_updated, publish_plan_cached, publish_plan_invalidated,
        publish_shopping_list_generated, publish_shopping_list_cleared,
        publish_aggregation_degraded
    )
"""
from __future__ import annotations
from typing import Any, Iterable, Optional
from .Event_Bus import (
    GLOBAL_EVENT_BUS, EventBus,
    SETTINGS_UPDATED, PLAN_CACHED, PLAN_INVALIDATED,
    SHOPPING_LIST_GENERATED, SHOPPING_LIST_CLEARED, AGGREGATION_DEGRADED
)

__all__ = [
    'publish_settings_updated', 'publish_plan_cached', 'publish_plan_invalidated',
    'publish_shopping_list_generated', 'publish_shopping_list_cleared',
    'publish_aggregation_degraded'
]


def _bus(bus: Optional[EventBus]) -> EventBus:
    return bus if bus is not None else GLOBAL_EVENT_BUS


def publish_settings_updated(settings: Any, plan_invalidated: bool, bus: Optional[EventBus] = None):
    _bus(bus).publish(SETTINGS_UPDATED, {
        'settings': settings,
        'plan_invalidated': plan_invalidated
    })


def publish_plan_cached(plan: Any, bus: Optional[EventBus] = None):
    _bus(bus).publish(PLAN_CACHED, {
        'day': plan.day,
        'meals': len(plan.meals)
    })


def publish_plan_invalidated(day: Optional[int], reason: str, bus: Optional[EventBus] = None):
    _bus(bus).publish(PLAN_INVALIDATED, {
        'day': day,
        'reason': reason
    })


def publish_shopping_list_generated(shopping_list: Any, bus: Optional[EventBus] = None):
    _bus(bus).publish(SHOPPING_LIST_GENERATED, {
        'days_covered': shopping_list.days_covered,
        'items': len(shopping_list.items)
    })


def publish_shopping_list_cleared(bus: Optional[EventBus] = None):
    _bus(bus).publish(SHOPPING_LIST_CLEARED, None)


def publish_aggregation_degraded(days: Iterable[int], failed_days: Iterable[int], partial_results: bool,
                                 bus: Optional[EventBus] = None):
    """One or more days of a shopping window failed to load."""
    _bus(bus).publish(AGGREGATION_DEGRADED, {
        'days': list(days),
        'failed_days': list(failed_days),
        'partial_results': partial_results
    })
