"""Simple Event Bus / Observer implementation for program state changes.

Event names used so far:
  settings.updated        -> payload {"settings": Settings, "plan_invalidated": bool}
  plan.cached             -> payload {"day": int, "meals": int}
  plan.invalidated        -> payload {"day": int | None, "reason": str}
  shopping_list.generated -> payload {"days_covered": int, "items": int}
  shopping_list.cleared   -> payload None
  aggregation.degraded    -> payload {"days": [int], "failed_days": [int], "partial_results": bool}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
SETTINGS_UPDATED = "settings.updated"
PLAN_CACHED = "plan.cached"
PLAN_INVALIDATED = "plan.invalidated"
SHOPPING_LIST_GENERATED = "shopping_list.generated"
SHOPPING_LIST_CLEARED = "shopping_list.cleared"
AGGREGATION_DEGRADED = "aggregation.degraded"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any = None):
		# A failing observer must not break the state change that emitted the event
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish',
	'SETTINGS_UPDATED', 'PLAN_CACHED', 'PLAN_INVALIDATED',
	'SHOPPING_LIST_GENERATED', 'SHOPPING_LIST_CLEARED', 'AGGREGATION_DEGRADED'
]
