"""Web-facing observers for program events.

Subscribes to the GLOBAL_EVENT_BUS and keeps a lightweight in-memory ring
buffer of recent events that the web layer exposes at /api/events, so a
client can show "shopping list ready" or "some days could not be loaded"
notices without reloading state.

Each event gets an auto-increment id (cursor); clients poll with
since=<last_id_seen> to receive only newer ones. MAX_EVENTS caps memory.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    GLOBAL_EVENT_BUS, SETTINGS_UPDATED, PLAN_CACHED, PLAN_INVALIDATED,
    SHOPPING_LIST_GENERATED, SHOPPING_LIST_CLEARED, AGGREGATION_DEGRADED
)

OBSERVED_EVENTS = (
    SETTINGS_UPDATED, PLAN_CACHED, PLAN_INVALIDATED,
    SHOPPING_LIST_GENERATED, SHOPPING_LIST_CLEARED, AGGREGATION_DEGRADED,
)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat()
        }
        if isinstance(payload, dict):
            for k, v in payload.items():
                # Domain objects are reduced to their JSON form
                evt[k] = v.to_dict() if hasattr(v, 'to_dict') else v
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in OBSERVED_EVENTS:
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive), plus next_cursor for the following poll."""
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events', 'OBSERVED_EVENTS']
