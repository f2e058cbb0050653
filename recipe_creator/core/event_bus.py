# core/event_bus.py — lightweight publish/subscribe event system

from __future__ import annotations
import logging
from collections import defaultdict
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EventBus:
    """
    Lets a publisher notify any number of listeners without knowing them.
    Listeners are called synchronously, in the order they subscribed,
    with the published payload as their only argument.

    Events used across the system:
      "CALORIES_EXCEEDED"   payload: total calories (int)
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable[[Any], None]]] = defaultdict(list)

    def subscribe(self, event_type: str, callback: Callable[[Any], None]) -> None:
        self._listeners[event_type].append(callback)

    def unsubscribe(self, event_type: str, callback: Callable[[Any], None]) -> None:
        listeners = self._listeners[event_type]
        if callback in listeners:
            listeners.remove(callback)

    def publish(self, event_type: str, payload: Any = None) -> None:
        # Iterate a snapshot so a listener can unsubscribe itself mid-publish.
        # Listener exceptions are not caught.
        listeners = list(self._listeners.get(event_type, []))
        logger.debug("Publishing %s to %d listener(s)", event_type, len(listeners))
        for callback in listeners:
            callback(payload)
