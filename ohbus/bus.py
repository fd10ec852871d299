"""Publish/subscribe bus that routes events to subscribed callbacks."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from typing import Callable

from .event_type import EventType
from .events import Event

Callback = Callable[[Event], None]


@dataclass(frozen=True)
class Subscription:
    """A callback registered for one kind of event, optionally for one name."""

    id: int
    name: str
    event_type: EventType
    callback: Callback
    once: bool = False

    def matches(self, event: Event) -> bool:
        """Tell whether this subscription should receive ``event``."""
        if self.event_type != event.event_type():
            return False
        return self.name == "" or self.event_type.match(event.topic(), self.name)

    def __str__(self) -> str:
        return (
            f"id={self.id}; name={json.dumps(self.name)}, "
            f"eventType={json.dumps(self.event_type.name)}, "
            f"once={str(self.once).lower()}"
        )


class EventBus:
    """Dispatches published events to matching subscribers.

    With ``asynchronous`` set, each callback runs in its own thread and
    ``wait`` blocks until all of them have finished.
    """

    def __init__(self, asynchronous: bool = False) -> None:
        self._asynchronous = asynchronous
        self._subs: list[Subscription] = []
        self._lock = threading.RLock()
        self._last_id = 0
        self._running = 0
        self._idle = threading.Condition()

    def subscribe(self, name: str, event_type: EventType, callback: Callback) -> int:
        """Register ``callback`` and return an id to unsubscribe with.

        An empty ``name`` receives every event of ``event_type``.
        """
        return self._subscribe(name, event_type, callback, once=False)

    def subscribe_once(self, name: str, event_type: EventType, callback: Callback) -> int:
        """Register ``callback`` for a single matching event."""
        return self._subscribe(name, event_type, callback, once=True)

    def _subscribe(
        self, name: str, event_type: EventType, callback: Callback, once: bool
    ) -> int:
        with self._lock:
            self._last_id += 1
            self._subs.append(
                Subscription(self._last_id, name, EventType(event_type), callback, once)
            )
            return self._last_id

    def unsubscribe(self, sub_id: int) -> int:
        """Remove a subscription, keeping the order of the others.

        Returns the number of subscriptions removed (0 or 1).
        """
        with self._lock:
            return self._remove(sub_id)

    def _remove(self, sub_id: int) -> int:
        for index, sub in enumerate(self._subs):
            if sub.id == sub_id:
                del self._subs[index]
                return 1
        return 0

    def publish(self, event: Event) -> int:
        """Send ``event`` to every matching subscriber.

        Returns the number of subscribers that received it.
        """
        with self._lock:
            receivers = [sub for sub in list(self._subs) if sub.matches(event)]
            for sub in receivers:
                if sub.once:
                    self._remove(sub.id)
            for sub in receivers:
                if self._asynchronous:
                    self._start(sub.callback, event)
                else:
                    sub.callback(event)
            return len(receivers)

    def _start(self, callback: Callback, event: Event) -> None:
        with self._idle:
            self._running += 1
        thread = threading.Thread(target=self._run, args=(callback, event), daemon=True)
        thread.start()

    def _run(self, callback: Callback, event: Event) -> None:
        try:
            callback(event)
        finally:
            with self._idle:
                self._running -= 1
                if self._running == 0:
                    self._idle.notify_all()

    def wait(self) -> None:
        """Block until every running callback has finished."""
        with self._idle:
            self._idle.wait_for(lambda: self._running == 0)

    def subscriptions(self) -> list[str]:
        """Describe the current subscriptions, in order."""
        with self._lock:
            return [str(sub) for sub in self._subs]