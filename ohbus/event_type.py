"""Kinds of events and how subscription names match their topics."""

from __future__ import annotations

from enum import IntEnum

from . import api

ITEM_TOPIC_PREFIX = "items/"
THING_TOPIC_PREFIX = "things/"
CHANNEL_TOPIC_PREFIX = "channels/"


class EventType(IntEnum):
    """Every kind of event the client can publish."""

    UNKNOWN = 0
    CLIENT_STARTED = 1
    CLIENT_CONNECTED = 2
    CLIENT_CONNECTION_STABLE = 3
    CLIENT_DISCONNECTED = 4
    CLIENT_STOPPED = 5
    CLIENT_ERROR = 6
    RULE_PANIC = 7
    SERVER_ALIVE = 8
    SERVER_STARTLEVEL = 9
    TIME_CRON = 10
    ITEM_ADDED = 11
    ITEM_REMOVED = 12
    ITEM_UPDATED = 13
    ITEM_COMMAND = 14
    ITEM_STATE = 15
    ITEM_STATE_PREDICTED = 16
    ITEM_STATE_CHANGED = 17
    GROUP_ITEM_STATE_CHANGED = 18
    THING_ADDED = 19
    THING_REMOVED = 20
    THING_UPDATED = 21
    THING_STATUS_INFO = 22
    THING_STATUS_INFO_CHANGED = 23
    INBOX_ADDED = 24
    INBOX_REMOVED = 25
    INBOX_UPDATE = 26
    ITEM_CHANNEL_LINK_ADDED = 27
    ITEM_CHANNEL_LINK_REMOVED = 28
    CHANNEL_TRIGGERED = 29

    def match(self, topic: str, name: str) -> bool:
        """Tell whether a subscription to ``name`` covers an event on ``topic``.

        Raises ValueError for event types that have no topic matching.
        """
        if self in _ALWAYS_MATCH:
            return True
        if self is EventType.GROUP_ITEM_STATE_CHANGED:
            return topic.startswith(ITEM_TOPIC_PREFIX + name + "/") and topic.endswith(
                "/" + api.TOPIC_EVENT_STATE_CHANGED
            )
        try:
            prefix, suffix = _EXACT_MATCH[self]
        except KeyError:
            raise ValueError(f"event type {self.name} ({int(self)}) has no topic match") from None
        return topic == prefix + name + "/" + suffix


_ALWAYS_MATCH = frozenset(
    {
        EventType.UNKNOWN,
        EventType.CLIENT_STARTED,
        EventType.CLIENT_CONNECTED,
        EventType.CLIENT_CONNECTION_STABLE,
        EventType.CLIENT_DISCONNECTED,
        EventType.CLIENT_STOPPED,
        EventType.CLIENT_ERROR,
        EventType.TIME_CRON,
    }
)

_EXACT_MATCH = {
    EventType.ITEM_ADDED: (ITEM_TOPIC_PREFIX, api.TOPIC_EVENT_ADDED),
    EventType.ITEM_REMOVED: (ITEM_TOPIC_PREFIX, api.TOPIC_EVENT_REMOVED),
    EventType.ITEM_UPDATED: (ITEM_TOPIC_PREFIX, api.TOPIC_EVENT_UPDATED),
    EventType.ITEM_COMMAND: (ITEM_TOPIC_PREFIX, api.TOPIC_EVENT_COMMAND),
    EventType.ITEM_STATE: (ITEM_TOPIC_PREFIX, api.TOPIC_EVENT_STATE),
    EventType.ITEM_STATE_CHANGED: (ITEM_TOPIC_PREFIX, api.TOPIC_EVENT_STATE_CHANGED),
    EventType.THING_STATUS_INFO: (THING_TOPIC_PREFIX, api.TOPIC_EVENT_STATUS),
}