"""Splitting of event-stream topics into their parts."""

from __future__ import annotations

# "smarthome" was used by openHAB 2.x, "openhab" since 3.0.
_ROOTS = frozenset({"smarthome", "openhab"})


def split_topic(topic: str, collection: str) -> tuple[str, str, str]:
    """Return (name, triggering name, event type) or three empty strings."""
    parts = topic.split("/")
    if not 4 <= len(parts) <= 5 or parts[0] not in _ROOTS or parts[1] != collection:
        return "", "", ""
    if len(parts) == 5:
        return parts[2], parts[3], parts[4]
    return parts[2], "", parts[3]


def split_item_topic(topic: str) -> tuple[str, str, str]:
    """Return the item name, the triggering item (if any) and the event type."""
    return split_topic(topic, "items")


def split_thing_topic(topic: str) -> tuple[str, str]:
    """Return the thing name and the event type."""
    name, _, event_type = split_topic(topic, "things")
    return name, event_type


def split_channel_topic(topic: str) -> tuple[str, str]:
    """Return the channel name and the event type."""
    name, _, event_type = split_topic(topic, "channels")
    return name, event_type