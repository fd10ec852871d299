"""Events about items and groups of items."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import api
from .event_type import ITEM_TOPIC_PREFIX, EventType
from .events import Event


def _item_topic(*parts: str) -> str:
    return ITEM_TOPIC_PREFIX + "/".join(parts)


@dataclass(frozen=True)
class ItemInfo:
    """An item as carried by item registry events."""

    name: str = ""
    label: str = ""
    type: str = ""
    category: str = ""
    tags: list[str] = field(default_factory=list)
    group_names: list[str] = field(default_factory=list)
    members: list[str] = field(default_factory=list)
    group_type: str = ""


@dataclass(frozen=True)
class ItemReceivedCommand(Event):
    """A command has been sent to an item."""

    item_name: str
    command_type: str = ""
    command: str = ""

    def topic(self) -> str:
        return _item_topic(self.item_name, api.TOPIC_EVENT_COMMAND)

    def event_type(self) -> EventType:
        return EventType.ITEM_COMMAND

    def __str__(self) -> str:
        return "Item " + self.item_name + " received command " + self.command


@dataclass(frozen=True)
class ItemReceivedState(Event):
    """The state of an item is about to get updated."""

    item_name: str
    state_type: str = ""
    state: str = ""

    def topic(self) -> str:
        return _item_topic(self.item_name, api.TOPIC_EVENT_STATE)

    def event_type(self) -> EventType:
        return EventType.ITEM_STATE

    def __str__(self) -> str:
        return "Item " + self.item_name + " received state " + self.state


@dataclass(frozen=True)
class ItemStateUpdated(Event):
    """The state of an item has been updated."""

    item_name: str
    state_type: str = ""
    state: str = ""

    def topic(self) -> str:
        return _item_topic(self.item_name, api.TOPIC_EVENT_STATE_UPDATED)

    def event_type(self) -> EventType:
        return EventType.ITEM_STATE

    def __str__(self) -> str:
        return "Item " + self.item_name + " state updated to " + self.state


@dataclass(frozen=True)
class ItemStateChanged(Event):
    """The state of an item has changed."""

    item_name: str
    previous_state_type: str = ""
    previous_state: str = ""
    new_state_type: str = ""
    new_state: str = ""

    def topic(self) -> str:
        return _item_topic(self.item_name, api.TOPIC_EVENT_STATE_CHANGED)

    def event_type(self) -> EventType:
        return EventType.ITEM_STATE_CHANGED

    def __str__(self) -> str:
        return (
            "Item "
            + self.item_name
            + " state changed from "
            + self.previous_state
            + " to "
            + self.new_state
        )


@dataclass(frozen=True)
class ItemStatePredicted(Event):
    """The state of an item is predicted to be updated."""

    item_name: str
    predicted_type: str = ""
    predicted_state: str = ""

    def topic(self) -> str:
        return _item_topic(self.item_name, api.TOPIC_EVENT_STATE_PREDICTED)

    def event_type(self) -> EventType:
        return EventType.ITEM_STATE_PREDICTED

    def __str__(self) -> str:
        return "Item " + self.item_name + " state predicted " + self.predicted_state


@dataclass(frozen=True)
class ItemAdded(Event):
    """An item has been added to the item registry."""

    item: ItemInfo

    def topic(self) -> str:
        return _item_topic(self.item.name, api.TOPIC_EVENT_ADDED)

    def event_type(self) -> EventType:
        return EventType.ITEM_ADDED

    def __str__(self) -> str:
        return "Item " + self.item.name + " added"


@dataclass(frozen=True)
class ItemRemoved(Event):
    """An item has been removed from the item registry."""

    item: ItemInfo

    def topic(self) -> str:
        return _item_topic(self.item.name, api.TOPIC_EVENT_REMOVED)

    def event_type(self) -> EventType:
        return EventType.ITEM_REMOVED

    def __str__(self) -> str:
        return "Item " + self.item.name + " removed"


@dataclass(frozen=True)
class ItemUpdated(Event):
    """An item has been updated in the item registry."""

    old_item: ItemInfo
    item: ItemInfo

    def topic(self) -> str:
        return _item_topic(self.item.name, api.TOPIC_EVENT_UPDATED)

    def event_type(self) -> EventType:
        return EventType.ITEM_UPDATED

    def __str__(self) -> str:
        return "Item " + self.item.name + " updated"


@dataclass(frozen=True)
class GroupItemStateUpdated(Event):
    """The state of a group has been updated through one of its members."""

    item_name: str
    triggering_item: str = ""
    state_type: str = ""
    state: str = ""

    def topic(self) -> str:
        return _item_topic(self.item_name, self.triggering_item, api.TOPIC_EVENT_STATE_UPDATED)

    def event_type(self) -> EventType:
        return EventType.ITEM_STATE

    def __str__(self) -> str:
        return "Group " + self.item_name + " state updated to " + self.state


@dataclass(frozen=True)
class GroupItemStateChanged(Event):
    """The state of a group has changed through one of its members."""

    item_name: str
    triggering_item: str = ""
    previous_state_type: str = ""
    previous_state: str = ""
    new_state_type: str = ""
    new_state: str = ""

    def topic(self) -> str:
        return _item_topic(self.item_name, self.triggering_item, api.TOPIC_EVENT_STATE_CHANGED)

    def event_type(self) -> EventType:
        return EventType.GROUP_ITEM_STATE_CHANGED

    def __str__(self) -> str:
        return (
            "Group "
            + self.item_name
            + " state changed from "
            + self.previous_state
            + " to "
            + self.new_state
        )