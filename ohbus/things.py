"""Events about things."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from . import api
from .event_type import THING_TOPIC_PREFIX, EventType
from .events import Event


@dataclass(frozen=True)
class Thing:
    """A thing as carried by thing events."""

    uid: str = ""
    label: str = ""
    bridge_uid: str = ""
    configuration: dict[str, Any] = field(default_factory=dict)
    properties: dict[str, str] = field(default_factory=dict)
    thing_type_uid: str = ""


@dataclass(frozen=True)
class ThingStatus:
    status: str = ""
    status_detail: str = ""
    description: str = ""


@dataclass(frozen=True)
class ThingStatusInfoEvent(Event):
    """The status of a thing has been updated."""

    thing_name: str
    status: str = ""
    status_detail: str = ""

    @classmethod
    def from_status(cls, thing_name: str, status: ThingStatus) -> ThingStatusInfoEvent:
        return cls(
            thing_name=thing_name,
            status=status.status,
            status_detail=status.status_detail,
        )

    def topic(self) -> str:
        return THING_TOPIC_PREFIX + self.thing_name + "/" + api.TOPIC_EVENT_STATUS

    def event_type(self) -> EventType:
        return EventType.ITEM_COMMAND

    def __str__(self) -> str:
        return "Thing " + self.thing_name + " status is " + self.status


@dataclass(frozen=True)
class ThingStatusInfoChangedEvent(Event):
    """The status of a thing has changed."""

    thing_name: str
    previous_status: str = ""
    previous_status_detail: str = ""
    previous_description: str = ""
    new_status: str = ""
    new_status_detail: str = ""
    new_description: str = ""

    @classmethod
    def from_statuses(
        cls, thing_name: str, previous_status: ThingStatus, new_status: ThingStatus
    ) -> ThingStatusInfoChangedEvent:
        return cls(
            thing_name=thing_name,
            previous_status=previous_status.status,
            previous_status_detail=previous_status.status_detail,
            previous_description=previous_status.description,
            new_status=new_status.status,
            new_status_detail=new_status.status_detail,
            new_description=new_status.description,
        )

    def topic(self) -> str:
        return THING_TOPIC_PREFIX + self.thing_name + "/" + api.TOPIC_EVENT_STATUS_CHANGED

    def event_type(self) -> EventType:
        return EventType.ITEM_COMMAND

    def __str__(self) -> str:
        return (
            "Thing "
            + self.thing_name
            + " status changed from "
            + self.previous_status
            + " to "
            + self.new_status
        )


@dataclass(frozen=True)
class ThingUpdated(Event):
    """A thing has been updated in the thing registry."""

    old_thing: Thing
    thing: Thing

    def topic(self) -> str:
        return THING_TOPIC_PREFIX + self.thing.uid + "/" + api.TOPIC_EVENT_UPDATED

    def event_type(self) -> EventType:
        return EventType.THING_UPDATED

    def __str__(self) -> str:
        return "Thing " + self.thing.uid + " updated"