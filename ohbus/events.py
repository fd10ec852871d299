"""Events that are not tied to items or things."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from . import api
from .event_type import CHANNEL_TOPIC_PREFIX, EventType


class Event(ABC):
    """Something that happened, published on the event bus."""

    @abstractmethod
    def topic(self) -> str:
        """Topic the event was sent on, without the server root prefix."""

    @abstractmethod
    def event_type(self) -> EventType:
        """Kind of the event."""


@dataclass(frozen=True)
class AliveEvent(Event):
    """Sent regularly by servers with API version 5 or later."""

    def topic(self) -> str:
        return ""

    def event_type(self) -> EventType:
        return EventType.SERVER_ALIVE

    def type_name(self) -> str:
        return "Alive"

    def __str__(self) -> str:
        return "Received Alive message from server"


@dataclass(frozen=True)
class ChannelTriggered(Event):
    """A channel has been triggered."""

    channel_name: str
    event: str

    def topic(self) -> str:
        return CHANNEL_TOPIC_PREFIX + self.channel_name + "/" + api.TOPIC_EVENT_TRIGGERED

    def event_type(self) -> EventType:
        return EventType.CHANNEL_TRIGGERED

    def __str__(self) -> str:
        return "Channel " + self.channel_name + " triggered " + self.event


@dataclass(frozen=True)
class ErrorEvent(Event):
    """An error raised by the client itself."""

    error: BaseException

    def topic(self) -> str:
        return ""

    def event_type(self) -> EventType:
        return EventType.CLIENT_ERROR

    def __str__(self) -> str:
        return "Received client error: " + str(self.error)


def _strip_root(topic: str) -> str:
    return topic.removeprefix("smarthome/").removeprefix("openhab/")


@dataclass(frozen=True)
class GenericEvent(Event):
    """An event whose type is not known to the client."""

    type_name: str
    event_topic: str
    payload: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "event_topic", _strip_root(self.event_topic))

    def topic(self) -> str:
        return self.event_topic

    def event_type(self) -> EventType:
        return EventType.UNKNOWN

    def __str__(self) -> str:
        return (
            "Received unknown event "
            + self.type_name
            + " on topic "
            + self.event_topic
            + " with payload "
            + self.payload
        )


@dataclass(frozen=True)
class RulePanicEvent(Event):
    """An exception escaped from the code of a rule."""

    message: str
    rule_id: str = ""
    rule_name: str = ""
    rule_description: str = ""
    event: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def topic(self) -> str:
        return ""

    def event_type(self) -> EventType:
        return EventType.RULE_PANIC

    def __str__(self) -> str:
        return "Caught a panic from inside rule code: " + self.message


@dataclass(frozen=True)
class StartlevelEvent(Event):
    """Sent by the server during startup, typically from level 30 to 100."""

    event_topic: str
    level: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "event_topic", self.event_topic.removeprefix("openhab/"))

    def topic(self) -> str:
        return self.event_topic

    def event_type(self) -> EventType:
        return EventType.SERVER_STARTLEVEL

    def __str__(self) -> str:
        return f"Received start level {self.level} from server"


@dataclass(frozen=True)
class SystemEvent(Event):
    """An event generated by the client: start, connection, stop, cron."""

    kind: EventType

    def topic(self) -> str:
        return ""

    def event_type(self) -> EventType:
        return self.kind

    def __str__(self) -> str:
        return f"System event #{int(self.kind)}"