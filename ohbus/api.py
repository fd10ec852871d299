"""Data structures exchanged with the openHAB REST and event APIs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Event type names sent by the server.
EVENT_ITEM_ADDED = "ItemAddedEvent"
EVENT_ITEM_REMOVED = "ItemRemovedEvent"
EVENT_ITEM_UPDATED = "ItemUpdatedEvent"
EVENT_ITEM_COMMAND = "ItemCommandEvent"
EVENT_ITEM_STATE = "ItemStateEvent"
EVENT_ITEM_STATE_UPDATED = "ItemStateUpdatedEvent"
EVENT_ITEM_STATE_PREDICTED = "ItemStatePredictedEvent"
EVENT_ITEM_STATE_CHANGED = "ItemStateChangedEvent"
EVENT_GROUP_ITEM_STATE_UPDATED = "GroupStateUpdatedEvent"
EVENT_GROUP_ITEM_STATE_CHANGED = "GroupItemStateChangedEvent"
EVENT_THING_ADDED = "ThingAddedEvent"
EVENT_THING_REMOVED = "ThingRemovedEvent"
EVENT_THING_UPDATED = "ThingUpdatedEvent"
EVENT_THING_STATUS_INFO = "ThingStatusInfoEvent"
EVENT_THING_STATUS_INFO_CHANGED = "ThingStatusInfoChangedEvent"
EVENT_INBOX_ADDED = "InboxAddedEvent"
EVENT_INBOX_REMOVED = "InboxRemovedEvent"
EVENT_INBOX_UPDATE = "InboxUpdateEvent"
EVENT_ITEM_CHANNEL_LINK_ADDED = "ItemChannelLinkAddedEvent"
EVENT_ITEM_CHANNEL_LINK_REMOVED = "ItemChannelLinkRemovedEvent"
EVENT_CHANNEL_TRIGGERED = "ChannelTriggeredEvent"
EVENT_TYPE_ALIVE = "ALIVE"
EVENT_TYPE_STARTLEVEL = "StartlevelEvent"

# Last segment of event topics.
TOPIC_EVENT_ADDED = "added"
TOPIC_EVENT_REMOVED = "removed"
TOPIC_EVENT_UPDATED = "updated"
TOPIC_EVENT_COMMAND = "command"
TOPIC_EVENT_STATE = "state"
TOPIC_EVENT_STATE_UPDATED = "stateupdated"
TOPIC_EVENT_STATE_PREDICTED = "statepredicted"
TOPIC_EVENT_STATE_CHANGED = "statechanged"
TOPIC_EVENT_STATUS = "status"
TOPIC_EVENT_STATUS_CHANGED = "statuschanged"
TOPIC_EVENT_TRIGGERED = "triggered"


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"cannot decode {type(data).__name__} into {what}")
    return data


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    """Find a key, falling back to a case-insensitive match."""
    if key in data:
        return data[key]
    folded = key.casefold()
    for name, value in data.items():
        if isinstance(name, str) and name.casefold() == folded:
            return value
    return None


def _typed(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = _lookup(data, key)
    if value is None:
        return default
    if isinstance(value, bool) and kind is not bool:
        raise TypeError(f"field {key!r}: expected {kind.__name__}, got bool")
    if not isinstance(value, kind):
        raise TypeError(
            f"field {key!r}: expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    return _typed(data, key, str, "")


def _int(data: Mapping[str, Any], key: str) -> int:
    return _typed(data, key, int, 0)


def _bool(data: Mapping[str, Any], key: str) -> bool:
    return _typed(data, key, bool, False)


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    return list(_typed(data, key, list, []))


def _str_list(data: Mapping[str, Any], key: str) -> list[str]:
    values = _list(data, key)
    for value in values:
        if not isinstance(value, str):
            raise TypeError(
                f"field {key!r}: expected list of str, found {type(value).__name__}"
            )
    return values


def _dict(data: Mapping[str, Any], key: str) -> dict[str, Any]:
    return dict(_typed(data, key, Mapping, {}))


@dataclass
class EventMessage:
    """Envelope of a message received on the event stream."""

    topic: str = ""
    payload: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> EventMessage:
        data = _mapping(data, "EventMessage")
        return cls(
            topic=_str(data, "topic"),
            payload=_str(data, "payload"),
            type=_str(data, "type"),
        )


@dataclass
class EventCommand:
    type: str = ""
    value: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> EventCommand:
        data = _mapping(data, "EventCommand")
        return cls(type=_str(data, "type"), value=_str(data, "value"))


@dataclass
class EventState:
    type: str = ""
    value: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> EventState:
        data = _mapping(data, "EventState")
        return cls(type=_str(data, "type"), value=_str(data, "value"))


@dataclass
class EventStateChanged:
    type: str = ""
    value: str = ""
    old_type: str = ""
    old_value: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> EventStateChanged:
        data = _mapping(data, "EventStateChanged")
        return cls(
            type=_str(data, "type"),
            value=_str(data, "value"),
            old_type=_str(data, "oldType"),
            old_value=_str(data, "oldValue"),
        )


@dataclass
class EventStatePredicted:
    predicted_type: str = ""
    predicted_value: str = ""
    is_confirmation: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> EventStatePredicted:
        data = _mapping(data, "EventStatePredicted")
        return cls(
            predicted_type=_str(data, "predictedType"),
            predicted_value=_str(data, "predictedValue"),
            is_confirmation=_bool(data, "isConfirmation"),
        )


@dataclass
class EventStatus:
    status: str = ""
    status_detail: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> EventStatus:
        data = _mapping(data, "EventStatus")
        return cls(status=_str(data, "status"), status_detail=_str(data, "statusDetail"))


@dataclass
class EventTriggered:
    event: str = ""
    channel: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> EventTriggered:
        data = _mapping(data, "EventTriggered")
        return cls(event=_str(data, "event"), channel=_str(data, "channel"))


@dataclass
class Function:
    name: str = ""
    params: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Function:
        data = _mapping(data, "Function")
        return cls(name=_str(data, "name"), params=_str_list(data, "params"))


@dataclass
class StateOptions:
    value: str = ""
    label: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> StateOptions:
        data = _mapping(data, "StateOptions")
        return cls(value=_str(data, "value"), label=_str(data, "label"))


@dataclass
class StateDescription:
    minimum: int = 0
    maximum: int = 0
    step: int = 0
    pattern: str = ""
    read_only: bool = False
    options: list[StateOptions] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> StateDescription:
        data = _mapping(data, "StateDescription")
        return cls(
            minimum=_int(data, "minimum"),
            maximum=_int(data, "maximum"),
            step=_int(data, "step"),
            pattern=_str(data, "pattern"),
            read_only=_bool(data, "readOnly"),
            options=[StateOptions.from_dict(o) for o in _list(data, "options")],
        )


@dataclass
class CommandOptions:
    command: str = ""
    label: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> CommandOptions:
        data = _mapping(data, "CommandOptions")
        return cls(command=_str(data, "command"), label=_str(data, "label"))


@dataclass
class CommandDescription:
    options: list[CommandOptions] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> CommandDescription:
        data = _mapping(data, "CommandDescription")
        return cls(
            options=[CommandOptions.from_dict(o) for o in _list(data, "commandOptions")]
        )


def _optional(data: Mapping[str, Any], key: str, kind: Any) -> Any:
    value = _lookup(data, key)
    return None if value is None else kind.from_dict(value)


@dataclass
class Item:
    """An item as described by the openHAB API."""

    name: str = ""
    label: str = ""
    link: str = ""
    type: str = ""
    state: str = ""
    transformed_state: str = ""
    editable: bool = False
    category: str = ""
    tags: list[str] = field(default_factory=list)
    group_names: list[str] = field(default_factory=list)
    group_type: str = ""
    function: Function | None = None
    state_description: StateDescription | None = None
    command_description: CommandDescription | None = None
    members: list[Item] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Item:
        data = _mapping(data, "Item")
        return cls(
            name=_str(data, "name"),
            label=_str(data, "label"),
            link=_str(data, "link"),
            type=_str(data, "type"),
            state=_str(data, "state"),
            transformed_state=_str(data, "transformedState"),
            editable=_bool(data, "editable"),
            category=_str(data, "category"),
            tags=_str_list(data, "tags"),
            group_names=_str_list(data, "groupNames"),
            group_type=_str(data, "groupType"),
            function=_optional(data, "function", Function),
            state_description=_optional(data, "stateDescription", StateDescription),
            command_description=_optional(data, "commandDescription", CommandDescription),
            members=[Item.from_dict(m) for m in _list(data, "members")],
        )


@dataclass
class Startlevel:
    startlevel: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Startlevel:
        data = _mapping(data, "Startlevel")
        return cls(startlevel=_int(data, "startlevel"))


@dataclass
class ThingStatusInfo:
    status: str = ""
    status_detail: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ThingStatusInfo:
        data = _mapping(data, "ThingStatusInfo")
        return cls(
            status=_str(data, "status"),
            status_detail=_str(data, "statusDetail"),
            description=_str(data, "description"),
        )


@dataclass
class Thing:
    """A thing as described by the openHAB API."""

    uid: str = ""
    label: str = ""
    status_info: ThingStatusInfo = field(default_factory=ThingStatusInfo)
    bridge_uid: str = ""
    configuration: dict[str, Any] = field(default_factory=dict)
    properties: dict[str, str] = field(default_factory=dict)
    thing_type_uid: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Thing:
        data = _mapping(data, "Thing")
        properties = _dict(data, "properties")
        for key, value in properties.items():
            if not isinstance(value, str):
                raise TypeError(
                    f"field 'properties': value of {key!r} is {type(value).__name__}, "
                    "expected str"
                )
        status = _lookup(data, "statusInfo")
        return cls(
            uid=_str(data, "UID"),
            label=_str(data, "label"),
            status_info=ThingStatusInfo() if status is None else ThingStatusInfo.from_dict(status),
            bridge_uid=_str(data, "bridgeUID"),
            configuration=_dict(data, "configuration"),
            properties=properties,
            thing_type_uid=_str(data, "thingTypeUID"),
        )