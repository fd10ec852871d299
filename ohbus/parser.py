"""Decoding of raw event-stream messages into typed events."""

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

from . import api
from .events import AliveEvent, ChannelTriggered, Event, GenericEvent, StartlevelEvent
from .items import (
    GroupItemStateChanged,
    GroupItemStateUpdated,
    ItemAdded,
    ItemInfo,
    ItemReceivedCommand,
    ItemReceivedState,
    ItemRemoved,
    ItemStateChanged,
    ItemStatePredicted,
    ItemStateUpdated,
    ItemUpdated,
)
from .things import (
    Thing,
    ThingStatus,
    ThingStatusInfoChangedEvent,
    ThingStatusInfoEvent,
    ThingUpdated,
)
from .topic import split_channel_topic, split_item_topic, split_thing_topic

T = TypeVar("T")


class EventParseError(ValueError):
    """Raised when a message from the event stream cannot be decoded."""


def _decoding_error(err: Exception) -> EventParseError:
    return EventParseError(f"error decoding message: {err}")


def _load(payload: str) -> Any:
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, TypeError) as err:
        raise _decoding_error(err) from err


def _build(kind: type[T], value: Any) -> T:
    if value is None:
        return kind()
    try:
        return kind.from_dict(value)  # type: ignore[attr-defined]
    except TypeError as err:
        raise _decoding_error(err) from err


def _decode_object(payload: str, kind: type[T]) -> T:
    return _build(kind, _load(payload))


def _decode_pair(payload: str, kind: type[T]) -> tuple[T, T]:
    """Decode a JSON array that must hold exactly two objects: (new, old)."""
    value = _load(payload)
    if value is None:
        value = []
    if not isinstance(value, list):
        raise _decoding_error(
            TypeError(f"cannot decode {type(value).__name__} into list of {kind.__name__}")
        )
    decoded = [_build(kind, element) for element in value]
    if len(decoded) != 2:
        raise EventParseError(
            "error decoding message: expected array with 2 elements, "
            f"but found {len(decoded)}"
        )
    return decoded[0], decoded[1]


def _invalid_topic(topic: str) -> EventParseError:
    return EventParseError(f"invalid topic: {json.dumps(topic)}")


def _item_name(topic: str) -> tuple[str, str]:
    name, triggering, _ = split_item_topic(topic)
    if not name:
        raise _invalid_topic(topic)
    return name, triggering


def _item_info(item: api.Item) -> ItemInfo:
    return ItemInfo(
        type=item.type,
        group_type=item.group_type,
        name=item.name,
        label=item.label,
        category=item.category,
        tags=list(item.tags),
        group_names=list(item.group_names),
    )


def _thing(thing: api.Thing) -> Thing:
    return Thing(
        uid=thing.uid,
        label=thing.label,
        bridge_uid=thing.bridge_uid,
        configuration=dict(thing.configuration),
        properties=dict(thing.properties),
        thing_type_uid=thing.thing_type_uid,
    )


def _item_command(message: api.EventMessage) -> Event:
    data = _decode_object(message.payload, api.EventCommand)
    name, _ = _item_name(message.topic)
    return ItemReceivedCommand(name, data.type, data.value)


def _item_state(message: api.EventMessage) -> Event:
    data = _decode_object(message.payload, api.EventState)
    name, _ = _item_name(message.topic)
    return ItemReceivedState(name, data.type, data.value)


def _item_state_updated(message: api.EventMessage) -> Event:
    data = _decode_object(message.payload, api.EventState)
    name, _ = _item_name(message.topic)
    return ItemStateUpdated(name, data.type, data.value)


def _item_state_changed(message: api.EventMessage) -> Event:
    data = _decode_object(message.payload, api.EventStateChanged)
    name, _ = _item_name(message.topic)
    return ItemStateChanged(name, data.old_type, data.old_value, data.type, data.value)


def _group_state_updated(message: api.EventMessage) -> Event:
    data = _decode_object(message.payload, api.EventState)
    name, triggering = _item_name(message.topic)
    return GroupItemStateUpdated(name, triggering, data.type, data.value)


def _group_state_changed(message: api.EventMessage) -> Event:
    data = _decode_object(message.payload, api.EventStateChanged)
    name, triggering = _item_name(message.topic)
    return GroupItemStateChanged(
        name, triggering, data.old_type, data.old_value, data.type, data.value
    )


def _item_state_predicted(message: api.EventMessage) -> Event:
    data = _decode_object(message.payload, api.EventStatePredicted)
    name, _ = _item_name(message.topic)
    return ItemStatePredicted(name, data.predicted_type, data.predicted_value)


def _item_added(message: api.EventMessage) -> Event:
    return ItemAdded(_item_info(_decode_object(message.payload, api.Item)))


def _item_removed(message: api.EventMessage) -> Event:
    return ItemRemoved(_item_info(_decode_object(message.payload, api.Item)))


def _item_updated(message: api.EventMessage) -> Event:
    new, old = _decode_pair(message.payload, api.Item)
    return ItemUpdated(old_item=_item_info(old), item=_item_info(new))


def _thing_updated(message: api.EventMessage) -> Event:
    new, old = _decode_pair(message.payload, api.Thing)
    return ThingUpdated(old_thing=_thing(old), thing=_thing(new))


def _thing_status_info(message: api.EventMessage) -> Event:
    data = _decode_object(message.payload, api.ThingStatusInfo)
    name, _ = split_thing_topic(message.topic)
    return ThingStatusInfoEvent.from_status(
        name, ThingStatus(status=data.status, status_detail=data.status_detail)
    )


def _thing_status_info_changed(message: api.EventMessage) -> Event:
    new, old = _decode_pair(message.payload, api.ThingStatusInfo)
    name, _ = split_thing_topic(message.topic)
    return ThingStatusInfoChangedEvent.from_statuses(
        name,
        ThingStatus(old.status, old.status_detail, old.description),
        ThingStatus(new.status, new.status_detail, new.description),
    )


def _alive(message: api.EventMessage) -> Event:
    return AliveEvent()


def _startlevel(message: api.EventMessage) -> Event:
    data = _decode_object(message.payload, api.Startlevel)
    return StartlevelEvent(message.topic, data.startlevel)


def _channel_triggered(message: api.EventMessage) -> Event:
    data = _decode_object(message.payload, api.EventTriggered)
    name, _ = split_channel_topic(message.topic)
    return ChannelTriggered(name, data.event)


_DECODERS: dict[str, Callable[[api.EventMessage], Event]] = {
    api.EVENT_ITEM_COMMAND: _item_command,
    api.EVENT_ITEM_STATE: _item_state,
    api.EVENT_ITEM_STATE_UPDATED: _item_state_updated,
    api.EVENT_ITEM_STATE_CHANGED: _item_state_changed,
    api.EVENT_GROUP_ITEM_STATE_UPDATED: _group_state_updated,
    api.EVENT_GROUP_ITEM_STATE_CHANGED: _group_state_changed,
    api.EVENT_ITEM_STATE_PREDICTED: _item_state_predicted,
    api.EVENT_ITEM_ADDED: _item_added,
    api.EVENT_ITEM_REMOVED: _item_removed,
    api.EVENT_ITEM_UPDATED: _item_updated,
    api.EVENT_THING_UPDATED: _thing_updated,
    api.EVENT_THING_STATUS_INFO: _thing_status_info,
    api.EVENT_THING_STATUS_INFO_CHANGED: _thing_status_info_changed,
    api.EVENT_TYPE_ALIVE: _alive,
    api.EVENT_TYPE_STARTLEVEL: _startlevel,
    api.EVENT_CHANNEL_TRIGGERED: _channel_triggered,
}


def parse_event(data: str) -> Event:
    """Decode one JSON message from the event stream into an event.

    Unknown message types give a GenericEvent. Raises EventParseError when
    the message or its payload cannot be decoded.
    """
    try:
        raw = json.loads(data)
        message = api.EventMessage() if raw is None else api.EventMessage.from_dict(raw)
    except (json.JSONDecodeError, TypeError) as err:
        raise EventParseError(f"invalid event data {json.dumps(data)}: {err}") from err

    decoder = _DECODERS.get(message.type)
    if decoder is None:
        return GenericEvent(message.type, message.topic, message.payload)
    return decoder(message)