# ohbus

This package provides three things for openHAB data:

- typed models for openHAB REST and event-stream data,
- a parser that turns raw event-stream messages into event objects,
- a small publish/subscribe bus that sends those events to callbacks.

It uses only the standard library.

## Installation

```
pip install .
```

To install it with the test dependencies:

```
pip install ".[test]"
```

## Parsing events

openHAB sends each event as a JSON message. The message has a `topic`, a
`type` and a `payload`. The payload is itself a JSON string.

```python
from ohbus.parser import parse_event, EventParseError

raw = (
    '{"topic":"openhab/items/Kitchen_Light/command",'
    '"payload":"{\\"type\\":\\"OnOff\\",\\"value\\":\\"ON\\"}",'
    '"type":"ItemCommandEvent"}'
)
event = parse_event(raw)
print(event.topic())             # items/Kitchen_Light/command
print(event.event_type().name)   # ITEM_COMMAND
print(event)                     # Item Kitchen_Light received command ON
```

The parser recognises these message types:

- Item events: `ItemCommandEvent`, `ItemStateEvent`, `ItemStateUpdatedEvent`,
  `ItemStateChangedEvent` and `ItemStatePredictedEvent`.
- Group events: `GroupStateUpdatedEvent` and `GroupItemStateChangedEvent`.
- Item registry events: `ItemAddedEvent`, `ItemRemovedEvent` and
  `ItemUpdatedEvent`.
- Thing events: `ThingUpdatedEvent`, `ThingStatusInfoEvent` and
  `ThingStatusInfoChangedEvent`.
- Server and channel events: `ALIVE`, `StartlevelEvent` and
  `ChannelTriggeredEvent`.

Any other type becomes a `GenericEvent`. A `GenericEvent` keeps the type name,
the topic and the raw payload.

The parser raises `EventParseError`, a subclass of `ValueError`, in these cases:

- the message is not valid JSON, or its payload is not valid JSON;
- a field has the wrong type;
- an item event has an invalid topic;
- an "updated" or "changed" payload is not an array of exactly two elements.

Topics in parsed events do not include the `openhab/` or `smarthome/` root.

## Event classes

Every event is a frozen dataclass derived from `ohbus.events.Event`. Each one
provides `topic()`, `event_type()` and a readable `str()`.

- `ohbus.events` has the events that are not about items or things:
  - `AliveEvent`
  - `ChannelTriggered`
  - `ErrorEvent`, which wraps an exception
  - `GenericEvent`
  - `RulePanicEvent`
  - `StartlevelEvent`
  - `SystemEvent`, which carries a client-side `EventType` such as
    `CLIENT_CONNECTED` or `TIME_CRON`
- `ohbus.items` has the item events:
  - `ItemReceivedCommand`, `ItemReceivedState`, `ItemStateUpdated`,
    `ItemStateChanged` and `ItemStatePredicted`
  - `ItemAdded`, `ItemRemoved` and `ItemUpdated`, which carry `ItemInfo`
  - `GroupItemStateUpdated` and `GroupItemStateChanged`
- `ohbus.things` has the thing events:
  - `ThingStatusInfoEvent`, built with `from_status`
  - `ThingStatusInfoChangedEvent`, built with `from_statuses`
  - `ThingUpdated`

  It also has the `Thing` and `ThingStatus` records.

Some events report the same event type as another event:

- `ItemStateUpdated` and `GroupItemStateUpdated` report `EventType.ITEM_STATE`.
- `ThingStatusInfoEvent` and `ThingStatusInfoChangedEvent` report
  `EventType.ITEM_COMMAND`.

## Subscribing to events

```python
from ohbus.bus import EventBus
from ohbus.event_type import EventType
from ohbus.events import SystemEvent

bus = EventBus(asynchronous=False)

sub_id = bus.subscribe(
    "Kitchen_Light", EventType.ITEM_COMMAND, lambda e: print("got", e)
)
bus.subscribe_once("", EventType.CLIENT_CONNECTED, lambda e: print("connected"))

bus.publish(event)                                   # returns 1
bus.publish(SystemEvent(EventType.CLIENT_CONNECTED)) # returns 1, then the once-subscription is gone
print(bus.subscriptions())
# ['id=1; name="Kitchen_Light", eventType="ITEM_COMMAND", once=false']
bus.unsubscribe(sub_id)                              # 1 if removed, 0 if the id was unknown
bus.wait()                                           # waits for any callbacks still running
```

How subscriptions match:

- A subscription receives an event only when the event types are equal.
- An empty name matches every event of that type.
- Any other name must match the event's topic, as checked by
  `EventType.match(topic, name)`.
- `EventType.match` raises `ValueError` for event types that have no topic
  rule. Do not subscribe by name to those types.

A bus created with `asynchronous=True` runs every callback in its own thread.
`wait()` blocks until all of those callbacks have finished.

## Other modules

- `ohbus.api` has dataclasses for openHAB REST and event payloads, such as
  `Item`, `Thing`, `EventMessage` and `ThingStatusInfo`. Each one has a
  `from_dict` constructor that raises `TypeError` on fields of the wrong type.
  It also has the event type names and topic suffixes as constants.
- `ohbus.topic` has functions that split openHAB event topics:
  - `split_topic`
  - `split_item_topic`
  - `split_thing_topic`
  - `split_channel_topic`

## What this package does not do

- It does not connect to an openHAB server.
- It does not make REST requests.
- It does not read the server-sent event stream.
- It does not schedule rules or cron jobs.

You supply the raw messages to `parse_event` and publish the resulting events
on an `EventBus` yourself.

## Running the tests

```
pytest
```