from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from ohbus import api
from ohbus.event_type import EventType
from ohbus.events import (
    AliveEvent,
    ChannelTriggered,
    ErrorEvent,
    Event,
    GenericEvent,
    RulePanicEvent,
    StartlevelEvent,
    SystemEvent,
)
from ohbus.topic import split_channel_topic


def test_event_is_abstract():
    with pytest.raises(TypeError):
        Event()


def test_alive_event():
    ev = AliveEvent()
    assert ev.topic() == ""
    assert ev.event_type() is EventType.SERVER_ALIVE
    assert ev.type_name() == "Alive"
    assert str(ev) == "Received Alive message from server"


def test_alive_events_compare_equal():
    first = AliveEvent()
    second = AliveEvent()
    assert first == second
    assert str(first) == str(second) == "Received Alive message from server"


def test_channel_triggered_topic_round_trip():
    ev = ChannelTriggered("astro:sun:local:rise#event", "START")
    assert split_channel_topic("openhab/" + ev.topic()) == (
        "astro:sun:local:rise#event",
        api.TOPIC_EVENT_TRIGGERED,
    )
    assert ev.event_type() is EventType.CHANNEL_TRIGGERED


def test_channel_triggered_str():
    ev = ChannelTriggered("chan", "PRESSED")
    text = str(ev)
    assert text.startswith("Channel chan")
    assert text.endswith("triggered PRESSED")


def test_error_event_keeps_error():
    err = ValueError("boom")
    ev = ErrorEvent(err)
    assert ev.error is err
    assert ev.topic() == ""
    assert ev.event_type() is EventType.CLIENT_ERROR
    assert str(ev).startswith("Received client error: ")
    assert str(ev).endswith("boom")


@pytest.mark.parametrize(
    "topic, expected",
    [
        ("smarthome/inbox/abc/added", "inbox/abc/added"),
        ("openhab/inbox/abc/added", "inbox/abc/added"),
        ("smarthome/openhab/x", "x"),
        ("openhab/smarthome/x", "smarthome/x"),
        ("other/thing", "other/thing"),
    ],
)
def test_generic_event_strips_root(topic, expected):
    ev = GenericEvent("InboxAddedEvent", topic, "{}")
    assert ev.topic() == expected


def test_generic_event_fields():
    ev = GenericEvent("SomethingEvent", "openhab/some/topic", "data")
    assert ev.type_name == "SomethingEvent"
    assert ev.payload == "data"
    assert ev.event_type() is EventType.UNKNOWN
    assert EventType.UNKNOWN.match(ev.topic(), "anything")
    text = str(ev)
    assert text.startswith("Received unknown event SomethingEvent")
    assert ev.topic() in text
    assert text.endswith("data")


def test_rule_panic_event():
    stamp = datetime(2024, 1, 2, 3, 4, 5)
    ev = RulePanicEvent("kaboom", "id1", "rule", "desc", "some event", stamp)
    assert ev.timestamp == stamp
    assert ev.rule_id == "id1"
    assert ev.rule_name == "rule"
    assert ev.rule_description == "desc"
    assert ev.event == "some event"
    assert ev.topic() == ""
    assert ev.event_type() is EventType.RULE_PANIC
    assert str(ev) == "Caught a panic from inside rule code: " + "kaboom"


def test_startlevel_event():
    ev = StartlevelEvent("openhab/system/startlevel", 70)
    assert ev.topic() == "system/startlevel"
    assert ev.level == 70
    assert ev.event_type() is EventType.SERVER_STARTLEVEL
    assert "70" in str(ev)
    assert str(ev).startswith("Received start level")


def test_startlevel_keeps_smarthome_root():
    ev = StartlevelEvent("smarthome/system/startlevel", 30)
    assert ev.topic() == "smarthome/system/startlevel"


@pytest.mark.parametrize(
    "kind",
    [
        EventType.CLIENT_STARTED,
        EventType.CLIENT_CONNECTED,
        EventType.CLIENT_CONNECTION_STABLE,
        EventType.CLIENT_DISCONNECTED,
        EventType.CLIENT_STOPPED,
        EventType.TIME_CRON,
    ],
)
def test_system_event(kind):
    ev = SystemEvent(kind)
    assert ev.event_type() is kind
    assert ev.topic() == ""
    assert str(ev).startswith("System event #")
    assert str(ev).endswith(str(int(kind)))
    assert kind.match(ev.topic(), "")


def test_events_are_frozen():
    ev = ChannelTriggered("chan", "PRESSED")
    with pytest.raises(FrozenInstanceError):
        ev.event = "RELEASED"
    assert ev.event == "PRESSED"
    assert str(ev).endswith("triggered PRESSED")