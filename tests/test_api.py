import json

import pytest

from ohbus import api


def test_event_message_from_dict():
    msg = api.EventMessage.from_dict(
        {"topic": "openhab/items/lamp/command", "payload": "{}", "type": "ItemCommandEvent"}
    )
    assert msg.topic == "openhab/items/lamp/command"
    assert msg.payload == "{}"
    assert msg.type == api.EVENT_ITEM_COMMAND


def test_event_message_missing_fields_default_to_empty():
    msg = api.EventMessage.from_dict({})
    assert msg == api.EventMessage("", "", "")


def test_event_message_null_field_is_empty():
    msg = api.EventMessage.from_dict({"topic": None, "type": "ALIVE"})
    assert msg.topic == ""
    assert msg.type == api.EVENT_TYPE_ALIVE


def test_keys_match_case_insensitively():
    msg = api.EventMessage.from_dict({"TOPIC": "a/b", "Type": "x"})
    assert msg.topic == "a/b"
    assert msg.type == "x"


def test_wrong_field_type_raises():
    with pytest.raises(TypeError):
        api.EventMessage.from_dict({"topic": 12})


def test_non_mapping_raises():
    with pytest.raises(TypeError):
        api.EventCommand.from_dict(["a", "b"])


def test_event_command_and_state():
    assert api.EventCommand.from_dict({"type": "OnOff", "value": "ON"}) == api.EventCommand(
        "OnOff", "ON"
    )
    assert api.EventState.from_dict({"type": "Decimal", "value": "12"}) == api.EventState(
        "Decimal", "12"
    )


def test_event_state_changed_old_values():
    data = api.EventStateChanged.from_dict(
        {"type": "OnOff", "value": "ON", "oldType": "OnOff", "oldValue": "OFF"}
    )
    assert data.old_type == "OnOff"
    assert data.old_value == "OFF"
    assert data.value == "ON"


def test_event_state_predicted():
    data = api.EventStatePredicted.from_dict(
        {"predictedType": "OnOff", "predictedValue": "ON", "isConfirmation": True}
    )
    assert data.predicted_type == "OnOff"
    assert data.predicted_value == "ON"
    assert data.is_confirmation is True


def test_bool_field_rejects_string():
    with pytest.raises(TypeError):
        api.EventStatePredicted.from_dict({"isConfirmation": "true"})


def test_event_status_and_triggered():
    status = api.EventStatus.from_dict({"status": "ONLINE", "statusDetail": "NONE"})
    assert (status.status, status.status_detail) == ("ONLINE", "NONE")
    triggered = api.EventTriggered.from_dict({"event": "PRESSED", "channel": "a:b:c"})
    assert (triggered.event, triggered.channel) == ("PRESSED", "a:b:c")


ITEM_JSON = """
{
  "link": "http://localhost:8080/rest/items/Lights",
  "state": "ON",
  "editable": false,
  "type": "Group",
  "name": "Lights",
  "label": "All lights",
  "category": "light",
  "tags": ["Lighting"],
  "groupNames": ["House"],
  "groupType": "Switch",
  "function": {"name": "OR", "params": ["ON", "OFF"]},
  "stateDescription": {
    "minimum": 0, "maximum": 100, "step": 5, "pattern": "%d",
    "readOnly": true,
    "options": [{"value": "ON", "label": "On"}]
  },
  "commandDescription": {"commandOptions": [{"command": "OFF", "label": "Off"}]},
  "members": [
    {"name": "Lamp", "type": "Switch", "state": "ON", "tags": [], "groupNames": ["Lights"]}
  ]
}
"""


def test_item_full_decode():
    item = api.Item.from_dict(json.loads(ITEM_JSON))
    assert item.name == "Lights"
    assert item.group_type == "Switch"
    assert item.tags == ["Lighting"]
    assert item.group_names == ["House"]
    assert item.function == api.Function("OR", ["ON", "OFF"])
    assert item.state_description.read_only is True
    assert item.state_description.maximum == 100
    assert item.state_description.options == [api.StateOptions("ON", "On")]
    assert item.command_description.options == [api.CommandOptions("OFF", "Off")]
    assert [m.name for m in item.members] == ["Lamp"]
    assert item.members[0].group_names == ["Lights"]


def test_item_optional_parts_absent():
    item = api.Item.from_dict({"name": "Lamp"})
    assert item.function is None
    assert item.state_description is None
    assert item.command_description is None
    assert item.members == []
    assert item.tags == []


def test_item_tags_must_be_strings():
    with pytest.raises(TypeError):
        api.Item.from_dict({"tags": ["ok", 3]})


def test_state_description_rejects_non_integer():
    with pytest.raises(TypeError):
        api.StateDescription.from_dict({"minimum": 1.5})
    with pytest.raises(TypeError):
        api.StateDescription.from_dict({"step": True})


def test_startlevel():
    assert api.Startlevel.from_dict({"startlevel": 80}).startlevel == 80
    assert api.Startlevel.from_dict({}).startlevel == 0


def test_thing_decode():
    thing = api.Thing.from_dict(
        {
            "UID": "binding:device:placeholder",
            "label": "Device",
            "statusInfo": {"status": "ONLINE", "statusDetail": "NONE", "description": "ok"},
            "bridgeUID": "binding:bridge:placeholder",
            "configuration": {"refresh": 30, "enabled": True},
            "properties": {"vendor": "Acme"},
            "thingTypeUID": "binding:device",
        }
    )
    assert thing.uid == "binding:device:placeholder"
    assert thing.status_info == api.ThingStatusInfo("ONLINE", "NONE", "ok")
    assert thing.bridge_uid == "binding:bridge:placeholder"
    assert thing.configuration == {"refresh": 30, "enabled": True}
    assert thing.properties == {"vendor": "Acme"}
    assert thing.thing_type_uid == "binding:device"


def test_thing_missing_status_info_defaults():
    thing = api.Thing.from_dict({"UID": "x"})
    assert thing.status_info == api.ThingStatusInfo()


def test_thing_properties_must_be_strings():
    with pytest.raises(TypeError):
        api.Thing.from_dict({"properties": {"count": 3}})


def test_decoded_types_match_constants():
    group = api.EventMessage.from_dict({"type": "GroupStateUpdatedEvent"})
    assert group.type == api.EVENT_GROUP_ITEM_STATE_UPDATED
    changed = api.EventMessage.from_dict({"topic": "openhab/items/lamp/statechanged"})
    assert changed.topic.rsplit("/", 1)[-1] == api.TOPIC_EVENT_STATE_CHANGED