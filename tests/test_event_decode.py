"""Tests for envelope, info and property dictionary decoding."""
import datetime as dt
import json

import pytest
from pydantic import ValidationError

from pwmonitor.domain import EventType, MediaClass, State
from pwmonitor.errors import DecodeError
from pwmonitor.parsing.events import Event, build_event_snapshot, decode_event, decode_events
from pwmonitor.runtime.config import MonitorSettings


NODE_RECORD = {
    "id": 45,
    "type": "PipeWire:Interface:Node",
    "version": 3,
    "permissions": ["r", "w", "x", "m"],
    "info": {
        "max-input-ports": 0,
        "max-output-ports": 0,
        "change-mask": ["input-ports", "output-ports", "state", "props", "params"],
        "n-input-ports": 0,
        "n-output-ports": 0,
        "state": "suspended",
        "error": None,
        "props": {
            "node.name": "alsa_output.pci-0000_00_1f.3.analog-stereo",
            "node.description": "Built-in Audio Analog Stereo",
            "media.class": "Audio/Sink",
            "object.serial": 45,
            "node.always-process": False,
            "priority.session": 1009,
        },
    },
}


def test_decode_node_event():
    event = decode_event(NODE_RECORD)
    assert event.id == 45
    assert event.type == EventType.NODE
    assert event.version == 3
    assert event.permissions == ["r", "w", "x", "m"]
    assert event.info is not None
    assert event.info.state == State.SUSPENDED
    assert event.info.change_mask == ["input-ports", "output-ports", "state", "props", "params"]
    assert event.info.max_input_ports == 0
    assert event.info.error is None


def test_decode_props_keep_absent_distinct_from_zero():
    props = decode_event(NODE_RECORD).info.props
    assert props.node_name == "alsa_output.pci-0000_00_1f.3.analog-stereo"
    assert props.media_class == MediaClass.AUDIO_SINK
    assert props.node_always_process is False
    assert props.client_id is None
    assert props.get("object.serial") == 45
    assert props.get("priority.session") is None


def test_decode_json_text():
    event = decode_event(json.dumps(NODE_RECORD))
    assert event.id == 45
    assert event.info.props.node_description == "Built-in Audio Analog Stereo"


def test_unknown_fields_are_dropped():
    record = {
        "id": 7,
        "type": "PipeWire:Interface:Node",
        "bogus": {"nested": True},
        "info": {"props": {"node.name": "x", "vendor.custom": "y"}, "extra-field": 1},
    }
    event = decode_event(record)
    assert event.info.props.present() == {"node.name": "x"}
    assert not hasattr(event, "bogus")


def test_missing_and_null_fields_take_zero_values():
    event = decode_event({"id": None, "type": None, "permissions": None})
    assert event.id == 0
    assert event.type == EventType.EMPTY
    assert event.version == 0
    assert event.permissions == []
    assert event.info is None

    assert decode_event({}).id == 0


def test_null_change_mask():
    event = decode_event({"id": 3, "info": {"change-mask": None}})
    assert event.info.change_mask == []


def test_unknown_type_kept_verbatim():
    event = decode_event({"id": 3, "type": "PipeWire:Interface:Client", "info": {"props": {}}})
    assert event.type == "PipeWire:Interface:Client"
    assert not isinstance(event.type, EventType)


def test_unknown_state_kept_verbatim():
    event = decode_event({"id": 80, "type": "PipeWire:Interface:Link", "info": {"state": "active"}})
    assert event.info.state == "active"


@pytest.mark.parametrize(
    "record",
    [
        {"id": "45"},
        {"id": True},
        {"id": 1.5},
        {"id": 1, "version": "3"},
        {"id": 1, "type": 5},
        {"id": 1, "info": []},
        {"id": 1, "permissions": "rwx"},
        {"id": 1, "info": {"props": {"node.name": 5}}},
        {"id": 1, "info": {"props": {"client.id": "34"}}},
        {"id": 1, "info": {"props": {"node.autoconnect": "true"}}},
    ],
)
def test_type_mismatch_fails_decoding(record):
    with pytest.raises(DecodeError):
        decode_event(record)


def test_malformed_json_fails_decoding():
    with pytest.raises(DecodeError):
        decode_event("{not json")
    with pytest.raises(DecodeError):
        decode_event("[1, 2]")


def test_non_object_record_fails_decoding():
    with pytest.raises(DecodeError):
        decode_event(42)


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        decode_event({"id": "45"})


def test_event_is_immutable():
    event = decode_event(NODE_RECORD)
    with pytest.raises(ValidationError):
        event.id = 3


def test_captured_at_from_caller():
    ts = dt.datetime(2024, 5, 1, 12, 0, tzinfo=dt.UTC)
    event = decode_event(NODE_RECORD, captured_at=ts)
    assert event.captured_at == ts


def test_captured_at_defaults_to_now():
    before = dt.datetime.now(dt.UTC)
    event = decode_event(NODE_RECORD)
    assert event.captured_at is not None
    assert event.captured_at >= before


def test_captured_at_never_read_from_wire(monkeypatch):
    monkeypatch.setattr(
        "pwmonitor.parsing.events.decode.get_settings",
        lambda: MonitorSettings(capture_timestamps=False),
    )
    event = decode_event({"id": 1, "captured_at": "2024-05-01T12:00:00Z", "_captured_at": "x"})
    assert event.captured_at is None


def test_capture_disabled_by_settings(monkeypatch):
    monkeypatch.setattr(
        "pwmonitor.parsing.events.decode.get_settings",
        lambda: MonitorSettings(capture_timestamps=False),
    )
    assert decode_event(NODE_RECORD).captured_at is None


def test_caller_can_stamp_event():
    event = decode_event({"id": 5}, captured_at=None)
    ts = dt.datetime(2024, 5, 1, tzinfo=dt.UTC)
    assert event.stamp(ts) is event
    assert event.captured_at == ts


def test_decode_events_batch():
    ts = dt.datetime(2024, 5, 1, tzinfo=dt.UTC)
    text = json.dumps([NODE_RECORD, {"id": 128, "info": None}])
    events = decode_events(text, captured_at=ts)
    assert [e.id for e in events] == [45, 128]
    assert all(e.captured_at == ts for e in events)
    assert all(isinstance(e, Event) for e in events)


def test_decode_events_rejects_non_array():
    with pytest.raises(DecodeError):
        decode_events('{"id": 1}')
    with pytest.raises(DecodeError):
        decode_events("[{")


def test_snapshot_collects_errors():
    snapshot = build_event_snapshot("{broken")
    assert snapshot.event is None
    assert not snapshot.ok
    assert len(snapshot.errors) == 1
    assert snapshot.errors[0].startswith("decode_failed")
    assert snapshot.raw == "{broken"


def test_snapshot_warns_on_unknown_type():
    snapshot = build_event_snapshot({"id": 3, "type": "PipeWire:Interface:Module", "info": {}})
    assert snapshot.ok
    assert snapshot.warnings == ["unknown event type: PipeWire:Interface:Module"]


def test_snapshot_of_valid_record():
    ts = dt.datetime(2024, 5, 1, tzinfo=dt.UTC)
    snapshot = build_event_snapshot(NODE_RECORD, captured_at=ts)
    assert snapshot.ok
    assert snapshot.warnings == []
    assert snapshot.received_at == ts
    assert snapshot.event.captured_at == ts
