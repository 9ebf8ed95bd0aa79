"""Tests for EventView accessors."""
import warnings

from pwmonitor.domain import EventType, State
from pwmonitor.parsing.events import Event, EventInfo, EventInfoProps, EventView, NodeProps, decode_event
from pwmonitor.runtime import get_logger, ring_buffer

NODE_RECORD = {
    "id": 45,
    "type": "PipeWire:Interface:Node",
    "info": {
        "change-mask": ["state", "props"],
        "state": "running",
        "props": {"node.name": "alsa_output.pci", "media.class": "Audio/Sink"},
    },
}


def test_view_on_node_event():
    view = EventView(decode_event(NODE_RECORD))
    assert view.id == 45
    assert view.type == EventType.NODE
    assert view.is_node
    assert not view.is_port
    assert not view.is_link
    assert not view.is_removal
    assert view.state == State.RUNNING
    assert view.has_known_state


def test_change_mask_lookup():
    view = EventView(decode_event(NODE_RECORD))
    assert view.changed("props")
    assert not view.changed("params")


def test_prop_by_wire_name():
    view = EventView(decode_event(NODE_RECORD))
    assert view.prop("node.name") == "alsa_output.pci"
    assert view.prop("node.description") is None
    assert view.prop("not.a.property") is None


def test_projections_do_not_raise():
    view = EventView(decode_event(NODE_RECORD))
    assert view.node.name == "alsa_output.pci"
    assert view.port is None
    assert view.link is None


def test_view_on_removal_event():
    view = EventView(decode_event({"id": 128, "info": None}))
    assert view.is_removal
    assert view.state is None
    assert not view.has_known_state
    assert not view.changed("props")
    assert view.prop("node.name") is None
    assert view.node is None


def test_unknown_state():
    view = EventView(decode_event({"id": 80, "type": "PipeWire:Interface:Link", "info": {"state": "paused"}}))
    assert view.state == "paused"
    assert not view.has_known_state


def test_value_mismatch_gives_zero_valued_node_and_is_logged():
    props = EventInfoProps.model_construct(node_name=5)
    event = Event.model_construct(id=45, type=EventType.NODE, info=EventInfo.model_construct(props=props))
    handler = ring_buffer(get_logger())
    handler.clear()
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        node = EventView(event).node
    assert node == NodeProps()
    entry = handler.get_events()[-1]
    assert entry["event"] == "projection_failed"
    assert entry["details"]["id"] == 45
