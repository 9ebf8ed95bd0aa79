from pwmonitor.parsing.events.decode import build_event_snapshot, decode_event, decode_events
from pwmonitor.parsing.events.model import Event, EventInfo, EventSnapshot
from pwmonitor.parsing.events.params import (
    EventParams,
    ParamBuffers,
    ParamEnumFormat,
    ParamFormat,
    ParamIO,
    ParamLatency,
    ParamMeta,
    ParamTag,
)
from pwmonitor.parsing.events.projection import LinkProps, NodeProps, PortProps, link_props, node_props, port_props
from pwmonitor.parsing.events.props import EventInfoProps, wire_names
from pwmonitor.parsing.events.removal import is_removal_event
from pwmonitor.parsing.events.view import EventView

__all__ = [
    "build_event_snapshot",
    "decode_event",
    "decode_events",
    "Event",
    "EventInfo",
    "EventSnapshot",
    "EventParams",
    "ParamBuffers",
    "ParamEnumFormat",
    "ParamFormat",
    "ParamIO",
    "ParamLatency",
    "ParamMeta",
    "ParamTag",
    "LinkProps",
    "NodeProps",
    "PortProps",
    "link_props",
    "node_props",
    "port_props",
    "EventInfoProps",
    "wire_names",
    "is_removal_event",
    "EventView",
]
