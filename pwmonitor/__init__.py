from pwmonitor.domain import DeviceClass, EventType, MediaClass, State
from pwmonitor.errors import (
    DecodeError,
    MissingInfoError,
    ProjectionError,
    PwMonitorError,
    TypeMismatchError,
    ValueTypeMismatchError,
)
from pwmonitor.parsing.events import (
    Event,
    EventInfo,
    EventInfoProps,
    EventParams,
    EventSnapshot,
    EventView,
    LinkProps,
    NodeProps,
    PortProps,
    build_event_snapshot,
    decode_event,
    decode_events,
    is_removal_event,
    link_props,
    node_props,
    port_props,
)
from pwmonitor.runtime import MonitorSettings, get_settings
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "DeviceClass",
    "EventType",
    "MediaClass",
    "State",
    "DecodeError",
    "MissingInfoError",
    "ProjectionError",
    "PwMonitorError",
    "TypeMismatchError",
    "ValueTypeMismatchError",
    "Event",
    "EventInfo",
    "EventInfoProps",
    "EventParams",
    "EventSnapshot",
    "EventView",
    "LinkProps",
    "NodeProps",
    "PortProps",
    "build_event_snapshot",
    "decode_event",
    "decode_events",
    "is_removal_event",
    "link_props",
    "node_props",
    "port_props",
    "MonitorSettings",
    "get_settings",
]

try:
    __version__ = version("pwmonitor")
except PackageNotFoundError:
    __version__ = "0.0.0"
