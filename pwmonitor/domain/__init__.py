"""
This package defines the enumerations shared by the event models: interface
kinds, node states, media classes and device classes.
"""
from pwmonitor.domain.enums import (
    DeviceClass,
    DeviceClassValue,
    EventType,
    EventTypeValue,
    MediaClass,
    MediaClassValue,
    State,
    StateValue,
    is_known,
    lenient_enum,
    wire_value,
)

__all__ = [
    "DeviceClass",
    "DeviceClassValue",
    "EventType",
    "EventTypeValue",
    "MediaClass",
    "MediaClassValue",
    "State",
    "StateValue",
    "is_known",
    "lenient_enum",
    "wire_value",
]
