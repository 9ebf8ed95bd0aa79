"""
Enumerations for values found in PipeWire monitor events.

The daemon is free to emit values that are not listed here, so enum-typed
model fields are declared with :func:`lenient_enum`: a known value becomes the
enum member, anything else is kept as the plain string it arrived as.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Type, Union

from pydantic import BeforeValidator


class EventType(str, Enum):
    """Interface kind carried in the ``type`` field of an event."""
    EMPTY = ""
    NODE = "PipeWire:Interface:Node"
    PORT = "PipeWire:Interface:Port"
    LINK = "PipeWire:Interface:Link"


class DeviceClass(str, Enum):
    SOUND = "sound"


class State(str, Enum):
    SUSPENDED = "suspended"
    RUNNING = "running"
    IDLE = "idle"
    ERROR = "error"
    CREATING = "creating"


class MediaClass(str, Enum):
    """Audio role of a node."""
    # A source of audio samples like a microphone
    AUDIO_SOURCE = "Audio/Source"
    # A sink for audio samples, like an audio card
    AUDIO_SINK = "Audio/Sink"
    # Both a sink and a source
    AUDIO_DUPLEX = "Audio/Duplex"
    # A playback stream
    STREAM_OUTPUT_AUDIO = "Stream/Output/Audio"
    # A capture stream
    STREAM_INPUT_AUDIO = "Stream/Input/Audio"


def _to_member(enum_cls: Type[Enum]):
    def convert(value: Any) -> Any:
        if isinstance(value, enum_cls) or not isinstance(value, str):
            return value
        try:
            return enum_cls(value)
        except ValueError:
            return value
    return convert


def lenient_enum(enum_cls: Type[Enum]) -> Any:
    """
    Build an annotated type accepting members of ``enum_cls`` or any string.

    Non-string input is left for the union to reject, so a number in an enum
    field still fails validation.
    """
    return Annotated[Union[enum_cls, str], BeforeValidator(_to_member(enum_cls))]


EventTypeValue = lenient_enum(EventType)
DeviceClassValue = lenient_enum(DeviceClass)
StateValue = lenient_enum(State)
MediaClassValue = lenient_enum(MediaClass)


def is_known(enum_cls: Type[Enum], value: Any) -> bool:
    """Tell whether ``value`` is a member, or the wire value of a member, of ``enum_cls``."""
    return isinstance(value, enum_cls) or value in {member.value for member in enum_cls}


def wire_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value
