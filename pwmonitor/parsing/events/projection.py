"""
Typed projections of the generic property dictionary.

A projection narrows ``info.props`` of an event to the fixed set of
properties relevant to one interface kind. The props are re-encoded to their
wire form and validated again against the narrower schema, so the dotted
name of every projected field is resolved by the same aliases the primary
decoder uses. Keys the schema does not know are dropped; keys missing from
the event take the field default.

Decoded events cannot fail the second validation: the props model declares
the same strict type for every key a projection reads, so a wrong-typed value
is already rejected by the decoder. ``ValueTypeMismatchError`` only guards
events built by hand (``model_construct``) or props that bypassed validation.
"""
from __future__ import annotations

from typing import Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError

from pwmonitor.domain.enums import DeviceClassValue, EventType, MediaClassValue, wire_value
from pwmonitor.errors import MissingInfoError, TypeMismatchError, ValueTypeMismatchError
from pwmonitor.parsing.events.model import Event

P = TypeVar("P", bound=BaseModel)


class _Projection(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class NodeProps(_Projection):
    name: StrictStr = Field("", alias="node.name")
    description: StrictStr = Field("", alias="node.description")
    nickname: StrictStr = Field("", alias="node.nick")
    audio_channels: StrictInt = Field(0, alias="audio.channels")
    audio_position: StrictStr = Field("", alias="audio.position")
    client_id: StrictInt = Field(0, alias="client.id")
    device_class: Optional[DeviceClassValue] = Field(None, alias="device.class")
    device_id: StrictInt = Field(0, alias="device.id")
    device_profile_description: StrictStr = Field("", alias="device.profile.description")
    device_profile_name: StrictStr = Field("", alias="device.profile.name")
    factory_id: StrictInt = Field(0, alias="factory.id")
    factory_mode: StrictStr = Field("", alias="factory.mode")
    factory_name: StrictStr = Field("", alias="factory.name")
    library_name: StrictStr = Field("", alias="library.name")
    media_class: MediaClassValue = Field("", alias="media.class")
    object_id: StrictInt = Field(0, alias="object.id")
    object_path: StrictStr = Field("", alias="object.path")
    object_serial: StrictInt = Field(0, alias="object.serial")


class PortProps(_Projection):
    port_id: StrictInt = Field(0, alias="port.id")
    name: StrictStr = Field("", alias="port.name")
    direction: StrictStr = Field("", alias="port.direction")
    alias: StrictStr = Field("", alias="port.alias")
    physical: StrictBool = Field(False, alias="port.physical")
    terminal: StrictBool = Field(False, alias="port.terminal")
    monitor: StrictBool = Field(False, alias="port.monitor")
    group: StrictStr = Field("", alias="port.group")
    audio_channel: StrictStr = Field("", alias="audio.channel")
    format_dsp: StrictStr = Field("", alias="format.dsp")
    node_id: StrictInt = Field(0, alias="node.id")
    object_id: StrictInt = Field(0, alias="object.id")
    object_path: StrictStr = Field("", alias="object.path")
    object_serial: StrictInt = Field(0, alias="object.serial")


class LinkProps(_Projection):
    output_node: StrictInt = Field(0, alias="link.output.node")
    output_port: StrictInt = Field(0, alias="link.output.port")
    input_node: StrictInt = Field(0, alias="link.input.node")
    input_port: StrictInt = Field(0, alias="link.input.port")
    passive: StrictBool = Field(False, alias="link.passive")
    factory_id: StrictInt = Field(0, alias="factory.id")
    client_id: StrictInt = Field(0, alias="client.id")
    object_id: StrictInt = Field(0, alias="object.id")
    object_serial: StrictInt = Field(0, alias="object.serial")


def project_props(event: Event, schema: type[P], expected: EventType) -> P:
    """
    Narrow the props of ``event`` to ``schema``.

    Raises:
        TypeMismatchError: The event is not of the ``expected`` interface kind.
        MissingInfoError: The event carries no info.
        ValueTypeMismatchError: A property value does not fit the type the
            schema declares for it. ``partial`` holds a zero-valued result.
    """
    if event.type != expected:
        raise TypeMismatchError(
            f"event {event.id} is {wire_value(event.type)!r}, not {expected.value!r}"
        )
    if event.info is None:
        raise MissingInfoError(f"event {event.id} has no info")
    if event.info.props is None:
        return schema()

    data = event.info.props.model_dump_json(by_alias=True, exclude_none=True)
    try:
        return schema.model_validate_json(data)
    except ValidationError as exc:
        raise ValueTypeMismatchError(
            f"props of event {event.id} do not fit {schema.__name__}: {exc}",
            partial=schema(),
        ) from exc


def node_props(event: Event) -> NodeProps:
    return project_props(event, NodeProps, EventType.NODE)


def port_props(event: Event) -> PortProps:
    return project_props(event, PortProps, EventType.PORT)


def link_props(event: Event) -> LinkProps:
    return project_props(event, LinkProps, EventType.LINK)
