"""
Generic property dictionary of a monitor event.

Every PipeWire object carries a free-form ``props`` object keyed by dotted
names. The daemon only emits the properties relevant to the object kind, and
update events only carry the properties that changed, so every field here is
optional: ``None`` means "not present in this record", which is distinct from
a property that is present with a zero value.

Property names that are not listed are dropped during decoding.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from pwmonitor.domain.enums import DeviceClassValue, MediaClassValue


class EventInfoProps(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    adapt_follower_spa_node: Optional[StrictStr] = Field(None, alias="adapt.follower.spa-node")
    application_icon_name: Optional[StrictStr] = Field(None, alias="application.icon-name")
    application_id: Optional[StrictStr] = Field(None, alias="application.id")
    application_name: Optional[StrictStr] = Field(None, alias="application.name")
    application_process_binary: Optional[StrictStr] = Field(None, alias="application.process.binary")
    application_process_id: Optional[StrictInt] = Field(None, alias="application.process.id")
    audio_channel: Optional[StrictStr] = Field(None, alias="audio.channel")
    audio_channels: Optional[StrictInt] = Field(None, alias="audio.channels")
    audio_position: Optional[StrictStr] = Field(None, alias="audio.position")
    client_id: Optional[StrictInt] = Field(None, alias="client.id")
    clock_quantum_limit: Optional[StrictInt] = Field(None, alias="clock.quantum-limit")
    device_api: Optional[StrictStr] = Field(None, alias="device.api")
    device_class: Optional[DeviceClassValue] = Field(None, alias="device.class")
    device_id: Optional[StrictInt] = Field(None, alias="device.id")
    device_profile_description: Optional[StrictStr] = Field(None, alias="device.profile.description")
    device_profile_name: Optional[StrictStr] = Field(None, alias="device.profile.name")
    factory_id: Optional[StrictInt] = Field(None, alias="factory.id")
    factory_mode: Optional[StrictStr] = Field(None, alias="factory.mode")
    factory_name: Optional[StrictStr] = Field(None, alias="factory.name")
    format_dsp: Optional[StrictStr] = Field(None, alias="format.dsp")
    library_name: Optional[StrictStr] = Field(None, alias="library.name")
    link_input_node: Optional[StrictInt] = Field(None, alias="link.input.node")
    link_input_port: Optional[StrictInt] = Field(None, alias="link.input.port")
    link_output_node: Optional[StrictInt] = Field(None, alias="link.output.node")
    link_output_port: Optional[StrictInt] = Field(None, alias="link.output.port")
    link_passive: Optional[StrictBool] = Field(None, alias="link.passive")
    media_category: Optional[StrictStr] = Field(None, alias="media.category")
    media_class: Optional[MediaClassValue] = Field(None, alias="media.class")
    media_name: Optional[StrictStr] = Field(None, alias="media.name")
    media_role: Optional[StrictStr] = Field(None, alias="media.role")
    media_type: Optional[StrictStr] = Field(None, alias="media.type")
    node_always_process: Optional[StrictBool] = Field(None, alias="node.always-process")
    node_autoconnect: Optional[StrictBool] = Field(None, alias="node.autoconnect")
    node_description: Optional[StrictStr] = Field(None, alias="node.description")
    node_id: Optional[StrictInt] = Field(None, alias="node.id")
    node_loop_name: Optional[StrictStr] = Field(None, alias="node.loop.name")
    node_name: Optional[StrictStr] = Field(None, alias="node.name")
    node_nick: Optional[StrictStr] = Field(None, alias="node.nick")
    node_rate: Optional[StrictStr] = Field(None, alias="node.rate")
    node_want_driver: Optional[StrictBool] = Field(None, alias="node.want-driver")
    object_id: Optional[StrictInt] = Field(None, alias="object.id")
    object_path: Optional[StrictStr] = Field(None, alias="object.path")
    object_register: Optional[StrictBool] = Field(None, alias="object.register")
    object_serial: Optional[StrictInt] = Field(None, alias="object.serial")
    port_alias: Optional[StrictStr] = Field(None, alias="port.alias")
    port_direction: Optional[StrictStr] = Field(None, alias="port.direction")
    port_group: Optional[StrictStr] = Field(None, alias="port.group")
    port_id: Optional[StrictInt] = Field(None, alias="port.id")
    port_monitor: Optional[StrictBool] = Field(None, alias="port.monitor")
    port_name: Optional[StrictStr] = Field(None, alias="port.name")
    port_physical: Optional[StrictBool] = Field(None, alias="port.physical")
    port_terminal: Optional[StrictBool] = Field(None, alias="port.terminal")
    stream_is_live: Optional[StrictBool] = Field(None, alias="stream.is-live")

    def get(self, wire_name: str):
        """Return the value of a property by its dotted wire name, or ``None``."""
        field_name = wire_to_field(type(self)).get(wire_name)
        if field_name is None:
            return None
        return getattr(self, field_name)

    def present(self) -> dict:
        """The properties carried by this record, keyed by wire name."""
        return self.model_dump(by_alias=True, exclude_none=True)


def wire_names(model: type[BaseModel]) -> dict[str, str]:
    """Map each field of ``model`` to the dotted wire name it is decoded from."""
    return {name: info.alias or name for name, info in model.model_fields.items()}


def wire_to_field(model: type[BaseModel]) -> dict[str, str]:
    return {wire: name for name, wire in wire_names(model).items()}


__all__ = ["EventInfoProps", "wire_names", "wire_to_field"]
