from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, StrictInt, StrictStr, field_validator

from pwmonitor.domain.enums import EventType, EventTypeValue, StateValue
from pwmonitor.parsing.events.params import EventParams
from pwmonitor.parsing.events.props import EventInfoProps
from pwmonitor.parsing.events.removal import is_removal_event


class EventInfo(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    direction: Optional[StrictStr] = None
    change_mask: list[StrictStr] = Field(default_factory=list, alias="change-mask")
    props: Optional[EventInfoProps] = None
    params: Optional[EventParams] = None
    state: Optional[StateValue] = None
    error: Optional[Any] = None

    # Link info
    output_node_id: Optional[StrictInt] = Field(None, alias="output-node-id")
    output_port_id: Optional[StrictInt] = Field(None, alias="output-port-id")
    input_node_id: Optional[StrictInt] = Field(None, alias="input-node-id")
    input_port_id: Optional[StrictInt] = Field(None, alias="input-port-id")

    # Node info
    max_input_ports: Optional[StrictInt] = Field(None, alias="max-input-ports")
    max_output_ports: Optional[StrictInt] = Field(None, alias="max-output-ports")
    n_input_ports: Optional[StrictInt] = Field(None, alias="n-input-ports")
    n_output_ports: Optional[StrictInt] = Field(None, alias="n-output-ports")

    @field_validator("change_mask", mode="before")
    @classmethod
    def _null_mask(cls, value: Any) -> Any:
        return [] if value is None else value


class Event(BaseModel):
    """
    One record of the monitor stream.

    ``info`` is ``None`` when the object was removed, or when the interface
    kind carries no info payload. ``captured_at`` never comes from the wire;
    it is set when the record is received.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: StrictInt = 0
    type: EventTypeValue = EventType.EMPTY
    version: StrictInt = 0
    info: Optional[EventInfo] = None
    permissions: list[StrictStr] = Field(default_factory=list)

    _captured_at: Optional[datetime] = PrivateAttr(default=None)

    @field_validator("id", "version", mode="before")
    @classmethod
    def _null_int(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("type", mode="before")
    @classmethod
    def _null_type(cls, value: Any) -> Any:
        return EventType.EMPTY if value is None else value

    @field_validator("permissions", mode="before")
    @classmethod
    def _null_permissions(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def captured_at(self) -> Optional[datetime]:
        return self._captured_at

    def stamp(self, captured_at: Optional[datetime]) -> "Event":
        """Record when the event was received. Returns the event itself."""
        self._captured_at = captured_at
        return self

    @property
    def is_removal(self) -> bool:
        return is_removal_event(self)


@dataclass
class EventSnapshot:
    raw: Any
    received_at: Optional[datetime]
    event: Optional[Event] = None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.event is not None and not self.errors
