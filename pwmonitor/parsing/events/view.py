from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pwmonitor.domain.enums import EventType, State, is_known
from pwmonitor.errors import ProjectionError, ValueTypeMismatchError
from pwmonitor.parsing.events.model import Event
from pwmonitor.parsing.events.projection import LinkProps, NodeProps, PortProps, link_props, node_props, port_props
from pwmonitor.parsing.events.removal import is_removal_event
from pwmonitor.runtime.logging import get_logger


class EventView:
    def __init__(self, event: Event) -> None:
        self.event = event

    # --- raw accessors ---
    @property
    def id(self) -> int:
        return self.event.id

    @property
    def type(self) -> EventType | str:
        return self.event.type

    @property
    def captured_at(self) -> Optional[datetime]:
        return self.event.captured_at

    # --- lifecycle ---
    @property
    def is_removal(self) -> bool:
        return is_removal_event(self.event)

    @property
    def is_node(self) -> bool:
        return self.event.type == EventType.NODE

    @property
    def is_port(self) -> bool:
        return self.event.type == EventType.PORT

    @property
    def is_link(self) -> bool:
        return self.event.type == EventType.LINK

    @property
    def state(self) -> Optional[State | str]:
        return self.event.info.state if self.event.info else None

    @property
    def has_known_state(self) -> bool:
        return self.state is not None and is_known(State, self.state)

    def changed(self, field: str) -> bool:
        """Tell whether ``field`` is listed in the change mask of the event."""
        if self.event.info is None:
            return False
        return field in self.event.info.change_mask

    # --- props ---
    def prop(self, wire_name: str) -> Any:
        if self.event.info is None or self.event.info.props is None:
            return None
        return self.event.info.props.get(wire_name)

    # --- projections ---
    def _project(self, projector) -> Any:
        """Missing info or another interface kind give None; a value mismatch gives the zero-valued result."""
        try:
            return projector(self.event)
        except ValueTypeMismatchError as exc:
            get_logger().warning("projection_failed", extra={"details": {"id": self.event.id, "error": str(exc)}})
            return exc.partial
        except ProjectionError:
            return None

    @property
    def node(self) -> Optional[NodeProps]:
        return self._project(node_props)

    @property
    def port(self) -> Optional[PortProps]:
        return self._project(port_props)

    @property
    def link(self) -> Optional[LinkProps]:
        return self._project(link_props)
