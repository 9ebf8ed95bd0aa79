from __future__ import annotations

from typing import TYPE_CHECKING

from pwmonitor.domain.enums import EventType

if TYPE_CHECKING:
    from pwmonitor.parsing.events.model import Event


def is_removal_event(event: "Event") -> bool:
    """
    Tell whether an event announces that an object was removed.

    The daemon reports a removal with a minimal record holding only the
    object id and a null info::

        {
            "id": 128,
            "info": null
        }

    A record with id 0 does not reference any object and is never a removal.
    """
    return event.info is None and event.type == EventType.EMPTY and event.id != 0
