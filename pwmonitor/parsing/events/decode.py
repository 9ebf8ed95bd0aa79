from __future__ import annotations

import datetime as dt
import json
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import ValidationError

from pwmonitor.domain.enums import EventType, is_known, wire_value
from pwmonitor.errors import DecodeError
from pwmonitor.parsing.events.model import Event, EventSnapshot
from pwmonitor.runtime.config import get_settings
from pwmonitor.runtime.logging import get_logger

Record = Union[Mapping[str, Any], str, bytes, bytearray]


def _receipt_time(captured_at: Optional[dt.datetime]) -> Optional[dt.datetime]:
    if captured_at is not None:
        return captured_at
    if get_settings().capture_timestamps:
        return dt.datetime.now(dt.UTC)
    return None


def decode_event(record: Record, captured_at: Optional[dt.datetime] = None) -> Event:
    """
    Decode one monitor record into an :class:`Event`.

    Args:
        record: A decoded JSON object, or the JSON text of one object.
        captured_at: When the record was received. Defaults to the current
            UTC time unless timestamp capture is disabled in the settings.

    Raises:
        DecodeError: The text is not valid JSON, the record is not an object,
            or a known field holds a value of the wrong type.
    """
    if not isinstance(record, (str, bytes, bytearray, Mapping)):
        get_logger().warning(
            "event_decode_failed",
            extra={"details": {"errors": 1, "first": f"unsupported record type {type(record).__name__}"}},
        )
        raise DecodeError(f"Expected a JSON object, got {type(record).__name__}")
    try:
        if isinstance(record, Mapping):
            event = Event.model_validate(dict(record))
        else:
            event = Event.model_validate_json(record)
    except ValidationError as exc:
        get_logger().warning(
            "event_decode_failed",
            extra={"details": {"errors": exc.error_count(), "first": exc.errors()[0]["msg"]}},
        )
        raise DecodeError(f"Failed to decode monitor event: {exc}") from exc

    if not is_known(EventType, event.type):
        get_logger().debug("unknown_event_type", extra={"details": {"id": event.id, "type": wire_value(event.type)}})
    return event.stamp(_receipt_time(captured_at))


def decode_events(records: Union[Iterable[Record], str, bytes], captured_at: Optional[dt.datetime] = None) -> list[Event]:
    """
    Decode a batch of records, such as the JSON array printed for one
    monitor update. All events of the batch share the same receipt time.
    """
    if isinstance(records, (str, bytes, bytearray)):
        try:
            records = json.loads(records)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"Failed to parse monitor batch: {exc}") from exc
        if not isinstance(records, list):
            raise DecodeError("Monitor batch must be a JSON array")
    received_at = _receipt_time(captured_at)
    return [decode_event(record, captured_at=received_at) for record in records]


def build_event_snapshot(record: Record, captured_at: Optional[dt.datetime] = None) -> EventSnapshot:
    received_at = _receipt_time(captured_at)
    try:
        event = decode_event(record, captured_at=received_at)
    except DecodeError as exc:
        return EventSnapshot(raw=record, received_at=received_at, errors=[f"decode_failed: {exc}"])

    warnings: list[str] = []
    if not is_known(EventType, event.type):
        warnings.append(f"unknown event type: {wire_value(event.type)}")
    return EventSnapshot(raw=record, received_at=received_at, event=event, warnings=warnings)
