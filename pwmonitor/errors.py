"""
Exception hierarchy for decoding and projecting monitor events.
"""
from __future__ import annotations

from typing import Any, Optional


class PwMonitorError(Exception):
    pass


class DecodeError(PwMonitorError, ValueError):
    """A record is not valid JSON or a known field carries the wrong type."""


class ProjectionError(PwMonitorError):
    """
    An event could not be narrowed to a typed property schema.

    Attributes:
        partial: A best-effort result with every field at its zero value, or
            ``None`` when the projection did not get far enough to build one.
    """

    def __init__(self, message: str, partial: Optional[Any] = None) -> None:
        super().__init__(message)
        self.partial = partial


class TypeMismatchError(ProjectionError):
    pass


class MissingInfoError(ProjectionError):
    pass


class ValueTypeMismatchError(ProjectionError):
    pass


__all__ = [
    "PwMonitorError",
    "DecodeError",
    "ProjectionError",
    "TypeMismatchError",
    "MissingInfoError",
    "ValueTypeMismatchError",
]
