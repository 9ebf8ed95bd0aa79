"""
Parameter blocks attached to node and port info.

``info.params`` maps a fixed set of category names to lists of records. Each
category decodes on its own; a category missing from the record stays
``None`` and categories that are not listed here are ignored. Range and
choice values (``{"default": .., "min": .., "max": ..}``) are common in
enumerated formats and buffer requirements, so those fields are left untyped.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr


class _Param(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ParamEnumFormat(_Param):
    media_type: StrictStr = Field("", alias="mediaType")
    media_subtype: StrictStr = Field("", alias="mediaSubtype")
    format: Any = None


class ParamMeta(_Param):
    type: StrictStr = ""
    size: StrictInt = 0


class ParamIO(_Param):
    id: StrictStr = ""
    size: StrictInt = 0


class ParamFormat(_Param):
    media_type: StrictStr = Field("", alias="mediaType")
    media_subtype: StrictStr = Field("", alias="mediaSubtype")
    format: Any = None
    rate: Optional[StrictInt] = None
    channels: Optional[StrictInt] = None
    position: list[StrictStr] = Field(default_factory=list)


class ParamBuffers(_Param):
    buffers: Any = None
    blocks: Any = None
    size: Any = None
    stride: Any = None
    align: Any = None
    data_type: Any = Field(None, alias="dataType")


class ParamLatency(_Param):
    direction: StrictStr = ""
    min_quantum: StrictFloat = Field(0.0, alias="minQuantum")
    max_quantum: StrictFloat = Field(0.0, alias="maxQuantum")
    min_rate: StrictInt = Field(0, alias="minRate")
    max_rate: StrictInt = Field(0, alias="maxRate")
    min_ns: StrictInt = Field(0, alias="minNs")
    max_ns: StrictInt = Field(0, alias="maxNs")


class ParamTag(_Param):
    direction: StrictStr = ""
    info: Any = None


class EventParams(_Param):
    enum_format: Optional[list[ParamEnumFormat]] = Field(None, alias="EnumFormat")
    meta: Optional[list[ParamMeta]] = Field(None, alias="Meta")
    io: Optional[list[ParamIO]] = Field(None, alias="IO")
    format: Optional[list[ParamFormat]] = Field(None, alias="Format")
    buffers: Optional[list[ParamBuffers]] = Field(None, alias="Buffers")
    latency: Optional[list[ParamLatency]] = Field(None, alias="Latency")
    tag: Optional[list[ParamTag]] = Field(None, alias="Tag")

    def categories(self) -> list[str]:
        """Wire names of the categories present in this record."""
        return list(self.model_dump(by_alias=True, exclude_none=True))


__all__ = [
    "EventParams",
    "ParamBuffers",
    "ParamEnumFormat",
    "ParamFormat",
    "ParamIO",
    "ParamLatency",
    "ParamMeta",
    "ParamTag",
]
