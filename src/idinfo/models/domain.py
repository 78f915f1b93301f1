"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class DecodedResult:
    format_name: str
    description: str
    canonical_string: str
    size_bits: int
    hex_representation: str
    binary_bytes: bytes
    version: str = ""
    integer_value: str | None = None
    entropy_bits: int | None = None
    timestamp: datetime | None = None
    timestamp_value: str | None = None
    sequence: int | None = None
    node_fields: tuple[str, ...] = ()
    base64: str | None = None
    extra_attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra_attributes", MappingProxyType(dict(self.extra_attributes)))

    @property
    def node1(self) -> str | None:
        return self.node_fields[0] if len(self.node_fields) > 0 else None

    @property
    def node2(self) -> str | None:
        return self.node_fields[1] if len(self.node_fields) > 1 else None


@dataclass
class TimestampComparison:
    format_name: str
    description: str
    timestamp: datetime
    is_now: bool
    is_future: bool
