"""Pydantic models for JSON serialization of decoded results."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from idinfo.models.domain import DecodedResult


class DecodedResultSchema(BaseModel):
    format_name: str
    description: str
    version: str | None = None
    canonical_string: str
    integer_value: str | None = None
    size_bits: int
    entropy_bits: int | None = None
    timestamp: datetime | None = None
    timestamp_value: str | None = None
    sequence: int | None = None
    node_fields: list[str] | None = None
    hex_representation: str
    base64: str | None = None
    extra_attributes: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, result: DecodedResult) -> DecodedResultSchema:
        return cls(
            format_name=result.format_name,
            description=result.description,
            version=result.version or None,
            canonical_string=result.canonical_string,
            integer_value=result.integer_value,
            size_bits=result.size_bits,
            entropy_bits=result.entropy_bits,
            timestamp=result.timestamp,
            timestamp_value=result.timestamp_value,
            sequence=result.sequence,
            node_fields=list(result.node_fields) or None,
            hex_representation=result.hex_representation,
            base64=result.base64,
            extra_attributes=dict(result.extra_attributes),
        )

    def to_json(self) -> str:
        return self.model_dump_json(indent=2, exclude_none=True)
