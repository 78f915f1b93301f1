"""ShortUUID decoder: a UUID in 22 characters of the base57 alphabet."""

from __future__ import annotations

import shortuuid

from idinfo.decoders.common import big_int, describe_uuid
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult


class ShortUUIDDecoder:
    @property
    def name(self) -> str:
        return "ShortUUID"

    def can_parse(self, text: str) -> bool:
        if len(text) != 22:
            return False
        try:
            shortuuid.decode(text)
        except ValueError:
            return False
        return True

    def parse(self, text: str) -> DecodedResult:
        if len(text) != 22:
            raise DecodeError("ShortUUID must be 22 characters")
        try:
            embedded = shortuuid.decode(text)
        except ValueError as e:
            raise DecodeError(f"invalid ShortUUID: {e}") from e

        raw = embedded.bytes
        return DecodedResult(
            format_name=self.name,
            description="ShortUUID",
            canonical_string=text,
            integer_value=big_int(raw),
            size_bits=128,
            entropy_bits=122,
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes={
                "alphabet": "Base57 (no ambiguous characters)",
                "length": "22 characters",
                "reversible": "true",
                "original_uuid": str(embedded),
                "uuid_version": describe_uuid(embedded).version_label,
                "url_safe": "true",
                "case_sensitive": "true",
            },
        )

    def generate(self) -> str:
        return shortuuid.uuid()
