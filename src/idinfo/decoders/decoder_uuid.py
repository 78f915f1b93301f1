"""UUID (RFC 9562) decoder covering versions 1-8 plus the Nil and Max UUIDs."""

from __future__ import annotations

import base64
import re
import uuid

from idinfo.decoders.common import big_int, describe_uuid, uuid_variant_label
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_UUID_RE = re.compile(
    r"^(?:[0-9a-fA-F]{32}"
    r"|[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12})$"
)


class UUIDDecoder:
    @property
    def name(self) -> str:
        return "UUID"

    def can_parse(self, text: str) -> bool:
        if not _UUID_RE.match(text):
            return False
        try:
            uuid.UUID(text)
        except ValueError:
            return False
        return True

    def parse(self, text: str) -> DecodedResult:
        if not _UUID_RE.match(text):
            raise DecodeError(f"'{text}' is neither 32 hex digits nor the 8-4-4-4-12 dashed form")
        try:
            u = uuid.UUID(text)
        except ValueError as e:
            raise DecodeError(f"invalid UUID: {e}") from e

        layout = describe_uuid(u)
        return DecodedResult(
            format_name=self.name,
            description="UUID (RFC-9562)",
            version=layout.version_label,
            canonical_string=str(u),
            integer_value=big_int(u.bytes),
            size_bits=128,
            entropy_bits=layout.entropy_bits,
            timestamp=layout.timestamp,
            timestamp_value=layout.timestamp_value,
            sequence=layout.sequence,
            node_fields=(layout.node,) if layout.node else (),
            hex_representation=u.hex,
            binary_bytes=u.bytes,
            base64=base64.b64encode(u.bytes).decode("ascii"),
            extra_attributes={"variant": uuid_variant_label(u)},
        )

    def generate(self) -> str:
        return str(uuid.uuid4())
