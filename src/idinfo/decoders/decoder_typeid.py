"""TypeID decoder: a type prefix, an underscore and a UUID in lowercase Crockford Base32."""

from __future__ import annotations

import re
import uuid

import base32_crockford
from typeid import TypeID

from idinfo.config.constants import TYPEID_PREFIX_DESCRIPTIONS
from idinfo.decoders.common import big_int, describe_uuid, uuid_version_nibble
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_TYPEID_RE = re.compile(r"^(?P<prefix>[a-z](?:[a-z_]{0,61}[a-z])?)_(?P<suffix>[0-7][0-9a-hjkmnp-tv-z]{25})$")


class TypeIDDecoder:
    def __init__(self, prefix: str = "demo") -> None:
        self._prefix = prefix

    @property
    def name(self) -> str:
        return "TypeID"

    def can_parse(self, text: str) -> bool:
        return len(text) >= 28 and bool(_TYPEID_RE.match(text))

    def parse(self, text: str) -> DecodedResult:
        match = _TYPEID_RE.match(text)
        if match is None:
            raise DecodeError("TypeID must be <prefix>_<26-char lowercase base32 suffix>")

        prefix = match.group("prefix")
        suffix = match.group("suffix")
        embedded = uuid.UUID(int=base32_crockford.decode(suffix))
        layout = describe_uuid(embedded)
        version = uuid_version_nibble(embedded)
        entropy = layout.entropy_bits if version in (4, 7) else 128

        extra = {
            "type_prefix": prefix,
            "suffix": suffix,
            "uuid": str(embedded),
            "uuid_version": layout.version_label,
            "alphabet": "Crockford Base32 (lowercase)",
            "url_safe": "true",
            "sortable": "true" if version == 7 else "false",
        }
        if prefix in TYPEID_PREFIX_DESCRIPTIONS:
            extra["type_description"] = TYPEID_PREFIX_DESCRIPTIONS[prefix]

        raw = embedded.bytes
        return DecodedResult(
            format_name=self.name,
            description="TypeID (type-safe K-sortable identifier)",
            version=layout.version_label if version == 7 else "",
            canonical_string=text,
            integer_value=big_int(raw),
            size_bits=128,
            entropy_bits=entropy,
            timestamp=layout.timestamp if version == 7 else None,
            timestamp_value=layout.timestamp_value if version == 7 else None,
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes=extra,
        )

    def generate(self) -> str:
        return str(TypeID(prefix=self._prefix))
