"""Hex-encoded hash digests, classified by length."""

from __future__ import annotations

import hashlib
import re
import secrets

from idinfo.config.constants import HASH_LENGTHS, HASH_STRENGTH
from idinfo.decoders.common import big_int
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


class HashHexDecoder:
    @property
    def name(self) -> str:
        return "HashHex"

    def can_parse(self, text: str) -> bool:
        return len(text) >= 8 and len(text) % 2 == 0 and bool(_HEX_RE.match(text))

    def parse(self, text: str) -> DecodedResult:
        if not self.can_parse(text):
            raise DecodeError("hash must be an even number (>= 8) of hex digits")

        raw = bytes.fromhex(text)
        algorithm = HASH_LENGTHS.get(len(text))
        extra = {
            "encoding": "hexadecimal",
            "byte_length": str(len(raw)),
            "deterministic": "depends on hash function",
        }
        if algorithm:
            strength, recommended = HASH_STRENGTH[algorithm]
            extra["probable_algorithm"] = algorithm
            extra["cryptographic_strength"] = strength
            extra["recommended_use"] = recommended
        label = algorithm or f"Hash ({len(raw) * 8} bits)"
        return DecodedResult(
            format_name=self.name,
            description=f"Hex-encoded {label}",
            canonical_string=text.upper(),
            integer_value=big_int(raw),
            size_bits=len(raw) * 8,
            entropy_bits=len(raw) * 8,
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes=extra,
        )

    def generate(self) -> str:
        return hashlib.sha256(secrets.token_bytes(32)).hexdigest()
