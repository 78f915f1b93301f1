"""RFC 4648 Base32 decoder, padded or unpadded."""

from __future__ import annotations

import base64
import binascii
import re
import secrets

from idinfo.config.constants import BASE32_SIZE_HINTS
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_BASE32_RE = re.compile(r"^[A-Z2-7]+=*$")


def _decode_base32(text: str) -> bytes:
    try:
        return base64.b32decode(text)
    except binascii.Error:
        unpadded = text.rstrip("=")
        return base64.b32decode(unpadded + "=" * (-len(unpadded) % 8))


class Base32Decoder:
    @property
    def name(self) -> str:
        return "Base32"

    def can_parse(self, text: str) -> bool:
        upper = text.upper()
        if not 8 <= len(upper) <= 64 or not _BASE32_RE.match(upper):
            return False
        try:
            _decode_base32(upper)
        except binascii.Error:
            return False
        return True

    def parse(self, text: str) -> DecodedResult:
        upper = text.strip().upper()
        if not 8 <= len(upper) <= 64 or not _BASE32_RE.match(upper):
            raise DecodeError("Base32 must be 8-64 characters of A-Z and 2-7 with optional padding")
        try:
            decoded = _decode_base32(upper)
        except binascii.Error as e:
            raise DecodeError(f"invalid Base32: {e}") from e

        extra = {
            "alphabet": "Base32 (A-Z, 2-7)",
            "decoded_size": f"{len(decoded)} bytes",
            "padding": f"{upper.count('=')} characters",
            "encoding": "RFC 4648 Base32",
        }
        if len(decoded) in BASE32_SIZE_HINTS:
            extra["possible_type"] = BASE32_SIZE_HINTS[len(decoded)]
        elif 8 <= len(decoded) <= 12:
            extra["possible_type"] = "Short identifier"
        return DecodedResult(
            format_name=self.name,
            description="Base32",
            canonical_string=upper,
            size_bits=len(decoded) * 8,
            entropy_bits=len(upper.rstrip("=")) * 5,
            hex_representation=decoded.hex(),
            binary_bytes=decoded,
            extra_attributes=extra,
        )

    def generate(self) -> str:
        return base64.b32encode(secrets.token_bytes(20)).decode("ascii")
