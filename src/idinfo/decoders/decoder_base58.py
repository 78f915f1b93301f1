"""Bitcoin-alphabet Base58 decoder."""

from __future__ import annotations

import re
import secrets

import base58

from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_BASE58_RE = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{8,60}$")
_DIGITS_RE = re.compile(r"^[1-9]+$")
_LETTERS_RE = re.compile(r"^[A-HJ-NP-Za-km-z]+$")


def _possible_type(decoded: bytes) -> str | None:
    if len(decoded) == 25 and decoded[0] == 0x00:
        return "Bitcoin P2PKH Address"
    if len(decoded) == 25 and decoded[0] == 0x05:
        return "Bitcoin P2SH Address"
    if len(decoded) >= 32:
        return "Hash or Key"
    return None


class Base58Decoder:
    @property
    def name(self) -> str:
        return "Base58"

    def can_parse(self, text: str) -> bool:
        if not _BASE58_RE.match(text):
            return False
        # short all-digit or all-letter strings are far more likely numbers or words
        if _DIGITS_RE.match(text) and len(text) < 15:
            return False
        if _LETTERS_RE.match(text) and len(text) < 10:
            return False
        return True

    def parse(self, text: str) -> DecodedResult:
        if not self.can_parse(text):
            raise DecodeError("Base58 must be 8-60 characters of the Bitcoin alphabet")
        try:
            decoded = base58.b58decode(text)
        except ValueError as e:
            raise DecodeError(f"invalid Base58: {e}") from e

        extra = {
            "alphabet": "Base58 (Bitcoin style)",
            "decoded_size": f"{len(decoded)} bytes",
            "encoding": "Base58",
        }
        possible = _possible_type(decoded)
        if possible:
            extra["possible_type"] = possible
        return DecodedResult(
            format_name=self.name,
            description="Base58",
            canonical_string=text,
            size_bits=len(decoded) * 8,
            entropy_bits=int(len(text) * 5.858),
            hex_representation=decoded.hex(),
            binary_bytes=decoded,
            extra_attributes=extra,
        )

    def generate(self) -> str:
        return base58.b58encode(secrets.token_bytes(32)).decode("ascii")
