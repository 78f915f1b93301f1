"""CUID2 decoder. CUID2 has no binary layout; the character bytes stand in."""

from __future__ import annotations

import re

from cuid2 import cuid_wrapper

from idinfo.config.constants import CUID2_ALPHABET
from idinfo.decoders.common import CHARACTER_BYTES
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_CUID2_RE = re.compile(r"^[a-z][0-9a-z]{3,31}$")


class CUIDDecoder:
    def __init__(self) -> None:
        self._generate = cuid_wrapper()

    @property
    def name(self) -> str:
        return "CUID"

    def can_parse(self, text: str) -> bool:
        return 4 <= len(text) <= 32 and bool(_CUID2_RE.match(text))

    def parse(self, text: str) -> DecodedResult:
        if not self.can_parse(text):
            raise DecodeError("CUID2 must be 4-32 lowercase alphanumerics starting with a letter")

        raw = text.encode("ascii")
        return DecodedResult(
            format_name=self.name,
            description="CUID v2 (Collision-resistant Unique Identifier)",
            canonical_string=text,
            size_bits=len(text) * 6,
            entropy_bits=int(len(text) * 5.2),
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes={
                "version": "2",
                "encoding": "Base36 (lowercase)",
                "collision_resistant": "true",
                "cryptographically_secure": "true",
                "url_safe": "true",
                "length": str(len(text)),
                "alphabet": CUID2_ALPHABET,
                "alphabet_size": str(len(CUID2_ALPHABET)),
                "binary_encoding": CHARACTER_BYTES,
            },
        )

    def generate(self) -> str:
        return self._generate()
