"""NUID (NATS) decoder. No binary layout; the character bytes stand in."""

from __future__ import annotations

import re
import threading

from nats.nuid import NUID

from idinfo.decoders.common import CHARACTER_BYTES
from idinfo.exceptions import DecodeError, GenerationError
from idinfo.models.domain import DecodedResult

_NUID_RE = re.compile(r"^[0-9A-Za-z]{22}$")
_MAX_ATTEMPTS = 64


class NUIDDecoder:
    def __init__(self) -> None:
        self._nuid = NUID()
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "NUID"

    def can_parse(self, text: str) -> bool:
        return len(text) == 22 and bool(_NUID_RE.match(text)) and text[0] != "0"

    def parse(self, text: str) -> DecodedResult:
        if not self.can_parse(text):
            raise DecodeError("NUID must be 22 base62 characters not starting with 0")

        raw = text.encode("ascii")
        return DecodedResult(
            format_name=self.name,
            description="NUID (NATS Unique Identifier)",
            canonical_string=text,
            size_bits=132,
            entropy_bits=132,
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes={
                "alphabet": "Base62 (0-9A-Za-z)",
                "length": "22 characters",
                "crypto_prefix": "12 characters crypto random",
                "sequential_part": "10 characters sequential",
                "url_safe": "true",
                "case_sensitive": "true",
                "sortable": "partially (by prefix)",
                "binary_encoding": CHARACTER_BYTES,
            },
        )

    def generate(self) -> str:
        # a prefix starting with '0' is valid NUID output but outside what can_parse accepts
        with self._lock:
            for _ in range(_MAX_ATTEMPTS):
                value = self._nuid.next().decode("ascii")
                if value[0] != "0":
                    return value
                self._nuid.randomize_prefix()
        raise GenerationError("NUID generator kept producing a leading '0'")
