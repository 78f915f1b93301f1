"""SCRU128 decoder: 25 base36 digits holding a 128-bit integer.

Bit layout, most significant first:

    48-bit unix ms | 24-bit counter_hi | 24-bit counter_lo | 32-bit entropy
"""

from __future__ import annotations

import re

import scru128
from scru128 import Scru128Id

from idinfo.decoders.common import datetime_from_ms, seconds_label
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_SCRU128_RE = re.compile(r"^[0-9A-Za-z]{25}$")
_MAX_SCRU128 = (1 << 128) - 1


class SCRU128Decoder:
    @property
    def name(self) -> str:
        return "SCRU128"

    def can_parse(self, text: str) -> bool:
        return bool(_SCRU128_RE.match(text)) and int(text, 36) <= _MAX_SCRU128

    def parse(self, text: str) -> DecodedResult:
        if not self.can_parse(text):
            raise DecodeError("SCRU128 must be 25 base36 characters encoding a 128-bit value")
        try:
            canonical = str(Scru128Id.from_str(text))
        except ValueError as e:
            raise DecodeError(f"invalid SCRU128: {e}") from e

        value = int(text, 36)
        unix_ms = value >> 80
        counter_hi = (value >> 56) & 0xFFFFFF
        counter_lo = (value >> 32) & 0xFFFFFF
        entropy = value & 0xFFFFFFFF
        raw = value.to_bytes(16, "big")
        return DecodedResult(
            format_name=self.name,
            description="SCRU128 (Sortable, Clock and Random number-based Unique identifier)",
            canonical_string=canonical,
            integer_value=str(value),
            size_bits=128,
            entropy_bits=32,
            timestamp=datetime_from_ms(unix_ms),
            timestamp_value=seconds_label(unix_ms),
            sequence=(counter_hi << 24) | counter_lo,
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes={
                "encoding": "Base36",
                "timestamp_precision": "millisecond",
                "sortable": "true",
                "timestamp_bits": "48",
                "counter_hi_bits": "24",
                "counter_lo_bits": "24",
                "entropy_bits": "32",
                "counter_hi": str(counter_hi),
                "counter_lo": str(counter_lo),
                "entropy_value": f"{entropy:08x}",
            },
        )

    def generate(self) -> str:
        return scru128.new_string()
