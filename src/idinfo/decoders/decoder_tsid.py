"""TSID decoder: 13 Crockford Base32 characters holding a 64-bit integer."""

from __future__ import annotations

import re

import base32_crockford

from idinfo.config.constants import TSID_EPOCH_MS
from idinfo.decoders.common import datetime_from_ms, seconds_label
from idinfo.exceptions import DecodeError
from idinfo.generation.tsid_factory import TSIDFactory
from idinfo.models.domain import DecodedResult

# Crockford alphabet plus the ambiguous I, L and O, case-insensitive
_TSID_RE = re.compile(r"^[0-9A-HJ-KM-NP-TV-ZILO]{13}$")


class TSIDDecoder:
    def __init__(self, factory: TSIDFactory | None = None) -> None:
        self._factory = factory or TSIDFactory()

    @property
    def name(self) -> str:
        return "TSID"

    def can_parse(self, text: str) -> bool:
        text = text.strip().upper()
        # 13 symbols carry 65 bits; the leading symbol must leave the value under 2^64
        return bool(_TSID_RE.match(text)) and base32_crockford.decode(text) < 1 << 64

    def parse(self, text: str) -> DecodedResult:
        text = text.strip()
        if not self.can_parse(text):
            raise DecodeError("TSID must be 13 Crockford Base32 characters encoding a 64-bit value")

        number = base32_crockford.decode(text.upper())
        time_component = number >> 22
        random_component = number & 0x3FFFFF
        unix_ms = time_component + TSID_EPOCH_MS
        raw = number.to_bytes(8, "big")
        return DecodedResult(
            format_name=self.name,
            description="TSID (Time-Sorted Unique Identifier)",
            canonical_string=text.upper(),
            integer_value=str(number),
            size_bits=64,
            entropy_bits=22,
            timestamp=datetime_from_ms(unix_ms),
            timestamp_value=seconds_label(unix_ms),
            node_fields=(str(random_component),),
            hex_representation=f"{number:016x}",
            binary_bytes=raw,
            extra_attributes={
                "encoding": "Crockford Base32",
                "timestamp_precision": "millisecond",
                "epoch": "2020-01-01T00:00:00Z (default)",
                "sortable": "true",
                "structure": "42-bit timestamp + 22-bit random",
                "timestamp_bits": "42",
                "random_bits": "22",
                "random_value": str(random_component),
                "time_component": str(time_component),
                "case_insensitive": "true",
            },
        )

    def generate(self) -> str:
        return self._factory.generate()
