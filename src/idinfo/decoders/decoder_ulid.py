"""ULID decoder: 48-bit millisecond timestamp followed by 80 random bits."""

from __future__ import annotations

import re
import time
from typing import Callable

from ulid import ULID

from idinfo.decoders.common import big_int, datetime_from_ms, seconds_label
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_ULID_RE = re.compile(r"^[0-7][0-9A-HJKMNP-TV-Z]{25}$")


class ULIDDecoder:
    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    @property
    def name(self) -> str:
        return "ULID"

    def can_parse(self, text: str) -> bool:
        return len(text) == 26 and bool(_ULID_RE.match(text))

    def parse(self, text: str) -> DecodedResult:
        if not self.can_parse(text):
            raise DecodeError("ULID must be 26 Crockford Base32 characters starting with 0-7")
        try:
            value = ULID.from_str(text)
        except ValueError as e:
            raise DecodeError(f"invalid ULID: {e}") from e

        raw = value.bytes
        ms = int.from_bytes(raw[:6], "big")
        return DecodedResult(
            format_name=self.name,
            description="ULID (Universally Unique Lexicographically Sortable Identifier)",
            canonical_string=str(value),
            integer_value=big_int(raw),
            size_bits=128,
            entropy_bits=80,
            timestamp=datetime_from_ms(ms),
            timestamp_value=seconds_label(ms),
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes={
                "encoding": "Crockford Base32",
                "timestamp_precision": "millisecond",
                "sortable": "true",
            },
        )

    def generate(self) -> str:
        return str(ULID.from_timestamp(float(self._clock())))
