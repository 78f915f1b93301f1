"""KSUID decoder: 32-bit seconds since the KSUID epoch plus a 128-bit payload."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Callable

from ksuid import Ksuid

from idinfo.config.constants import KSUID_EPOCH_SECONDS, KSUID_MAX_STRING
from idinfo.decoders.common import big_int, counter_from, datetime_from_ms
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_KSUID_RE = re.compile(r"^[0-9A-Za-z]{27}$")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class KSUIDDecoder:
    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock

    @property
    def name(self) -> str:
        return "KSUID"

    def can_parse(self, text: str) -> bool:
        # base62 digits sort in ASCII order, so the bound check is a string compare
        return bool(_KSUID_RE.match(text)) and text <= KSUID_MAX_STRING

    def parse(self, text: str) -> DecodedResult:
        if not self.can_parse(text):
            raise DecodeError("KSUID must be 27 base62 characters not above the 160-bit maximum")
        try:
            raw = bytes(Ksuid.from_base62(text))
        except ValueError as e:
            raise DecodeError(f"invalid KSUID: {e}") from e
        if len(raw) != 20:
            raise DecodeError(f"KSUID decoded to {len(raw)} bytes, expected 20")

        seconds = counter_from(raw[:4]) + KSUID_EPOCH_SECONDS
        return DecodedResult(
            format_name=self.name,
            description="KSUID (K-Sortable Unique Identifier)",
            canonical_string=text,
            integer_value=big_int(raw),
            size_bits=160,
            entropy_bits=128,
            timestamp=datetime_from_ms(seconds * 1000),
            timestamp_value=f"{seconds:.3f}",
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes={
                "encoding": "Base62",
                "timestamp_precision": "second",
                "epoch": "2014-05-13T16:53:20Z",
                "sortable": "true",
                "payload_bytes": "16",
                "payload": raw[4:].hex(),
            },
        )

    def generate(self) -> str:
        return str(Ksuid(datetime=self._clock()))
