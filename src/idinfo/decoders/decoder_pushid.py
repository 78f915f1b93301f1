"""Firebase PushID decoder and generator.

A PushID is 8 characters of millisecond timestamp followed by 12 random
characters, both in a 64-character alphabet that sorts in ASCII order.
"""

from __future__ import annotations

import re
import secrets
import threading
import time
from typing import Callable

from idinfo.config.constants import PUSHID_ALPHABET
from idinfo.decoders.common import CHARACTER_BYTES, datetime_from_ms
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_PUSHID_RE = re.compile(r"^[-0-9A-Z_a-z]{20}$")
_YEAR_2000_MS = 946684800000
_YEAR_2100_MS = 4102444800000


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def decode_push_timestamp(prefix: str) -> int:
    value = 0
    for char in prefix:
        value = value * 64 + PUSHID_ALPHABET.index(char)
    return value


class PushIDDecoder:
    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._last_ms = -1
        self._last_random: list[int] = []

    @property
    def name(self) -> str:
        return "PushID"

    def can_parse(self, text: str) -> bool:
        return len(text) == 20 and bool(_PUSHID_RE.match(text))

    def parse(self, text: str) -> DecodedResult:
        if not self.can_parse(text):
            raise DecodeError("PushID must be 20 characters of the Firebase alphabet")

        ms = decode_push_timestamp(text[:8])
        extra = {
            "alphabet": "Firebase PushID (64 characters)",
            "length": "20 characters",
            "format": "8 chars timestamp + 12 chars random",
            "binary_encoding": CHARACTER_BYTES,
        }
        timestamp = None
        if _YEAR_2000_MS <= ms <= _YEAR_2100_MS:
            timestamp = datetime_from_ms(ms)
            extra["timestamp_part"] = text[:8]
            extra["random_part"] = text[8:]

        raw = text.encode("ascii")
        return DecodedResult(
            format_name=self.name,
            description="Firebase PushID",
            canonical_string=text,
            size_bits=120,
            entropy_bits=120,
            timestamp=timestamp,
            timestamp_value=str(ms) if timestamp else None,
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes=extra,
        )

    def generate(self) -> str:
        with self._lock:
            now = self._clock()
            if now == self._last_ms:
                # same millisecond: increment the random tail so ids stay ordered
                for i in range(11, -1, -1):
                    if self._last_random[i] != 63:
                        self._last_random[i] += 1
                        break
                    self._last_random[i] = 0
            else:
                self._last_ms = now
                self._last_random = [secrets.randbelow(64) for _ in range(12)]
            random_part = list(self._last_random)

        stamp = []
        for _ in range(8):
            stamp.append(PUSHID_ALPHABET[now % 64])
            now //= 64
        return "".join(reversed(stamp)) + "".join(PUSHID_ALPHABET[i] for i in random_part)
