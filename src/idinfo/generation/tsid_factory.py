"""TSID factory: 42-bit ms since 2020-01-01 | 22-bit random-start counter."""

from __future__ import annotations

import secrets
import threading
import time
from typing import Callable

import base32_crockford

from idinfo.config.constants import TSID_EPOCH_MS

RANDOM_BITS = 22
RANDOM_MASK = (1 << RANDOM_BITS) - 1


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def encode_tsid(number: int) -> str:
    return base32_crockford.encode(number).rjust(13, "0")


class TSIDFactory:
    """Monotonic within a millisecond: the 22-bit tail starts random and increments."""

    def __init__(self, clock: Callable[[], int] = _now_ms, epoch_ms: int = TSID_EPOCH_MS) -> None:
        self._clock = clock
        self._epoch_ms = epoch_ms
        self._lock = threading.Lock()
        self._last_ms = -1
        self._tail = 0

    def generate(self) -> str:
        with self._lock:
            now = max(self._clock(), self._last_ms)
            if now == self._last_ms:
                self._tail += 1
                if self._tail > RANDOM_MASK:
                    now += 1
                    self._tail = secrets.randbits(RANDOM_BITS)
            else:
                self._tail = secrets.randbits(RANDOM_BITS)
            self._last_ms = now
            number = (now - self._epoch_ms) << RANDOM_BITS | self._tail
        return encode_tsid(number)
