"""Thread-safe Snowflake node: 41-bit ms timestamp | 10-bit node | 12-bit step."""

from __future__ import annotations

import threading
import time
from typing import Callable

from idinfo.config.constants import TWITTER_EPOCH_MS
from idinfo.exceptions import ConfigurationError, GenerationError

NODE_BITS = 10
STEP_BITS = 12
TIMESTAMP_BITS = 41
MAX_NODE = (1 << NODE_BITS) - 1
MAX_STEP = (1 << STEP_BITS) - 1


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class SnowflakeNode:
    """Generates Snowflake IDs for one node.

    Step and last-timestamp state are guarded by a lock so one node can be
    shared across threads. When the 12-bit step overflows within a
    millisecond, generation waits for the clock to advance.
    """

    def __init__(
        self,
        node_id: int = 1,
        epoch_ms: int = TWITTER_EPOCH_MS,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        if not 0 <= node_id <= MAX_NODE:
            raise ConfigurationError(f"Snowflake node id must be between 0 and {MAX_NODE}, got {node_id}")
        self.node_id = node_id
        self.epoch_ms = epoch_ms
        self._clock = clock
        self._lock = threading.Lock()
        self._last_ms = -1
        self._step = 0

    def _wait_next_ms(self, last_ms: int) -> int:
        now = self._clock()
        while now <= last_ms:
            time.sleep(0.0001)
            now = self._clock()
        return now

    def generate(self) -> int:
        with self._lock:
            now = self._clock()
            if now < self._last_ms:
                # clock moved backwards; keep issuing from the last timestamp
                now = self._last_ms
            if now == self._last_ms:
                self._step = (self._step + 1) & MAX_STEP
                if self._step == 0:
                    now = self._wait_next_ms(self._last_ms)
            else:
                self._step = 0
            self._last_ms = now

            elapsed = now - self.epoch_ms
            if not 0 <= elapsed < (1 << TIMESTAMP_BITS):
                raise GenerationError(f"clock is outside the 41-bit range of epoch {self.epoch_ms}")
            return elapsed << (NODE_BITS + STEP_BITS) | self.node_id << STEP_BITS | self._step
