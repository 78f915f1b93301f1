"""Snowflake decoder: 41-bit ms timestamp | 10-bit node | 12-bit step."""

from __future__ import annotations

import re
import threading

from idinfo.config.constants import TWITTER_EPOCH_MS
from idinfo.decoders.common import datetime_from_ms, seconds_label
from idinfo.exceptions import ConfigurationError, DecodeError
from idinfo.generation.snowflake_node import MAX_NODE, MAX_STEP, NODE_BITS, STEP_BITS, SnowflakeNode
from idinfo.models.domain import DecodedResult

_SNOWFLAKE_RE = re.compile(r"^\d{10,19}$")
_UINT64_MAX = (1 << 64) - 1


class SnowflakeDecoder:
    """Parses with a fixed epoch; generates through an explicitly owned node.

    When no node is passed one is created on first `generate()`, once,
    under a lock.
    """

    def __init__(
        self,
        node: SnowflakeNode | None = None,
        node_id: int = 1,
        epoch_ms: int = TWITTER_EPOCH_MS,
    ) -> None:
        if node is None and not 0 <= node_id <= MAX_NODE:
            raise ConfigurationError(f"Snowflake node id must be between 0 and {MAX_NODE}, got {node_id}")
        self._node = node
        self._node_id = node_id
        self._epoch_ms = node.epoch_ms if node else epoch_ms
        self._node_lock = threading.Lock()

    @property
    def name(self) -> str:
        return "Snowflake"

    @property
    def node(self) -> SnowflakeNode:
        if self._node is None:
            with self._node_lock:
                if self._node is None:
                    self._node = SnowflakeNode(node_id=self._node_id, epoch_ms=self._epoch_ms)
        return self._node

    def can_parse(self, text: str) -> bool:
        return bool(_SNOWFLAKE_RE.match(text)) and int(text) <= _UINT64_MAX

    def parse(self, text: str) -> DecodedResult:
        if not self.can_parse(text):
            raise DecodeError("Snowflake must be a 10-19 digit unsigned 64-bit integer")

        value = int(text)
        unix_ms = (value >> (NODE_BITS + STEP_BITS)) + self._epoch_ms
        node_id = (value >> STEP_BITS) & MAX_NODE
        step = value & MAX_STEP
        epoch = datetime_from_ms(self._epoch_ms)
        return DecodedResult(
            format_name=self.name,
            description="Snowflake",
            canonical_string=text,
            integer_value=text,
            size_bits=64,
            entropy_bits=22,
            timestamp=datetime_from_ms(unix_ms),
            timestamp_value=seconds_label(unix_ms),
            sequence=step,
            node_fields=(str(node_id),),
            hex_representation=f"{value:016x}",
            binary_bytes=value.to_bytes(8, "big"),
            extra_attributes={
                "epoch": epoch.isoformat().replace("+00:00", "Z") if epoch else str(self._epoch_ms),
                "timestamp_bits": "41",
                "node_bits": "10",
                "sequence_bits": "12",
                "node_id": str(node_id),
                "sequence_number": str(step),
            },
        )

    def generate(self) -> str:
        return str(self.node.generate())
