"""Unix timestamp decoder with second/milli/micro/nanosecond unit disambiguation."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Callable

from idinfo.config.constants import UNIX_EPOCH
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_UNIXTIME_RE = re.compile(r"^(0|\d{10,19})$")
_UINT64_MAX = (1 << 64) - 1
_INT64_MAX = (1 << 63) - 1

# (unit, precision, microseconds per tick)
_UNITS = [
    ("seconds", "second", 1_000_000),
    ("milliseconds", "millisecond", 1_000),
    ("microseconds", "microsecond", 1),
    ("nanoseconds", "nanosecond", None),
]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_datetime(value: int, micros_per_tick: int | None) -> datetime | None:
    try:
        if micros_per_tick is None:
            return UNIX_EPOCH + timedelta(microseconds=value // 1000)
        return UNIX_EPOCH + timedelta(microseconds=value * micros_per_tick)
    except OverflowError:
        return None


def resolve_unit(value: int, now: datetime) -> tuple[datetime | None, str, str]:
    """Pick the unit whose reading lands in 1970-2100 and is closest to now.

    Falls back to seconds when no reading qualifies. Ties keep the earlier
    (coarser) unit.
    """
    best: tuple[datetime | None, str, str] | None = None
    best_diff: float | None = None
    for unit, precision, micros in _UNITS:
        moment = _as_datetime(value, micros)
        if moment is None or not 1970 <= moment.year <= 2100:
            continue
        diff = abs(int(moment.timestamp()) - int(now.timestamp()))
        if best_diff is None or diff < best_diff:
            best, best_diff = (moment, unit, precision), diff
    if best is None:
        return _as_datetime(value, _UNITS[0][2]), "seconds", "second"
    return best


class UnixTimeDecoder:
    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock

    @property
    def name(self) -> str:
        return "UnixTime"

    def can_parse(self, text: str) -> bool:
        return bool(_UNIXTIME_RE.match(text)) and int(text) <= _UINT64_MAX

    def parse(self, text: str) -> DecodedResult:
        if not self.can_parse(text):
            raise DecodeError("Unix timestamp must be 0 or a 10-19 digit unsigned 64-bit integer")

        value = int(text)
        if value > _INT64_MAX:
            value &= _INT64_MAX
        moment, unit, precision = resolve_unit(value, self._clock())

        extra = {
            "unit": unit,
            "precision": precision,
            "epoch": "1970-01-01T00:00:00Z",
            "deterministic": "true",
        }
        if moment is None:
            extra["note"] = "value is outside the representable calendar range"
        return DecodedResult(
            format_name=self.name,
            description=f"Unix timestamp ({unit})",
            canonical_string=text,
            integer_value=text,
            size_bits=64,
            entropy_bits=0,
            timestamp=moment,
            timestamp_value=f"{moment.timestamp():.3f}" if moment else None,
            hex_representation=f"{value:016x}",
            binary_bytes=value.to_bytes(8, "big"),
            extra_attributes=extra,
        )

    def generate(self) -> str:
        return str(int(self._clock().timestamp()))
