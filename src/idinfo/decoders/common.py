"""Helpers shared by the format decoders: integer/time conversions and UUID layout."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta

from idinfo.config.constants import GREGORIAN_UUID_OFFSET, UNIX_EPOCH

CHARACTER_BYTES = "character bytes (no native binary layout)"


def big_int(data: bytes) -> str:
    """Decimal string of the big-endian unsigned integer held in data."""
    return str(int.from_bytes(data, "big"))


def datetime_from_ms(ms: int) -> datetime | None:
    """UTC datetime for a Unix millisecond count, or None when out of range."""
    try:
        return UNIX_EPOCH + timedelta(milliseconds=ms)
    except OverflowError:
        return None


def seconds_label(ms: int) -> str:
    return f"{ms / 1000:.3f}"


def counter_from(data: bytes) -> int:
    return int.from_bytes(data, "big")


@dataclass
class UUIDLayout:
    version_label: str
    entropy_bits: int | None
    timestamp: datetime | None = None
    timestamp_value: str | None = None
    sequence: int | None = None
    node: str | None = None


_VERSION_LABELS = {
    1: ("1 (timestamp and MAC address)", 14),
    2: ("2 (DCE security)", 62),
    3: ("3 (namespace name based with MD5)", 122),
    4: ("4 (random)", 122),
    5: ("5 (namespace name based with SHA-1)", 122),
    6: ("6 (reordered timestamp and MAC address)", 14),
    7: ("7 (sortable timestamp and random)", 74),
    8: ("8 (custom)", 122),
}

_MAX_UUID = uuid.UUID(int=(1 << 128) - 1)


def uuid_version_nibble(u: uuid.UUID) -> int:
    return (u.int >> 76) & 0xF


def describe_uuid(u: uuid.UUID) -> UUIDLayout:
    """Version label, entropy and time/clock/node fields for any UUID."""
    version = uuid_version_nibble(u)
    if version not in _VERSION_LABELS:
        if u == uuid.UUID(int=0):
            label = "Nil UUID"
        elif u == _MAX_UUID:
            label = "Max UUID"
        else:
            label = f"Unknown version {version}"
        return UUIDLayout(version_label=label, entropy_bits=None)

    label, entropy = _VERSION_LABELS[version]
    layout = UUIDLayout(version_label=label, entropy_bits=entropy)

    if version in (1, 6):
        if version == 1:
            ticks = (u.time_hi_version & 0x0FFF) << 48 | u.time_mid << 32 | u.time_low
        else:
            raw = u.int >> 64
            ticks = (raw >> 4 & ~0xFFF) | (raw & 0x0FFF)
        unix_ticks = ticks - GREGORIAN_UUID_OFFSET
        layout.timestamp = _datetime_from_ticks(unix_ticks)
        layout.timestamp_value = f"{unix_ticks / 10_000_000:.3f}"
        layout.sequence = u.clock_seq
        layout.node = f"{u.node:012x}"
    elif version == 7:
        ms = u.int >> 80
        layout.timestamp = datetime_from_ms(ms)
        layout.timestamp_value = seconds_label(ms)

    return layout


def _datetime_from_ticks(ticks: int) -> datetime | None:
    try:
        return UNIX_EPOCH + timedelta(microseconds=ticks // 10)
    except OverflowError:
        return None


def uuid_variant_label(u: uuid.UUID) -> str:
    return {
        uuid.RESERVED_NCS: "NCS (Network Computing System)",
        uuid.RFC_4122: "RFC 4122",
        uuid.RESERVED_MICROSOFT: "Microsoft GUID",
        uuid.RESERVED_FUTURE: "Future",
    }.get(u.variant, "Unknown")
