"""Text, JSON and binary renderings of decoded results."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import BinaryIO

from idinfo.models.domain import DecodedResult, TimestampComparison
from idinfo.models.schemas import DecodedResultSchema
from idinfo.output.colors import BINARY, BORDER, HEADER, LABEL, VALUE, paint

LABEL_WIDTH = 9
VALUE_WIDTH = 43
MAX_INTEGER_WIDTH = 43

TOP = "┏━━━━━━━━━━━┯━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓"
DIVIDER = "┠───────────┼─────────────────────────────────────────────┨"
BOTTOM = "┗━━━━━━━━━━━┷━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛"

NOW_WINDOW = timedelta(minutes=1)


def format_rfc3339(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def hex_groups(hex_string: str) -> list[tuple[str, str]]:
    """Split hex into 8-digit groups, each paired with its nibble bit pattern."""
    groups = []
    for i in range(0, len(hex_string), 8):
        chunk = hex_string[i : i + 8]
        label = " ".join(chunk[j : j + 4] for j in range(0, len(chunk), 4))
        bits = " ".join(f"{int(digit, 16):04b}" for digit in chunk)
        groups.append((label, bits))
    return groups


def _card_sections(result: DecodedResult) -> list[list[tuple[str, str, str]]]:
    header = [("ID Type", result.description, VALUE)]
    if result.version:
        header.append(("Version", result.version, VALUE))

    representations = [("String", result.canonical_string, VALUE)]
    if result.integer_value is not None:
        integer = result.integer_value
        if len(integer) > MAX_INTEGER_WIDTH:
            integer = integer[:40] + "..."
        representations.append(("Integer", integer, VALUE))
    if result.base64 is not None:
        representations.append(("Base64", result.base64, VALUE))

    details = [("Size", f"{result.size_bits} bits", VALUE)]
    if result.entropy_bits is not None:
        details.append(("Entropy", f"{result.entropy_bits} bits", VALUE))
    if result.timestamp is not None:
        stamp = format_rfc3339(result.timestamp)
        if result.timestamp_value is not None:
            stamp = f"{result.timestamp_value} ({stamp})"
        details.append(("Timestamp", stamp, VALUE))
    details.append(("Node 1", result.node1 or "-", VALUE))
    details.append(("Node 2", result.node2 or "-", VALUE))
    details.append(("Sequence", str(result.sequence) if result.sequence is not None else "-", VALUE))

    sections = [header, representations, details]
    binary = [(label, bits, BINARY) for label, bits in hex_groups(result.hex_representation)]
    if binary:
        sections.append(binary)
    return sections


def render_card(result: DecodedResult, color: bool = False) -> str:
    """Bordered key/value card. With color, the same layout wrapped in ANSI codes."""
    left = paint("┃ ", BORDER, color)
    mid = paint("│ ", BORDER, color)
    right = paint("┃", BORDER, color)

    lines = [paint(TOP, BORDER, color)]
    for index, section in enumerate(_card_sections(result)):
        if index:
            lines.append(paint(DIVIDER, BORDER, color))
        for label, value, style in section:
            lines.append(
                left
                + paint(f"{label:<{LABEL_WIDTH}} ", LABEL, color)
                + mid
                + paint(f"{value:<{VALUE_WIDTH}} ", style, color)
                + right
            )
    lines.append(paint(BOTTOM, BORDER, color))
    return "\n".join(lines)


def render_short(result: DecodedResult) -> str:
    if result.version:
        return f"ID Type: {result.description}, version: {result.version}."
    return f"ID Type: {result.description}."


def render_everything(results: list[DecodedResult], color: bool = False) -> str:
    blocks = [f"Successfully parsed as {len(results)} different formats:\n"]
    for i, result in enumerate(results, start=1):
        blocks.append(paint(f"=== Format {i}: {result.description} ===", HEADER, color))
        blocks.append(render_card(result, color) + "\n")
    return "\n".join(blocks)


def compare_timestamps(results: list[DecodedResult], now: datetime | None = None) -> list[TimestampComparison]:
    """Timestamped results sorted oldest first, flagged relative to now."""
    now = now or datetime.now(timezone.utc)
    rows = [
        TimestampComparison(
            format_name=r.format_name,
            description=r.description,
            timestamp=r.timestamp,
            is_now=abs(now - r.timestamp) < NOW_WINDOW,
            is_future=r.timestamp > now,
        )
        for r in results
        if r.timestamp is not None
    ]
    rows.sort(key=lambda row: row.timestamp)
    return rows


def render_comparison(rows: list[TimestampComparison]) -> str:
    lines = ["Date/times of the valid IDs parsed as:"]
    for row in rows:
        suffix = ""
        if row.is_now:
            suffix = " --- Now ---"
        elif row.is_future:
            suffix = " (future)"
        lines.append(f"- {format_rfc3339(row.timestamp)} {row.description}{suffix}")
    return "\n".join(lines)


def render_json(result: DecodedResult) -> str:
    return DecodedResultSchema.from_result(result).to_json()


def write_binary(result: DecodedResult, stream: BinaryIO) -> None:
    stream.write(result.binary_bytes)
    stream.flush()
