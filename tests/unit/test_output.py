"""Tests for the card, short, JSON, binary and comparison renderers."""

import io
import json
from dataclasses import replace
from datetime import timedelta

import pytest

from idinfo.decoders.decoder_uuid import UUIDDecoder
from idinfo.models.domain import DecodedResult
from idinfo.output.renderers import (
    compare_timestamps,
    hex_groups,
    render_card,
    render_comparison,
    render_everything,
    render_json,
    render_short,
    write_binary,
)

V7 = "017f22e2-79b0-7cc3-98c4-dc0c0c07398f"


def make_result(**overrides):
    base = DecodedResult(
        format_name="Test",
        description="Test ID",
        canonical_string="abc",
        size_bits=16,
        hex_representation="abcd",
        binary_bytes=b"\xab\xcd",
    )
    return replace(base, **overrides)


def test_result_attributes_are_read_only():
    source = {"variant": "RFC 4122"}
    result = make_result(extra_attributes=source)
    source["variant"] = "changed"
    assert result.extra_attributes["variant"] == "RFC 4122"
    with pytest.raises(TypeError):
        result.extra_attributes["variant"] = "changed"


def test_card_contains_fields():
    card = render_card(UUIDDecoder().parse(V7))
    assert "┃ ID Type   │ UUID (RFC-9562)" in card
    assert "7 (sortable timestamp and random)" in card
    assert "1645557742.000 (2022-02-22T19:22:22Z)" in card
    assert "┃ Node 1    │ -" in card
    assert "┃ Sequence  │ -" in card
    assert "017f 22e2 │ 0000 0001 0111 1111 0010 0010 1110 0010" in card
    assert "\033[" not in card


def test_card_lines_are_aligned():
    lines = render_card(UUIDDecoder().parse(V7)).splitlines()
    assert len({len(line) for line in lines}) == 1


def test_card_truncates_long_integer():
    card = render_card(make_result(integer_value="9" * 60))
    assert "9" * 40 + "..." in card
    assert "9" * 41 not in card


def test_colored_card_uses_ansi():
    card = render_card(make_result(), color=True)
    assert "\033[" in card
    assert "Test ID" in card


def test_hex_groups():
    assert hex_groups("0f") == [("0f", "0000 1111")]
    assert hex_groups("0123456789") == [("0123 4567", "0000 0001 0010 0011 0100 0101 0110 0111"), ("89", "1000 1001")]


def test_short():
    assert render_short(UUIDDecoder().parse(V7)) == "ID Type: UUID (RFC-9562), version: 7 (sortable timestamp and random)."
    assert render_short(make_result()) == "ID Type: Test ID."


def test_everything_lists_each_result():
    text = render_everything([make_result(), make_result(description="Other")])
    assert text.startswith("Successfully parsed as 2 different formats:")
    assert "=== Format 1: Test ID ===" in text
    assert "=== Format 2: Other ===" in text


def test_json_omits_absent_fields():
    payload = json.loads(render_json(UUIDDecoder().parse(V7)))
    assert payload["format_name"] == "UUID"
    assert payload["size_bits"] == 128
    assert payload["timestamp"].startswith("2022-02-22T19:22:22")
    assert "sequence" not in payload
    assert "node_fields" not in payload
    assert "binary_bytes" not in payload
    assert payload["extra_attributes"]["variant"] == "RFC 4122"


def test_write_binary():
    stream = io.BytesIO()
    write_binary(make_result(), stream)
    assert stream.getvalue() == b"\xab\xcd"


def test_compare_timestamps(fixed_now):
    results = [
        make_result(description="future", timestamp=fixed_now + timedelta(days=1)),
        make_result(description="now", timestamp=fixed_now - timedelta(seconds=30)),
        make_result(description="past", timestamp=fixed_now - timedelta(days=365)),
        make_result(description="none"),
    ]
    rows = compare_timestamps(results, now=fixed_now)
    assert [r.description for r in rows] == ["past", "now", "future"]
    assert [r.is_now for r in rows] == [False, True, False]
    assert [r.is_future for r in rows] == [False, False, True]

    text = render_comparison(rows).splitlines()
    assert text[0] == "Date/times of the valid IDs parsed as:"
    assert text[1] == "- 2023-06-02T12:00:00Z past"
    assert text[2].endswith("now --- Now ---")
    assert text[3] == "- 2024-06-02T12:00:00Z future (future)"
