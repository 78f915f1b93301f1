"""Tests for forced and auto-detect modes of the detection engine."""

import pytest
from structlog.testing import capture_logs

from idinfo.decoders.decoder_registry import DecoderRegistry
from idinfo.detection.engine import DetectionEngine
from idinfo.exceptions import DecodeError, ForcedFormatMismatch, UnknownFormatName, UnrecognizedFormat
from idinfo.observability.logger import setup_logging


class AlwaysRejects:
    name = "Fussy"

    def can_parse(self, text):
        return True

    def parse(self, text):
        raise DecodeError("never valid")

    def generate(self):
        return "x"


def test_uuid_string_matches_only_uuid(engine):
    results = engine.detect("550e8400-e29b-41d4-a716-446655440000")
    assert [r.format_name for r in results] == ["UUID"]
    assert results[0].size_bits == 128
    assert results[0].version == "4 (random)"
    assert results[0].entropy_bits == 122


def test_objectid_is_first_match(engine):
    results = engine.detect("507f1f77bcf86cd799439011")
    assert results[0].format_name == "ObjectID"
    assert "HashHex" in [r.format_name for r in results]


def test_input_is_stripped(engine):
    assert engine.detect("  507f1f77bcf86cd799439011\n")[0].format_name == "ObjectID"


def test_at_sign_is_rejected_by_every_decoder(engine, registry):
    for text in ["user@example.com", "abc@def", "@@@@@@@@@@@@@@@@@@@@", "1609459200@"]:
        assert engine.detect(text) == []
        for decoder in registry:
            assert not decoder.can_parse(text), decoder.name


def test_forced_mode(engine):
    results = engine.detect("1609459200", force_format="unix")
    assert len(results) == 1
    assert results[0].format_name == "UnixTime"
    assert results[0].extra_attributes["unit"] == "seconds"
    assert results[0].timestamp.isoformat() == "2021-01-01T00:00:00+00:00"


def test_forced_mode_mismatch_returns_empty(engine):
    assert engine.detect("not-a-uuid", force_format="uuid") == []


def test_forced_unknown_format(engine):
    with pytest.raises(UnknownFormatName):
        engine.detect("anything", force_format="nope")


def test_identify_raises_on_no_match(engine):
    with pytest.raises(UnrecognizedFormat):
        engine.identify("!!")
    with pytest.raises(ForcedFormatMismatch):
        engine.identify("!!", force_format="ulid")


def test_best_match(engine):
    assert engine.best_match("01ARZ3NDEKTSV4RRFFQ69G5FAV").format_name == "ULID"


def test_rejected_parse_is_logged_and_skipped():
    setup_logging("DEBUG")
    registry = DecoderRegistry()
    registry.register(AlwaysRejects())
    engine = DetectionEngine(registry)
    with capture_logs() as logs:
        assert engine.detect("whatever") == []
    events = [entry["event"] for entry in logs]
    assert "decode_rejected" in events
    assert "detection_complete" in events
    setup_logging("WARNING")
