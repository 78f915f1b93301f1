"""Tests for the decoder registry."""

import pytest

from idinfo.decoders.decoder_registry import DecoderRegistry
from idinfo.exceptions import UnknownFormatName

EXPECTED_ORDER = [
    "UUID",
    "ULID",
    "ObjectID",
    "KSUID",
    "Xid",
    "CUID",
    "SCRU128",
    "TSID",
    "TypeID",
    "NUID",
    "ShortUUID",
    "Sqids",
    "NanoID",
    "Snowflake",
    "UnixTime",
    "HashHex",
    "Base58",
    "PushID",
    "Base32",
]


def test_default_order(registry):
    assert registry.all_names() == EXPECTED_ORDER
    assert len(registry) == 19


def test_lookup_is_case_insensitive(registry):
    assert registry.lookup("uuid").name == "UUID"
    assert registry.lookup("KSUID").name == "KSUID"
    assert registry.lookup(" typeid ").name == "TypeID"


@pytest.mark.parametrize(
    "alias, name",
    [
        ("guid", "UUID"),
        ("mongodb", "ObjectID"),
        ("bson", "ObjectID"),
        ("cuid2", "CUID"),
        ("scru", "SCRU128"),
        ("nats-id", "NUID"),
        ("nano_id", "NanoID"),
        ("discord", "Snowflake"),
        ("sf-twitter", "Snowflake"),
        ("timestamp", "UnixTime"),
        ("hash", "HashHex"),
        ("bitcoin", "Base58"),
        ("firebase", "PushID"),
        ("b32", "Base32"),
        ("suuid", "ShortUUID"),
        ("sqid", "Sqids"),
        ("type-id", "TypeID"),
    ],
)
def test_aliases(registry, alias, name):
    assert registry.lookup(alias).name == name


def test_lookup_has_no_fuzzy_matching(registry):
    assert registry.lookup("uuidd") is None
    assert registry.lookup("ul") is None


def test_require_raises_for_unknown(registry):
    with pytest.raises(UnknownFormatName):
        registry.require("snowflake2")


def test_iteration_follows_registration_order(registry):
    assert [d.name for d in registry] == EXPECTED_ORDER
    assert [d.name for d in registry.decoders] == EXPECTED_ORDER


def test_empty_registry():
    registry = DecoderRegistry()
    assert registry.all_names() == []
    assert registry.lookup("uuid") is None
