"""Tests for ID generation: round-trips, uniqueness, determinism and ordering."""

import itertools
import uuid

import pytest
import scru128

from idinfo.decoders.decoder_ksuid import KSUIDDecoder
from idinfo.decoders.decoder_scru128 import SCRU128Decoder
from idinfo.decoders.decoder_tsid import TSIDDecoder
from idinfo.decoders.decoder_ulid import ULIDDecoder
from idinfo.decoders.decoder_xid import XidDecoder
from idinfo.exceptions import ConfigurationError, GenerationError, UnknownFormatName
from idinfo.generation.generator import generate_id
from idinfo.generation.snowflake_node import MAX_STEP, NODE_BITS, STEP_BITS, SnowflakeNode
from idinfo.generation.tsid_factory import TSIDFactory
from idinfo.generation.uuid_versions import SUPPORTED_VERSIONS, generate_uuid
from idinfo.generation.xid_factory import XidFactory

UNIQUE_FORMATS = [
    "ULID",
    "KSUID",
    "Xid",
    "CUID",
    "NanoID",
    "NUID",
    "SCRU128",
    "TSID",
    "ShortUUID",
    "PushID",
    "Base58",
    "Base32",
]


def test_every_decoder_round_trips(registry):
    for decoder in registry:
        value = decoder.generate()
        result = decoder.parse(value)
        assert decoder.can_parse(result.canonical_string), decoder.name
        assert result.format_name == decoder.name


def test_generated_ids_auto_detect_as_their_format(engine, registry):
    for decoder in registry:
        value = decoder.generate()
        names = [r.format_name for r in engine.detect(value)]
        assert decoder.name in names, (decoder.name, value, names)


def test_size_matches_binary_or_is_documented(registry):
    for decoder in registry:
        result = decoder.parse(decoder.generate())
        if result.size_bits != len(result.binary_bytes) * 8:
            assert "binary_encoding" in result.extra_attributes, decoder.name


@pytest.mark.parametrize("name", UNIQUE_FORMATS)
def test_uniqueness(registry, name):
    decoder = registry.require(name)
    values = [decoder.generate() for _ in range(100)]
    assert len(set(values)) == 100


def test_uuid_v4_uniqueness():
    assert len({generate_uuid("v4") for _ in range(100)}) == 100


@pytest.mark.parametrize("version", SUPPORTED_VERSIONS)
def test_uuid_versions(version):
    value = uuid.UUID(generate_uuid(version))
    assert value.version == int(version[1:])


def test_name_based_uuids_are_deterministic():
    assert generate_uuid("v3") == generate_uuid("v3")
    assert generate_uuid("v5") == generate_uuid("v5")
    assert generate_uuid("v5") == str(uuid.uuid5(uuid.NAMESPACE_DNS, "idinfo-generated"))
    assert generate_uuid("v3", "example.com") == str(uuid.uuid3(uuid.NAMESPACE_DNS, "example.com"))


def test_unsupported_uuid_version():
    with pytest.raises(GenerationError):
        generate_uuid("v9")


def test_sqids_generation_is_deterministic(registry):
    decoder = registry.require("sqids")
    assert decoder.generate() == decoder.generate()
    assert decoder.parse(decoder.generate()).extra_attributes["numbers"] == "42, 123, 7890"


def test_generate_id_dispatch(registry, settings):
    assert uuid.UUID(generate_id(registry, "uuid:v7", settings)).version == 7
    assert uuid.UUID(generate_id(registry, "GUID:V1", settings)).version == 1
    assert registry.require("ulid").can_parse(generate_id(registry, "ulid", settings))
    assert registry.require("pushid").can_parse(generate_id(registry, "firebase", settings))


def test_generate_id_uses_settings(registry, settings):
    settings.uuid_namespace_name = "example.com"
    assert generate_id(registry, "uuid:v5", settings) == str(uuid.uuid5(uuid.NAMESPACE_DNS, "example.com"))


def test_generate_id_errors(registry, settings):
    with pytest.raises(UnknownFormatName):
        generate_id(registry, "nope", settings)
    with pytest.raises(GenerationError):
        generate_id(registry, "uuid:v2", settings)


def _assert_sorted_and_increasing(decoder, count=20):
    values = [decoder.generate() for _ in range(count)]
    assert values == sorted(values)
    stamps = [decoder.parse(v).timestamp for v in values]
    assert all(a < b for a, b in zip(stamps, stamps[1:]))


def test_ulid_sortability(second_ticks):
    _assert_sorted_and_increasing(ULIDDecoder(clock=second_ticks))


def test_ksuid_sortability(datetime_ticks):
    _assert_sorted_and_increasing(KSUIDDecoder(clock=datetime_ticks))


def test_xid_sortability(second_ticks):
    _assert_sorted_and_increasing(XidDecoder(XidFactory(clock=second_ticks)))


def test_tsid_sortability(millisecond_ticks):
    _assert_sorted_and_increasing(TSIDDecoder(TSIDFactory(clock=millisecond_ticks)))


def test_tsid_monotonic_within_millisecond():
    decoder = TSIDDecoder(TSIDFactory(clock=lambda: 1_700_000_000_000))
    values = [decoder.generate() for _ in range(100)]
    assert values == sorted(values)
    assert len(set(values)) == 100


def test_scru128_library_sortability():
    decoder = SCRU128Decoder()
    values = [scru128.new_string() for _ in range(100)]
    assert values == sorted(values)
    stamps = [decoder.parse(v).timestamp for v in values]
    assert all(a <= b for a, b in zip(stamps, stamps[1:]))


def test_snowflake_node_steps_within_a_millisecond():
    node = SnowflakeNode(node_id=3, epoch_ms=0, clock=lambda: 1000)
    first, second = node.generate(), node.generate()
    assert first == (1000 << (NODE_BITS + STEP_BITS)) | (3 << STEP_BITS)
    assert second == first + 1


def test_snowflake_node_waits_on_step_overflow():
    ticks = iter([100, 100, 100, 101])
    node = SnowflakeNode(node_id=0, epoch_ms=0, clock=lambda: next(ticks))
    node.generate()
    node._step = MAX_STEP
    value = node.generate()
    assert value >> (NODE_BITS + STEP_BITS) == 101
    assert value & MAX_STEP == 0


def test_snowflake_node_tolerates_clock_moving_backwards():
    ticks = iter([200, 150])
    node = SnowflakeNode(node_id=0, epoch_ms=0, clock=lambda: next(ticks))
    first, second = node.generate(), node.generate()
    assert second >> (NODE_BITS + STEP_BITS) == 200
    assert second == first + 1


def test_snowflake_node_rejects_bad_node_id():
    with pytest.raises(ConfigurationError):
        SnowflakeNode(node_id=-1)


def test_snowflake_node_rejects_clock_before_epoch():
    node = SnowflakeNode(epoch_ms=10_000, clock=lambda: 5_000)
    with pytest.raises(GenerationError):
        node.generate()


def test_snowflake_node_is_thread_safe():
    from concurrent.futures import ThreadPoolExecutor

    counter = itertools.count()
    node = SnowflakeNode(node_id=1, epoch_ms=0, clock=lambda: 1_000 + next(counter) // 50)
    with ThreadPoolExecutor(max_workers=8) as pool:
        values = list(pool.map(lambda _: node.generate(), range(400)))
    assert len(set(values)) == 400
