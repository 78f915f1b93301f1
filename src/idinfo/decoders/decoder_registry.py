"""Ordered registry of format decoders with name and alias lookup."""

from __future__ import annotations

from typing import Iterator

from idinfo.config.constants import FORMAT_ALIASES
from idinfo.config.settings import Settings
from idinfo.decoders.decoder_base32 import Base32Decoder
from idinfo.decoders.decoder_base58 import Base58Decoder
from idinfo.decoders.decoder_cuid import CUIDDecoder
from idinfo.decoders.decoder_hashhex import HashHexDecoder
from idinfo.decoders.decoder_ksuid import KSUIDDecoder
from idinfo.decoders.decoder_nanoid import NanoIDDecoder
from idinfo.decoders.decoder_nuid import NUIDDecoder
from idinfo.decoders.decoder_objectid import ObjectIDDecoder
from idinfo.decoders.decoder_pushid import PushIDDecoder
from idinfo.decoders.decoder_scru128 import SCRU128Decoder
from idinfo.decoders.decoder_shortuuid import ShortUUIDDecoder
from idinfo.decoders.decoder_snowflake import SnowflakeDecoder
from idinfo.decoders.decoder_sqids import SqidsDecoder
from idinfo.decoders.decoder_tsid import TSIDDecoder
from idinfo.decoders.decoder_typeid import TypeIDDecoder
from idinfo.decoders.decoder_ulid import ULIDDecoder
from idinfo.decoders.decoder_unixtime import UnixTimeDecoder
from idinfo.decoders.decoder_uuid import UUIDDecoder
from idinfo.decoders.decoder_xid import XidDecoder
from idinfo.exceptions import UnknownFormatName
from idinfo.protocols.decoder import Decoder


class DecoderRegistry:
    def __init__(self) -> None:
        self._decoders: list[Decoder] = []

    def register(self, decoder: Decoder) -> None:
        self._decoders.append(decoder)

    @property
    def decoders(self) -> list[Decoder]:
        return list(self._decoders)

    def __iter__(self) -> Iterator[Decoder]:
        return iter(self._decoders)

    def __len__(self) -> int:
        return len(self._decoders)

    def lookup(self, name: str) -> Decoder | None:
        """Find a decoder by canonical name or alias, case-insensitively."""
        wanted = name.strip().lower()
        for decoder in self._decoders:
            if decoder.name.lower() == wanted:
                return decoder
        for canonical, aliases in FORMAT_ALIASES.items():
            if wanted in aliases:
                for decoder in self._decoders:
                    if decoder.name.lower() == canonical:
                        return decoder
        return None

    def require(self, name: str) -> Decoder:
        decoder = self.lookup(name)
        if decoder is None:
            raise UnknownFormatName(
                f"Unknown format '{name}'. Supported: {', '.join(self.all_names())}"
            )
        return decoder

    def all_names(self) -> list[str]:
        return [decoder.name for decoder in self._decoders]


def create_default_registry(settings: Settings | None = None) -> DecoderRegistry:
    """Create a registry with all built-in decoders in detection order."""
    settings = settings or Settings()
    registry = DecoderRegistry()
    decoders: list[Decoder] = [
        UUIDDecoder(),
        ULIDDecoder(),
        ObjectIDDecoder(),
        KSUIDDecoder(),
        XidDecoder(),
        CUIDDecoder(),
        SCRU128Decoder(),
        TSIDDecoder(),
        TypeIDDecoder(prefix=settings.typeid_prefix),
        NUIDDecoder(),
        ShortUUIDDecoder(),
        SqidsDecoder(sample_numbers=settings.sqids_sample_numbers),
        NanoIDDecoder(),
        SnowflakeDecoder(node_id=settings.snowflake_node_id, epoch_ms=settings.snowflake_epoch_ms),
        UnixTimeDecoder(),
        HashHexDecoder(),
        Base58Decoder(),
        PushIDDecoder(),
        Base32Decoder(),
    ]
    for decoder in decoders:
        registry.register(decoder)
    return registry
