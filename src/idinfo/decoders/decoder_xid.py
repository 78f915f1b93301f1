"""Xid decoder: base32hex of seconds | machine | pid | counter."""

from __future__ import annotations

import base64
import binascii
import re

from idinfo.decoders.common import big_int, counter_from, datetime_from_ms
from idinfo.exceptions import DecodeError
from idinfo.generation.xid_factory import XidFactory, encode_xid
from idinfo.models.domain import DecodedResult

_XID_RE = re.compile(r"^[0-9a-v]{20}$")


def _decode_xid(text: str) -> bytes:
    raw = base64.b32hexdecode(text.upper() + "====")
    # the 20th character carries 4 padding bits that must be zero
    if encode_xid(raw) != text:
        raise DecodeError("Xid has non-zero trailing padding bits")
    return raw


class XidDecoder:
    def __init__(self, factory: XidFactory | None = None) -> None:
        self._factory = factory or XidFactory()

    @property
    def name(self) -> str:
        return "Xid"

    def can_parse(self, text: str) -> bool:
        if len(text) != 20 or not _XID_RE.match(text):
            return False
        try:
            _decode_xid(text)
        except (binascii.Error, DecodeError):
            return False
        return True

    def parse(self, text: str) -> DecodedResult:
        if len(text) != 20 or not _XID_RE.match(text):
            raise DecodeError("Xid must be 20 characters of [0-9a-v]")
        try:
            raw = _decode_xid(text)
        except binascii.Error as e:
            raise DecodeError(f"invalid Xid: {e}") from e

        seconds = counter_from(raw[:4])
        machine = raw[4:7].hex()
        process = raw[7:9].hex()
        counter = counter_from(raw[9:12])
        return DecodedResult(
            format_name=self.name,
            description="Xid (globally unique sortable id)",
            canonical_string=text,
            integer_value=big_int(raw),
            size_bits=96,
            entropy_bits=56,
            timestamp=datetime_from_ms(seconds * 1000),
            timestamp_value=f"{seconds:.3f}",
            sequence=counter,
            node_fields=(machine, process),
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes={
                "encoding": "Base32 (hex alphabet, lowercase)",
                "timestamp_precision": "second",
                "machine_bytes": machine,
                "process_bytes": process,
                "counter_value": str(counter),
                "sortable": "true",
            },
        )

    def generate(self) -> str:
        return self._factory.generate()
