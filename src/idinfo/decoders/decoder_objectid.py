"""MongoDB ObjectId decoder: seconds | machine | process | counter."""

from __future__ import annotations

import re

from bson import ObjectId
from bson.errors import InvalidId

from idinfo.decoders.common import big_int, counter_from, datetime_from_ms
from idinfo.exceptions import DecodeError
from idinfo.models.domain import DecodedResult

_OBJECTID_RE = re.compile(r"^[0-9a-fA-F]{24}$")


class ObjectIDDecoder:
    @property
    def name(self) -> str:
        return "ObjectID"

    def can_parse(self, text: str) -> bool:
        return len(text) == 24 and bool(_OBJECTID_RE.match(text))

    def parse(self, text: str) -> DecodedResult:
        if not self.can_parse(text):
            raise DecodeError("ObjectId must be exactly 24 hex characters")
        try:
            oid = ObjectId(text)
        except InvalidId as e:
            raise DecodeError(str(e)) from e

        raw = oid.binary
        seconds = counter_from(raw[:4])
        machine = raw[4:7].hex()
        process = raw[7:9].hex()
        counter = counter_from(raw[9:12])
        return DecodedResult(
            format_name=self.name,
            description="MongoDB ObjectId",
            canonical_string=str(oid),
            integer_value=big_int(raw),
            size_bits=96,
            entropy_bits=40,
            timestamp=datetime_from_ms(seconds * 1000),
            timestamp_value=f"{seconds:.3f}",
            sequence=counter,
            node_fields=(machine, process),
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes={
                "timestamp_precision": "second",
                "machine_bytes": machine,
                "process_bytes": process,
                "counter_value": str(counter),
            },
        )

    def generate(self) -> str:
        return str(ObjectId())
