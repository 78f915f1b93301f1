"""Sqids decoder using the default alphabet and blocklist."""

from __future__ import annotations

import math
from typing import Sequence

from sqids import Sqids

from idinfo.decoders.common import CHARACTER_BYTES
from idinfo.exceptions import DecodeError, GenerationError
from idinfo.models.domain import DecodedResult

_BITS_PER_CHAR = math.log2(62)


def _number_range(numbers: list[int]) -> str:
    largest = max(numbers)
    if largest < 1_000:
        return "small (< 1K)"
    if largest < 1_000_000:
        return "medium (< 1M)"
    return "large (>= 1M)"


class SqidsDecoder:
    def __init__(self, sample_numbers: Sequence[int] = (42, 123, 7890)) -> None:
        self._sqids = Sqids()
        self._sample_numbers = list(sample_numbers)

    @property
    def name(self) -> str:
        return "Sqids"

    def _decode(self, text: str) -> list[int]:
        if not text:
            return []
        try:
            return self._sqids.decode(text)
        except ValueError:
            return []

    def can_parse(self, text: str) -> bool:
        return len(self._decode(text)) > 0

    def parse(self, text: str) -> DecodedResult:
        numbers = self._decode(text)
        if not numbers:
            raise DecodeError("input does not decode to any Sqids numbers")

        extra = {
            "alphabet": "default Sqids alphabet (62 characters)",
            "numbers": ", ".join(str(n) for n in numbers),
            "number_range": _number_range(numbers),
            "reversible": "true",
            "url_safe": "true",
            "binary_encoding": CHARACTER_BYTES,
        }
        try:
            canonical = self._sqids.encode(numbers)
        except ValueError:
            # numbers above the encoder's limit cannot be re-encoded
            canonical = text
        extra["canonical"] = canonical
        extra["is_canonical"] = "true" if canonical == text else "false"

        raw = text.encode("ascii")
        return DecodedResult(
            format_name=self.name,
            description="Sqids",
            canonical_string=text,
            size_bits=len(text) * 6,
            entropy_bits=int(len(text) * _BITS_PER_CHAR),
            hex_representation=raw.hex(),
            binary_bytes=raw,
            extra_attributes=extra,
        )

    def generate(self) -> str:
        try:
            return self._sqids.encode(self._sample_numbers)
        except ValueError as e:
            raise GenerationError(f"cannot encode Sqids sample numbers: {e}") from e
