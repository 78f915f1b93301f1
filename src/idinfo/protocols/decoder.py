"""Protocol for identifier format decoders."""

from __future__ import annotations

from typing import Protocol

from idinfo.models.domain import DecodedResult


class Decoder(Protocol):
    @property
    def name(self) -> str: ...

    def can_parse(self, text: str) -> bool:
        """Cheap structural check. Never raises."""
        ...

    def parse(self, text: str) -> DecodedResult:
        """Authoritative decode. Raises DecodeError when text is not of this format."""
        ...

    def generate(self) -> str:
        """Produce a fresh instance. Raises GenerationError on primitive failure."""
        ...
