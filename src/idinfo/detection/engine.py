"""Detection engine: runs decoders against an input in forced or auto mode."""

from __future__ import annotations

from idinfo.decoders.decoder_registry import DecoderRegistry
from idinfo.exceptions import DecodeError, ForcedFormatMismatch, UnrecognizedFormat
from idinfo.models.domain import DecodedResult
from idinfo.observability.logger import get_logger

logger = get_logger("detection")


class DetectionEngine:
    def __init__(self, registry: DecoderRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> DecoderRegistry:
        return self._registry

    def detect(self, text: str, force_format: str | None = None) -> list[DecodedResult]:
        """All matching decodes in registry order; empty when nothing matches.

        With force_format only that decoder is consulted. An unknown format
        name raises UnknownFormatName.
        """
        text = text.strip()

        if force_format:
            decoder = self._registry.require(force_format)
            try:
                result = decoder.parse(text)
            except DecodeError as e:
                logger.debug("decode_rejected", decoder=decoder.name, reason=str(e), forced=True)
                return []
            logger.debug("detection_complete", forced=decoder.name, matches=1)
            return [result]

        results: list[DecodedResult] = []
        for decoder in self._registry:
            if not decoder.can_parse(text):
                continue
            try:
                results.append(decoder.parse(text))
            except DecodeError as e:
                logger.debug("decode_rejected", decoder=decoder.name, reason=str(e))

        logger.debug(
            "detection_complete",
            matches=len(results),
            formats=[r.format_name for r in results],
        )
        return results

    def identify(self, text: str, force_format: str | None = None) -> list[DecodedResult]:
        results = self.detect(text, force_format)
        if results:
            return results
        if force_format:
            raise ForcedFormatMismatch(f"Input is not a valid {force_format} identifier")
        raise UnrecognizedFormat("Input does not match any known identifier format")

    def best_match(self, text: str, force_format: str | None = None) -> DecodedResult:
        return self.identify(text, force_format)[0]
