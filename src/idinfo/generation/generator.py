"""Entry point for ID generation by format name or `uuid:<version>`."""

from __future__ import annotations

from idinfo.config.settings import Settings
from idinfo.decoders.decoder_registry import DecoderRegistry
from idinfo.generation.uuid_versions import generate_uuid
from idinfo.observability.logger import get_logger

logger = get_logger("generation")


def generate_id(registry: DecoderRegistry, format_spec: str, settings: Settings | None = None) -> str:
    settings = settings or Settings()
    spec = format_spec.strip()

    name, _, version = spec.partition(":")
    if version and name.lower() in ("uuid", "guid"):
        value = generate_uuid(version.lower(), namespace_name=settings.uuid_namespace_name)
        logger.info("id_generated", format="UUID", version=version.lower())
        return value

    decoder = registry.require(spec)
    value = decoder.generate()
    logger.info("id_generated", format=decoder.name)
    return value
