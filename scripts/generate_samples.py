"""Generate one ID per format and show how auto-detection ranks it."""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from idinfo.config.settings import Settings
from idinfo.decoders.decoder_registry import create_default_registry
from idinfo.detection.engine import DetectionEngine
from idinfo.generation.generator import generate_id
from idinfo.generation.uuid_versions import SUPPORTED_VERSIONS
from idinfo.observability.logger import setup_logging


def main() -> None:
    settings = Settings()
    setup_logging(settings.log_level, json_output=settings.log_json)
    registry = create_default_registry(settings)
    engine = DetectionEngine(registry)

    specs = registry.all_names() + [f"uuid:{v}" for v in SUPPORTED_VERSIONS]
    mismatches = 0
    for spec in specs:
        value = generate_id(registry, spec, settings)
        matches = [r.format_name for r in engine.detect(value)]
        expected = "UUID" if spec.startswith("uuid:") else spec
        marker = "ok" if matches and matches[0] == expected else "  "
        if expected not in matches:
            marker = "!!"
            mismatches += 1
        print(f"[{marker}] {spec:<10} {value:<40} -> {', '.join(matches) or '(none)'}")

    print(f"\n{len(specs)} samples, {mismatches} not detected as their own format")


if __name__ == "__main__":
    main()
