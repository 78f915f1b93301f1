"""Entrypoint: the idinfo command-line interface."""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from idinfo.config.constants import OUTPUT_FORMATS
from idinfo.config.settings import Settings
from idinfo.decoders.decoder_registry import DecoderRegistry, create_default_registry
from idinfo.detection.engine import DetectionEngine
from idinfo.exceptions import (
    ConfigurationError,
    ForcedFormatMismatch,
    GenerationError,
    UnknownFormatName,
    UnrecognizedFormat,
)
from idinfo.generation.generator import generate_id
from idinfo.generation.uuid_versions import SUPPORTED_VERSIONS
from idinfo.observability.logger import get_logger, setup_logging
from idinfo.output.renderers import (
    compare_timestamps,
    render_card,
    render_comparison,
    render_everything,
    render_json,
    render_short,
    write_binary,
)

logger = get_logger("cli")

EPILOG = """\
examples:
  idinfo 01941f29-7c00-7aaa-aaaa-aaaaaaaaaaaa
  idinfo -f uuid 01941f29-7c00-7aaa-aaaa-aaaaaaaaaaaa
  idinfo -o json 01HVZ7JKJJ8M9K9M9M9M9M9M9M
  echo "01941f29-7c00-7aaa-aaaa-aaaaaaaaaaaa" | idinfo -
  idinfo -g uuid:v7
  idinfo -g ulid

supported formats:
  UUID (v1-v8), ULID, MongoDB ObjectId, KSUID, Xid, CUID2, SCRU128, TSID,
  NUID, Snowflake, NanoID, Firebase PushID, Base58, Base32, Unix timestamps,
  hex-encoded hashes, ShortUUID, Sqids, TypeID
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="idinfo",
        description="Identify, decode and generate unique identifiers.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("id", nargs="?", help="identifier to inspect, or '-' to read one line from stdin")
    parser.add_argument("-f", "--format", dest="force_format", help="force parsing as a specific format")
    parser.add_argument("-o", "--output", help=f"output format ({', '.join(OUTPUT_FORMATS)})")
    parser.add_argument("-e", "--everything", action="store_true", help="show every matching format")
    parser.add_argument("--compare", action="store_true", help="compare timestamps of every matching format")
    parser.add_argument(
        "-g",
        "--generate",
        metavar="FORMAT",
        help=f"generate an ID; UUID versions: {', '.join('uuid:' + v for v in SUPPORTED_VERSIONS)}",
    )
    parser.add_argument("--color", action=argparse.BooleanOptionalAction, default=None, help="ANSI-colored card")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return parser


def _error(*lines: str) -> int:
    for line in lines:
        print(line, file=sys.stderr)
    return 1


def _generate(registry: DecoderRegistry, format_spec: str, settings: Settings) -> int:
    try:
        value = generate_id(registry, format_spec, settings)
    except UnknownFormatName:
        return _error(
            f"Error: Unsupported format '{format_spec}'",
            f"Supported formats: {', '.join(registry.all_names())}",
            f"For UUID, you can also specify version: {', '.join('uuid:' + v for v in SUPPORTED_VERSIONS)}",
        )
    except (GenerationError, ConfigurationError) as e:
        return _error(f"Error generating {format_spec}: {e}")
    print(value)
    return 0


def _read_input(arg: str) -> str:
    if arg == "-":
        return sys.stdin.readline().strip()
    return arg


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        return _error(f"Error: invalid configuration: {e}")

    setup_logging("DEBUG" if args.verbose else settings.log_level, json_output=settings.log_json)
    output_format = (args.output or settings.output_format).lower()
    color = settings.color if args.color is None else args.color

    try:
        registry = create_default_registry(settings)
    except ConfigurationError as e:
        return _error(f"Error: {e}")

    if args.generate:
        return _generate(registry, args.generate, settings)

    if args.id is None:
        return _error(
            "Error: Please provide an ID to parse",
            "Usage: idinfo [OPTIONS] <ID>",
            "Try 'idinfo --help' for more information.",
        )

    text = _read_input(args.id)
    if not text:
        return _error("Error: Empty input provided", "Please provide a valid ID to parse.")

    if output_format not in OUTPUT_FORMATS:
        return _error(
            f"Error: Unknown output format '{output_format}'",
            f"Supported formats: {', '.join(OUTPUT_FORMATS)}",
        )

    engine = DetectionEngine(registry)
    try:
        results = engine.identify(text, args.force_format)
    except UnknownFormatName:
        return _error(
            f"Error: Unknown format '{args.force_format}'",
            f"Supported formats: {', '.join(registry.all_names())}",
        )
    except ForcedFormatMismatch:
        return _error(
            f"Error: Unable to parse ID '{text}'",
            f"The ID cannot be parsed as format '{args.force_format}'.",
            "Try without the -f flag for auto-detection.",
        )
    except UnrecognizedFormat:
        return _error(
            f"Error: Unable to parse ID '{text}'",
            "The ID format is not recognized or supported.",
            f"Supported formats: {', '.join(registry.all_names())}",
            "Try using -f to force a specific format.",
        )

    if args.everything:
        print(render_everything(results, color))
        return 0
    if args.compare:
        print(render_comparison(compare_timestamps(results)))
        return 0

    result = results[0]
    if output_format == "card":
        print(render_card(result, color))
    elif output_format == "short":
        print(render_short(result))
    elif output_format == "json":
        try:
            print(render_json(result))
        except (ValidationError, PydanticSerializationError) as e:
            logger.error("json_render_failed", format=result.format_name, error=str(e))
            return _error(
                "Error generating JSON output",
                "This is likely due to invalid data in the parsed result.",
            )
    else:
        write_binary(result, sys.stdout.buffer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
