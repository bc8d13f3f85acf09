"""
sprout.cli - Sprout Command Line Interface

Subcommands:

- sprout sourcemap RECORDS.json      Build a version 3 source map from emitter records
- sprout mappings TEXT               Decode a mappings string into positions
- sprout vlq encode INT...           Encode integers as base64 VLQ
- sprout vlq decode TEXT             Decode base64 VLQ text into integers
"""

import argparse
import json
import logging
import sys
import traceback
from typing import Optional


def cmd_sourcemap(args: argparse.Namespace) -> int:
    """Build a source map document from a JSON list of mapping records."""
    from sprout.project.config import ConfigError, load_config
    from sprout.sourcemap import Mapping, SourceMapGenerator, sort_mappings

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ConfigError) as e:
        print(f"Error in configuration: {e}", file=sys.stderr)
        return 1

    try:
        with open(args.records, encoding="utf-8") as f:
            records = json.load(f)
        if not isinstance(records, list):
            raise ValueError(
                f"{args.records} must contain a list of records, got {type(records).__name__}"
            )
        line_base = 1 if args.one_based else 0
        mappings = sort_mappings(Mapping.from_record(r, line_base) for r in records)
    except (OSError, ValueError, KeyError, TypeError) as e:
        print(f"Error reading records: {e}", file=sys.stderr)
        if args.verbose:
            traceback.print_exc(file=sys.stderr)
        return 1

    sources = [args.source] if args.source else []
    sources_content = None
    if args.source and args.include_sources:
        try:
            with open(args.source, encoding="utf-8") as f:
                sources_content = [f.read()]
        except OSError as e:
            print(f"Error reading source: {e}", file=sys.stderr)
            return 1

    output = SourceMapGenerator().to_json(
        mappings,
        file=args.file or "",
        sources=sources,
        sources_content=sources_content,
        source_root=config.source_root,
        indent=2,
    )

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
            f.write("\n")
    else:
        print(output)
    return 0


def cmd_mappings(args: argparse.Namespace) -> int:
    """Print the absolute positions encoded in a mappings string."""
    from sprout.sourcemap import VLQDecodeError, decode_mappings

    try:
        mappings = decode_mappings(args.text)
    except VLQDecodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for m in mappings:
        print(
            f"{m.generated_line}:{m.generated_column} -> "
            f"{m.original_line}:{m.original_column}"
        )
    return 0


def cmd_vlq(args: argparse.Namespace) -> int:
    """Encode or decode base64 VLQ values."""
    from sprout.sourcemap import VLQDecodeError, decode_integers, encode_integers

    if args.action == "encode":
        try:
            values = [int(v) for v in args.values]
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(encode_integers(values))
        return 0

    if len(args.values) != 1:
        print("Error: vlq decode takes exactly one argument", file=sys.stderr)
        return 1
    try:
        print(" ".join(str(v) for v in decode_integers(args.values[0])))
    except VLQDecodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="sprout",
        description="Sprout - destructuring and source map tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  sprout sourcemap records.json --file out.php --source in.phel
  sprout mappings "AAAA;AACA,IAAG"
  sprout vlq encode 0 -1 1000000
  sprout vlq decode "AAgBC"
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging and tracebacks",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")

    sourcemap_parser = subparsers.add_parser(
        "sourcemap", help="Build a version 3 source map from mapping records"
    )
    sourcemap_parser.add_argument("records", help="JSON file with mapping records")
    sourcemap_parser.add_argument(
        "-o", "--output", help="Write the source map here instead of stdout"
    )
    sourcemap_parser.add_argument("--file", help="Name of the generated file")
    sourcemap_parser.add_argument("--source", help="Path of the original source file")
    sourcemap_parser.add_argument(
        "--include-sources",
        action="store_true",
        help="Embed the original source text as sourcesContent",
    )
    sourcemap_parser.add_argument(
        "--one-based",
        action="store_true",
        help="Record line numbers start at 1 (default: 0)",
    )
    sourcemap_parser.add_argument(
        "--config", help="Path to sprout.json (default: search upward from cwd)"
    )

    mappings_parser = subparsers.add_parser(
        "mappings", help="Decode a mappings string"
    )
    mappings_parser.add_argument("text", help="The mappings string")

    vlq_parser = subparsers.add_parser("vlq", help="Encode or decode base64 VLQ")
    vlq_parser.add_argument("action", choices=["encode", "decode"])
    vlq_parser.add_argument("values", nargs="+", help="Integers, or VLQ text")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the Sprout CLI. Calls sys.exit with return code."""
    sys.exit(_main(argv))


def _main(argv: Optional[list[str]] = None) -> int:
    """Internal main that returns exit code."""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.subcommand == "sourcemap":
        return cmd_sourcemap(args)
    elif args.subcommand == "mappings":
        return cmd_mappings(args)
    elif args.subcommand == "vlq":
        return cmd_vlq(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    main()
