"""Command-line interface for pandoc-jekyll."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import core
from .directives import directive_by_key
from .version import __version__


def _get_usage() -> str:
    return (
        f"pandoc-jekyll {__version__}\n"
        "Usage:\n"
        "  pandoc-jekyll [--help] [--version|--ver]\n"
        "  pandoc-jekyll [TARGET_FORMAT] [options] < input.json > output.json\n"
        "  pandoc --filter pandoc-jekyll ...\n\n"
        "Options:\n"
        "  --input PATH                 Read the JSON AST from PATH instead of stdin\n"
        "  --output PATH                Write the JSON AST to PATH instead of stdout\n"
        "  --pretty                     Indent the output JSON\n"
        "  --disable-gallery            Leave json gallery blocks untouched\n"
        "  --skip-directive KEY         Do not promote KEY (tags, cover, summary, lang)\n"
        "  --verbose                    Verbose progress logs\n"
        "  --debug                      Debug logs"
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("target_format", nargs="?", help="Output format passed by pandoc to filters")
    parser.add_argument("--help", action="store_true")
    parser.add_argument("--version", action="store_true")
    parser.add_argument("--ver", action="store_true")
    parser.add_argument("--input", help="Path of the JSON AST to read (default: stdin)")
    parser.add_argument("--output", help="Path of the JSON AST to write (default: stdout)")
    parser.add_argument("--pretty", action="store_true", help="Indent the output JSON")
    parser.add_argument("--disable-gallery", action="store_true", help="Skip gallery block transformation")
    parser.add_argument(
        "--skip-directive",
        action="append",
        default=[],
        metavar="KEY",
        help="Directive metadata key to leave in the document (repeatable)",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose progress logs")
    parser.add_argument("--debug", action="store_true", help="Debug logs")
    return parser


def _validate_skipped_directives(keys: list[str]) -> str | None:
    for key in keys:
        if directive_by_key(key) is None:
            return f"Invalid value for --skip-directive: {key}"
    return None


def _build_config(args: argparse.Namespace, debug: bool) -> core.FilterConfig:
    skipped = set(args.skip_directive)
    return core.FilterConfig(
        verbose=bool(args.verbose),
        debug=debug,
        enable_gallery=not args.disable_gallery,
        directives=tuple(d for d in core.DIRECTIVES if d.key not in skipped),
        indent=2 if args.pretty else None,
    )


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        print(_get_usage())
        return 2

    if args.help:
        print(_get_usage())
        return 0

    if args.version or args.ver:
        print(__version__)
        return 0

    directive_error = _validate_skipped_directives(args.skip_directive)
    if directive_error:
        print(directive_error, file=sys.stderr)
        return core.EXIT_INVALID_ARGS

    debug = bool(args.debug) or core.is_debug_env()
    core.setup_logging(args.verbose, debug)
    if args.target_format:
        core.LOG.debug("Target format: %s", args.target_format)

    config = _build_config(args, debug)

    if args.input:
        input_path = Path(args.input).expanduser().resolve()
        if not input_path.exists() or not input_path.is_file():
            print(f"Input file not found: {input_path}", file=sys.stderr)
            return core.EXIT_INVALID_ARGS
        try:
            with input_path.open("r", encoding="utf-8") as stream:
                document = core.load_document(stream)
        except ValueError as exc:
            print(str(exc), file=sys.stderr)
            return core.EXIT_INVALID_INPUT
    else:
        try:
            document = core.load_document(sys.stdin)
        except ValueError as exc:
            print(str(exc), file=sys.stderr)
            return core.EXIT_INVALID_INPUT

    try:
        result = core.run_filter(document, config)
    except RuntimeError as exc:
        print(f"Filter failed: {exc}", file=sys.stderr)
        return core.EXIT_STRUCTURE

    if not args.output:
        core.dump_document(result, sys.stdout, indent=config.indent)
        return 0

    output_path = Path(args.output).expanduser().resolve()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8", newline="\n") as stream:
            core.dump_document(result, stream, indent=config.indent)
    except OSError as exc:
        print(f"Unable to write output {output_path}: {exc}", file=sys.stderr)
        return core.EXIT_OUTPUT
    core.LOG.info("Filtered AST written to %s", output_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
