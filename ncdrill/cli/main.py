"""
CLI entry point for the ncdrill command.

Parses a drill file and prints the resulting command stream.
"""

import argparse
import json
import logging
import sys

from ncdrill import config
from ncdrill.config import TRACE
from ncdrill.drill import DrillInterpreter, summarize
from ncdrill.protocol import wire
from ncdrill.utils.errors import CoordinateDecodeError

logger = logging.getLogger("ncdrill.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse an Excellon drill program")
    parser.add_argument("file", help="Drill file to parse")
    parser.add_argument("--format", choices=["wire", "json"], default="wire",
                        help="Output encoding for commands (default: wire)")
    parser.add_argument("--summary", action="store_true",
                        help="Print hit/tool statistics after the commands")
    parser.add_argument("--stash-limit", type=int, default=None,
                        help=f"Blocks held before assuming trailing suppression (default: {config.STASH_LIMIT})")

    # Verbose logging options
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Enable quiet logging (ERROR level)")
    parser.add_argument("--log-level", choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set specific log level")
    return parser


def resolve_log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        return TRACE if args.log_level == "TRACE" else getattr(logging, args.log_level)
    if args.verbose >= 3 or config.TRACE_ENABLED:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.ERROR
    return getattr(logging, config.LOG_LEVEL_DEFAULT, logging.INFO)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the drill parser CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=resolve_log_level(args),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    interpreter = DrillInterpreter(stash_limit=args.stash_limit)
    try:
        program = interpreter.load_file(args.file)
    except OSError as e:
        logger.error(f"Failed to read {args.file}: {e}")
        return 1
    except CoordinateDecodeError as e:
        line = e.line if e.line is not None else interpreter.line_number
        logger.error(f"{args.file}:{line}: {e}")
        return 1

    encode = wire.encode_json if args.format == "json" else wire.encode_command
    for command in program:
        print(encode(command))

    if args.summary:
        stats = summarize(program)
        stats["warnings"] = interpreter.warnings + stats["warnings"]
        print(json.dumps(stats, indent=2), file=sys.stderr)

    logger.info(f"{len(program)} commands, {len(interpreter.warnings)} warnings")
    return 0


def main_entry():
    """Entry point for the ncdrill command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
