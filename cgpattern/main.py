"""Command-line interface for .cgp map pattern files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .codec.files import load_pattern, save_pattern, write_pattern
from .config.loader import LOG_LEVELS, ConfigLoader, ConfigLoadError, PatternConfig
from .errors import MapPatternError
from .pattern.map_pattern import MapPattern
from .pattern.prefab import Prefab
from .render.ascii_renderer import ASCIIRenderer
from .utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cgpattern",
        description="Inspect and rewrite 16x16 .cgp map pattern files",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: config/cgpattern.yaml)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override the configured log level"
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Accept any signed byte in parenthesized heights"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="Parse a pattern and print a summary")
    check.add_argument("file", type=Path)

    fmt = commands.add_parser("format", help="Rewrite a pattern in canonical form")
    fmt.add_argument("file", type=Path)
    fmt.add_argument(
        "-o", "--output",
        default=None,
        help="Name to save to instead of overwriting FILE"
    )

    show = commands.add_parser("show", help="Print an ASCII preview of a pattern")
    show.add_argument("file", type=Path)

    new = commands.add_parser("new", help="Write an empty pattern")
    new.add_argument("name")

    return parser


def summarize(pattern: MapPattern) -> str:
    """One-line description of a pattern."""
    levels = pattern.get_levels()
    placed = int((pattern.get_prefabs() != Prefab.EMPTY).sum())
    return f"levels {int(levels.min())}..{int(levels.max())}, {placed} prefabs placed"


def _load(args: argparse.Namespace, config: PatternConfig) -> MapPattern:
    return load_pattern(
        args.file,
        strict_levels=config.codec.strict_levels and not args.lenient,
        encoding=config.codec.encoding,
    )


def cmd_check(args: argparse.Namespace, config: PatternConfig) -> int:
    pattern = _load(args, config)
    print(f"{args.file}: ok ({summarize(pattern)})")
    return 0


def cmd_format(args: argparse.Namespace, config: PatternConfig) -> int:
    pattern = _load(args, config)
    if args.output is None:
        path = write_pattern(pattern, args.file, encoding=config.codec.encoding)
    else:
        path = save_pattern(
            pattern,
            args.output,
            extension=config.codec.extension,
            encoding=config.codec.encoding,
        )
    print(path)
    return 0


def cmd_show(args: argparse.Namespace, config: PatternConfig) -> int:
    pattern = _load(args, config)
    print(ASCIIRenderer().render_overview(pattern))
    return 0


def cmd_new(args: argparse.Namespace, config: PatternConfig) -> int:
    path = save_pattern(
        MapPattern.default(),
        args.name,
        extension=config.codec.extension,
        encoding=config.codec.encoding,
    )
    print(path)
    return 0


COMMANDS = {
    "check": cmd_check,
    "format": cmd_format,
    "show": cmd_show,
    "new": cmd_new,
}


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = ConfigLoader(args.config).load_config()
    except ConfigLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    setup_logging(
        log_dir=config.logging.log_dir,
        log_level=args.log_level or config.logging.level,
        enable_json=config.logging.enable_json,
    )

    try:
        return COMMANDS[args.command](args, config)
    except MapPatternError as e:
        logger.error("%s failed: %s", args.command, e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
