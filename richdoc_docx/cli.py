"""
Command-line interface for richdoc_docx.

Usage:
    richdoc-docx convert model.json --output document.docx
    richdoc-docx convert model.json --title "Quarterly report"
    richdoc-docx version
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .api import export_docx_sync
from .config import ExportOptions
from .exceptions import RichDocExportError
from .utils.rich_logger import LOG_LEVELS, setup_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="richdoc-docx",
        description="Export rich document models (JSON) to DOCX",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  richdoc-docx convert model.json --output out.docx
  richdoc-docx --log-level DEBUG convert model.json
  richdoc-docx version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--no-rich",
        action="store_true",
        help="Use plain log output instead of rich formatting"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    convert_parser = subparsers.add_parser("convert", help="Convert a JSON document model to DOCX")
    convert_parser.add_argument("input", help="Input JSON file")
    convert_parser.add_argument(
        "-o", "--output",
        help="Output file path (default: input name with .docx extension)"
    )
    convert_parser.add_argument("--title", help="Document title")
    convert_parser.add_argument("--creator", help="Document author")

    subparsers.add_parser("version", help="Show version information")

    return parser


def cmd_convert(args) -> int:
    """Convert a JSON payload file to DOCX."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    output_path = Path(args.output) if args.output else input_path.with_suffix(".docx")

    try:
        payload = json.loads(input_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        print(f"Error: Cannot read document model from {input_path}: {e}", file=sys.stderr)
        return 1

    option_values = {"title": args.title}
    if args.creator:
        option_values["creator"] = args.creator
    options = ExportOptions(**option_values)

    try:
        data = export_docx_sync(payload, options)
    except RichDocExportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    logger.info(f"Saved {output_path} ({len(data)} bytes)")
    print(f"Saved: {output_path}")
    return 0


def cmd_version(args=None) -> int:
    """Show version information."""
    from . import __version__
    print(f"richdoc-docx v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, use_rich=not args.no_rich)

    if args.command == "convert":
        return cmd_convert(args)
    elif args.command == "version":
        return cmd_version(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
