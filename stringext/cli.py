"""Command-line interface."""

import argparse

from stringext.core.operations import OPERATIONS
from stringext.utils.constants import Constants


def format_operation_list() -> str:
    """One 'name  description' line per registered operation."""
    width = max(len(name) for name in OPERATIONS)
    return "\n".join(
        f"  {name.ljust(width)}  {op.description}" for name, op in sorted(OPERATIONS.items())
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="stringext",
        description="Apply a string normalization, encoding or validation helper to text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Slug a title
  %(prog)s slug "Crème Brûlée, Recipe #2"

  # Decode Base64 lines from a file, one result per line
  %(prog)s base64-decode -i encoded.txt --skip-blank

  # Parse query strings from stdin and emit YAML
  cat queries.txt | %(prog)s parse-query -f yaml

  # Using JSON config (CLI args override JSON values)
  %(prog)s --config config.json -v

Example config.json:
{
  "operation": "slug",
  "input": "~/titles.txt",
  "output": "./slugs.json",
  "output_format": "json",
  "strip_lines": true,
  "skip_blank": true,
  "verbose": true
}

Use --list-operations to see every operation.
        """,
    )

    # Operation and inputs
    parser.add_argument(
        "operation", nargs="?", help="Operation to apply (see --list-operations)"
    )
    parser.add_argument(
        "texts", nargs="*", help="Input texts (default: read lines from --input or stdin)"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument(
        "-i", "--input", type=str, help="File with one input per line ('-' for stdin)"
    )

    # Output
    parser.add_argument("-o", "--output", type=str, help="Output file (default: stdout)")
    parser.add_argument(
        "-f",
        "--format",
        dest="output_format",
        choices=Constants.OUTPUT_FORMATS,
        help="Output format (default: text)",
    )

    # Input shaping
    parser.add_argument(
        "--strip", dest="strip_lines", action="store_true", help="Trim each input line"
    )
    parser.add_argument("--skip-blank", action="store_true", help="Ignore blank input lines")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Debug logging (fallback paths, timings)"
    )
    parser.add_argument(
        "--list-operations", action="store_true", help="List available operations and exit"
    )

    return parser
