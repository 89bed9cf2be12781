"""Shared file helpers for the command-line pipeline."""

import os
import sys
from pathlib import Path
from typing import Callable, TextIO

from loguru import logger

from stringext.utils.constants import Constants


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def split_lines(text: str) -> list[str]:
    """Split text into records on LF only, dropping a trailing CR from each.

    Form feeds, U+2028 and the other characters str.splitlines() treats as
    breaks stay inside the record. A final LF does not start an empty record.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_input_lines(filepath: str | None) -> list[str]:
    """Read input lines from a file, or from stdin when filepath is None or '-'.

    Line terminators are removed; everything else on the line is kept.
    """
    if not filepath or filepath == Constants.STDIN_MARKER:
        return split_lines(sys.stdin.read())

    path = Path(expand_file_path(filepath) or filepath)
    with open(path, "r", encoding=Constants.DEFAULT_ENCODING, newline="") as f:
        return split_lines(f.read())


def write_file_safely(
    filepath: str | Path, write_content: Callable[[TextIO], None], description: str
) -> None:
    """Open filepath for writing, creating parent directories, and run write_content.

    Args:
        filepath: Destination file
        write_content: Callback receiving the open text file
        description: Short action description used in the error log

    Raises:
        OSError: If the file cannot be created or written
    """
    path = Path(expand_file_path(str(filepath)) or filepath)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding=Constants.DEFAULT_ENCODING) as f:
            write_content(f)
    except OSError as e:
        logger.error(f"Error {description} to {path}: {e}")
        raise
