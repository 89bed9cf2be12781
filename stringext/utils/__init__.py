"""Utility functions for StringExt."""

from stringext.utils.constants import Constants
from stringext.utils.helpers import (
    expand_file_path,
    read_input_lines,
    split_lines,
    write_file_safely,
)
from stringext.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "read_input_lines",
    "setup_logger",
    "split_lines",
    "write_file_safely",
]
