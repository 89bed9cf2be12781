"""StringExt - string normalization, encoding and validation helpers.

Pure, stateless functions over a single string: slugs, diacritic removal,
grapheme clusters, Base64, hashing, query strings, lenient conversion and
format checks.
"""

from loguru import logger

from .core import Config, load_config
from .processing import run_pipeline
from .text import (
    TextElements,
    base64_decode,
    base64_encode,
    grapheme_clusters,
    parse_query_string,
    remove_diacritics,
    to_slug,
)

# Silent as a library; setup_logger() re-enables output for the CLI
logger.disable(__name__)

__version__ = "0.1.0"
__all__ = [
    "Config",
    "TextElements",
    "base64_decode",
    "base64_encode",
    "grapheme_clusters",
    "load_config",
    "parse_query_string",
    "remove_diacritics",
    "run_pipeline",
    "to_slug",
]
