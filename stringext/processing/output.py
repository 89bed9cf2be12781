"""Output generation for pipeline results."""

import json
import sys
from typing import Any, TextIO

import yaml
from loguru import logger

from stringext.core import OperationResult
from stringext.utils.helpers import write_file_safely


def format_text_value(value: Any) -> str:
    """Render one operation output as a single line of text.

    Lists are joined with spaces, dicts become k=v pairs, booleans are
    lowercase and None prints as an empty line.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict):
        return " ".join(f"{k}={v}" for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def result_to_record(result: OperationResult) -> dict:
    """Convert a result to a plain dict for JSON/YAML serialization."""
    return {"input": result.input, "output": result.output}


def _write_text(results: list[OperationResult], f: TextIO) -> None:
    for result in results:
        f.write(format_text_value(result.output) + "\n")


def _write_json(results: list[OperationResult], f: TextIO) -> None:
    records = [result_to_record(r) for r in results]
    json.dump(records, f, ensure_ascii=False, indent=2)
    f.write("\n")


def _write_yaml(results: list[OperationResult], f: TextIO) -> None:
    records = [result_to_record(r) for r in results]
    yaml.safe_dump(records, f, allow_unicode=True, sort_keys=False, default_flow_style=False)


_WRITERS = {
    "text": _write_text,
    "json": _write_json,
    "yaml": _write_yaml,
}


def generate_output(
    results: list[OperationResult],
    output_path: str | None,
    output_format: str = "text",
    verbose: bool = False,
) -> None:
    """Write results to output_path, or to stdout when it is None.

    Raises:
        ValueError: If output_format is not text, json or yaml
    """
    if output_format not in _WRITERS:
        raise ValueError(f"Invalid output format: {output_format}")
    writer = _WRITERS[output_format]

    if output_path:
        write_file_safely(output_path, lambda f: writer(results, f), "writing results")
        if verbose:
            logger.info(f"Wrote {len(results)} results to {output_path}")
    else:
        writer(results, sys.stdout)
