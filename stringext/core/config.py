"""Configuration model and loading for the command-line pipeline."""

import argparse
import json
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from stringext.core.operations import OPERATIONS, normalize_operation_name
from stringext.utils.helpers import expand_file_path, split_lines

# CLI arguments that map straight onto Config fields
_ARG_FIELDS = (
    "operation",
    "texts",
    "input",
    "output",
    "output_format",
    "strip_lines",
    "skip_blank",
    "verbose",
    "debug",
)


class Config(BaseModel):
    """Settings for one pipeline run."""

    operation: str
    texts: list[str] = Field(default_factory=list)
    input: str | None = None
    output: str | None = None
    output_format: Literal["text", "json", "yaml"] = "text"
    strip_lines: bool = False
    skip_blank: bool = False
    verbose: bool = False
    debug: bool = False

    @field_validator("operation")
    @classmethod
    def canonical_operation(cls, v: str) -> str:
        """Accept any case and '_' separators, reject unknown names."""
        name = normalize_operation_name(v)
        if name not in OPERATIONS:
            raise ValueError(f"unknown operation {v!r}; choose from {', '.join(sorted(OPERATIONS))}")
        return name

    @field_validator("texts", mode="before")
    @classmethod
    def parse_string_list(cls, v):
        """Allow texts as a newline-separated string in JSON config files."""
        if v is None:
            return []
        if isinstance(v, str):
            return split_lines(v)
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        if self.texts and self.input:
            raise ValueError("give either positional texts or --input, not both")
        return self


def _load_json_config(config_file: str) -> dict:
    path = expand_file_path(config_file) or config_file
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{config_file}: top-level JSON value must be an object")
    return data


def load_config(
    config_file: str | None,
    args: argparse.Namespace | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> Config:
    """Build a Config from an optional JSON file overridden by CLI arguments.

    CLI values override JSON values unless they are None (or an empty list
    of texts, or an unset flag), so a JSON file can supply everything the
    command line leaves out.

    Args:
        config_file: Path to a JSON config file, or None
        args: Parsed command-line arguments
        parser: Parser used to report errors; without one errors are raised

    Returns:
        Validated configuration

    Raises:
        ValueError: On invalid settings when no parser is given
        OSError: If the config file cannot be read and no parser is given
    """
    settings: dict = {}
    try:
        if config_file:
            settings.update(_load_json_config(config_file))

        if args is not None:
            for field in _ARG_FIELDS:
                value = getattr(args, field, None)
                if value is None or value is False or value == []:
                    continue
                settings[field] = value

        return Config(**settings)
    except (OSError, ValueError) as e:
        # ValidationError and JSONDecodeError are both ValueError subclasses
        if parser is None:
            raise
        message = _format_validation_error(e) if isinstance(e, ValidationError) else str(e)
        parser.error(message)
        raise  # unreachable, parser.error exits


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(loc) for loc in err["loc"]) or "config"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)
