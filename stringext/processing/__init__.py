"""Processing pipeline for StringExt."""

from .output import format_text_value, generate_output
from .pipeline import apply_operation, collect_inputs, run_pipeline

__all__ = [
    "apply_operation",
    "collect_inputs",
    "format_text_value",
    "generate_output",
    "run_pipeline",
]
