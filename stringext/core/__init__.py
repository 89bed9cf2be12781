"""Configuration and operation registry for StringExt."""

from .config import Config, load_config
from .operations import OPERATIONS, Operation, OperationResult, get_operation

__all__ = [
    "Config",
    "OPERATIONS",
    "Operation",
    "OperationResult",
    "get_operation",
    "load_config",
]
