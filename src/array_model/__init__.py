"""
Read-only models over static lists of records.

The library only emits DEBUG log records and never adds handlers.
Applications configure logging with `array_model.logging_setup.setup_logging()`,
which reads the default level from `Settings.log_level` (ARRAY_MODEL_LOG_LEVEL).
"""

from array_model.errors import ArrayModelError, TypeMismatch, UnsupportedSource
from array_model.logging_setup import setup_logging
from array_model.model import ArrayModel, model_field
from array_model.validation import require_type

__all__ = [
    "ArrayModel",
    "model_field",
    "require_type",
    "setup_logging",
    "ArrayModelError",
    "TypeMismatch",
    "UnsupportedSource",
]
