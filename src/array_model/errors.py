"""
Error taxonomy for array models.

Absent records are not errors: lookups return None for those.
"""


class ArrayModelError(Exception):
    """Base class for array model failures."""


class TypeMismatch(ArrayModelError, TypeError):
    """Raised when a dataset or record does not have the required shape."""


class UnsupportedSource(ArrayModelError):
    """Raised when a model's bound data is not something it can enumerate."""
