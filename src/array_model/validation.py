"""Stand-alone type checks used when binding data and building records."""

from typing import Any, Optional, Tuple, Type, Union

from array_model.errors import TypeMismatch

TypeSpec = Union[Type, Tuple[Type, ...]]


def _type_name(t: TypeSpec) -> str:
    if isinstance(t, tuple):
        return " or ".join(_type_name(x) for x in t)
    return getattr(t, "__name__", repr(t))


def require_type(value: Any, expected: TypeSpec, name: Optional[str] = None,
                 exclude: Tuple[Type, ...] = ()) -> Any:
    """
    Return `value` unchanged if it is an instance of `expected`.

    Args:
        value: Object to check
        expected: A type or tuple of types (abstract base classes work)
        name: Argument name to mention in the error message
        exclude: Types rejected even though they match `expected`
            (e.g. str is a Sequence but never a dataset)

    Raises:
        TypeMismatch: if the check fails
    """
    if isinstance(value, expected) and not (exclude and isinstance(value, exclude)):
        return value

    actual = type(value).__name__
    if name is None:
        raise TypeMismatch(f"expected {_type_name(expected)} but got {actual}")
    raise TypeMismatch(f"{name} requires {_type_name(expected)} but got {actual}")
