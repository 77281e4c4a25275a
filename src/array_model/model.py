"""
ArrayModel - read-only models over static lists of records

Base class for ActiveRecord-style models built from plain lists of dicts.
Useful for small reference data (enumerations, lookup tables) that never
changes and does not deserve its own database table.

Example:

    USERS = [
        {"name": "Nathan", "year": 1984},
        {"name": "Dave", "year": 1987},
    ]

    class User(ArrayModel, data=USERS, readers=["name", "year"]):
        def age_in(self, year: int) -> int:
            return year - self.year

    User[0].age_in(2016)  # => 32
    User[1].name          # => "Dave"

Instances are read only: the backing record is exposed through a
read-only view and attributes cannot be assigned.
"""

import logging
import operator
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator, List, Optional

import pandas as pd

from array_model.errors import UnsupportedSource
from array_model.validation import require_type

logger = logging.getLogger(__name__)

# str/bytes are sequences to collections.abc but never a list of records
NOT_A_DATASET = (str, bytes, bytearray)

_MISSING = object()


def _by_position(data: Sequence, k: Any) -> Any:
    if isinstance(k, bool):
        return _MISSING
    try:
        position = operator.index(k)
    except TypeError:
        return _MISSING
    if -len(data) <= position < len(data):
        return data[position]
    return _MISSING


def _by_key(key: str) -> Callable[[Sequence, Any], Any]:
    def lookup(data: Sequence, k: Any) -> Any:
        for item_data in data:
            require_type(item_data, Mapping, "item_data")
            if item_data.get(key, _MISSING) == k:
                return item_data
        return _MISSING
    return lookup


class model_field:
    """
    Read-only attribute exposing one field of the backing record.

    Use in a class body, `first_name = model_field("name")`, or through
    `ArrayModel.attr_model_reader`. Without a key, the field read is the
    attribute's own name. Missing fields read as None.
    """

    def __init__(self, key: Optional[str] = None):
        self.key = key
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if self.key is None:
            self.key = name

    def __get__(self, instance: Optional["ArrayModel"], owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance[self.key]

    def __set__(self, instance: "ArrayModel", value: Any) -> None:
        raise AttributeError(f"{self.name} is read only")

    def __repr__(self) -> str:
        return f"model_field({self.key!r})"


class ArrayModelMeta(type):
    """Class-level sugar: `Model[k]`, `iter(Model)` and `len(Model)`."""

    def __getitem__(cls, k: Any) -> Optional["ArrayModel"]:
        return cls.get(k)

    def __iter__(cls) -> Iterator["ArrayModel"]:
        return iter(cls.all())

    def __len__(cls) -> int:
        return len(cls.all())

    def __bool__(cls) -> bool:
        # classes stay truthy whether or not they hold any records
        return True


class ArrayModel(metaclass=ArrayModelMeta):
    """
    Base class for read-only models over a list of dicts.

    Bind data with class keywords or `model_data`, declare readers with
    `model_field`, `attr_model_reader` or `attr_model_readers`, then look up
    records with `get` / `Model[k]` or list them with `all`.
    """

    _data: Any = None
    _data_key: Optional[str] = None
    _lookup: Callable[[Sequence, Any], Any] = staticmethod(_by_position)
    _all_memo: Optional[tuple] = None

    def __init_subclass__(cls, data: Optional[Sequence] = None, primary_key: Optional[str] = None,
                          readers: Optional[Iterable[str]] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if data is not None:
            cls.model_data(data, primary_key=primary_key)
        elif primary_key is not None:
            # re-key the inherited data
            cls.model_data(cls._data, primary_key=primary_key)
        if readers is not None:
            cls.attr_model_readers(readers)

    # ---- class-level configuration ----

    @classmethod
    def model_data(cls, data: Sequence, primary_key: Optional[str] = None) -> type:
        """
        Bind `data` (a list of dicts) to this model.

        Args:
            data: Ordered sequence of records. Records are checked when
                they are wrapped, not here.
            primary_key: Field used by `get` instead of list position

        Returns:
            The model class, so calls can be chained

        Raises:
            TypeMismatch: if data is not a sequence
        """
        require_type(data, Sequence, "data", exclude=NOT_A_DATASET)

        cls._data = data
        cls._data_key = primary_key
        cls._lookup = staticmethod(_by_position if primary_key is None else _by_key(primary_key))
        cls._all_memo = None

        logger.debug(f"Bound {len(data)} records to {cls.__name__} (primary_key={primary_key!r})")
        return cls

    bind = model_data

    @classmethod
    def attr_model_reader(cls, name: str, key: Optional[str] = None) -> model_field:
        """Declare a read-only attribute `name` returning field `key` (default: `name`)."""
        require_type(name, str, "name")
        field = model_field(key)
        setattr(cls, name, field)
        field.__set_name__(cls, name)
        return field

    @classmethod
    def attr_model_readers(cls, names: Iterable[str]) -> None:
        """Declare one reader per name, each reading the field of the same name."""
        for name in names:
            cls.attr_model_reader(name)

    # ---- lookups ----

    @classmethod
    def _source(cls) -> Sequence:
        data = cls._data
        if not isinstance(data, Sequence) or isinstance(data, NOT_A_DATASET):
            raise UnsupportedSource(
                f"{cls.__name__} does not support {type(data).__name__} as data source"
            )
        return data

    @classmethod
    def get(cls, k: Any) -> Optional["ArrayModel"]:
        """
        Look up one record.

        Without a primary key `k` is a list position; with one it is
        compared (==) against that field of each record, first match wins.
        Returns None when nothing matches.
        """
        item_data = cls._lookup(cls._source(), k)
        if item_data is _MISSING:
            return None
        return cls(item_data)

    @classmethod
    def all(cls) -> List["ArrayModel"]:
        """Every record wrapped in this model, in data order."""
        data = cls._source()

        # memo is per class and tied to the bound list
        memo = cls.__dict__.get("_all_memo")
        if memo is None or memo[0] is not data:
            memo = (data, [cls(item_data) for item_data in data])
            cls._all_memo = memo
            logger.debug(f"Materialized {len(memo[1])} {cls.__name__} records")

        return list(memo[1])

    @classmethod
    def to_frame(cls) -> pd.DataFrame:
        """
        All records as a DataFrame (a copy), indexed by the primary key
        when one is configured.
        """
        frame = pd.DataFrame.from_records([dict(item.values) for item in cls.all()])
        if cls._data_key is not None and cls._data_key in frame.columns:
            frame = frame.set_index(cls._data_key)
        return frame

    # ---- instances ----

    def __init__(self, item_data: Mapping):
        require_type(item_data, Mapping, "item_data")
        object.__setattr__(self, "_item_data", item_data)

    @property
    def values(self) -> Mapping:
        """Read-only view of the backing record."""
        return MappingProxyType(self._item_data)

    def __getitem__(self, k: Any) -> Any:
        return self._item_data.get(k)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} instances are read only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} instances are read only")

    # same class wrapping the same record object
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._item_data is other._item_data

    def __hash__(self) -> int:
        return hash((type(self), id(self._item_data)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._item_data)!r})"
