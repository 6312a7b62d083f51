"""Shared state bag passed between nodes of one authentication attempt."""

from collections import OrderedDict
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, Union

Key = Union[str, Enum]


def _key(key: Key) -> str:
    return key.value if isinstance(key, Enum) else key


class SharedState(MutableMapping):
    """Ordered key/value bag owned by a single authentication attempt.

    Keys are strings (well-known keys may be passed as ``StateKey``).
    Values are strings, lists of strings, nested maps or opaque JSON.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._data: "OrderedDict[str, Any]" = OrderedDict()
        if initial:
            for key, value in initial.items():
                self[key] = value

    def __getitem__(self, key: Key) -> Any:
        return self._data[_key(key)]

    def __setitem__(self, key: Key, value: Any) -> None:
        self._data[_key(key)] = value

    def __delitem__(self, key: Key) -> None:
        del self._data[_key(key)]

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Enum):
            key = key.value
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SharedState({dict(self._data)!r})"

    def is_defined(self, key: Key) -> bool:
        """A key is defined when present with a non-null value."""
        return self._data.get(_key(key)) is not None

    def get_str(self, key: Key) -> Optional[str]:
        """Read a value as a string, or None when undefined."""
        value = self._data.get(_key(key))
        return None if value is None else str(value)

    def put(self, key: Key, value: Any) -> "SharedState":
        """Write a value and return self for chaining."""
        self[key] = value
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict copy, in insertion order."""
        return dict(self._data)
