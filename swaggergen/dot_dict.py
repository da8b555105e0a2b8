"""
Mapping with attribute access and dotted-path lookups.

Configuration sections are DotDict instances, so `cfg.dbs.db.url` and
`cfg.get("dbs.db.url")` reach the same value.
"""

from __future__ import annotations

from collections.abc import ItemsView, Iterator, KeysView, ValuesView
from typing import Any

_MISSING = object()


def _wrap(value: Any) -> Any:
    if isinstance(value, dict):
        return DotDict(**{str(k): v for k, v in value.items()})
    if isinstance(value, list):
        return [_wrap(item) for item in value]
    return value


def _unwrap(value: Any) -> Any:
    if isinstance(value, DotDict):
        return value.to_dict()
    if isinstance(value, list):
        return [_unwrap(item) for item in value]
    return value


class DotDict:
    """
    Configuration section.

    Values are stored by key; dictionaries become nested DotDicts and the
    entries of lists are converted the same way. Names starting with "_"
    are ordinary attributes and never part of the data, which lets
    subclasses keep their own state.

    Keys named like a method or property ("items", "get", ...) are kept as
    data and reached with `get()` or `[]`; only assigning them as attributes
    is refused.
    """

    def __init__(self, /, **kwargs: Any) -> None:
        object.__setattr__(self, "_data", {})
        self.set(**kwargs)

    def set(self, /, **kwargs: Any) -> DotDict:
        """Store several keys at once; returns self."""
        for key, value in kwargs.items():
            self._store(key, value)
        return self

    def _store(self, key: Any, value: Any) -> None:
        self._data[str(key)] = _wrap(value)

    def _lookup(self, path: str) -> Any:
        current: Any = self
        for part in path.split("."):
            if not part:
                continue
            if not isinstance(current, DotDict) or part not in current._data:
                return _MISSING
            current = current._data[part]
        return current

    def __getattr__(self, name: str) -> Any:
        data = self.__dict__.get("_data")
        if data is None or name not in data:
            raise AttributeError(name)
        return data[name]

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
        elif hasattr(type(self), name):
            raise ValueError(f"Key '{name}' is reserved and cannot be set as an attribute")
        else:
            self._store(name, value)

    def __getitem__(self, key: str) -> Any:
        """Value of `key`, or None when absent."""
        return self._data.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self._store(key, value)

    def __contains__(self, key: Any) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return str(self.dict())

    def keys(self) -> KeysView[str]:
        return self._data.keys()

    def values(self) -> ValuesView[Any]:
        return self._data.values()

    def items(self) -> ItemsView[str, Any]:
        return self._data.items()

    def has(self, path: str) -> bool:
        """Whether a dotted path such as "dbs.db.url" exists."""
        return bool(path) and self._lookup(path) is not _MISSING

    def get(self, path: str, default: Any = None) -> Any:
        """Value at a dotted path, or `default` like dict.get()."""
        if not path:
            return default
        value = self._lookup(path)
        return default if value is _MISSING else value

    def dict(self) -> dict[str, Any]:
        """Plain dictionary of nested sections; lists are returned as stored."""
        return {
            k: v.dict() if isinstance(v, DotDict) else v for k, v in self._data.items()
        }

    def to_dict(self) -> dict[str, Any]:
        """Fully plain copy, including sections inside lists."""
        return {k: _unwrap(v) for k, v in self._data.items()}


class DotDictPathNotFoundError(Exception):
    """A dotted path does not exist in a DotDict."""

    def __init__(self, obj: DotDict, path: str) -> None:
        super().__init__(f"Path not found: {path}")
        self.obj = obj
        self.path = path
