"""
Dictionary-like object with attribute access and dotted-path lookup.

DotDict backs the configuration object: `config.logging.level` and
`config.get("logging.level")` are equivalent.
"""

import builtins
from collections.abc import ItemsView, KeysView
from typing import Any


class DotDict:
    """
    Dictionary-like object with attribute-style access and nested structure support.

    Nested dictionaries are converted to DotDict instances on assignment.
    """

    # Keys that would shadow methods and are not allowed
    _RESERVED_KEYS = frozenset({"set", "clear", "dict", "to_dict", "get", "has"})

    def __init__(self, **kwargs: Any) -> None:
        self.set(**kwargs)

    def set(self, **kwargs: Any) -> "DotDict":
        """
        Set multiple key-value pairs, with automatic nested object creation.

        Returns:
            self: For method chaining
        """
        for key, val in kwargs.items():
            self._set_item(key, val)
        return self

    def _set_item(self, key: Any, val: Any) -> None:
        if not isinstance(key, str):
            key = str(key)

        if key in self._RESERVED_KEYS:
            raise ValueError(
                f"Key '{key}' is reserved and cannot be used (would shadow method)"
            )

        if isinstance(val, dict):
            setattr(self, key, DotDict(**val))
        elif isinstance(val, list):
            setattr(self, key, [DotDict(**v) if isinstance(v, dict) else v for v in val])
        else:
            setattr(self, key, val)

    def clear(self) -> None:
        """Clear all attributes from the object."""
        for k in list(self.__dict__.keys()):
            delattr(self, k)

    def _fields(self) -> builtins.dict[str, Any]:
        """Public fields; attributes starting with an underscore are bookkeeping."""
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    def to_dict(self) -> builtins.dict[str, Any]:
        """
        Recursively convert DotDict and all nested structures to plain dicts.

        Returns:
            dict: Fully converted dictionary with no DotDict instances
        """
        result: dict[str, Any] = {}
        for key, val in self._fields().items():
            if isinstance(val, DotDict):
                result[key] = val.to_dict()
            elif isinstance(val, list):
                result[key] = [
                    item.to_dict() if isinstance(item, DotDict) else item
                    for item in val
                ]
            else:
                result[key] = val
        return result

    def keys(self) -> KeysView[str]:
        return self._fields().keys()

    def items(self) -> ItemsView[str, Any]:
        return self._fields().items()

    def __contains__(self, key: Any) -> bool:
        return key in self._fields()

    def __getitem__(self, key: str) -> Any:
        return getattr(self, key) if key in self.__dict__ else None

    def __setitem__(self, key: str, val: Any) -> None:
        if key in self.__dict__:
            delattr(self, key)
        self._set_item(key, val)

    def __len__(self) -> int:
        return len(self._fields())

    def __str__(self) -> str:
        return str(self.to_dict())

    def has(self, path: str) -> bool:
        """
        Check if a dot-separated path exists in the object.

        Args:
            path: Dot-separated path to check (e.g., "logging.level")
        """
        missing = object()
        return self.get(path, missing) is not missing

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get value by dot-separated path.

        Follows standard dict.get() semantics: returns default if path not found.

        Args:
            path: Dot-separated path to get (e.g., "commands.progress.duration")
            default: Value to return if path not found

        Returns:
            Found value or default
        """
        components = [item for item in path.split(".") if item]
        if not components:
            return default

        cur: Any = self
        for item in components:
            if isinstance(cur, DotDict) and item in cur.__dict__:
                cur = cur.__dict__[item]
            else:
                return default
        return cur
