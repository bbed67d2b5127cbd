"""
Typed keys and the per-request option bag.

A key carries only a name; its type parameter tells type checkers what kind
of value lives under that name, so ``options.try_get_value(TIMEOUT_KEY)`` is
known to be an ``Optional[int]`` without a cast at the call site.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, MutableMapping, Optional, TypeVar

TValue = TypeVar("TValue")


@dataclass(frozen=True)
class HttpRequestOptionsKey(Generic[TValue]):
    """Name of an HTTP request option, tagged with the option's value type."""
    
    name: str
    
    def __str__(self) -> str:
        return self.name


AGENT_KEY: HttpRequestOptionsKey[str] = HttpRequestOptionsKey("Autodesk.Forge.Agent")
SCOPE_KEY: HttpRequestOptionsKey[str] = HttpRequestOptionsKey("Autodesk.Forge.Scope")
TIMEOUT_KEY: HttpRequestOptionsKey[int] = HttpRequestOptionsKey("Autodesk.Forge.Timeout")


class HttpRequestOptions(MutableMapping[str, Any]):
    """
    Heterogeneous options attached to a single outgoing request.
    
    Entries are stored by key name. Use ``set`` and ``try_get_value`` with a
    typed key; plain mapping access by name is available for code that only
    knows the string.
    """
    
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})
    
    def set(self, key: HttpRequestOptionsKey[TValue], value: TValue) -> None:
        """Store a value under a typed key."""
        self._values[key.name] = value
    
    def try_get_value(self, key: HttpRequestOptionsKey[TValue]) -> Optional[TValue]:
        """Get the value stored under a typed key, or None if it is not set."""
        return self._values.get(key.name)
    
    def get_value(self, key: HttpRequestOptionsKey[TValue]) -> TValue:
        """Get the value stored under a typed key, raising KeyError if it is not set."""
        return self._values[key.name]
    
    def __getitem__(self, name: str) -> Any:
        return self._values[name]
    
    def __setitem__(self, name: str, value: Any) -> None:
        self._values[name] = value
    
    def __delitem__(self, name: str) -> None:
        del self._values[name]
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._values)
    
    def __len__(self) -> int:
        return len(self._values)
    
    def __repr__(self) -> str:
        return f"HttpRequestOptions({self._values!r})"
