"""Parameter sources consumed by expression nodes.

A parameter source is a total string lookup: every key maps to a string,
and unknown keys map to "". Callers cannot tell an absent key from a key
set to the empty string through this interface.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Params(Protocol):
    """Interface every parameter source must implement.

    Implementations must be side-effect free and safe for concurrent
    reads, since one tree may be evaluated from several threads at once.
    """

    def get(self, key: str) -> str: ...


class Map(dict[str, str]):
    """Parameter source backed by a plain mapping of strings.

    Usage:
        params = Map({"role": "admin"})
        params.get("role")     # "admin"
        params.get("missing")  # ""
    """

    def get(self, key: str, default: str = "") -> str:
        return super().get(key, default)

    def __repr__(self) -> str:
        return f"Map({dict.__repr__(self)})"
