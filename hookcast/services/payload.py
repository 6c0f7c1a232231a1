"""Tolerant lookups over decoded webhook payloads."""

from __future__ import annotations

from typing import Any, Mapping, Sequence


class _Absent:
    """Marker for a value that could not be reached."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def is_present(value: Any) -> bool:
    return value is not ABSENT


class Payload:
    """
    Read-only view over one event payload.

    ``extract`` descends through mappings by key and through sequences by
    integer index. A missing step, a JSON ``null`` or a step into a value of
    the wrong shape all collapse to :data:`ABSENT`; lookups never raise.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None):
        self._data = data if isinstance(data, Mapping) else {}

    def extract(self, *path: str | int) -> Any:
        current: Any = self._data
        for step in path:
            if isinstance(current, Mapping):
                if step not in current:
                    return ABSENT
                current = current[step]
            elif (
                isinstance(step, int)
                and isinstance(current, Sequence)
                and not isinstance(current, (str, bytes))
            ):
                if not -len(current) <= step < len(current):
                    return ABSENT
                current = current[step]
            else:
                return ABSENT
            if current is None:
                return ABSENT
        return current

    def text(self, *path: str | int) -> str:
        """Like :meth:`extract`, but renders absent values as ``""``."""
        value = self.extract(*path)
        if not is_present(value):
            return ""
        return str(value)

    def __repr__(self) -> str:
        return f"Payload({self._data!r})"
