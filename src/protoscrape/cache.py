"""Process-wide side tables of reflected metadata.

Records are keyed by kind ("message" or "service") and object identity, so
one object reflected both ways keeps two records. Each record holds a strong
reference to the object it describes, so an id is never reused while its
entry lives. Access is unguarded; a racing first reflection only computes
the same record twice.
"""

from __future__ import annotations

from typing import Any

_reflected: dict[tuple[str, int], Any] = {}


def get_cached(kind: str, target: Any) -> Any | None:
    return _reflected.get((kind, id(target)))


def store(kind: str, target: Any, record: Any) -> Any:
    _reflected[(kind, id(target))] = record
    return record


def is_reflected(target: Any, kind: str | None = None) -> bool:
    """True if target has already been reflected, as kind if given."""
    if kind is not None:
        return (kind, id(target)) in _reflected
    return any(key[1] == id(target) for key in _reflected)


def clear_cache() -> None:
    """Forget every reflected record."""
    _reflected.clear()
