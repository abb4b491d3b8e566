"""Dotted-path lookup in a root registry.

Absence and wrong kind are different outcomes: a missing path resolves to
None, while a path holding something of the wrong kind raises
TypeKindMismatch.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from protoscrape.registry import get_root
from protoscrape.types import MessageTypeLike, ServiceLike, TypeKindMismatch


def resolve(path: str, root: Mapping[str, Any] | None = None) -> Any | None:
    """Walk path segment by segment from root.

    Mapping nodes are indexed, anything else is looked up by attribute.
    Returns None as soon as a segment is missing.
    """
    cur: Any = get_root(root)
    for part in path.split("."):
        if cur is None:
            return None
        if isinstance(cur, Mapping):
            cur = cur.get(part)
        else:
            cur = getattr(cur, part, None)
    return cur


def resolve_message(
    path: str, root: Mapping[str, Any] | None = None
) -> MessageTypeLike | None:
    """Resolve path to a message class.

    Raises:
        TypeKindMismatch: path holds something without fromObject.
    """
    resolved = resolve(path, root)
    if resolved is None:
        return None
    if not isinstance(resolved, MessageTypeLike):
        raise TypeKindMismatch(path, "message")
    return resolved


def resolve_service(
    path: str, root: Mapping[str, Any] | None = None
) -> ServiceLike | None:
    """Resolve path to a service instance.

    Raises:
        TypeKindMismatch: path holds something that is not a service
            instance (a service class is not enough).
    """
    resolved = resolve(path, root)
    if resolved is None:
        return None
    if isinstance(resolved, type) or not isinstance(resolved, ServiceLike):
        raise TypeKindMismatch(path, "service")
    return resolved
