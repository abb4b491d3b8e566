"""Namespace lookup: where does a type live in a root registry?"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import ModuleType, SimpleNamespace
from typing import Any

from protoscrape.registry import get_root


def namespace_items(node: Any) -> Iterable[tuple[str, Any]] | None:
    """Children of a registry node, or None if node is a leaf.

    Mappings are iterated directly; modules and SimpleNamespace nodes, which
    resolve() walks by attribute, through vars().
    """
    if isinstance(node, Mapping):
        return node.items()
    if isinstance(node, ModuleType | SimpleNamespace):
        return (
            (key, value)
            for key, value in vars(node).items()
            if not key.startswith("__") and not _foreign_module(node, value)
        )
    return None


def _foreign_module(node: Any, value: Any) -> bool:
    # only a module's own submodules are part of its namespace
    if not isinstance(node, ModuleType) or not isinstance(value, ModuleType):
        return False
    return not value.__name__.startswith(node.__name__ + ".")


def find_ns(target: Any, root: Any = None) -> str:
    """Return the dotted path of the registry that holds target.

    Entries are visited depth-first in the registry's own iteration order and
    the first hit wins. An entry matches when it is the target's class (for
    service and message instances) or the target itself (for message
    classes). Returns "" when target is not reachable or root is not a
    registry; also "" when target sits directly in root.
    """
    return _search(target, type(target), get_root(root), "", set())


def _search(
    target: Any, target_type: type, node: Any, path: str, seen: set[int]
) -> str:
    items = namespace_items(node)
    if items is None or id(node) in seen:
        return ""
    # modules can import each other
    seen.add(id(node))

    for key, entry in items:
        if entry is target_type or entry is target:
            return path
        res = _search(
            target, target_type, entry, f"{path}.{key}" if path else key, seen
        )
        if res:
            return res
    return ""
