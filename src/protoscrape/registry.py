"""Root registries.

A root registry is a nested mapping of namespace segments to either nested
registries or leaf definitions (message classes, service instances). Building
it is up to the caller; this module only holds the process-wide default and
loads roots named on the command line.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from typing import Any

# used by every operation that is not handed a root explicitly
DEFAULT_ROOT: dict[str, Any] = {}


def get_root(root: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    """Return root, or the default root when none is given."""
    return DEFAULT_ROOT if root is None else root


def load_root(spec: str) -> Any:
    """Import a root registry from a ``package.module:attribute`` spec.

    Dotted attributes after the colon are followed, so ``pkg.gen:roots.default``
    works. Raises ValueError for a malformed spec; import and attribute errors
    propagate.
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"root spec must look like 'module:attribute': {spec!r}")

    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    return obj
