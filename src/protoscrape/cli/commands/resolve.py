"""Resolve command - look up what lives at a dotted path."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, field

from protoscrape.registry import load_root
from protoscrape.resolve import resolve
from protoscrape.types import MessageTypeLike, ServiceLike


def describe_kind(obj: object) -> str:
    if isinstance(obj, type):
        return "message" if isinstance(obj, MessageTypeLike) else "class"
    if isinstance(obj, ServiceLike):
        return "service"
    if isinstance(obj, Mapping):
        return "namespace"
    return type(obj).__name__


@dataclass
class Resolve:
    """Resolve a dotted path against a root registry."""

    root: str = field(
        metadata={"help": "Root registry as package.module:attribute"},
    )
    path: str = field(
        metadata={"help": "Dotted path to look up (e.g., pkg.v1.Echo)"},
    )

    def run(self) -> int:
        """Execute the resolve command."""
        registry = load_root(self.root)
        found = resolve(self.path, registry)
        if found is None:
            print(f"error: nothing at path: {self.path}", file=sys.stderr)
            return 1

        print(f"Path: {self.path}")
        print(f"Kind: {describe_kind(found)}")
        print(f"Repr: {found!r}")
        return 0
