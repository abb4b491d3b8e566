"""Reflect commands - print recovered fields and methods."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field

from protoscrape.message import reflect_message
from protoscrape.registry import load_root
from protoscrape.resolve import resolve_message, resolve_service
from protoscrape.service import reflect_service


@dataclass
class Message:
    """Reflect a message type and list its fields."""

    root: str = field(
        metadata={"help": "Root registry as package.module:attribute"},
    )
    path: str = field(
        metadata={"help": "Dotted path of the message type"},
    )
    json: bool = field(
        default=False,
        metadata={"help": "Output as JSON"},
    )

    def run(self) -> int:
        """Execute the message command."""
        registry = load_root(self.root)
        message_type = resolve_message(self.path, registry)
        if message_type is None:
            print(f"error: no message at path: {self.path}", file=sys.stderr)
            return 1

        reflected = reflect_message(message_type, registry)
        if self.json:
            print(json.dumps(reflected.to_dict(), indent=2))
            return 0

        print(f"Message:   {reflected.full_name}")
        print(f"Source:    {reflected.source}")
        print(f"\nFields ({len(reflected.fields_array)}):")
        for f in reflected.fields_array:
            print(f"  {f.id:3}  {f.name:<24} {f.type}")
        return 0


@dataclass
class Service:
    """Reflect a service instance and list its RPC methods."""

    root: str = field(
        metadata={"help": "Root registry as package.module:attribute"},
    )
    path: str = field(
        metadata={"help": "Dotted path of the service instance"},
    )
    json: bool = field(
        default=False,
        metadata={"help": "Output as JSON"},
    )

    def run(self) -> int:
        """Execute the service command."""
        registry = load_root(self.root)
        service = resolve_service(self.path, registry)
        if service is None:
            print(f"error: no service at path: {self.path}", file=sys.stderr)
            return 1

        reflected = reflect_service(service, registry)
        if self.json:
            print(json.dumps(reflected.to_dict(), indent=2))
            return 0

        print(f"Service:   {reflected.full_name}")
        print(f"Source:    {reflected.source}")
        print(f"\nMethods ({len(reflected.methods_array)}):")
        for m in reflected.methods_array:
            print(
                f"  {m.kind} {m.name}({m.request_type}) "
                f"returns ({m.response_type})"
            )
        return 0
