"""Records and capability protocols for reflected protocol types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, runtime_checkable

# the only method kind the rpcCall template can express
MethodKind = Literal["rpc"]
MetadataSource = Literal["descriptor", "scrape"]


@runtime_checkable
class MessageTypeLike(Protocol):
    """A generated message class that can be built from a plain object."""

    def fromObject(self, obj: Any) -> Any: ...  # noqa: N802


@runtime_checkable
class ServiceLike(Protocol):
    """A generated service stub that dispatches through rpcCall."""

    def rpcCall(self, *args: Any, **kwargs: Any) -> Any: ...  # noqa: N802


class TypeKindMismatch(Exception):
    """Something exists at a path but is not the expected kind of type."""

    def __init__(self, path: str, expected: str):
        self.path = path
        self.expected = expected
        super().__init__(f"type at path is not a {expected}: {path!r}")


@dataclass
class Field:
    """A message field recovered from generated code."""

    name: str
    id: int  # 0-based, order of appearance
    type: str  # dotted type path, not validated

    def to_dict(self) -> dict:
        return {"name": self.name, "id": self.id, "type": self.type}


@dataclass
class Method:
    """A service method recovered from generated code."""

    name: str
    kind: MethodKind
    request_type: str
    response_type: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "kind": self.kind,
            "request_type": self.request_type,
            "response_type": self.response_type,
        }


@dataclass
class ReflectedMessageType:
    """Metadata recovered for a message class."""

    type: Any
    name: str
    ns: str
    fields_array: list[Field] = field(default_factory=list)
    source: MetadataSource = "scrape"
    fields: dict[str, Field] = field(init=False)

    def __post_init__(self) -> None:
        # later duplicates win in the mapping, the array keeps both
        self.fields = {f.name: f for f in self.fields_array}

    @property
    def full_name(self) -> str:
        return f"{self.ns}.{self.name}" if self.ns else self.name

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "ns": self.ns,
            "source": self.source,
            "fields": [f.to_dict() for f in self.fields_array],
        }


@dataclass
class ReflectedService:
    """Metadata recovered for a service instance."""

    service: Any
    name: str
    ns: str
    methods_array: list[Method] = field(default_factory=list)
    source: MetadataSource = "scrape"
    methods: dict[str, Method] = field(init=False)

    def __post_init__(self) -> None:
        self.methods = {m.name: m for m in self.methods_array}

    @property
    def full_name(self) -> str:
        return f"{self.ns}.{self.name}" if self.ns else self.name

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "ns": self.ns,
            "source": self.source,
            "methods": [m.to_dict() for m in self.methods_array],
        }
