"""Recover fields and RPC methods of generated protocol types.

Reads explicit descriptors where generated code provides them and falls back
to scraping the fixed-shape source of generated accessors otherwise.
"""

from protoscrape.cache import clear_cache, is_reflected
from protoscrape.config import ReflectConfig
from protoscrape.message import reflect_message, reflect_message_fields
from protoscrape.namespace import find_ns
from protoscrape.registry import DEFAULT_ROOT, load_root
from protoscrape.resolve import resolve, resolve_message, resolve_service
from protoscrape.scrape import scrape_source
from protoscrape.service import reflect_service, reflect_service_methods
from protoscrape.types import (
    Field,
    MessageTypeLike,
    Method,
    ReflectedMessageType,
    ReflectedService,
    ServiceLike,
    TypeKindMismatch,
)

__all__ = [
    "DEFAULT_ROOT",
    "Field",
    "MessageTypeLike",
    "Method",
    "ReflectConfig",
    "ReflectedMessageType",
    "ReflectedService",
    "ServiceLike",
    "TypeKindMismatch",
    "clear_cache",
    "find_ns",
    "is_reflected",
    "load_root",
    "reflect_message",
    "reflect_message_fields",
    "reflect_service",
    "reflect_service_methods",
    "resolve",
    "resolve_message",
    "resolve_service",
    "scrape_source",
]
