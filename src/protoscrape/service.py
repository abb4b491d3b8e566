"""Service reflection.

Generated service stubs implement each RPC as a single delegating return::

    def Echo(self, request, callback=None):
        return self.rpcCall(self.Echo, Root.pkg.Req, Root.pkg.Res, request, callback)

The second and third arguments name the request and response types.
"""

from __future__ import annotations

import inspect
import re
from collections.abc import Mapping
from typing import Any

import structlog

from protoscrape.cache import get_cached, store
from protoscrape.config import ReflectConfig
from protoscrape.descriptor import get_descriptor, methods_from_descriptor
from protoscrape.namespace import find_ns
from protoscrape.scrape import scrape_source
from protoscrape.types import Method, ReflectedService

logger = structlog.get_logger(__name__)

METHOD_PATTERN = re.compile(
    r"^\s*return\s+self\.rpcCall\((.*?),"
    r"\s*Root\.([\w.]+),\s*Root\.([\w.]+),.*$",
    re.MULTILINE,
)


def _own_methods(service: Any) -> list[tuple[str, Any]]:
    """Functions defined directly on the service's class, in definition order.

    Class attributes are read raw, so properties and other descriptors are
    never evaluated.
    """
    methods = []
    for name, member in vars(type(service)).items():
        # skips __init__ along with the rest of the class plumbing
        if name.startswith("__") and name.endswith("__"):
            continue
        if isinstance(member, staticmethod | classmethod):
            member = member.__func__
        if inspect.isfunction(member):
            methods.append((name, member))
    return methods


def reflect_service_methods(service: Any) -> list[Method]:
    """Scrape the RPC methods of a generated service instance."""
    methods: list[Method] = []
    for name, member in _own_methods(service):
        for _, req_path, res_path in scrape_source(member, METHOD_PATTERN):
            # TODO: recognize streaming kinds once the stub template exposes them
            methods.append(
                Method(
                    name=name,
                    kind="rpc",
                    request_type=req_path,
                    response_type=res_path,
                )
            )
    return methods


def reflect_service(
    service: Any,
    root: Mapping[str, Any] | None = None,
    *,
    config: ReflectConfig | None = None,
) -> ReflectedService:
    """Return the reflected metadata for a service instance.

    The first call computes it and later calls return the same record.
    Methods without a recognizable rpcCall return are skipped.
    """
    cached = get_cached("service", service)
    if cached is not None:
        return cached

    config = config or ReflectConfig.from_env()

    methods = None
    source = "scrape"
    if config.prefer_descriptor:
        descriptor = get_descriptor(service, "methods")
        if descriptor is not None:
            methods = methods_from_descriptor(descriptor)
            source = "descriptor"
    if methods is None:
        methods = reflect_service_methods(service)
        source = "scrape"

    reflected = ReflectedService(
        service=service,
        name=type(service).__name__,
        ns=find_ns(service, root),
        methods_array=methods,
        source=source,
    )
    logger.debug(
        "reflected service",
        name=reflected.name,
        ns=reflected.ns,
        methods=len(methods),
        source=source,
    )
    return store("service", service, reflected)
