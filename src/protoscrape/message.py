"""Message reflection.

Generated message classes build nested-message fields in ``fromObject`` with
one assignment per field::

    result.inner = Root.pkg.Inner.fromObject(obj["inner"])

Each such line names the field and the dotted path of its type. Scalar
fields are assigned without a nested ``fromObject`` call and are not
recovered this way; only a DESCRIPTOR reports them.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import structlog

from protoscrape.cache import get_cached, store
from protoscrape.config import ReflectConfig
from protoscrape.descriptor import fields_from_descriptor, get_descriptor
from protoscrape.namespace import find_ns
from protoscrape.scrape import scrape_source
from protoscrape.types import Field, ReflectedMessageType

logger = structlog.get_logger(__name__)

FIELD_PATTERN = re.compile(
    r"^\s*result\.(\w+)\s*=\s*Root\.([\w.]+)\.fromObject\(.*$",
    re.MULTILINE,
)


def reflect_message_fields(message_type: Any) -> list[Field]:
    """Scrape the nested-message fields of a generated message class."""
    from_object = getattr(message_type, "fromObject", None)
    if from_object is None:
        return []

    fields: list[Field] = []
    for name, path in scrape_source(from_object, FIELD_PATTERN):
        fields.append(Field(name=name, id=len(fields), type=path))
    return fields


def reflect_message(
    message_type: Any,
    root: Mapping[str, Any] | None = None,
    *,
    config: ReflectConfig | None = None,
) -> ReflectedMessageType:
    """Return the reflected metadata for a message class.

    The first call computes it and later calls return the same record.
    Never raises on unrecognized source; such classes just report fewer
    fields.
    """
    cached = get_cached("message", message_type)
    if cached is not None:
        return cached

    config = config or ReflectConfig.from_env()

    fields = None
    source = "scrape"
    if config.prefer_descriptor:
        descriptor = get_descriptor(message_type, "fields")
        if descriptor is not None:
            fields = fields_from_descriptor(descriptor)
            source = "descriptor"
    if fields is None:
        fields = reflect_message_fields(message_type)
        source = "scrape"

    reflected = ReflectedMessageType(
        type=message_type,
        name=getattr(message_type, "__name__", type(message_type).__name__),
        ns=find_ns(message_type, root),
        fields_array=fields,
        source=source,
    )
    logger.debug(
        "reflected message",
        name=reflected.name,
        ns=reflected.ns,
        fields=len(fields),
        source=source,
    )
    return store("message", message_type, reflected)
