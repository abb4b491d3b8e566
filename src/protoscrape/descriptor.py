"""Read fields and methods from an explicit protobuf-style DESCRIPTOR.

Code generators that emit a descriptor next to the generated type (as
google.protobuf does) leave nothing to scrape for. Descriptors are read by
shape only, so any object with the same attributes works.
"""

from __future__ import annotations

from typing import Any

import structlog

from protoscrape.types import Field, Method

logger = structlog.get_logger(__name__)

# FieldDescriptor.TYPE_* values
SCALAR_TYPE_NAMES: dict[int, str] = {
    1: "double",
    2: "float",
    3: "int64",
    4: "uint64",
    5: "int32",
    6: "fixed64",
    7: "fixed32",
    8: "bool",
    9: "string",
    10: "group",
    11: "message",
    12: "bytes",
    13: "uint32",
    14: "enum",
    15: "sfixed32",
    16: "sfixed64",
    17: "sint32",
    18: "sint64",
}


def get_descriptor(obj: Any, members: str) -> Any | None:
    """Return obj.DESCRIPTOR if it carries the given member list."""
    descriptor = getattr(obj, "DESCRIPTOR", None)
    if descriptor is None or getattr(descriptor, members, None) is None:
        return None
    return descriptor


def _field_type(fd: Any) -> str:
    for attr in ("message_type", "enum_type"):
        nested = getattr(fd, attr, None)
        if nested is not None:
            return nested.full_name
    return SCALAR_TYPE_NAMES.get(getattr(fd, "type", None), "")


def fields_from_descriptor(descriptor: Any) -> list[Field] | None:
    """Build Field records in descriptor order, or None if it is malformed."""
    try:
        return [
            Field(name=fd.name, id=i, type=_field_type(fd))
            for i, fd in enumerate(descriptor.fields)
        ]
    except (AttributeError, TypeError) as e:
        logger.debug("unreadable message descriptor", error=str(e))
        return None


def methods_from_descriptor(descriptor: Any) -> list[Method] | None:
    """Build Method records in descriptor order, or None if it is malformed.

    Streaming flags are ignored; every method is reported as "rpc".
    """
    try:
        return [
            Method(
                name=md.name,
                kind="rpc",
                request_type=md.input_type.full_name,
                response_type=md.output_type.full_name,
            )
            for md in descriptor.methods
        ]
    except (AttributeError, TypeError) as e:
        logger.debug("unreadable service descriptor", error=str(e))
        return None
