"""Configuration for reflection, loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Environment variable names
ENV_PREFER_DESCRIPTOR = "PROTOSCRAPE_PREFER_DESCRIPTOR"
ENV_DEBUG = "PROTOSCRAPE_DEBUG"

_TRUTHY = ("true", "1", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class ReflectConfig:
    """Knobs for message and service reflection."""

    # read DESCRIPTOR when a generated type exposes one, scrape otherwise
    prefer_descriptor: bool = True
    debug: bool = False

    @classmethod
    def from_env(cls) -> ReflectConfig:
        """Load config from environment variables."""
        return cls(
            prefer_descriptor=_env_flag(ENV_PREFER_DESCRIPTOR, True),
            debug=_env_flag(ENV_DEBUG, False),
        )

    @classmethod
    def scrape_only(cls) -> ReflectConfig:
        """Ignore descriptors and always scrape generated source."""
        return cls(prefer_descriptor=False)
