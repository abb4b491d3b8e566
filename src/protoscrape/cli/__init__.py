"""protoscrape CLI - inspect generated protocol types.

Uses tyro for type-driven CLI generation from dataclasses.
"""

from __future__ import annotations

import sys
from typing import Annotated

import tyro

from protoscrape.cli.commands.reflect import Message, Service
from protoscrape.cli.commands.resolve import Resolve
from protoscrape.types import TypeKindMismatch

# Type aliases for subcommand annotations
_Resolve = Annotated[Resolve, tyro.conf.subcommand("resolve")]
_Message = Annotated[Message, tyro.conf.subcommand("message")]
_Service = Annotated[Service, tyro.conf.subcommand("service")]

Command = _Resolve | _Message | _Service


def main(args: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    # configure structlog (respects PROTOSCRAPE_DEBUG env var)
    from protoscrape.logging_config import configure_logging

    configure_logging()

    try:
        cmd = tyro.cli(
            Command,
            prog="protoscrape",
            description="Recover fields and methods of generated protocol types.",
            args=args,
        )
        return cmd.run()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        return 130
    except (TypeKindMismatch, ValueError, ImportError, AttributeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
