"""mcp-draw package entrypoint.

main() parses command-line options using mcpdraw.options and serves the
image tool over stdio via mcpdraw.server.
"""

from __future__ import annotations

import asyncio
import sys

from .options import parse_args

__version__ = "0.0.1"


def main() -> None:
    """CLI entrypoint: parse argv, then serve the MCP tool until stdin closes."""

    parsed = parse_args(sys.argv[1:])

    try:
        from . import server as server_module

        asyncio.run(server_module.serve(parsed))
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
