"""Command-line options parser for mcp-draw.

The server is configured once at startup and the result is passed by value
into the server and the tool handler.

Usage:
- build_parser() -> argparse.ArgumentParser
- parse_args(argv, environ=None, cwd=None) -> ServerOptions

Rules enforced:
- --api-key wins over the OPENAI_API_KEY environment variable.
- --output-dir wins over the current working directory, and is made absolute
  against the working directory at startup.
- --model defaults to gpt-image-1.
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_DOTENV_FILE = Path(".env")
API_KEY_ENV = "OPENAI_API_KEY"
DEFAULT_MODEL = "gpt-image-1"


@dataclass(frozen=True)
class ServerOptions:
    """Startup configuration for the MCP server.

    Attributes:
        api_key: OpenAI credential, or None to let the client fail at startup.
        output_dir: Absolute directory that generated images are written to.
        model: OpenAI image model used for every request.
    """

    api_key: str | None
    output_dir: Path
    model: str = DEFAULT_MODEL


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="mcp-draw",
        description="MCP server that turns image descriptions into PNG files",
    )
    parser.add_argument(
        "--api-key",
        dest="api_key",
        default=None,
        help=f"OpenAI API key (defaults to ${API_KEY_ENV})",
    )
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        default=None,
        help="directory for generated images (defaults to the current directory)",
    )
    parser.add_argument(
        "--model",
        dest="model",
        default=DEFAULT_MODEL,
        help=f"image model to request (default: {DEFAULT_MODEL})",
    )
    return parser


def parse_args(
    argv: list[str],
    *,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> ServerOptions:
    """Parse argv into a ServerOptions object."""

    load_dotenv(_DOTENV_FILE)  # silently ignore if there is none, assume defaults.

    if environ is None:
        environ = os.environ
    base = Path(cwd) if cwd else Path.cwd()

    parser = build_parser()
    ns = parser.parse_args(argv)

    api_key = ns.api_key or environ.get(API_KEY_ENV) or None

    if ns.output_dir:
        output_dir = Path(ns.output_dir).expanduser()
        if not output_dir.is_absolute():
            output_dir = base / output_dir
    else:
        output_dir = base

    model = ns.model.strip()
    if not model:
        parser.error("--model must not be empty")

    return ServerOptions(api_key=api_key, output_dir=output_dir, model=model)


__all__ = [
    "API_KEY_ENV",
    "DEFAULT_MODEL",
    "ServerOptions",
    "build_parser",
    "parse_args",
]
