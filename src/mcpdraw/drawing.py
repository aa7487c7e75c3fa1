"""Tool handler that requests an image from OpenAI and saves it as a PNG."""

from __future__ import annotations

import asyncio
import base64
import sys
import uuid
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from .options import DEFAULT_MODEL

NO_IMAGE_MESSAGE = "Unable to create comic"
IMAGE_SUFFIX = ".png"


async def generate_image_from_description(
    description: str,
    *,
    client: Any,
    output_dir: Path,
    model: str = DEFAULT_MODEL,
) -> str:
    """Generate one image for description and return its absolute path.

    Returns NO_IMAGE_MESSAGE instead of raising when the service answers
    without a base64 payload. Errors from the service or the filesystem
    propagate to the caller.
    """

    _emit_request_info(model, description)
    response = await client.images.generate(model=model, prompt=description, n=1)

    payload = _extract_image_payload(response)
    if payload is None:
        _emit_warning("image service returned no image payload")
        return NO_IMAGE_MESSAGE

    image_bytes = base64.b64decode(payload)

    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{uuid.uuid4()}{IMAGE_SUFFIX}"
    await asyncio.to_thread(path.write_bytes, image_bytes)

    resolved = path.resolve()
    _emit_saved(resolved, len(image_bytes))
    return str(resolved)


def _extract_image_payload(response: Any) -> str | None:
    if response is None:
        return None

    data = _field(response, "data")
    if not isinstance(data, Sequence) or isinstance(data, (str, bytes, bytearray)):
        return None
    if not data:
        return None

    payload = _field(data[0], "b64_json")
    if isinstance(payload, str) and payload:
        return payload
    return None


def _field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


# stdout carries MCP frames, so every diagnostic goes to stderr.
def _emit_request_info(model: str, description: str) -> None:
    print(f"Request: model={model} prompt={description!r}", file=sys.stderr)


def _emit_saved(path: Path, size: int) -> None:
    print(f"Saved {size} bytes to {path}", file=sys.stderr)


def _emit_warning(message: str) -> None:
    print(f"warning: {message}", file=sys.stderr)


__all__ = ["IMAGE_SUFFIX", "NO_IMAGE_MESSAGE", "generate_image_from_description"]
