"""MCP server exposing the image generation tool over stdio."""

import sys
from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from openai import AsyncOpenAI
from pydantic import Field

from . import drawing
from .options import ServerOptions

SERVER_NAME = "mcp-draw"
TOOL_NAME = "generate_image_from_description"
TOOL_DESCRIPTION = (
    "Generates an image from a description of what the image should look like, "
    "saves to local file whose path is returned"
)
READY_MESSAGE = "Text in LLM running on stdio"


def build_server(options: ServerOptions, *, client: Any = None) -> FastMCP:
    """Create the FastMCP server and register the image tool on it."""

    if client is None:
        client = AsyncOpenAI(api_key=options.api_key)

    server = FastMCP(SERVER_NAME)

    @server.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    async def generate_image_from_description(
        description: Annotated[
            str, Field(description="Description of what the image should look like")
        ],
    ) -> str:
        return await drawing.generate_image_from_description(
            description,
            client=client,
            output_dir=options.output_dir,
            model=options.model,
        )

    return server


async def serve(options: ServerOptions) -> None:
    """Run the server on stdin/stdout until the host disconnects."""

    server = build_server(options)
    print(READY_MESSAGE, file=sys.stderr)
    await server.run_stdio_async()


__all__ = ["SERVER_NAME", "TOOL_DESCRIPTION", "TOOL_NAME", "build_server", "serve"]
