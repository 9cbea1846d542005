#!/usr/bin/env python3
"""
MCP Server for stackpack - bundles local web assets into a single HTML page or web component
"""

import asyncio
import logging
from typing import Any, Dict, List

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .bundler import bundle
from .cli import collect_inputs
from .component import DEFAULT_COMPONENT_NAME
from .errors import StackPackError
from .export import export_artifact
from .models import OutputKind

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize the MCP server
server = Server("stackpack-mcp")


@server.list_tools()
async def list_tools() -> List[Tool]:
    """List available tools."""
    return [
        Tool(
            name="bundle_files",
            description="Bundle HTML, CSS, JS, images and video into one standalone HTML file or web component",
            inputSchema={
                "type": "object",
                "properties": {
                    "paths": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Files or directories to bundle"
                    },
                    "output_kind": {
                        "type": "string",
                        "enum": [k.value for k in OutputKind],
                        "description": "Kind of artifact to generate"
                    },
                    "filename": {
                        "type": "string",
                        "description": "Output filename; the .html or .js suffix is added when missing"
                    },
                    "component_name": {
                        "type": "string",
                        "description": "Class name of the web component"
                    },
                    "output_dir": {
                        "type": "string",
                        "description": "Write the bundle into this directory instead of returning its content"
                    }
                },
                "required": ["paths"]
            }
        )
    ]


@server.call_tool()
async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
    """Call a specific tool by name."""
    if name != "bundle_files":
        raise ValueError(f"Unknown tool: {name}")
    if not arguments.get("paths"):
        raise ValueError("Missing required argument: paths")

    paths = arguments["paths"]
    logger.info(f"Bundling {len(paths)} path(s) with tool")

    try:
        result = await bundle(
            collect_inputs(paths),
            arguments.get("output_kind") or OutputKind.STANDALONE,
            arguments.get("filename"),
            arguments.get("component_name") or DEFAULT_COMPONENT_NAME,
        )
    except StackPackError as e:
        logger.error(f"Error bundling files: {e}")
        raise

    output_dir = arguments.get("output_dir")
    if output_dir:
        out_path = export_artifact(result.content, result.filename, output_dir)
        return [
            TextContent(
                type="text",
                text=f"Wrote {result.filename} ({result.file_count} files bundled) to {out_path}"
            )
        ]

    return [
        TextContent(
            type="text",
            text=result.content
        )
    ]


async def run_server():
    """Serve over stdio."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
