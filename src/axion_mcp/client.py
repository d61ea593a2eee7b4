import argparse
import asyncio
import json
import os
import sys
from typing import Any, Dict, List, Optional

from fastmcp import Client
from fastmcp.client.transports import PythonStdioTransport
from mcp import types

from axion_mcp import server


def parse_arguments(raw: Optional[str]) -> Dict[str, Any]:
    """Parse the tool arguments given on the command line as a JSON object."""
    if raw is None or raw.strip() == "":
        return {}
    arguments = json.loads(raw)
    if not isinstance(arguments, dict):
        raise ValueError("Tool arguments must be a JSON object")
    return arguments


def render(result: types.CallToolResult) -> List[str]:
    return [block.text for block in result.content if isinstance(block, types.TextContent)]


async def call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
    # Forward the caller's environment so API_KEY reaches the spawned server
    transport = PythonStdioTransport(script_path=server.__file__, env=dict(os.environ))
    client = Client(transport)
    async with client:
        return await client.call_tool_mcp(name, arguments)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="axion-mcp-call", description="Call one Axion MCP tool over stdio")
    parser.add_argument("tool", help="Tool name, e.g. stocks_ticker")
    parser.add_argument("arguments", nargs="?", help='JSON object, e.g. \'{"ticker": "AAPL"}\'')
    args = parser.parse_args(argv)

    try:
        arguments = parse_arguments(args.arguments)
    except ValueError as e:
        parser.error(str(e))

    result = asyncio.run(call_tool(args.tool, arguments))
    for text in render(result):
        print(text)
    return 1 if result.isError else 0


if __name__ == "__main__":
    sys.exit(main())
