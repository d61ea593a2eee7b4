import asyncio
import json
import logging
import ssl
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import aiohttp
import certifi
from mcp import types
from mcp.server.lowlevel import Server

from axion_mcp.config import ClientConfig
from axion_mcp.results import Outcome, RequestFailed, Success, TransportError, UnexpectedError
from axion_mcp.tools.catalog import list_tools

if TYPE_CHECKING:
    from axion_mcp.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class AxionClient:
    """Executes GET requests against the Axion API and classifies the outcome."""

    def __init__(self, config: ClientConfig):
        self.config = config

    def url_for(self, path: str) -> str:
        return f"{self.config.base_url}{path}"

    async def execute(self, path: str) -> Outcome:
        """Make a single async GET request; never raises for network or HTTP failures."""
        url = self.url_for(path)
        logger.debug("GET %s", url)

        # Create SSL context with proper certificates
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)

        try:
            async with aiohttp.ClientSession(connector=connector, timeout=timeout) as session:
                async with session.get(url, headers=self.config.headers()) as response:
                    # Error pages are not guaranteed to be valid in their declared charset
                    body = await response.text(errors="replace")
                    if not 200 <= response.status < 300:
                        return RequestFailed(url, response.status, body)
        except asyncio.TimeoutError:
            return TransportError(url, "Request timed out")
        except aiohttp.ClientError as e:
            return TransportError(url, str(e) or e.__class__.__name__)

        try:
            return Success(json.loads(body))
        except ValueError as e:
            return UnexpectedError(f"Invalid JSON response: {e}", url)


def register_axion_tools(server: Server, dispatcher: "Dispatcher") -> None:
    """Register the Axion catalog and call handler with the MCP server"""

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return [definition.to_tool() for definition in list_tools()]

    # Missing arguments are reported per tool by the dispatcher, not by the SDK's schema check
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        return await dispatcher.call(name, arguments)
