import asyncio
import logging
import os
import sys

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from axion_mcp import __version__
from axion_mcp.config import ClientConfig, load_config
from axion_mcp.dispatcher import Dispatcher
from axion_mcp.tools.axion import AxionClient, register_axion_tools

logger = logging.getLogger("axion_mcp")


def create_server(config: ClientConfig) -> Server:
    server = Server(
        name="axion-financial-data",
        version=__version__,
        instructions="""
        This server exposes Axion financial data: credit, economics, ESG, ETFs, news,
        sentiment, supply chain, company profiles and crypto/forex/futures/index/stock prices.
        """)

    # Register all tools
    register_axion_tools(server, Dispatcher(AxionClient(config)))
    return server


async def serve(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Axion MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    # stdout carries the protocol stream, so logs go to stderr
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        logging.getLogger().setLevel(os.getenv("AXION_LOG_LEVEL", "INFO").upper())
        server = create_server(load_config())
        asyncio.run(serve(server))
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
