import asyncio
import json

import pytest
from aiohttp import test_utils, web
from mcp.shared.memory import create_connected_server_and_client_session

from axion_mcp.config import ClientConfig
from axion_mcp.server import create_server, main


def with_session(config, scenario):
    async def run():
        async with create_connected_server_and_client_session(create_server(config)) as session:
            return await scenario(session)

    return asyncio.run(run())


@pytest.mark.unit
def test_list_tools_over_protocol():
    async def scenario(session):
        return await session.list_tools()

    result = with_session(ClientConfig(), scenario)
    names = [tool.name for tool in result.tools]

    assert len(names) == len(set(names))
    news_general = [tool for tool in result.tools if tool.name == "news_general"]
    assert len(news_general) == 1
    assert news_general[0].inputSchema["properties"] == {}


@pytest.mark.unit
def test_missing_argument_uses_tool_message():
    async def scenario(session):
        return await session.call_tool("credit_ratings", {})

    result = with_session(ClientConfig(), scenario)

    assert result.isError is True
    assert result.content[0].text == "Error: Organization ID is required"


@pytest.mark.unit
def test_unknown_tool_over_protocol():
    async def scenario(session):
        return await session.call_tool("nope", {})

    result = with_session(ClientConfig(), scenario)

    assert result.isError is True
    assert result.content[0].text == "Error: Unknown tool: nope"


@pytest.mark.unit
def test_successful_call_over_protocol():
    payload = {"ticker": "AAPL", "name": "Apple Inc."}

    async def stock(request):
        assert request.headers["Authorization"] == "Bearer key"
        return web.json_response(payload)

    async def run():
        app = web.Application()
        app.router.add_get("/stocks/{ticker}", stock)
        server = test_utils.TestServer(app)
        await server.start_server()
        try:
            config = ClientConfig(base_url=str(server.make_url("/")), api_key="key")
            async with create_connected_server_and_client_session(create_server(config)) as session:
                return await session.call_tool("stocks_ticker", {"ticker": "AAPL"})
        finally:
            await server.close()

    result = asyncio.run(run())

    assert not result.isError
    assert result.content[0].text == json.dumps(payload, indent=2)


@pytest.mark.unit
def test_main_exits_cleanly_on_bad_log_level(monkeypatch, caplog):
    monkeypatch.setenv("AXION_LOG_LEVEL", "verbose")

    with pytest.raises(SystemExit) as exc:
        main()

    assert exc.value.code == 1
    assert "Server error" in caplog.text
