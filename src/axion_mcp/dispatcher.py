import logging
from typing import Any, Mapping, Optional

from mcp import types

from axion_mcp.results import Outcome, UnexpectedError, is_error, normalize
from axion_mcp.tools.builder import build

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Runs one tool call through build, execute and normalize.

    A call that fails validation is completed without reaching the client;
    otherwise the client's ``execute`` is awaited exactly once. Nothing is
    stored on the dispatcher between calls, so concurrent calls are independent.
    """

    def __init__(self, client):
        self.client = client

    async def run(self, name: str, arguments: Optional[Mapping[str, Any]]) -> Outcome:
        try:
            built = build(name, arguments)
            if is_error(built):
                return built

            logger.info("tool=%s path=%s", name, built)
            return await self.client.execute(built)
        except Exception as e:
            logger.exception("tool=%s unexpected failure", name)
            return UnexpectedError(str(e) or e.__class__.__name__)

    async def call(self, name: str, arguments: Optional[Mapping[str, Any]]) -> types.CallToolResult:
        outcome = await self.run(name, arguments)
        if is_error(outcome):
            logger.warning("tool=%s outcome=%s", name, type(outcome).__name__)
        return normalize(outcome)
