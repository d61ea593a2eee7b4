"""
Per-call outcomes and their conversion to tool-call result envelopes.

Every stage of a call (building the request, executing it) returns one of the
values below instead of raising. ``normalize`` is the only place an outcome is
turned into user-facing text.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional, Union

from mcp import types


@dataclass(frozen=True)
class Success:
    payload: Any


@dataclass(frozen=True)
class UnknownToolError:
    name: str

    @property
    def message(self) -> str:
        return f"Unknown tool: {self.name}"


@dataclass(frozen=True)
class ValidationError:
    parameter: str
    reason: Optional[str] = None

    @property
    def message(self) -> str:
        return self.reason or f"{self.parameter} is required"


@dataclass(frozen=True)
class RequestFailed:
    url: str
    status: int
    body: str

    @property
    def message(self) -> str:
        return f"Failed to fetch from {self.url}: API request failed: {self.status} - {self.body}"


@dataclass(frozen=True)
class TransportError:
    url: str
    cause: str

    @property
    def message(self) -> str:
        return f"Failed to fetch from {self.url}: {self.cause}"


@dataclass(frozen=True)
class UnexpectedError:
    cause: str
    url: Optional[str] = None

    @property
    def message(self) -> str:
        if self.url:
            return f"Failed to fetch from {self.url}: {self.cause}"
        return self.cause


ToolError = Union[UnknownToolError, ValidationError, RequestFailed, TransportError, UnexpectedError]
Outcome = Union[Success, ToolError]

ERROR_TYPES = (UnknownToolError, ValidationError, RequestFailed, TransportError, UnexpectedError)


def is_error(outcome: Outcome) -> bool:
    return isinstance(outcome, ERROR_TYPES)


def _text(text: str) -> types.TextContent:
    return types.TextContent(type="text", text=text)


def normalize(outcome: Outcome) -> types.CallToolResult:
    """Render an outcome as a single-text-block envelope."""
    if isinstance(outcome, Success):
        rendered = json.dumps(outcome.payload, indent=2, ensure_ascii=False)
        return types.CallToolResult(content=[_text(rendered)], isError=False)
    return types.CallToolResult(content=[_text(f"Error: {outcome.message}")], isError=True)
