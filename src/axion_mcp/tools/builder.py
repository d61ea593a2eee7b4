from string import Formatter
from typing import Any, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from axion_mcp.results import UnknownToolError, ValidationError
from axion_mcp.tools.catalog import ToolDefinition, get_tool

# Characters left unescaped in query values, matching RFC 3986 "unreserved" plus !*'()
_QUERY_SAFE = "-_.!~*'()"


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    # JSON numbers like 2.0 arrive as floats; the API expects "2"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _placeholders(template: str) -> List[str]:
    return [field for _, field, _, _ in Formatter().parse(template) if field]


def build_query_string(params: List[Tuple[str, Any]]) -> str:
    """
    Serialize (name, value) pairs in the given order.

    Pairs whose value is None or an empty string are dropped; an empty result
    yields an empty string rather than a bare "?".
    """
    encoded = [
        f"{name}={quote(_stringify(value), safe=_QUERY_SAFE)}"
        for name, value in params
        if not _is_empty(value)
    ]
    return f"?{'&'.join(encoded)}" if encoded else ""


def build_path(definition: ToolDefinition, args: Mapping[str, Any]) -> Union[str, ValidationError]:
    for param in definition.required:
        if _is_empty(args.get(param.name)):
            return ValidationError(param.name, param.missing_message)

    in_path = _placeholders(definition.path)
    path = definition.path.format(**{
        name: quote(_stringify(args[name]), safe="") for name in in_path
    })
    query = [(p.name, args.get(p.name)) for p in definition.parameters if p.name not in in_path]
    return path + build_query_string(query)


def build(name: str, args: Optional[Mapping[str, Any]]) -> Union[str, UnknownToolError, ValidationError]:
    """
    Map a tool call to the relative request path (path plus query string).

    Never touches the network. Missing required arguments are reported one at a
    time, first in declaration order.
    """
    definition = get_tool(name)
    if definition is None:
        return UnknownToolError(name)
    return build_path(definition, args or {})
