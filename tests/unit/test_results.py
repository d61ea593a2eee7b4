import json

import pytest

from axion_mcp.results import (
    RequestFailed,
    Success,
    TransportError,
    UnexpectedError,
    UnknownToolError,
    ValidationError,
    is_error,
    normalize,
)


@pytest.mark.unit
def test_success_is_pretty_printed_json():
    payload = {"ticker": "AAPL", "prices": [{"close": 189.5}, {"close": 190.1}]}
    result = normalize(Success(payload))

    assert not result.isError
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.content[0].text == json.dumps(payload, indent=2)
    assert json.loads(result.content[0].text) == payload


@pytest.mark.unit
def test_success_with_list_payload():
    result = normalize(Success([1, 2]))
    assert result.content[0].text == "[\n  1,\n  2\n]"


@pytest.mark.unit
@pytest.mark.parametrize("outcome, text", [
    (UnknownToolError("nope"), "Error: Unknown tool: nope"),
    (ValidationError("id", "Organization ID is required"), "Error: Organization ID is required"),
    (ValidationError("ticker"), "Error: ticker is required"),
    (RequestFailed("https://api.example.com/stocks/ZZZZ", 404, "Not Found"),
     "Error: Failed to fetch from https://api.example.com/stocks/ZZZZ: API request failed: 404 - Not Found"),
    (TransportError("https://api.example.com/news", "Connection refused"),
     "Error: Failed to fetch from https://api.example.com/news: Connection refused"),
    (UnexpectedError("boom"), "Error: boom"),
    (UnexpectedError("Invalid JSON response: x", "https://api.example.com/news"),
     "Error: Failed to fetch from https://api.example.com/news: Invalid JSON response: x"),
])
def test_errors_become_error_envelopes(outcome, text):
    result = normalize(outcome)
    assert result.isError is True
    assert len(result.content) == 1
    assert result.content[0].text == text


@pytest.mark.unit
def test_is_error():
    assert not is_error(Success({}))
    assert not is_error("stocks/AAPL")
    assert is_error(UnexpectedError("boom"))
