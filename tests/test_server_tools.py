import json
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from forvomcp.client import ForvoClient
from forvomcp.errors import ForvoValidationError
from forvomcp.operations import Operation
from forvomcp.server import (
    get_standard_pronunciation,
    get_word_pronunciations,
    list_languages,
    list_popular_languages,
    list_popular_pronounced_words,
    ping,
    search_pronounced_words,
    search_words,
)
from forvomcp.transport import RestTransport


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.call = AsyncMock(return_value={"attributes": {"total": 1}, "items": [{"word": "apfel"}]})
    with patch("forvomcp.server.client", client):
        yield client


@pytest.mark.asyncio
async def test_ping():
    assert await ping.fn() == "pong"


@pytest.mark.asyncio
async def test_word_pronunciations_maps_arguments(mock_client):
    result = await get_word_pronunciations.fn(word="Apfel", language="de", group_in_languages=True, limit=3)

    assert result["items"][0]["word"] == "apfel"
    mock_client.call.assert_awaited_once_with(
        Operation.WORD_PRONUNCIATIONS,
        {"word": "Apfel", "language": "de", "limit": 3, "groupInLanguages": True},
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("tool", "kwargs", "operation", "params"),
    [
        (get_standard_pronunciation, {"word": "Haus"}, Operation.STANDARD_PRONUNCIATION, {"word": "Haus"}),
        (
            list_languages,
            {"order": "code", "min_pronunciations": 100},
            Operation.LANGUAGE_LIST,
            {"order": "code", "minPronunciations": 100},
        ),
        (list_popular_languages, {"limit": 5}, Operation.POPULAR_LANGUAGES, {"limit": 5}),
        (
            search_pronounced_words,
            {"search": "aus", "language": "de", "page": 2},
            Operation.PRONOUNCED_WORDS_SEARCH,
            {"search": "aus", "language": "de", "page": 2},
        ),
        (search_words, {"search": "aus", "pagesize": 50}, Operation.WORDS_SEARCH, {"search": "aus", "pagesize": 50}),
        (list_popular_pronounced_words, {}, Operation.POPULAR_PRONOUNCED_WORDS, {}),
    ],
)
async def test_tools_call_matching_operation(mock_client, tool, kwargs, operation, params):
    await tool.fn(**kwargs)

    mock_client.call.assert_awaited_once_with(operation, params)


@pytest.mark.asyncio
async def test_validation_error_returned_as_payload(mock_client):
    mock_client.call.side_effect = ForvoValidationError("search is a required parameter")

    result = await search_words.fn(search="")

    assert result == {
        "error": "search is a required parameter",
        "error_type": "ForvoValidationError",
        "operation": "words-search",
    }


@pytest.mark.asyncio
async def test_http_error_returned_as_payload(mock_client):
    mock_client.call.side_effect = httpx.ConnectError("connection refused")

    result = await list_languages.fn()

    assert result["error_type"] == "ConnectError"
    assert "connection refused" in result["error"]


@pytest.mark.asyncio
async def test_missing_client_raises():
    with patch("forvomcp.server.client", None):
        with pytest.raises(RuntimeError, match="FORVO_API_KEY"):
            await get_word_pronunciations.fn(word="apple")


@pytest.mark.asyncio
async def test_invalid_json_returned_as_payload(mock_client):
    mock_client.call.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)

    result = await list_languages.fn()

    assert result["error_type"] == "JSONDecodeError"
    assert result["operation"] == "language-list"


@pytest.mark.asyncio
async def test_http_status_error_hides_api_key(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json=["Limit/day reached."])

    transport = RestTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    forvo = ForvoClient("secret-key", transport=transport)

    with patch("forvomcp.server.client", forvo), caplog.at_level(logging.INFO, logger="forvomcp"):
        result = await list_languages.fn()

    assert result["error_type"] == "HTTPStatusError"
    assert "400" in result["error"]
    assert "/key/***/" in result["error"]
    assert "secret-key" not in result["error"]
    assert "secret-key" not in caplog.text
    await transport.client.aclose()
