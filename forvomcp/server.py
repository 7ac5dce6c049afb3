"""MCP Server for the Forvo pronunciation API"""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Mapping
from typing import Any

os.environ.setdefault("FASTMCP_LOG_ENABLED", "false")

import httpx
from fastmcp import FastMCP

from forvomcp.client import ForvoClient
from forvomcp.config import settings
from forvomcp.errors import ForvoValidationError
from forvomcp.logging_config import configure_logging
from forvomcp.middleware import LoggingMiddleware
from forvomcp.operations import Operation
from forvomcp.request import redact_url

configure_logging()
logger = logging.getLogger(__name__)

# One client (and connection pool) for the lifetime of the server
client: ForvoClient | None = (
    ForvoClient(settings.api_key, base_url=settings.base_url, timeout=settings.timeout_seconds)
    if settings.api_key
    else None
)

mcp = FastMCP("ForvoMCP")
mcp.add_middleware(LoggingMiddleware())


def _require_client() -> ForvoClient:
    if client is None:
        raise RuntimeError("Forvo API client is not ready. Set the FORVO_API_KEY environment variable and restart the server.")
    return client


def _compact(**params: Any) -> dict[str, Any]:
    """Drop arguments the caller left unset."""
    return {name: value for name, value in params.items() if value is not None}


async def _run(operation: Operation, params: Mapping[str, Any]) -> dict[str, Any]:
    forvo = _require_client()
    try:
        return await forvo.call(operation, params)
    except ForvoValidationError as e:
        logger.warning(f"Rejected parameters for {operation.command_name}: {e}")
        return {"error": str(e), "error_type": type(e).__name__, "operation": operation.command_name}
    except (httpx.HTTPError, json.JSONDecodeError) as e:
        # httpx errors carry the request URL, key included
        message = redact_url(str(e))
        logger.error(f"Forvo request failed for {operation.command_name}: {message}")
        return {"error": message, "error_type": type(e).__name__, "operation": operation.command_name}


@mcp.tool()
async def ping() -> str:
    """Check if server is alive."""
    return "pong"


@mcp.tool()
async def get_word_pronunciations(
    word: str,
    language: str | None = None,
    country: str | None = None,
    username: str | None = None,
    sex: str | None = None,
    rate: int | None = None,
    order: str | None = None,
    limit: int | None = None,
    group_in_languages: bool | None = None,
) -> dict[str, Any]:
    """
    Get all the pronunciations of a word.

    Args:
        word: The word to look up.
        language: Only pronunciations recorded in this language code (e.g. "de").
        country: Only pronunciations recorded by users of this country (Alpha-3 code).
        username: Only the pronunciation recorded by this user.
        sex: "m" (male) or "f" (female).
        rate: Only pronunciations rated at least this value.
        order: "date-desc", "date-asc", "rate-desc" or "rate-asc".
        limit: Max. pronunciations returned.
        group_in_languages: Group pronunciations by language.

    Returns:
        Forvo response with "attributes" and "items" (each item has a "pathmp3" audio URL).
    """
    return await _run(
        Operation.WORD_PRONUNCIATIONS,
        _compact(
            word=word,
            language=language,
            country=country,
            username=username,
            sex=sex,
            rate=rate,
            order=order,
            limit=limit,
            groupInLanguages=group_in_languages,
        ),
    )


@mcp.tool()
async def get_standard_pronunciation(word: str, language: str | None = None) -> dict[str, Any]:
    """
    Get the standard (top rated) pronunciation of a word.

    Args:
        word: The word to look up.
        language: Only pronunciations recorded in this language code.
    """
    return await _run(Operation.STANDARD_PRONUNCIATION, _compact(word=word, language=language))


@mcp.tool()
async def list_languages(
    language: str | None = None,
    order: str | None = None,
    min_pronunciations: int | None = None,
) -> dict[str, Any]:
    """
    List the languages available at Forvo.

    Args:
        language: Language code for the names, or "native". Default is English.
        order: "name" or "code".
        min_pronunciations: Only languages with at least this many pronunciations.
    """
    return await _run(
        Operation.LANGUAGE_LIST,
        _compact(language=language, order=order, minPronunciations=min_pronunciations),
    )


@mcp.tool()
async def list_popular_languages(
    language: str | None = None,
    order: str | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    """
    List the most popular languages.

    Args:
        language: Language code for the names, or "native". Default is English.
        order: "popular", "name" or "code".
        limit: Max. languages returned (Forvo default 10).
    """
    return await _run(Operation.POPULAR_LANGUAGES, _compact(language=language, order=order, limit=limit))


@mcp.tool()
async def search_pronounced_words(
    search: str,
    language: str | None = None,
    pagesize: int | None = None,
    page: int | None = None,
) -> dict[str, Any]:
    """
    Search words starting with a pattern that have one or more pronunciations.

    Args:
        search: The prefix to search for.
        language: Only words in this language code.
        pagesize: Results per page, 1-100 (Forvo default 20).
        page: Page to retrieve (Forvo default 1).
    """
    return await _run(
        Operation.PRONOUNCED_WORDS_SEARCH,
        _compact(search=search, language=language, pagesize=pagesize, page=page),
    )


@mcp.tool()
async def search_words(
    search: str,
    language: str | None = None,
    pagesize: int | None = None,
    page: int | None = None,
) -> dict[str, Any]:
    """
    Search words starting with a pattern, alphabetically ordered.

    Args:
        search: The prefix to search for.
        language: Only words in this language code.
        pagesize: Results per page, 1-100 (Forvo default 20).
        page: Page to retrieve (Forvo default 1).
    """
    return await _run(
        Operation.WORDS_SEARCH,
        _compact(search=search, language=language, pagesize=pagesize, page=page),
    )


@mcp.tool()
async def list_popular_pronounced_words(language: str | None = None, limit: int | None = None) -> dict[str, Any]:
    """
    List the most popular words with at least one pronunciation.

    Args:
        language: Only words in this language code.
        limit: Max. words returned (Forvo default 1000).
    """
    return await _run(Operation.POPULAR_PRONOUNCED_WORDS, _compact(language=language, limit=limit))


def main():
    """Run the MCP server"""
    sys.stdout.reconfigure(line_buffering=True)
    if not settings.api_key:
        logger.warning("FORVO_API_KEY is not configured. The server will run but tools will fail.")

    transport = os.getenv("MCP_TRANSPORT", "stdio").lower()

    if transport in ("http", "streamable-http", "sse"):
        host = os.getenv("MCP_HOST", "0.0.0.0")
        port = int(os.getenv("MCP_PORT", os.getenv("PORT", "8000")))
        path = os.getenv("MCP_PATH", "/mcp")

        logger.info(f"Starting ForvoMCP with Streamable HTTP on {host}:{port}{path}")
        mcp.run(transport="http", host=host, port=port, path=path)
    else:
        logger.info("Starting ForvoMCP in stdio mode")
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
