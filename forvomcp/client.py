import logging
from collections.abc import Mapping
from typing import Any, Protocol

from forvomcp.models import DEFAULT_BASE_URL, ApiConfig
from forvomcp.operations import Operation
from forvomcp.request import build_url
from forvomcp.transport import DEFAULT_TIMEOUT, RestTransport

logger = logging.getLogger(__name__)

Params = Mapping[str, Any] | None


class Transport(Protocol):
    async def get(self, url: str, body: Any = None) -> Any: ...

    async def aclose(self) -> None: ...


class ForvoClient:
    """Client for the Forvo pronunciation API.

    Every operation takes a mapping of Forvo parameters (camelCase names, as
    in the Forvo documentation) and returns the decoded JSON response.

    Example:
        async with ForvoClient(key="your api key") as forvo:
            data = await forvo.word_pronunciations({"word": "Apfel", "language": "de"})
    """

    def __init__(
        self,
        key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        transport: Transport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.config = ApiConfig(key=key, base_url=base_url)
        self.transport = transport or RestTransport(timeout=timeout)

    def build_url(self, operation: Operation, params: Params = None) -> str:
        return build_url(self.config, operation.spec, params)

    async def call(self, operation: Operation, params: Params = None) -> Any:
        """
        Validate parameters, then GET the operation URL.

        Raises:
            ForvoValidationError: Before any request if parameters are invalid.
            httpx.HTTPError: Whatever the transport raised, unchanged.
        """
        url = self.build_url(operation, params)
        logger.info(f"Calling Forvo action {operation.spec.action}")
        return await self.transport.get(url)

    async def word_pronunciations(self, params: Params = None) -> Any:
        """All pronunciations of ``word``."""
        return await self.call(Operation.WORD_PRONUNCIATIONS, params)

    async def standard_pronunciation(self, params: Params = None) -> Any:
        """The top rated pronunciation of ``word``."""
        return await self.call(Operation.STANDARD_PRONUNCIATION, params)

    async def language_list(self, params: Params = None) -> Any:
        """Languages available at Forvo."""
        return await self.call(Operation.LANGUAGE_LIST, params)

    async def popular_languages(self, params: Params = None) -> Any:
        """The most popular languages."""
        return await self.call(Operation.POPULAR_LANGUAGES, params)

    async def pronounced_words_search(self, params: Params = None) -> Any:
        """Words starting with ``search`` that have at least one pronunciation."""
        return await self.call(Operation.PRONOUNCED_WORDS_SEARCH, params)

    async def words_search(self, params: Params = None) -> Any:
        """Words starting with ``search``, alphabetically ordered."""
        return await self.call(Operation.WORDS_SEARCH, params)

    async def popular_pronounced_words(self, params: Params = None) -> Any:
        """The most popular words with at least one pronunciation."""
        return await self.call(Operation.POPULAR_PRONOUNCED_WORDS, params)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "ForvoClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
