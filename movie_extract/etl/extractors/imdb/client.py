"""IMDb HTTP client.

Performs GET requests with a fixed browser-identifying header
and reports failures as values instead of raising them.
"""

from types import TracebackType

import httpx

from movie_extract.etl.errors import TransportFailure
from movie_extract.etl.types import FetchResult
from movie_extract.settings import settings


class IMDbClient:
    """Async HTTP client for IMDb pages.

    Does not sleep and does not log: callers own the pre-request
    delay for detail pages and the reporting of failures.

    Attributes:
        user_agent: User-Agent header sent on every request.
    """

    def __init__(
        self,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            user_agent: Header override (defaults to settings).
            transport: Optional transport, mainly for tests.
        """
        self.user_agent = user_agent or settings.etl.user_agent
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    # -------------------------------------------------------------------------
    # Context Manager
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "IMDbClient":
        """Enter context and create HTTP client."""
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Exit context and close HTTP client.

        Args:
            _exc_type: Exception type if raised.
            _exc_val: Exception value if raised.
            _exc_tb: Exception traceback if raised.
        """
        if self._client:
            await self._client.aclose()
            self._client = None

    # -------------------------------------------------------------------------
    # HTTP Methods
    # -------------------------------------------------------------------------

    async def fetch(self, url: str, context: str) -> FetchResult:
        """GET a page body.

        Args:
            url: Absolute URL.
            context: Request context for failure reports ("page 2", a URL).

        Returns:
            FetchResult with the body, or with a TransportFailure on
            timeout, network error, non-2xx status or an invalid URL.
        """
        if self._client is None:
            msg = "Client not initialized. Use async context manager."
            return FetchResult(failure=TransportFailure(msg, context))

        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return FetchResult(failure=TransportFailure(_describe(e), context))

        return FetchResult(body=response.text)


def _describe(error: Exception) -> str:
    """Build a readable message for an httpx error."""
    message = str(error)
    return message or type(error).__name__
