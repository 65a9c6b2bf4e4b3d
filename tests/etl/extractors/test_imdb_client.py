"""Unit tests for the IMDb HTTP client."""

import httpx
import pytest

from movie_extract.etl.errors import TransportFailure
from movie_extract.etl.extractors.imdb.client import IMDbClient

URL = "https://www.imdb.com/title/tt1/"


def _client(handler) -> IMDbClient:
    return IMDbClient(user_agent="Mozilla/5.0", transport=httpx.MockTransport(handler))


class TestFetch:
    @staticmethod
    @pytest.mark.asyncio
    async def test_returns_body() -> None:
        async with _client(lambda request: httpx.Response(200, text="<html>ok</html>")) as client:
            result = await client.fetch(URL, URL)

        assert result.ok
        assert result.body == "<html>ok</html>"
        assert result.failure is None

    @staticmethod
    @pytest.mark.asyncio
    async def test_sends_user_agent() -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers["User-Agent"])
            return httpx.Response(200, text="")

        async with _client(handler) as client:
            await client.fetch(URL, URL)

        assert seen == ["Mozilla/5.0"]

    @staticmethod
    @pytest.mark.asyncio
    async def test_non_2xx_is_failure() -> None:
        async with _client(lambda request: httpx.Response(503, text="busy")) as client:
            result = await client.fetch(URL, "page 2")

        assert not result.ok
        assert isinstance(result.failure, TransportFailure)
        assert result.failure.context == "page 2"
        assert "503" in result.failure.message

    @staticmethod
    @pytest.mark.asyncio
    async def test_network_error_is_failure() -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Name or service not known", request=request)

        async with _client(handler) as client:
            result = await client.fetch(URL, URL)

        assert not result.ok
        assert result.failure.context == URL
        assert "Name or service not known" in result.failure.message

    @staticmethod
    @pytest.mark.asyncio
    async def test_timeout_is_failure() -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with _client(handler) as client:
            result = await client.fetch(URL, URL)

        assert result.failure is not None
        assert result.failure.message == "timed out"

    @staticmethod
    @pytest.mark.asyncio
    async def test_invalid_url_is_failure() -> None:
        bad_url = "https://www.imdb.com/title/\x01bad"
        async with _client(lambda request: httpx.Response(200, text="")) as client:
            result = await client.fetch(bad_url, bad_url)

        assert not result.ok
        assert isinstance(result.failure, TransportFailure)
        assert result.failure.context == bad_url
        assert "non-printable" in result.failure.message

    @staticmethod
    @pytest.mark.asyncio
    async def test_fetch_outside_context_is_failure() -> None:
        client = _client(lambda request: httpx.Response(200, text=""))
        result = await client.fetch(URL, URL)
        assert not result.ok
        assert "context manager" in result.failure.message

    @staticmethod
    @pytest.mark.asyncio
    async def test_client_closed_on_exit() -> None:
        client = _client(lambda request: httpx.Response(200, text=""))
        async with client:
            assert client._client is not None
        assert client._client is None
