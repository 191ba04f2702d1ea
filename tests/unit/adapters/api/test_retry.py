"""
Tests unitaires pour la relance des requetes catalogue.

Ces tests verifient:
- RateLimitError capture le header Retry-After
- with_retry relance sur RateLimitError avec backoff exponentiel
- request_with_retry detecte les 429 et relance automatiquement
- Les autres erreurs HTTP remontent sans relance
"""

import httpx
import pytest
import respx

from chakram.adapters.api.retry import RateLimitError, request_with_retry, with_retry

BROWSE_URL = "https://atv-ps.amazon.com/cdp/catalog/Browse"


class TestRateLimitError:
    """Tests pour l'exception RateLimitError."""

    def test_stores_retry_after(self) -> None:
        error = RateLimitError(retry_after=60)
        assert error.retry_after == 60
        assert "60" in str(error)

    def test_without_retry_after(self) -> None:
        assert RateLimitError().retry_after is None


class TestWithRetryDecorator:
    """Tests pour le decorateur with_retry."""

    @pytest.mark.asyncio
    async def test_retries_on_rate_limit_error(self) -> None:
        """with_retry relance quand RateLimitError est levee."""
        call_count = 0

        @with_retry(max_attempts=2, max_wait=1)
        async def flaky() -> str:
            nonlocal call_count
            call_count += 1
            if call_count < 2:
                raise RateLimitError(retry_after=1)
            return "success"

        assert await flaky() == "success"
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_reraises_after_max_attempts(self) -> None:
        call_count = 0

        @with_retry(max_attempts=2, max_wait=1)
        async def always_limited() -> str:
            nonlocal call_count
            call_count += 1
            raise RateLimitError(retry_after=1)

        with pytest.raises(RateLimitError):
            await always_limited()
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_other_exceptions_are_not_retried(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def broken() -> str:
            nonlocal call_count
            call_count += 1
            raise ValueError("not a rate limit")

        with pytest.raises(ValueError):
            await broken()
        assert call_count == 1


class TestRequestWithRetry:
    """Tests pour request_with_retry avec httpx."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_429_exhausts_attempts(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(BROWSE_URL).mock(
            return_value=httpx.Response(429, headers={"Retry-After": "30"})
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(RateLimitError) as exc_info:
                await request_with_retry(client, "GET", BROWSE_URL, max_attempts=2)

        assert exc_info.value.retry_after == 30
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_retries_then_succeeds(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(BROWSE_URL).mock(
            side_effect=[
                httpx.Response(429),
                httpx.Response(200, json={"message": {"body": {"titles": []}}}),
            ]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", BROWSE_URL, max_attempts=3)

        assert response.status_code == 200
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_date_retry_after_is_ignored(self, respx_mock: respx.Router) -> None:
        """Un Retry-After sous forme de date ne casse pas la conversion."""
        respx_mock.get(BROWSE_URL).mock(
            return_value=httpx.Response(
                429, headers={"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}
            )
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(RateLimitError) as exc_info:
                await request_with_retry(client, "GET", BROWSE_URL, max_attempts=1)

        assert exc_info.value.retry_after is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_errors_are_not_retried(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(BROWSE_URL).mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await request_with_retry(client, "GET", BROWSE_URL)

        assert exc_info.value.response.status_code == 500
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_kwargs_are_forwarded(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(BROWSE_URL).mock(return_value=httpx.Response(200, json={}))

        async with httpx.AsyncClient() as client:
            await request_with_retry(
                client, "GET", BROWSE_URL, params={"SearchString": "lost"}
            )

        assert route.calls[0].request.url.params["SearchString"] == "lost"
