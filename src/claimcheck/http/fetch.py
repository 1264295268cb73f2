"""Throttled HTTP fetching with exponential backoff."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

import httpx

from claimcheck.errors import TransportError
from claimcheck.http.throttle import Throttler

logger = logging.getLogger(__name__)


class RetryingFetcher:
    """Perform one HTTP request, retrying on transport failures and 5xx.

    Every attempt waits on the throttler first. Backoff starts at
    ``backoff_ms`` and doubles after each failed attempt. When retries run
    out, a transport failure is raised as ``TransportError`` while a 5xx
    response is returned so the caller can interpret it. Non-5xx responses
    are returned without retrying.

    Args:
        throttler: Throttler shared by all attempts.
        retries: Number of retries after the first attempt.
        backoff_ms: Delay before the first retry in milliseconds.
        timeout: Timeout in seconds for clients opened by the fetcher.
        client: Optional pre-configured client. When omitted, a client is
            opened for each ``fetch`` call.
        sleep: Coroutine used for backoff delays.
    """

    def __init__(
        self,
        throttler: Throttler,
        *,
        retries: int = 3,
        backoff_ms: int = 500,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if retries < 0:
            raise ValueError("retries must be >= 0")
        self._throttler = throttler
        self._retries = retries
        self._backoff_ms = backoff_ms
        self._timeout = timeout
        self._client = client
        self._sleep = sleep

    async def fetch(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send the request and return the final response.

        Raises:
            TransportError: If every attempt failed at the transport level.
        """
        if self._client is not None:
            return await self._fetch_with(self._client, method, url, headers)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await self._fetch_with(client, method, url, headers)

    async def _fetch_with(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        headers: dict[str, str] | None,
    ) -> httpx.Response:
        delay_ms = self._backoff_ms
        attempt = 0
        while True:
            await self._throttler.wait()
            try:
                response = await client.request(method, url, headers=headers)
            except httpx.TransportError as e:
                if attempt >= self._retries:
                    raise TransportError(f"Request failed: {e}") from e
                logger.warning(
                    "Request error (attempt %d/%d), retrying in %dms: %s",
                    attempt + 1,
                    self._retries + 1,
                    delay_ms,
                    e,
                )
            else:
                self._throttler.mark()
                if response.status_code < 500 or attempt >= self._retries:
                    return response
                logger.warning(
                    "Server error %d (attempt %d/%d), retrying in %dms",
                    response.status_code,
                    attempt + 1,
                    self._retries + 1,
                    delay_ms,
                )

            await self._sleep(delay_ms / 1000)
            delay_ms *= 2
            attempt += 1
