"""Claim scoring with the ClaimBuster API."""

import logging
import os
from typing import Any
from urllib.parse import quote

import httpx

from claimcheck.data import ScoredClaim
from claimcheck.errors import ApiError, ClientError, MalformedResponseError, ServerError
from claimcheck.http import RetryingFetcher, Throttler

CLAIMBUSTER_API_URL = "https://idir.uta.edu/claimbuster/api/v2"

# Characters encodeURIComponent leaves untouched besides alphanumerics and "-_."
_URI_COMPONENT_SAFE = "!~*'()"

logger = logging.getLogger(__name__)


class ClaimBusterScorer:
    """Score claims using the ClaimBuster ``score/text/sentences`` endpoint.

    Args:
        api_key: ClaimBuster API key (defaults to CLAIMBUSTER_API_KEY env var).
        base_url: API root, without trailing slash.
        max_requests_per_minute: Request budget used by the throttler.
        retries: Retries on transport errors and 5xx responses.
        backoff_ms: Initial backoff between retries in milliseconds.
        timeout: HTTP timeout in seconds.
        fetcher: Optional pre-built fetcher; overrides the throttling and
            retry arguments.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = CLAIMBUSTER_API_URL,
        max_requests_per_minute: int = 60,
        retries: int = 3,
        backoff_ms: int = 500,
        timeout: float = 30.0,
        fetcher: RetryingFetcher | None = None,
    ) -> None:
        self._api_key = api_key or os.environ.get("CLAIMBUSTER_API_KEY")
        if not self._api_key:
            raise ValueError(
                "ClaimBuster API key required. Pass api_key or set CLAIMBUSTER_API_KEY env var."
            )
        self._base_url = base_url.rstrip("/")
        self._fetcher = fetcher or RetryingFetcher(
            Throttler(max_requests_per_minute),
            retries=retries,
            backoff_ms=backoff_ms,
            timeout=timeout,
        )

    def build_url(self, claim: str) -> str:
        """Return the scoring URL for a claim, URL-encoded into the path."""
        return f"{self._base_url}/score/text/sentences/{quote(claim, safe=_URI_COMPONENT_SAFE)}"

    async def score(self, claim: str) -> ScoredClaim:
        """Score a single claim.

        Raises:
            TransportError: If the API could not be reached.
            ClientError: On a 4xx response.
            ServerError: On a 5xx response that outlived the retries.
            ApiError: On any other non-success response.
            MalformedResponseError: If the body lacks ``results[0].text/score``.
        """
        logger.info("Scoring claim: %s", claim[:80])
        response = await self._fetcher.fetch(
            "GET",
            self.build_url(claim),
            headers={
                "x-api-key": self._api_key,  # type: ignore[dict-item]
                "Content-Type": "application/json",
            },
        )
        if not response.is_success:
            raise _api_error(response)

        scored = _parse_response(response)
        logger.info("Claim scored %.2f", scored.score)
        return scored


def _api_error(response: httpx.Response) -> ApiError:
    """Map a non-success response onto the matching ApiError subclass."""
    status = response.status_code
    reason = response.reason_phrase
    if 400 <= status < 500:
        return ClientError(status, reason)
    if status >= 500:
        return ServerError(status, reason)
    return ApiError(status, reason)


def _parse_response(response: httpx.Response) -> ScoredClaim:
    """Extract the first scored sentence from a ClaimBuster response body."""
    try:
        data: Any = response.json()
    except ValueError as e:
        raise MalformedResponseError(f"Response body is not valid JSON: {e}") from e

    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list) or not results:
        raise MalformedResponseError("Response has no 'results' entries")

    first = results[0]
    if not isinstance(first, dict) or "text" not in first or "score" not in first:
        raise MalformedResponseError("First result is missing 'text' or 'score'")

    try:
        score = float(first["score"])
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(f"Score is not numeric: {first['score']!r}") from e

    return ScoredClaim(text=str(first["text"]), score=score)
