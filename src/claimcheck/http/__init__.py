"""HTTP plumbing: throttling and retries."""

from claimcheck.http.fetch import RetryingFetcher
from claimcheck.http.throttle import Throttler

__all__ = [
    "RetryingFetcher",
    "Throttler",
]
