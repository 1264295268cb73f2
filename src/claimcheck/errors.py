"""Exception hierarchy for claimcheck."""


class ClaimCheckError(Exception):
    """Base class for all claimcheck errors."""


class TransportError(ClaimCheckError):
    """The HTTP request could not be completed (DNS, connect, read, ...)."""


class ApiError(ClaimCheckError):
    """The scoring API answered with a non-success status.

    Args:
        status_code: HTTP status code of the response.
        reason: HTTP reason phrase of the response.
    """

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"ClaimBuster API error: {status_code} {reason}")


class ClientError(ApiError):
    """4xx response. Never retried."""


class ServerError(ApiError):
    """5xx response that persisted after all retries."""


class MalformedResponseError(ClaimCheckError):
    """The API response did not have the expected ``results`` shape."""


class FactCheckToolError(ClaimCheckError):
    """Top-level failure of a fact-check invocation."""
