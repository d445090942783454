"""
Error taxonomy for job retrieval.

Transport errors are retryable by the pagination loop. Parse failures are
never raised; see ParseResult.
"""


class JobQueryError(Exception):
    """Base class for all job query errors."""


class TransportError(JobQueryError):
    """A request failed before a usable response was received."""


class HttpStatusError(TransportError):
    """The remote site answered with a non-2xx status."""

    def __init__(self, status: int, url: str):
        self.status = status
        self.url = url
        super().__init__(f"HTTP {status} for {url}")


class RateLimitError(HttpStatusError):
    """The remote site answered 429 Too Many Requests."""

    def __init__(self, url: str):
        super().__init__(429, url)

    def __str__(self) -> str:
        return f"Rate limit reached for {self.url}"
