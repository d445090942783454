import logging
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

from playwright.async_api import (
    async_playwright,
    APIRequestContext,
    Playwright,
)

from jobquery.config.settings import settings
from jobquery.core.errors import HttpStatusError
from jobquery.transport.proxy import get_proxy_config

logger = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    status: int
    text: str
    url: str


class HttpClient(Protocol):
    """
    Minimal async GET interface the retrieval code depends on.

    Implementations raise HttpStatusError for non-2xx responses and must
    honour the timeout (milliseconds).
    """

    async def get(
        self, url: str, headers: Dict[str, str], timeout: int
    ) -> HttpResponse:
        ...


class PlaywrightHttpClient:
    """
    HTTP client backed by Playwright's API request context.

    Plain HTTP only: no browser is launched. One instance is owned by one
    caller and closed when that caller is done with it.
    """

    def __init__(self, proxy: Optional[Dict[str, str]] = None):
        self._proxy = proxy
        self._playwright: Optional[Playwright] = None
        self._request: Optional[APIRequestContext] = None

    async def initialize(self):
        """Start Playwright and create the request context if not already running."""
        if self._playwright is None:
            self._playwright = await async_playwright().start()
            logger.info("Playwright started.")

        if self._request is None:
            proxy_config = self._proxy if self._proxy is not None else get_proxy_config()
            self._request = await self._playwright.request.new_context(
                proxy=proxy_config,
                ignore_https_errors=settings.IGNORE_HTTPS_ERRORS,
            )
            logger.info("Request context created.")

    async def get(
        self, url: str, headers: Dict[str, str], timeout: int
    ) -> HttpResponse:
        if self._request is None:
            await self.initialize()

        response = await self._request.get(url, headers=headers, timeout=timeout)
        try:
            if not response.ok:
                raise HttpStatusError(response.status, url)
            # listing markup is not always valid UTF-8
            body = (await response.body()).decode("utf-8", errors="replace")
            return HttpResponse(status=response.status, text=body, url=response.url)
        finally:
            await response.dispose()

    async def close(self):
        if self._request:
            await self._request.dispose()
            self._request = None
            logger.info("Request context closed.")

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
            logger.info("Playwright stopped.")

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
