"""
Single-page fetch from the LinkedIn guest listing API.
"""

import logging

from jobquery.config.settings import settings
from jobquery.core.errors import HttpStatusError, RateLimitError
from jobquery.core.models import ParseResult, QueryOptions
from jobquery.transport.client import HttpClient
from jobquery.transport.headers import build_xhr_headers
from jobquery.transport.user_agent import IdentityProvider
from jobquery.adapters.linkedin.config import DEFAULT_HOST
from jobquery.adapters.linkedin.extraction import parse_job_list
from jobquery.adapters.linkedin.params import build_api_url, build_search_page_url

logger = logging.getLogger(__name__)


async def fetch_job_batch(
    client: HttpClient,
    options: QueryOptions,
    start: int,
    identity: IdentityProvider,
    host: str = DEFAULT_HOST,
) -> ParseResult:
    """
    Fetch and parse the listing page starting at the given offset.

    Each call presents a freshly drawn user agent. A 429 response is
    raised as RateLimitError; every other failure propagates unchanged.
    """
    url = build_api_url(options, start=start, host=host)
    headers = build_xhr_headers(
        identity.get_user_agent(),
        referer=build_search_page_url(options, host=host),
    )
    logger.debug(f"Fetching listing batch: {url}")

    try:
        response = await client.get(url, headers=headers, timeout=settings.REQUEST_TIMEOUT)
    except HttpStatusError as e:
        if e.status == 429:
            raise RateLimitError(url) from e
        raise

    return parse_job_list(response.text)
