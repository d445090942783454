"""
Result-count discovery from the LinkedIn search page.
Gives the pagination loop an upper bound on the number of listing pages.
"""

import logging
import math
import re

from bs4 import BeautifulSoup

from jobquery.config.settings import settings
from jobquery.core.models import QueryOptions
from jobquery.transport.client import HttpClient
from jobquery.transport.headers import build_navigation_headers
from jobquery.transport.user_agent import IdentityProvider
from jobquery.adapters.linkedin.config import (
    DEFAULT_HOST,
    FALLBACK_TOTAL_PAGES,
    JOBS_PER_PAGE,
    MAX_PAGES,
)
from jobquery.adapters.linkedin.params import build_search_page_url
from jobquery.adapters.linkedin.selectors import JOB_COUNT_SELECTORS

logger = logging.getLogger(__name__)


def extract_job_count(html: str) -> int:
    """Read the advertised result count, 0 if no indicator is present."""
    soup = BeautifulSoup(html, "html.parser")

    count_text = ""
    for selector in JOB_COUNT_SELECTORS:
        element = soup.select_one(selector)
        if element is not None:
            count_text = element.get_text().strip()
        if count_text:
            break

    logger.debug(f"Jobs count text: {count_text!r}")
    digits = re.sub(r"\D", "", count_text)
    return int(digits or "0")


def pages_for_count(job_count: int) -> int:
    """ceil(count / page width), clamped to [1, MAX_PAGES]."""
    total_pages = max(1, math.ceil(job_count / JOBS_PER_PAGE))
    return min(total_pages, MAX_PAGES)


async def estimate_total_pages(
    client: HttpClient,
    options: QueryOptions,
    identity: IdentityProvider,
    host: str = DEFAULT_HOST,
) -> int:
    """
    Estimate how many listing pages the query has.
    Any failure assumes the maximum so pagination can still proceed.
    """
    try:
        url = build_search_page_url(options, host=host)
        logger.debug(f"Fetching search page: {url}")

        response = await client.get(
            url,
            headers=build_navigation_headers(identity.get_user_agent()),
            timeout=settings.SEARCH_PAGE_TIMEOUT,
        )
        job_count = extract_job_count(response.text)
        total_pages = pages_for_count(job_count)

        logger.info(f"Found {job_count} jobs, {total_pages} pages")
        return total_pages
    except Exception as e:
        logger.warning(f"Error getting total pages, falling back to {FALLBACK_TOTAL_PAGES}: {e}")
        return FALLBACK_TOTAL_PAGES
