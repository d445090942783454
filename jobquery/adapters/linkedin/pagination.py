"""
Pagination over the LinkedIn guest listing API.

Pages are fetched strictly one after another. Successful pages are followed
by a randomized pacing delay; failed pages are retried at the same offset
after an exponential backoff, until too many consecutive failures end the
session with whatever was collected.
"""

import asyncio
import logging
from enum import Enum
from typing import List, Optional

from playwright.async_api import Error as PlaywrightError

from jobquery.config.settings import settings
from jobquery.core.cache import JobCache
from jobquery.core.errors import TransportError
from jobquery.core.models import JobRecord, QueryOptions
from jobquery.core.rate_limit import SleepFunc, backoff, random_delay
from jobquery.transport.client import HttpClient
from jobquery.transport.user_agent import IdentityProvider
from jobquery.adapters.linkedin.config import DEFAULT_HOST, JOBS_PER_PAGE
from jobquery.adapters.linkedin.discovery import estimate_total_pages
from jobquery.adapters.linkedin.fetching import fetch_job_batch
from jobquery.adapters.linkedin.params import build_api_url
from jobquery.adapters.linkedin.sorting import sort_jobs_by_ago_time

logger = logging.getLogger(__name__)

# Failures worth another attempt at the same offset
RETRYABLE_ERRORS = (TransportError, PlaywrightError, asyncio.TimeoutError)


class RetrievalStrategy(str, Enum):
    ESTIMATE = "estimate"  # estimate page count first, always fresh
    CACHED = "cached"  # no estimate, serve and store via a JobCache


class PaginationController:
    """
    Runs one retrieval session for one QueryOptions.

    With ESTIMATE the loop is bounded by the estimated page count; with
    CACHED it only stops on an empty page, the limit, or the error ceiling,
    and the result is served from and written to the given cache.
    """

    def __init__(
        self,
        client: HttpClient,
        identity: IdentityProvider,
        strategy: RetrievalStrategy = RetrievalStrategy.ESTIMATE,
        cache: Optional[JobCache] = None,
        host: str = DEFAULT_HOST,
        sleep: SleepFunc = asyncio.sleep,
        max_consecutive_errors: int = settings.MAX_CONSECUTIVE_ERRORS,
    ):
        strategy = RetrievalStrategy(strategy)
        if strategy is RetrievalStrategy.CACHED and cache is None:
            raise ValueError("The cached strategy requires a JobCache instance")
        if strategy is RetrievalStrategy.ESTIMATE and cache is not None:
            raise ValueError("A JobCache is only used by the cached strategy")

        self.client = client
        self.identity = identity
        self.strategy = strategy
        self.cache = cache
        self.host = host
        self.sleep = sleep
        self.max_consecutive_errors = max_consecutive_errors

    def cache_key(self, options: QueryOptions) -> str:
        return build_api_url(options, start=0, host=self.host)

    async def run(self, options: QueryOptions) -> List[JobRecord]:
        total_pages: Optional[int] = None

        if self.strategy is RetrievalStrategy.CACHED:
            cached = self.cache.get(self.cache_key(options))
            if cached is not None:
                logger.info(f"Cache hit: returning {len(cached)} cached jobs")
                return cached
            logger.info("Cache miss, fetching job data...")
        else:
            logger.info("Fetching fresh job data...")
            total_pages = await estimate_total_pages(
                self.client, options, self.identity, host=self.host
            )
            logger.info(f"Planning to fetch up to {total_pages} pages")

        all_jobs = await self._paginate(options, total_pages)

        if self.strategy is RetrievalStrategy.CACHED and all_jobs:
            self.cache.set(self.cache_key(options), all_jobs)

        logger.info(f"Final result: {len(all_jobs)} jobs fetched")
        return all_jobs

    async def _paginate(
        self, options: QueryOptions, total_pages: Optional[int]
    ) -> List[JobRecord]:
        all_jobs: List[JobRecord] = []
        start = 0
        current_page = 0
        consecutive_errors = 0
        pages_label = total_pages if total_pages is not None else "?"

        while total_pages is None or current_page < total_pages:
            try:
                batch = await fetch_job_batch(
                    self.client, options, start, self.identity, host=self.host
                )
            except RETRYABLE_ERRORS as e:
                consecutive_errors += 1
                logger.error(
                    f"Error fetching page {current_page + 1} "
                    f"(attempt {consecutive_errors}): {e}"
                )
                if consecutive_errors >= self.max_consecutive_errors:
                    logger.warning("Max consecutive errors reached. Stopping.")
                    break
                await backoff(consecutive_errors, sleep=self.sleep)
                continue

            if batch.degraded:
                logger.warning(f"Page {current_page + 1} could not be parsed")
            if not batch.jobs:
                logger.info("No more jobs found, stopping pagination")
                break

            all_jobs.extend(batch.jobs)
            logger.info(
                f"Fetched {len(batch.jobs)} jobs from page "
                f"{current_page + 1}/{pages_label}. Total: {len(all_jobs)}"
            )

            if options.wants_recent:
                all_jobs = sort_jobs_by_ago_time(all_jobs)

            if options.limit and len(all_jobs) >= options.limit:
                all_jobs = all_jobs[: options.limit]
                logger.info(f"Reached limit of {options.limit} jobs")
                break

            consecutive_errors = 0
            current_page += 1
            start += JOBS_PER_PAGE

            if total_pages is not None and current_page >= total_pages:
                break
            await random_delay(
                settings.PACING_MIN_DELAY, settings.PACING_MAX_DELAY, sleep=self.sleep
            )

        return all_jobs
