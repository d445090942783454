"""
LinkedInAdapter - Job portal adapter for LinkedIn's public job search.

Implements JobPortalAdapter interface. Delegates all work to submodules:
- params.py for query-string encoding
- discovery.py for result page estimation
- fetching.py and extraction.py for single listing pages
- pagination.py for the paced, retrying page loop
"""

import asyncio
import logging
from typing import List, Optional

from jobquery.adapters.base import JobPortalAdapter
from jobquery.config.settings import settings
from jobquery.core.cache import JobCache
from jobquery.core.models import JobRecord, QueryOptions
from jobquery.core.rate_limit import SleepFunc
from jobquery.transport.client import HttpClient
from jobquery.transport.user_agent import IdentityProvider
from jobquery.adapters.linkedin.config import DEFAULT_HOST
from jobquery.adapters.linkedin.pagination import (
    PaginationController,
    RetrievalStrategy,
)

logger = logging.getLogger(__name__)


class LinkedInAdapter(JobPortalAdapter):
    """
    LinkedIn adapter over the guest listing API.
    """

    def __init__(
        self,
        client: HttpClient,
        identity: IdentityProvider,
        strategy: Optional[RetrievalStrategy] = None,
        cache: Optional[JobCache] = None,
        host: str = DEFAULT_HOST,
        sleep: SleepFunc = asyncio.sleep,
    ):
        super().__init__(client, identity)
        self.controller = PaginationController(
            client,
            identity,
            strategy=strategy or settings.RETRIEVAL_STRATEGY,
            cache=cache,
            host=host,
            sleep=sleep,
        )

    async def fetch_jobs(self, options: QueryOptions) -> List[JobRecord]:
        logger.info(
            f"Searching LinkedIn (Keyword: {options.keyword!r}, "
            f"Location: {options.location!r}, Strategy: {self.controller.strategy.value})"
        )
        return await self.controller.run(options)
