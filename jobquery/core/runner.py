import asyncio
import logging
from typing import List, Dict, Optional, Type

from jobquery.adapters.base import JobPortalAdapter
from jobquery.adapters.linkedin.adapter import LinkedInAdapter
from jobquery.adapters.linkedin.pagination import RetrievalStrategy
from jobquery.core.cache import JobCache
from jobquery.core.models import JobRecord, QueryOptions
from jobquery.core.rate_limit import SleepFunc
from jobquery.transport.client import HttpClient, PlaywrightHttpClient
from jobquery.transport.user_agent import IdentityProvider, RandomUserAgentProvider

logger = logging.getLogger(__name__)

ADAPTERS: Dict[str, Type[JobPortalAdapter]] = {
    "linkedin": LinkedInAdapter,
}


class Runner:
    """
    Resolves the portal adapter and runs one retrieval session.
    """

    async def run(
        self,
        portal: str,
        options: QueryOptions,
        strategy: Optional[RetrievalStrategy] = None,
        cache: Optional[JobCache] = None,
        client: Optional[HttpClient] = None,
        identity: Optional[IdentityProvider] = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> List[JobRecord]:
        """
        Run the retrieval for a specific portal.

        Scraping hiccups (rate limits, network errors, markup drift) are
        absorbed by the adapter and show up as a shorter list. Anything
        else is logged and re-raised.
        """
        adapter_cls = ADAPTERS.get(portal.lower())
        if not adapter_cls:
            raise ValueError(
                f"Portal '{portal}' not supported. Available portals: {list(ADAPTERS.keys())}"
            )

        owns_client = client is None
        if owns_client:
            client = PlaywrightHttpClient()
        identity = identity or RandomUserAgentProvider()

        try:
            if owns_client:
                await client.initialize()

            adapter = adapter_cls(
                client,
                identity,
                strategy=strategy,
                cache=cache,
                sleep=sleep,
            )
            jobs = await adapter.fetch_jobs(options)
            logger.info(f"Retrieved {len(jobs)} jobs from {portal}.")
            return jobs

        except Exception as e:
            logger.exception(f"Fatal error in job fetching: {e}")
            raise
        finally:
            if owns_client:
                await client.close()


runner = Runner()


async def query(
    options: QueryOptions,
    strategy: Optional[RetrievalStrategy] = None,
    cache: Optional[JobCache] = None,
    client: Optional[HttpClient] = None,
    identity: Optional[IdentityProvider] = None,
    sleep: SleepFunc = asyncio.sleep,
) -> List[JobRecord]:
    """Search LinkedIn with the given options and return the matching jobs."""
    return await runner.run(
        "linkedin",
        options,
        strategy=strategy,
        cache=cache,
        client=client,
        identity=identity,
        sleep=sleep,
    )
