from abc import ABC, abstractmethod
from typing import List

from jobquery.core.models import JobRecord, QueryOptions
from jobquery.transport.client import HttpClient
from jobquery.transport.user_agent import IdentityProvider


class JobPortalAdapter(ABC):
    """
    Abstract base class for all job portal adapters.
    """

    def __init__(self, client: HttpClient, identity: IdentityProvider):
        self.client = client
        self.identity = identity

    @abstractmethod
    async def fetch_jobs(self, options: QueryOptions) -> List[JobRecord]:
        """
        Run one retrieval session for the given search criteria.
        Returns:
            List[JobRecord]: Best-effort, possibly partial list of jobs.
        """
        pass
