"""Shared fakes for the retrieval tests. No test touches the network."""

import os
import sys
from typing import Dict, List, Optional, Union

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from jobquery.core.errors import HttpStatusError
from jobquery.transport.client import HttpResponse
from jobquery.transport.user_agent import FixedUserAgentProvider

TEST_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) TestAgent/1.0"

SEARCH_PAGE_HTML = """
<html><body>
<div class="results-context-header">
  <h1><span class="results-context-header__job-count">{count}</span> Back End Developer Jobs</h1>
</div>
</body></html>
"""


def card_html(
    index: int,
    ago_time: str = "1 hour ago",
    title: Optional[str] = None,
    company: Optional[str] = None,
) -> str:
    title = f"Backend Developer {index}" if title is None else title
    company = f"Acme {index}" if company is None else company
    return f"""
<li>
  <div class="base-card base-search-card job-search-card">
    <a class="base-card__full-link" href="https://ph.linkedin.com/jobs/view/backend-developer-{index}?refId=abc{index}&amp;trackingId=xyz">
      <span class="sr-only">{title}</span>
    </a>
    <div class="search-entity-media">
      <img class="artdeco-entity-image" data-delayed-url="https://media.licdn.com/logo-{index}.png" alt="">
    </div>
    <div class="base-search-card__info">
      <h3 class="base-search-card__title">
        {title}
      </h3>
      <h4 class="base-search-card__subtitle"><a href="https://ph.linkedin.com/company/acme-{index}">{company}</a></h4>
      <div class="base-search-card__metadata">
        <span class="job-search-card__location">Manila, Philippines</span>
        <time class="job-search-card__listdate--new" datetime="2026-10-17">
          {ago_time}
        </time>
      </div>
    </div>
  </div>
</li>
"""


def page_html(count: int, first_index: int = 0, ago_times: Optional[List[str]] = None) -> str:
    cards = []
    for offset in range(count):
        ago = ago_times[offset] if ago_times else "1 hour ago"
        cards.append(card_html(first_index + offset, ago_time=ago))
    return "".join(cards)


Reply = Union[str, Exception]


class FakeHttpClient:
    """
    Serves canned replies. Listing API requests consume `batches` in
    order; search page requests get `search_page`. An Exception reply
    is raised instead of returned.
    """

    def __init__(self, batches: Optional[List[Reply]] = None, search_page: Reply = ""):
        self.batches = list(batches or [])
        self.search_page = search_page
        self.requests: List[Dict] = []

    @property
    def api_requests(self) -> List[Dict]:
        return [r for r in self.requests if "seeMoreJobPostings" in r["url"]]

    @property
    def search_requests(self) -> List[Dict]:
        return [r for r in self.requests if "/jobs/search?" in r["url"]]

    async def get(self, url: str, headers: Dict[str, str], timeout: int) -> HttpResponse:
        self.requests.append({"url": url, "headers": headers, "timeout": timeout})
        if "seeMoreJobPostings" in url:
            reply = self.batches.pop(0) if self.batches else ""
        else:
            reply = self.search_page
        if isinstance(reply, Exception):
            raise reply
        return HttpResponse(status=200, text=reply, url=url)


class RecordingSleep:
    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def server_error(url: str = "https://www.linkedin.com/jobs-guest") -> HttpStatusError:
    return HttpStatusError(503, url)


@pytest.fixture
def identity():
    return FixedUserAgentProvider(TEST_USER_AGENT)


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def clock():
    return FakeClock()
