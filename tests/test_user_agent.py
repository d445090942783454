from jobquery.transport import user_agent
from jobquery.transport.headers import build_navigation_headers, build_xhr_headers
from jobquery.transport.user_agent import (
    FALLBACK_UA,
    FixedUserAgentProvider,
    RandomUserAgentProvider,
)


def test_fixed_provider_is_deterministic():
    provider = FixedUserAgentProvider("agent/1.0")
    assert provider.get_user_agent() == "agent/1.0"
    assert provider.get_user_agent() == "agent/1.0"


def test_random_provider_draws_from_fake_useragent(monkeypatch):
    class StubUserAgent:
        def __init__(self, **kwargs):
            self.kwargs = kwargs
            self.draws = 0

        @property
        def random(self):
            self.draws += 1
            return f"agent-{self.draws}"

    monkeypatch.setattr(user_agent, "UserAgent", StubUserAgent)
    provider = RandomUserAgentProvider()

    assert provider.get_user_agent() == "agent-1"
    assert provider.get_user_agent() == "agent-2"


def test_random_provider_falls_back_when_library_fails(monkeypatch):
    def broken(**kwargs):
        raise RuntimeError("no data file")

    monkeypatch.setattr(user_agent, "UserAgent", broken)
    provider = RandomUserAgentProvider()

    assert provider.get_user_agent() == FALLBACK_UA


def test_header_sets():
    navigation = build_navigation_headers("agent/1.0")
    xhr = build_xhr_headers("agent/1.0", referer="https://www.linkedin.com/jobs/search?x=1")

    assert navigation["User-Agent"] == "agent/1.0"
    assert navigation["Sec-Fetch-Dest"] == "document"
    assert navigation["Cache-Control"] == "no-cache"
    assert xhr["Referer"] == "https://www.linkedin.com/jobs/search?x=1"
    assert xhr["X-Requested-With"] == "XMLHttpRequest"
    assert xhr["Sec-Fetch-Site"] == "same-origin"
