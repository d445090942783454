import logging
from typing import Optional, Protocol

from fake_useragent import UserAgent

logger = logging.getLogger(__name__)

# Default fallback user agent string
FALLBACK_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0.0.0 Safari/537.36"
)


class IdentityProvider(Protocol):
    """Supplies the User-Agent presented on each request."""

    def get_user_agent(self) -> str:
        ...


class RandomUserAgentProvider:
    """
    Rotates through realistic desktop user-agent strings.
    A new string is drawn on every call.
    """

    def __init__(self, fallback: str = FALLBACK_UA):
        self.fallback = fallback
        self._ua: Optional[UserAgent] = None
        try:
            self._ua = UserAgent(
                browsers=["Chrome", "Firefox", "Safari", "Edge"],
                os=["Windows", "Mac OS X"],
                fallback=fallback,
            )
        except Exception as e:
            logger.warning(f"Failed to initialize fake_useragent, using fallback: {e}")

    def get_user_agent(self) -> str:
        if self._ua is None:
            return self.fallback
        return self._ua.random


class FixedUserAgentProvider:
    """Always presents the same user agent."""

    def __init__(self, user_agent: str = FALLBACK_UA):
        self.user_agent = user_agent

    def get_user_agent(self) -> str:
        return self.user_agent
