import logging
from abc import ABC, abstractmethod
from typing import Optional, Dict

from jobquery.config.settings import settings

logger = logging.getLogger(__name__)


class ProxyProvider(ABC):
    """
    Abstract base class for proxy providers.
    Each provider builds the proxy dict accepted by Playwright's request context.
    """

    @abstractmethod
    def get_config(self) -> Optional[Dict[str, str]]:
        """
        Returns a dict with 'server' and optional 'username'/'password' keys,
        or None if the proxy cannot be configured.
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        pass


class NoProxyProvider(ProxyProvider):
    def get_config(self) -> Optional[Dict[str, str]]:
        logger.debug("No proxy configured")
        return None

    def get_name(self) -> str:
        return "No Proxy"


class GenericProxyProvider(ProxyProvider):
    """
    Any HTTP/SOCKS proxy given by PROXY_SERVER, with optional
    PROXY_USERNAME / PROXY_PASSWORD credentials.
    """

    def get_config(self) -> Optional[Dict[str, str]]:
        if not settings.PROXY_SERVER:
            logger.warning("PROXY_SERVER not set. Cannot use generic proxy.")
            return None

        logger.info(f"Using generic proxy: {settings.PROXY_SERVER}")
        config = {"server": settings.PROXY_SERVER}
        if settings.PROXY_USERNAME:
            config["username"] = settings.PROXY_USERNAME
        if settings.PROXY_PASSWORD:
            config["password"] = settings.PROXY_PASSWORD
        return config

    def get_name(self) -> str:
        return "Generic Proxy"


class ScrapeOpsProvider(ProxyProvider):
    """Requires SCRAPEOPS_API_KEY."""

    def get_config(self) -> Optional[Dict[str, str]]:
        if not settings.SCRAPEOPS_API_KEY:
            logger.warning("SCRAPEOPS_API_KEY not set. Cannot use ScrapeOps proxy.")
            return None

        logger.info("Using ScrapeOps proxy")
        return {
            "server": "http://proxy.scrapeops.io:5353",
            "username": "scrapeops",
            "password": settings.SCRAPEOPS_API_KEY,
        }

    def get_name(self) -> str:
        return "ScrapeOps"


PROXY_PROVIDERS: Dict[str, type[ProxyProvider]] = {
    "none": NoProxyProvider,
    "generic": GenericProxyProvider,
    "scrapeops": ScrapeOpsProvider,
}


def get_proxy_config(provider_name: Optional[str] = None) -> Optional[Dict[str, str]]:
    """
    Build the proxy configuration named by PROXY_PROVIDER (or provider_name).
    Unknown providers fall back to no proxy.
    """
    provider_name = (provider_name or settings.PROXY_PROVIDER).lower()
    provider_class = PROXY_PROVIDERS.get(provider_name)

    if not provider_class:
        logger.error(
            f"Unknown proxy provider: '{provider_name}'. "
            f"Available providers: {', '.join(PROXY_PROVIDERS.keys())}"
        )
        logger.warning("Falling back to no proxy.")
        return None

    return provider_class().get_config()
