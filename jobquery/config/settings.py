from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    class Config:
        env_file = BASE_DIR / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    """
    Configuration settings for the job query client.
    """

    # Target site
    SITE_HOST: str = "www.linkedin.com"

    # Timeouts
    REQUEST_TIMEOUT: int = 10000  # ms
    SEARCH_PAGE_TIMEOUT: int = 15000  # ms

    # Pacing between successful pages
    PACING_MIN_DELAY: float = 2.0  # seconds
    PACING_MAX_DELAY: float = 3.0  # seconds

    # Retries
    MAX_CONSECUTIVE_ERRORS: int = 3

    # Retrieval strategy: "estimate" (always fresh) or "cached"
    RETRIEVAL_STRATEGY: str = "estimate"
    CACHE_TTL: int = 3600  # seconds

    # Older site mode also accepted sortBy=DD for most recent first
    SITE_SORT_RECENT: bool = False

    IGNORE_HTTPS_ERRORS: bool = True

    # Proxies
    PROXY_PROVIDER: str = "none"
    PROXY_SERVER: Optional[str] = None
    PROXY_USERNAME: Optional[str] = None
    PROXY_PASSWORD: Optional[str] = None
    SCRAPEOPS_API_KEY: Optional[str] = None

settings = Settings()
