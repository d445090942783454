"""
LinkedIn-specific constants and URL builders.
"""

from jobquery.config.settings import settings

DEFAULT_HOST = settings.SITE_HOST

SEARCH_PATH = "/jobs/search"
JOBS_API_PATH = "/jobs-guest/jobs/api/seeMoreJobPostings/search"

# Pagination
JOBS_PER_PAGE = 25  # listing API page width
MAX_PAGES = 40  # the site stops serving results past this page
FALLBACK_TOTAL_PAGES = MAX_PAGES


def search_page_base(host: str = DEFAULT_HOST) -> str:
    return f"https://{host}{SEARCH_PATH}"


def jobs_api_base(host: str = DEFAULT_HOST) -> str:
    return f"https://{host}{JOBS_API_PATH}"
