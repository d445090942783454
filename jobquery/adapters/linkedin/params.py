"""
Translation of QueryOptions into LinkedIn's query-string vocabulary.
Pure string building, no I/O.
"""

import urllib.parse
from typing import Dict, List, Tuple

from jobquery.config.settings import settings
from jobquery.core.models import QueryOptions
from jobquery.adapters.linkedin.config import (
    DEFAULT_HOST,
    JOBS_PER_PAGE,
    jobs_api_base,
    search_page_base,
)

DATE_SINCE_POSTED_CODES: Dict[str, str] = {
    "past month": "r2592000",
    "past week": "r604800",
    "24hr": "r86400",
    "1hr": "r3600",
}

SALARY_CODES: Dict[str, str] = {
    "40000": "1",
    "60000": "2",
    "80000": "3",
    "100000": "4",
    "120000": "5",
}

EXPERIENCE_LEVEL_CODES: Dict[str, str] = {
    "internship": "1",
    "entry level": "2",
    "associate": "3",
    "senior": "4",
    "director": "5",
    "executive": "6",
}

REMOTE_FILTER_CODES: Dict[str, str] = {
    "on-site": "1",
    "remote": "2",
    "hybrid": "3",
}

JOB_TYPE_CODES: Dict[str, str] = {
    "full time": "F",
    "part time": "P",
    "contract": "C",
    "temporary": "T",
    "volunteer": "V",
    "internship": "I",
}

SORT_RELEVANT = "R"
SORT_RECENT = "DD"


def _filter_params(options: QueryOptions) -> List[Tuple[str, str]]:
    params: List[Tuple[str, str]] = []
    if options.keyword:
        params.append(("keywords", options.keyword))
    if options.location:
        params.append(("location", options.location))

    # Unknown values map to nothing and the parameter is left out
    coded = [
        ("f_TPR", DATE_SINCE_POSTED_CODES.get(options.date_since_posted, "")),
        ("f_SB2", SALARY_CODES.get(options.salary, "")),
        ("f_E", EXPERIENCE_LEVEL_CODES.get(options.experience_level, "")),
        ("f_WT", REMOTE_FILTER_CODES.get(options.remote_filter, "")),
        ("f_JT", JOB_TYPE_CODES.get(options.job_type, "")),
    ]
    params.extend((name, code) for name, code in coded if code)
    return params


def _sort_params(options: QueryOptions, site_sort_recent: bool) -> List[Tuple[str, str]]:
    if options.sort_by == "relevant":
        return [("sortBy", SORT_RELEVANT)]
    if options.sort_by == "recent" and site_sort_recent:
        return [("sortBy", SORT_RECENT)]
    return []


def page_offset(options: QueryOptions, start: int = 0) -> int:
    """Absolute result offset: the batch start plus the configured starting page."""
    return start + options.page * JOBS_PER_PAGE


def build_search_page_url(
    options: QueryOptions,
    host: str = DEFAULT_HOST,
    site_sort_recent: bool = settings.SITE_SORT_RECENT,
) -> str:
    """URL of the human-facing search results page."""
    params = _filter_params(options)
    params.append(("position", "1"))
    params.append(("pageNum", "0"))
    params.extend(_sort_params(options, site_sort_recent))
    return f"{search_page_base(host)}?{urllib.parse.urlencode(params)}"


def build_api_url(
    options: QueryOptions,
    start: int = 0,
    host: str = DEFAULT_HOST,
    site_sort_recent: bool = settings.SITE_SORT_RECENT,
) -> str:
    """URL of one page of the guest listing API, starting at the given offset."""
    params = _filter_params(options)
    params.append(("start", str(page_offset(options, start))))
    params.extend(_sort_params(options, site_sort_recent))
    return f"{jobs_api_base(host)}?{urllib.parse.urlencode(params)}"
