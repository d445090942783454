"""
CSS selector-based extraction of job cards from listing API markup.
"""

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from jobquery.core.models import JobRecord, ParseResult, NOT_SPECIFIED
from jobquery.adapters.linkedin.selectors import (
    JOB_CARD_SELECTOR,
    TITLE_SELECTOR,
    COMPANY_SELECTOR,
    LOCATION_SELECTOR,
    DATE_SELECTOR,
    DATE_ATTRIBUTE,
    SALARY_SELECTOR,
    JOB_LINK_SELECTOR,
    JOB_LINK_FALLBACK_SELECTOR,
    LOGO_SELECTOR,
    LOGO_ATTRIBUTE,
    AGO_TIME_SELECTORS,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def _text(card: Tag, selector: str) -> str:
    element = card.select_one(selector)
    if element is None:
        return ""
    return element.get_text().strip()


def _attr(card: Tag, selector: str, attribute: str) -> str:
    element = card.select_one(selector)
    if element is None:
        return ""
    value = element.get(attribute)
    return value.strip() if isinstance(value, str) else ""


def canonical_job_url(href: str) -> str:
    """Drop the query string (tracking ids) from a job link."""
    return href.split("?", 1)[0] if href else ""


def _extract_card(card: Tag) -> Optional[JobRecord]:
    position = _text(card, TITLE_SELECTOR)
    company = _text(card, COMPANY_SELECTOR)
    if not position or not company:
        return None

    salary = _WHITESPACE.sub(" ", _text(card, SALARY_SELECTOR))

    job_url = _attr(card, JOB_LINK_SELECTOR, "href")
    if not job_url:
        job_url = _attr(card, JOB_LINK_FALLBACK_SELECTOR, "href")

    ago_time = ""
    for selector in AGO_TIME_SELECTORS:
        ago_time = _text(card, selector)
        if ago_time:
            break

    return JobRecord(
        position=position,
        company=company,
        location=_text(card, LOCATION_SELECTOR),
        date=_attr(card, DATE_SELECTOR, DATE_ATTRIBUTE),
        salary=salary or NOT_SPECIFIED,
        job_url=canonical_job_url(job_url),
        company_logo=_attr(card, LOGO_SELECTOR, LOGO_ATTRIBUTE),
        ago_time=ago_time,
    )


def parse_job_list(html: str) -> ParseResult:
    """
    Parse one page of listing markup into job records.

    A card that fails to extract is skipped; a page that fails to parse
    comes back empty and marked degraded. Never raises.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
        cards = soup.select(JOB_CARD_SELECTOR)
    except Exception as e:
        logger.error(f"Error parsing job list: {e}")
        return ParseResult(jobs=[], degraded=True)

    jobs: List[JobRecord] = []
    skipped = 0
    for index, card in enumerate(cards):
        try:
            job = _extract_card(card)
        except Exception as e:
            logger.warning(f"Error parsing job card {index}: {e}")
            skipped += 1
            continue
        if job is not None:
            jobs.append(job)

    logger.debug(f"Extracted {len(jobs)} jobs from {len(cards)} cards")
    return ParseResult(jobs=jobs, skipped=skipped)
