from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

NOT_SPECIFIED = "Not specified"


def normalize_whitespace(value: Optional[str]) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    if not value:
        return ""
    return " ".join(str(value).split())


def _normalize_choice(value: Optional[Union[str, int]]) -> str:
    if value is None:
        return ""
    return normalize_whitespace(str(value)).lower()


def _non_negative_int(name: str, value: Optional[Union[str, int]]) -> int:
    if value is None or value == "":
        return 0
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    if number < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return number


@dataclass(frozen=True)
class QueryOptions:
    """
    Search criteria for one retrieval session.

    Enumerated filters are stored lowercased and trimmed; values the site
    does not know are kept as-is and simply produce no query parameter.
    """

    keyword: str = ""
    location: str = ""
    date_since_posted: str = ""
    job_type: str = ""
    remote_filter: str = ""
    salary: Union[str, int] = ""
    experience_level: str = ""
    sort_by: str = ""
    limit: int = 0
    page: int = 0

    def __post_init__(self):
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "keyword", normalize_whitespace(self.keyword))
        object.__setattr__(self, "location", normalize_whitespace(self.location))
        for name in (
            "date_since_posted",
            "job_type",
            "remote_filter",
            "salary",
            "experience_level",
            "sort_by",
        ):
            object.__setattr__(self, name, _normalize_choice(getattr(self, name)))
        object.__setattr__(self, "limit", _non_negative_int("limit", self.limit))
        object.__setattr__(self, "page", _non_negative_int("page", self.page))

    @property
    def wants_recent(self) -> bool:
        return self.sort_by == "recent"


@dataclass(frozen=True)
class JobRecord:
    """
    Canonical job listing extracted from one search result card.
    Every field is a string; a missing value is an empty string.
    """

    position: str
    company: str
    location: str = ""
    date: str = ""
    salary: str = NOT_SPECIFIED
    job_url: str = ""
    company_logo: str = ""
    ago_time: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "position": self.position,
            "company": self.company,
            "location": self.location,
            "date": self.date,
            "salary": self.salary,
            "jobUrl": self.job_url,
            "companyLogo": self.company_logo,
            "agoTime": self.ago_time,
        }


@dataclass
class ParseResult:
    """
    Outcome of parsing one page of listing markup.

    degraded is True when the page as a whole could not be parsed, which
    lets callers tell a broken page apart from a page with no jobs.
    """

    jobs: List[JobRecord] = field(default_factory=list)
    degraded: bool = False
    skipped: int = 0

    def __len__(self) -> int:
        return len(self.jobs)
