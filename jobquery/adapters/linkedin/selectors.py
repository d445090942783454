"""
All CSS selectors used by the LinkedIn adapter.
Centralized here so that selector changes only need to happen in one place.
"""

# --- Search page (result count) ---

# Tried in order; the first non-empty text wins
JOB_COUNT_SELECTORS = [
    ".results-context-header__job-count",
    '[data-test="results-context-header-job-count"]',
    ".jobs-search-results-list__subtitle",
]

# --- Listing API cards ---

JOB_CARD_SELECTOR = "li"

TITLE_SELECTOR = ".base-search-card__title"
COMPANY_SELECTOR = ".base-search-card__subtitle"
LOCATION_SELECTOR = ".job-search-card__location"
DATE_SELECTOR = "time"
DATE_ATTRIBUTE = "datetime"
SALARY_SELECTOR = ".job-search-card__salary-info"

JOB_LINK_SELECTOR = ".base-card__full-link"
JOB_LINK_FALLBACK_SELECTOR = "a"

LOGO_SELECTOR = ".artdeco-entity-image"
LOGO_ATTRIBUTE = "data-delayed-url"

# New layout first, then the legacy list date
AGO_TIME_SELECTORS = [
    ".job-search-card__listdate--new",
    ".job-search-card__listdate",
]
