import math
from typing import List

from jobquery.core.models import JobRecord


def age_to_minutes(ago_time: str) -> float:
    """
    Convert a relative age label such as "3 hours ago" to minutes.
    Labels in any other unit sort last (infinity).
    """
    label = (ago_time or "").lower()
    if "just now" in label:
        return 0.0

    parts = label.split()
    if len(parts) < 2:
        return math.inf
    try:
        number = int(parts[0])
    except ValueError:
        return math.inf

    unit = parts[1]
    if "hour" in unit:
        return float(number * 60)
    if "minute" in unit:
        return float(number)
    return math.inf


def sort_jobs_by_ago_time(jobs: List[JobRecord]) -> List[JobRecord]:
    """Most recent first. Stable, returns a new list."""
    return sorted(jobs, key=lambda job: age_to_minutes(job.ago_time))
