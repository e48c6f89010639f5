"""Featured job selection, platform statistics and keyword category counts."""
from __future__ import annotations

import math
from typing import Iterable, Sequence

from jobboard.log import get_logger
from jobboard.models import JobCategory, JobPosting, PlatformStats

log = get_logger(__name__)

FEATURED_LIMIT = 6

# Simulated metric: share of applications counted as placements.
PLACEMENT_RATE = 0.15

# Checked in order; the first group with a keyword in the title wins.
CATEGORY_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("Technology", ("developer", "engineer", "tech", "software")),
    ("Design", ("design", "ui", "ux", "graphic")),
    ("Marketing", ("marketing", "content", "digital")),
    ("Sales", ("sales", "business", "manager")),
    ("Finance", ("finance", "accounting", "financial")),
    ("Healthcare", ("health", "medical", "nurse", "healthcare")),
]


def _normalize(s: str) -> str:
    return (s or "").lower().strip()


def select_featured(jobs: Sequence[JobPosting], limit: int = FEATURED_LIMIT) -> list[JobPosting]:
    """Featured postings first, padded with the earliest non-featured ones.

    Returns a new list of at most *limit* (capped at 6) distinct postings.
    """
    limit = max(0, min(limit, FEATURED_LIMIT))
    picked: list[JobPosting] = []
    seen: set = set()

    def _take(candidates: Iterable[JobPosting]) -> None:
        for job in candidates:
            if len(picked) >= limit:
                return
            # Postings without an id are told apart by identity.
            key = job.id or id(job)
            if key in seen:
                continue
            seen.add(key)
            picked.append(job)

    _take(j for j in jobs if j.featured)
    _take(j for j in jobs if not j.featured)
    return picked


def compute_stats(jobs: Sequence[JobPosting]) -> PlatformStats:
    total_applications = sum(j.application_count or 0 for j in jobs)
    return PlatformStats(
        total_jobs=len(jobs),
        total_companies=len({j.company for j in jobs}),
        total_applications=total_applications,
        successful_placements=math.floor(total_applications * PLACEMENT_RATE),
    )


def classify_title(title: str) -> str | None:
    """Name of the first keyword group matching *title*, or None."""
    t = _normalize(title)
    for name, keywords in CATEGORY_KEYWORDS:
        if any(kw in t for kw in keywords):
            return name
    return None


def recompute_category_counts(
    categories: Sequence[JobCategory], jobs: Sequence[JobPosting]
) -> dict[str, int]:
    """Reset every category count, then count each job under at most one category.

    Categories are matched to keyword groups by name, case-insensitively. A job
    whose group has no category in *categories* stays uncategorized.
    Returns jobs per keyword group, with "" counting titles that matched none.
    """
    by_name: dict[str, JobCategory] = {}
    for cat in categories:
        cat.count = 0
        by_name.setdefault(_normalize(cat.name), cat)

    tally: dict[str, int] = {}
    for job in jobs:
        group = classify_title(job.title)
        key = group or ""
        tally[key] = tally.get(key, 0) + 1
        if group is None:
            continue
        cat = by_name.get(group.lower())
        if cat is not None:
            cat.count += 1

    log.debug("Category tally: %s", tally)
    return tally
