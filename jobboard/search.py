"""Filter job postings for the jobs page and the home page search box."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from jobboard.api.base import JobBoardApi
from jobboard.errors import capture
from jobboard.log import get_logger
from jobboard.models import JobPosting

log = get_logger(__name__)


@dataclass
class SearchFilters:
    query: str = ""
    location: str = ""
    job_type: str = ""
    experience_level: str = ""
    company: str = ""
    skills: list[str] = field(default_factory=list)
    remote: bool = False


@dataclass
class SearchResults:
    jobs: list[JobPosting]
    total_count: int
    filtered_count: int
    query: str = ""
    filters: SearchFilters = field(default_factory=SearchFilters)


def _norm(s: str | None) -> str:
    return (s or "").lower().strip()


def _is_remote(job: JobPosting) -> bool:
    return job.type == "remote" or "remote" in _norm(job.location)


def _matches_query(job: JobPosting, query: str) -> bool:
    fields = [job.title, job.company, job.description, *job.skills, *job.requirements]
    return any(query in _norm(f) for f in fields)


def filter_jobs(jobs: Sequence[JobPosting], filters: SearchFilters) -> list[JobPosting]:
    result = list(jobs)

    query = _norm(filters.query)
    if query:
        result = [j for j in result if _matches_query(j, query)]

    location = _norm(filters.location)
    if location:
        result = [
            j for j in result
            if location in _norm(j.location) or (location == "remote" and _is_remote(j))
        ]

    if filters.job_type:
        result = [j for j in result if j.type == filters.job_type]

    if filters.experience_level:
        result = [j for j in result if j.experience_level == filters.experience_level]

    company = _norm(filters.company)
    if company:
        result = [j for j in result if company in _norm(j.company)]

    wanted = [_norm(s) for s in filters.skills if _norm(s)]
    if wanted:
        result = [
            j for j in result
            if any(w in _norm(s) for w in wanted for s in j.skills)
        ]

    if filters.remote:
        result = [j for j in result if _is_remote(j)]

    return result


def search_jobs(api: JobBoardApi, filters: SearchFilters) -> SearchResults:
    """Fetch every job and filter locally; an API failure yields empty results."""
    fetched = capture(api.fetch_jobs)
    if not fetched.ok:
        log.warning("Job search failed: %s", fetched.error)
        return SearchResults(jobs=[], total_count=0, filtered_count=0,
                             query=filters.query, filters=filters)

    all_jobs = fetched.value or []
    matched = filter_jobs(all_jobs, filters)
    log.info("Search %r matched %d of %d jobs", filters.query, len(matched), len(all_jobs))
    return SearchResults(
        jobs=matched,
        total_count=len(all_jobs),
        filtered_count=len(matched),
        query=filters.query,
        filters=filters,
    )


def build_search_params(query: str = "", location: str = "") -> dict[str, str]:
    """Query-string parameters for the jobs page, skipping blank inputs."""
    params: dict[str, str] = {}
    if query.strip():
        params["q"] = query.strip()
    if location.strip():
        params["location"] = location.strip()
    return params
