"""HTTP gateway to the json-server style job board API.

Endpoints: /jobs, /jobCategories, /testimonials (collection and /{id}),
plus PATCH /jobCategories/{id} for the derived category count.
"""
from __future__ import annotations

from typing import Any

import requests

from jobboard.api.base import JobBoardApi
from jobboard.errors import TransportError
from jobboard.log import get_logger
from jobboard.models import JobCategory, JobPosting, Testimonial

log = get_logger(__name__)


def _int(value: Any) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0


def parse_job(hit: dict) -> JobPosting:
    return JobPosting(
        id=str(hit.get("id", "")),
        title=hit.get("title") or "",
        company=hit.get("company") or "",
        type=hit.get("type") or "full-time",
        featured=bool(hit.get("featured", False)),
        application_count=_int(hit.get("applicationCount")),
        location=hit.get("location") or "",
        salary=hit.get("salary"),
        description=hit.get("description") or "",
        requirements=tuple(hit.get("requirements") or ()),
        skills=tuple(hit.get("skills") or ()),
        posted_date=hit.get("postedDate"),
        experience_level=hit.get("experienceLevel"),
        is_active=bool(hit.get("isActive", True)),
        raw=hit,
    )


def parse_category(hit: dict) -> JobCategory:
    return JobCategory(
        id=str(hit.get("id", "")),
        name=hit.get("name") or "",
        icon=hit.get("icon") or "",
        color=hit.get("color") or "",
        description=hit.get("description") or "",
        count=_int(hit.get("count")),
    )


def parse_testimonial(hit: dict) -> Testimonial:
    return Testimonial(
        id=str(hit.get("id", "")),
        name=hit.get("name") or "",
        role=hit.get("role") or "",
        company=hit.get("company") or "",
        content=hit.get("content") or "",
        avatar=hit.get("avatar") or "",
        rating=_int(hit.get("rating", 5)),
        location=hit.get("location") or "",
        joined_date=hit.get("joinedDate"),
    )


class HttpJobBoardApi(JobBoardApi):
    def __init__(self, base_url: str, timeout: float = 15.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: dict | None = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            r = requests.request(method, url, json=payload, timeout=self.timeout)
            r.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise TransportError(f"{method} rejected", url=url, status_code=status) from exc
        except requests.RequestException as exc:
            raise TransportError(f"{method} failed: {exc}", url=url) from exc
        try:
            data = r.json()
        except ValueError as exc:
            raise TransportError("Response is not valid JSON", url=url) from exc

        log.debug("%s %s -> %d", method, url, r.status_code)
        return data

    def _get_list(self, path: str) -> list[dict]:
        data = self._request("GET", path)
        if not isinstance(data, list):
            raise TransportError("Expected a JSON array", url=f"{self.base_url}{path}")
        return data

    def _get_object(self, path: str) -> dict:
        data = self._request("GET", path)
        if not isinstance(data, dict):
            raise TransportError("Expected a JSON object", url=f"{self.base_url}{path}")
        return data

    def fetch_jobs(self) -> list[JobPosting]:
        return [parse_job(hit) for hit in self._get_list("/jobs")]

    def fetch_job(self, job_id: str) -> JobPosting:
        return parse_job(self._get_object(f"/jobs/{job_id}"))

    def fetch_categories(self) -> list[JobCategory]:
        return [parse_category(hit) for hit in self._get_list("/jobCategories")]

    def fetch_category(self, category_id: str) -> JobCategory:
        return parse_category(self._get_object(f"/jobCategories/{category_id}"))

    def update_category_count(self, category_id: str, count: int) -> JobCategory:
        path = f"/jobCategories/{category_id}"
        data = self._request("PATCH", path, {"count": count})
        if not isinstance(data, dict):
            raise TransportError("Expected a JSON object", url=f"{self.base_url}{path}")
        return parse_category(data)

    def fetch_testimonials(self) -> list[Testimonial]:
        return [parse_testimonial(hit) for hit in self._get_list("/testimonials")]

    def fetch_testimonial(self, testimonial_id: str) -> Testimonial:
        return parse_testimonial(self._get_object(f"/testimonials/{testimonial_id}"))
