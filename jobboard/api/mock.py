"""In-memory job board API with sample data, used when no server is configured."""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

from jobboard.api.base import JobBoardApi
from jobboard.errors import TransportError
from jobboard.log import get_logger
from jobboard.models import JobCategory, JobPosting, Testimonial

log = get_logger(__name__)


def _days_ago(days: int) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=days)).strftime("%Y-%m-%d")


def _sample_jobs() -> list[JobPosting]:
    return [
        JobPosting(
            id="1",
            title="Senior Software Engineer",
            company="TechCorp",
            type="full-time",
            featured=True,
            application_count=45,
            location="San Francisco, CA",
            salary="$150,000 - $190,000",
            description="Build and scale distributed services.",
            skills=("Python", "Kubernetes", "PostgreSQL"),
            posted_date=_days_ago(1),
            experience_level="senior",
        ),
        JobPosting(
            id="2",
            title="UX Designer",
            company="Design Studio Pro",
            type="remote",
            featured=True,
            application_count=32,
            location="Remote",
            description="Own user research and interaction design.",
            skills=("Figma", "Prototyping"),
            posted_date=_days_ago(3),
            experience_level="mid",
        ),
        JobPosting(
            id="3",
            title="Digital Marketing Specialist",
            company="GrowthLab",
            type="full-time",
            application_count=18,
            location="New York, NY",
            description="Run paid and content campaigns.",
            skills=("SEO", "Analytics"),
            posted_date=_days_ago(0),
            experience_level="mid",
        ),
        JobPosting(
            id="4",
            title="Sales Manager",
            company="InnovateCorp",
            type="full-time",
            featured=True,
            application_count=12,
            location="Chicago, IL",
            description="Lead a regional sales team.",
            skills=("CRM", "Negotiation"),
            posted_date=_days_ago(6),
            experience_level="senior",
        ),
        JobPosting(
            id="5",
            title="Financial Analyst",
            company="TechCorp",
            type="contract",
            application_count=9,
            location="Austin, TX",
            description="Forecasting and budgeting for product lines.",
            skills=("Excel", "Modelling"),
            posted_date=_days_ago(10),
            experience_level="entry",
        ),
        JobPosting(
            id="6",
            title="Registered Nurse",
            company="CityCare Health",
            type="part-time",
            application_count=7,
            location="Boston, MA",
            description="Inpatient ward, rotating shifts.",
            posted_date=_days_ago(2),
            experience_level="mid",
        ),
    ]


def _sample_categories() -> list[JobCategory]:
    return [
        JobCategory("1", "Technology", "code", "bg-blue-100 text-blue-600", "Software, data and IT roles"),
        JobCategory("2", "Design", "pen", "bg-purple-100 text-purple-600", "Product, UI and graphic design"),
        JobCategory("3", "Marketing", "chart-pie", "bg-green-100 text-green-600", "Brand, content and growth"),
        JobCategory("4", "Sales", "trending-up", "bg-orange-100 text-orange-600", "Account and business development"),
        JobCategory("5", "Finance", "currency", "bg-yellow-100 text-yellow-600", "Accounting and analysis"),
        JobCategory("6", "Healthcare", "heart", "bg-red-100 text-red-600", "Clinical and medical roles"),
    ]


def _sample_testimonials() -> list[Testimonial]:
    return [
        Testimonial(
            "1", "Sarah Johnson", "Software Engineer", "TechCorp",
            "Found my dream job within 2 weeks!", "SJ", 5, "San Francisco, CA", "2024-01-15",
        ),
        Testimonial(
            "2", "Michael Chen", "Product Manager", "InnovateCorp",
            "We hired exceptional talent quickly.", "MC", 5, "Chicago, IL", "2023-11-02",
        ),
        Testimonial(
            "3", "Emily Rodriguez", "UX Designer", "Design Studio Pro",
            "Every opportunity matched my skills.", "ER", 4, "Remote", "2024-03-20",
        ),
    ]


class MockJobBoardApi(JobBoardApi):
    def __init__(
        self,
        jobs: list[JobPosting] | None = None,
        categories: list[JobCategory] | None = None,
        testimonials: list[Testimonial] | None = None,
    ) -> None:
        self._jobs = list(jobs) if jobs is not None else _sample_jobs()
        self._categories = list(categories) if categories is not None else _sample_categories()
        self._testimonials = list(testimonials) if testimonials is not None else _sample_testimonials()

    @staticmethod
    def _find(items: list, item_id: str, path: str):
        for item in items:
            if item.id == item_id:
                return item
        raise TransportError("Not found", url=path, status_code=404)

    def fetch_jobs(self) -> list[JobPosting]:
        log.debug("MockJobBoardApi serving %d jobs", len(self._jobs))
        return list(self._jobs)

    def fetch_job(self, job_id: str) -> JobPosting:
        return self._find(self._jobs, job_id, f"/jobs/{job_id}")

    # Copies, so callers mutating counts never touch the stored sample data.
    def fetch_categories(self) -> list[JobCategory]:
        return [replace(c) for c in self._categories]

    def fetch_category(self, category_id: str) -> JobCategory:
        return replace(self._find(self._categories, category_id, f"/jobCategories/{category_id}"))

    def update_category_count(self, category_id: str, count: int) -> JobCategory:
        stored = self._find(self._categories, category_id, f"/jobCategories/{category_id}")
        stored.count = count
        return replace(stored)

    def fetch_testimonials(self) -> list[Testimonial]:
        return list(self._testimonials)

    def fetch_testimonial(self, testimonial_id: str) -> Testimonial:
        return self._find(self._testimonials, testimonial_id, f"/testimonials/{testimonial_id}")
