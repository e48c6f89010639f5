from abc import ABC, abstractmethod

from jobboard.models import JobCategory, JobPosting, Testimonial


class JobBoardApi(ABC):
    """Read access to the job board REST API plus the category count PATCH.

    Implementations raise TransportError on any failure; they never retry.
    """

    @abstractmethod
    def fetch_jobs(self) -> list[JobPosting]:
        pass

    @abstractmethod
    def fetch_job(self, job_id: str) -> JobPosting:
        pass

    @abstractmethod
    def fetch_categories(self) -> list[JobCategory]:
        pass

    @abstractmethod
    def fetch_category(self, category_id: str) -> JobCategory:
        pass

    @abstractmethod
    def update_category_count(self, category_id: str, count: int) -> JobCategory:
        pass

    @abstractmethod
    def fetch_testimonials(self) -> list[Testimonial]:
        pass

    @abstractmethod
    def fetch_testimonial(self, testimonial_id: str) -> Testimonial:
        pass
