"""
Shared fixtures for the job board tests.

FakeScheduler stands in for the asyncio event loop: callbacks only run when
a test advances its manual clock, so timer-driven code is deterministic.
"""

import os

import pytest

os.environ.setdefault("JOBBOARD_LOG_DIR", "off")

from jobboard.models import JobCategory, JobPosting


class FakeHandle:
    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    def __init__(self):
        self.now = 0.0
        self._queue = []
        self.fired = 0

    def call_soon(self, callback, *args):
        return self.call_later(0.0, callback, *args)

    # Fetch results arrive through this; tests run fetches inline.
    call_soon_threadsafe = call_soon

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(self.now + delay, callback, args)
        self._queue.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self._queue if not h.cancelled]

    def advance(self, seconds):
        """Move the clock forward, firing due callbacks in time order."""
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.when <= target + 1e-9]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self._queue.remove(handle)
            self.now = max(self.now, handle.when)
            self.fired += 1
            handle.callback(*handle.args)
        self.now = target

    def run_ready(self):
        self.advance(0.0)


@pytest.fixture
def scheduler():
    return FakeScheduler()


def make_job(job_id, title, company="Acme", featured=False, applications=0, **kw):
    return JobPosting(
        id=str(job_id),
        title=title,
        company=company,
        featured=featured,
        application_count=applications,
        **kw,
    )


def make_categories():
    names = ["Technology", "Design", "Marketing", "Sales", "Finance", "Healthcare"]
    return [JobCategory(id=str(i + 1), name=n) for i, n in enumerate(names)]


@pytest.fixture
def categories():
    return make_categories()


@pytest.fixture
def sample_jobs():
    return [
        make_job(1, "Senior Software Engineer", "TechCorp", featured=True, applications=40),
        make_job(2, "UX Designer", "Design Studio", applications=20),
        make_job(3, "Sales Manager", "TechCorp", featured=True, applications=10),
        make_job(4, "Night Receptionist", "Hotel Inc", applications=3),
    ]
