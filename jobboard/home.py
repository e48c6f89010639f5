"""
Home page controller.

activate → auth check, four independent loads (featured, stats, categories,
testimonials) queued on the scheduler, typing animation started.
deactivate → queued loads and the typing animation cancelled; no further
callbacks fire.

Gateway calls block, so they run on a worker pool; their results are handed
back through ``call_soon_threadsafe`` and applied to HomePageState on the
scheduler thread only.
"""
from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable

from jobboard.aggregator import compute_stats, recompute_category_counts, select_featured
from jobboard.api.base import JobBoardApi
from jobboard.auth import AuthProvider
from jobboard.config import HomeConfig
from jobboard.errors import Result, capture
from jobboard.log import get_logger
from jobboard.models import JobCategory, JobPosting, PlatformStats, Testimonial, TypingState
from jobboard.typing_animator import Handle, Scheduler, TypingAnimator, TypingTimings

log = get_logger(__name__)

_FETCH_WORKERS = 4


@dataclass
class HomePageState:
    featured_jobs: list[JobPosting] = field(default_factory=list)
    is_loading: bool = True
    is_authenticated: bool = False
    stats: PlatformStats = field(default_factory=PlatformStats)
    categories: list[JobCategory] = field(default_factory=list)
    testimonials: list[Testimonial] = field(default_factory=list)


class HomePageController:
    def __init__(
        self,
        api: JobBoardApi,
        auth: AuthProvider,
        scheduler: Scheduler,
        config: HomeConfig | None = None,
        executor: Executor | None = None,
    ) -> None:
        self.api = api
        self.auth = auth
        self.scheduler = scheduler
        self.config = config or HomeConfig()
        self.state = HomePageState()
        self._pending: list[Handle] = []
        self._executor = executor
        self._owns_executor = executor is None
        self._closed = False

        typing = self.config.typing
        self.animator = TypingAnimator(
            typing.words,
            scheduler,
            TypingTimings(
                typing_delay=typing.typing_delay,
                deleting_delay=typing.deleting_delay,
                pause_delay=typing.pause_delay,
            ),
        )

    @property
    def typing_state(self) -> TypingState:
        return self.animator.state

    def activate(self) -> None:
        self._closed = False
        self.state.is_authenticated = self.auth.is_authenticated()
        for load in (
            self.load_featured_jobs,
            self.load_stats,
            self.load_categories,
            self.load_testimonials,
        ):
            self._pending.append(self.scheduler.call_soon(load))
        self.animator.start()
        log.info("Home page activated (authenticated=%s)", self.state.is_authenticated)

    def deactivate(self) -> None:
        # Loads that have not started yet are dropped; fetches already in
        # flight finish on the pool but their results are discarded.
        self._closed = True
        for handle in self._pending:
            handle.cancel()
        self._pending.clear()
        self.animator.stop()
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None
        log.info("Home page deactivated")

    # ── Fetch plumbing ───────────────────────────────────────────────────

    def _pool(self) -> Executor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=_FETCH_WORKERS, thread_name_prefix="jobboard-fetch"
            )
        return self._executor

    def _fetch(self, on_result: Callable[[Result], None], fn: Callable[..., Any], *args: Any) -> None:
        """Run *fn* on the pool; *on_result* gets its Result on the scheduler thread."""
        future = self._pool().submit(capture, fn, *args)
        future.add_done_callback(lambda f: self._hand_back(on_result, f))

    def _hand_back(self, on_result: Callable[[Result], None], future: Future) -> None:
        # Runs on the worker thread.
        if self._closed:
            return
        try:
            self.scheduler.call_soon_threadsafe(self._deliver, on_result, future)
        except RuntimeError as exc:
            log.debug("Dropping fetch result, scheduler closed: %s", exc)

    def _deliver(self, on_result: Callable[[Result], None], future: Future) -> None:
        if self._closed or future.cancelled():
            return
        on_result(future.result())

    # ── Loads ────────────────────────────────────────────────────────────

    def load_featured_jobs(self) -> None:
        self._fetch(self._apply_featured_jobs, self.api.fetch_jobs)

    def _apply_featured_jobs(self, result: Result) -> None:
        self.state.is_loading = False
        if not result.ok:
            log.warning("Error loading featured jobs: %s", result.error)
            return
        self.state.featured_jobs = select_featured(result.value or [])
        log.info("Loaded %d featured jobs", len(self.state.featured_jobs))

    def load_stats(self) -> None:
        self._fetch(self._apply_stats, self.api.fetch_jobs)

    def _apply_stats(self, result: Result) -> None:
        if not result.ok:
            log.warning("Error loading stats: %s", result.error)
            return
        self.state.stats = compute_stats(result.value or [])
        log.info(
            "Stats: %d jobs, %d companies, %d applications",
            self.state.stats.total_jobs,
            self.state.stats.total_companies,
            self.state.stats.total_applications,
        )

    def load_categories(self) -> None:
        self._fetch(self._apply_categories, self.api.fetch_categories)

    def _apply_categories(self, result: Result) -> None:
        if not result.ok:
            log.warning("Error loading job categories: %s", result.error)
            return
        self.state.categories = result.value or []
        self.update_category_counts()

    def update_category_counts(self) -> None:
        self._fetch(self._apply_category_counts, self.api.fetch_jobs)

    def _apply_category_counts(self, result: Result) -> None:
        if not result.ok:
            log.warning("Error loading jobs for category counts: %s", result.error)
            return
        recompute_category_counts(self.state.categories, result.value or [])
        if self.config.sync_category_counts:
            for cat in self.state.categories:
                self._fetch(
                    lambda r, name=cat.name: self._log_sync_failure(name, r),
                    self.api.update_category_count,
                    cat.id,
                    cat.count,
                )

    def _log_sync_failure(self, name: str, result: Result) -> None:
        if not result.ok:
            log.warning("Error updating count for category %s: %s", name, result.error)

    def load_testimonials(self) -> None:
        self._fetch(self._apply_testimonials, self.api.fetch_testimonials)

    def _apply_testimonials(self, result: Result) -> None:
        if not result.ok:
            log.warning("Error loading testimonials: %s", result.error)
            return
        self.state.testimonials = result.value or []
