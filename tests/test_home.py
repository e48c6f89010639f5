"""Tests for HomePageController: load wiring, failure fallbacks and teardown."""

import asyncio
import time
from unittest.mock import MagicMock

from jobboard.api import MockJobBoardApi
from jobboard.auth import SessionAuth
from jobboard.config import HomeConfig, TypingConfig
from jobboard.errors import TransportError
from jobboard.home import HomePageController
from jobboard.inline import InlineExecutor
from jobboard.models import PlatformStats
from tests.conftest import make_categories


class FailingApi(MockJobBoardApi):
    """Mock gateway whose selected calls raise TransportError."""

    def __init__(self, failing, **kw):
        super().__init__(**kw)
        self.failing = set(failing)
        self.calls = []

    def _maybe_fail(self, name):
        self.calls.append(name)
        if name in self.failing:
            raise TransportError(f"{name} down", url=f"http://api/{name}")

    def fetch_jobs(self):
        self._maybe_fail("jobs")
        return super().fetch_jobs()

    def fetch_categories(self):
        self._maybe_fail("categories")
        return super().fetch_categories()

    def fetch_testimonials(self):
        self._maybe_fail("testimonials")
        return super().fetch_testimonials()

    def update_category_count(self, category_id, count):
        self._maybe_fail("patch")
        return super().update_category_count(category_id, count)


def _config(**kw):
    return HomeConfig(typing=TypingConfig(words=["A", "BB"]), **kw)


def _controller(scheduler, api=None, token="", **config_kw):
    return HomePageController(
        api=api or MockJobBoardApi(),
        auth=SessionAuth(token),
        scheduler=scheduler,
        config=_config(**config_kw),
        executor=InlineExecutor(),
    )


class TestActivate:
    """Tests for activation and the four independent loads."""

    def test_loads_are_queued_not_run_inline(self, scheduler):
        controller = _controller(scheduler)
        controller.activate()

        assert controller.state.is_loading is True
        assert controller.state.featured_jobs == []
        # Four loads plus the first typing step.
        assert len(scheduler.pending) == 5

    def test_full_load(self, scheduler):
        controller = _controller(scheduler, token="abc")
        controller.activate()
        scheduler.run_ready()

        state = controller.state
        assert state.is_authenticated is True
        assert state.is_loading is False
        assert len(state.featured_jobs) == 6
        assert [j.id for j in state.featured_jobs[:3]] == ["1", "2", "4"]
        assert state.stats.total_jobs == 6
        assert state.stats.total_companies == 5
        assert state.stats.total_applications == 123
        assert state.stats.successful_placements == 18
        assert {c.name: c.count for c in state.categories} == {
            "Technology": 1,
            "Design": 1,
            "Marketing": 1,
            "Sales": 1,
            "Finance": 1,
            "Healthcare": 1,
        }
        assert len(state.testimonials) == 3

    def test_unauthenticated(self, scheduler):
        controller = _controller(scheduler)
        controller.activate()
        assert controller.state.is_authenticated is False

    def test_auth_queried_once_without_side_effects(self, scheduler):
        auth = MagicMock()
        auth.is_authenticated.return_value = True
        controller = HomePageController(
            MockJobBoardApi(), auth, scheduler, _config(), executor=InlineExecutor()
        )
        controller.activate()
        auth.is_authenticated.assert_called_once_with()

    def test_category_load_fetches_jobs_again(self, scheduler):
        api = FailingApi(failing=[])
        controller = _controller(scheduler, api=api)
        controller.load_categories()
        assert api.calls == ["categories"]
        scheduler.run_ready()
        assert api.calls == ["categories", "jobs"]


class TestFailures:
    """Fetch failures are logged and leave defaults in place."""

    def test_jobs_down(self, scheduler):
        controller = _controller(scheduler, api=FailingApi(failing=["jobs"]))
        controller.activate()
        scheduler.run_ready()

        state = controller.state
        assert state.is_loading is False
        assert state.featured_jobs == []
        assert state.stats == PlatformStats()
        # Categories arrive but their counts stay at zero.
        assert len(state.categories) == 6
        assert all(c.count == 0 for c in state.categories)
        assert len(state.testimonials) == 3

    def test_categories_down(self, scheduler):
        controller = _controller(scheduler, api=FailingApi(failing=["categories"]))
        controller.activate()
        scheduler.run_ready()
        assert controller.state.categories == []
        assert controller.state.stats.total_jobs == 6

    def test_testimonials_down(self, scheduler):
        controller = _controller(scheduler, api=FailingApi(failing=["testimonials"]))
        controller.activate()
        scheduler.run_ready()
        assert controller.state.testimonials == []
        assert len(controller.state.featured_jobs) == 6

    def test_failure_keeps_previous_stats(self, scheduler):
        api = FailingApi(failing=[])
        controller = _controller(scheduler, api=api)
        controller.load_stats()
        scheduler.run_ready()
        before = controller.state.stats
        assert before.total_jobs == 6

        api.failing.add("jobs")
        controller.load_stats()
        scheduler.run_ready()
        assert controller.state.stats == before

    def test_failures_are_logged(self, scheduler, caplog):
        controller = _controller(scheduler, api=FailingApi(failing=["jobs"]))
        with caplog.at_level("WARNING"):
            controller.load_featured_jobs()
            scheduler.run_ready()
        assert "Error loading featured jobs" in caplog.text


class TestCategorySync:
    """Optional PATCH of recomputed counts."""

    def test_sync_disabled_by_default(self, scheduler):
        api = FailingApi(failing=[])
        controller = _controller(scheduler, api=api)
        controller.load_categories()
        scheduler.run_ready()
        assert "patch" not in api.calls

    def test_sync_pushes_counts(self, scheduler):
        api = FailingApi(failing=[])
        controller = _controller(scheduler, api=api, sync_category_counts=True)
        controller.load_categories()
        scheduler.run_ready()
        assert api.calls.count("patch") == 6
        assert api.fetch_category("1").count == 1

    def test_sync_failure_is_ignored(self, scheduler):
        api = FailingApi(failing=["patch"], categories=make_categories())
        controller = _controller(scheduler, api=api, sync_category_counts=True)
        controller.load_categories()
        scheduler.run_ready()
        assert sum(c.count for c in controller.state.categories) == 6


class TestDeactivate:
    """Teardown stops every pending callback."""

    def test_typing_runs_while_active(self, scheduler):
        controller = _controller(scheduler)
        controller.activate()
        scheduler.advance(0.1)
        assert controller.typing_state.displayed_text == "A"

    def test_no_callbacks_after_deactivate(self, scheduler):
        controller = _controller(scheduler)
        controller.activate()
        scheduler.advance(0.3)
        snapshot = controller.typing_state
        fired = scheduler.fired

        controller.deactivate()
        scheduler.advance(120)

        assert scheduler.fired == fired
        assert controller.typing_state == snapshot
        assert scheduler.pending == []

    def test_deactivate_drops_queued_loads(self, scheduler):
        api = FailingApi(failing=[])
        controller = _controller(scheduler, api=api)
        controller.activate()
        controller.deactivate()
        scheduler.advance(10)
        assert api.calls == []
        assert controller.state.is_loading is True

    def test_result_in_flight_is_discarded(self, scheduler):
        controller = _controller(scheduler)
        controller.load_featured_jobs()
        # Fetched, but not yet handed back to the scheduler thread.
        assert controller.state.featured_jobs == []

        controller.deactivate()
        scheduler.run_ready()
        assert controller.state.featured_jobs == []
        assert controller.state.is_loading is True


class TestResultDelivery:
    """Fetch results are applied by the scheduler, never by the worker."""

    def test_results_wait_for_the_scheduler(self, scheduler):
        api = FailingApi(failing=[])
        controller = _controller(scheduler, api=api)
        controller.load_stats()

        assert api.calls == ["jobs"]
        assert controller.state.stats == PlatformStats()
        assert len(scheduler.pending) == 1

        scheduler.run_ready()
        assert controller.state.stats.total_jobs == 6

    def test_worker_exception_becomes_failed_result(self, scheduler, caplog):
        api = MagicMock()
        api.fetch_testimonials.side_effect = TransportError("boom", url="http://api/testimonials")
        controller = HomePageController(
            api, SessionAuth(), scheduler, _config(), executor=InlineExecutor()
        )
        with caplog.at_level("WARNING"):
            controller.load_testimonials()
            scheduler.run_ready()
        assert controller.state.testimonials == []
        assert "Error loading testimonials" in caplog.text


_FETCH_DELAY = 0.3


class SlowApi(MockJobBoardApi):
    """Mock gateway whose reads block like a slow network call."""

    def fetch_jobs(self):
        time.sleep(_FETCH_DELAY)
        return super().fetch_jobs()

    def fetch_categories(self):
        time.sleep(_FETCH_DELAY)
        return super().fetch_categories()

    def fetch_testimonials(self):
        time.sleep(_FETCH_DELAY)
        return super().fetch_testimonials()


async def _wait_for(predicate, timeout=5.0):
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached in time")
        await asyncio.sleep(0.02)


class TestEventLoop:
    """Controller driven by a real asyncio loop with a blocking gateway."""

    def test_loop_keeps_running_while_fetching(self):
        async def scenario():
            loop = asyncio.get_running_loop()
            controller = HomePageController(SlowApi(), SessionAuth(), loop, _config())
            controller.activate()
            try:
                start = loop.time()
                await asyncio.sleep(0.05)
                assert loop.time() - start < 0.25

                await asyncio.sleep(0.1)
                # The first typing step fired while every fetch is still blocked.
                assert controller.animator.text != ""
                assert controller.state.featured_jobs == []
                assert controller.state.is_loading is True

                await _wait_for(
                    lambda: len(controller.state.featured_jobs) == 6
                    and len(controller.state.testimonials) == 3
                    and controller.state.stats.total_jobs == 6
                    and sum(c.count for c in controller.state.categories) == 6
                )
                assert controller.state.is_loading is False
            finally:
                controller.deactivate()

        asyncio.run(scenario())

    def test_deactivate_discards_fetches_in_flight(self):
        async def scenario():
            loop = asyncio.get_running_loop()
            controller = HomePageController(SlowApi(), SessionAuth(), loop, _config())
            controller.activate()
            await asyncio.sleep(0.05)
            controller.deactivate()

            await asyncio.sleep(_FETCH_DELAY * 2)
            assert controller.state.featured_jobs == []
            assert controller.state.testimonials == []
            assert controller.state.is_loading is True
            assert controller.animator.running is False

        asyncio.run(scenario())
