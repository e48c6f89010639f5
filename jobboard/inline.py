"""Synchronous scheduler and executor for callers without an event loop.

Streamlit reruns the whole script per interaction, so the page runs the home
controller to completion inline: queued callbacks and fetches execute at once,
and timers are never armed (the typing animation only runs under asyncio, see
run_home.py).
"""
from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Any, Callable


class _Done:
    def cancel(self) -> None:
        pass


class InlineScheduler:
    def call_soon(self, callback: Callable[..., Any], *args: Any) -> _Done:
        callback(*args)
        return _Done()

    call_soon_threadsafe = call_soon

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> _Done:
        return _Done()


class InlineExecutor(Executor):
    """Runs each submitted call immediately in the calling thread."""

    def submit(self, fn, /, *args, **kwargs) -> Future:
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)
        return future
