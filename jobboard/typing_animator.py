"""Hero banner typing animation.

``advance`` is the pure transition: it takes the current TypingState and
returns the next state plus the delay before the following step.
``TypingAnimator`` drives it through a scheduler exposing
``call_later(delay, callback)`` whose handle supports ``cancel()`` (an
asyncio event loop qualifies).
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Protocol, Sequence

from jobboard.log import get_logger
from jobboard.models import TypingState

log = get_logger(__name__)


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Handle: ...

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> Handle: ...

    def call_soon_threadsafe(self, callback: Callable[..., Any], *args: Any) -> Handle: ...


@dataclass(frozen=True)
class TypingTimings:
    typing_delay: float = 0.1
    deleting_delay: float = 0.05
    pause_delay: float = 2.0


def _check_words(words: Sequence[str]) -> list[str]:
    words = list(words)
    if not words:
        raise ValueError("Typing animation needs at least one word")
    if any(not w for w in words):
        raise ValueError("Typing animation words must be non-empty")
    return words


def advance(
    state: TypingState, words: Sequence[str], timings: TypingTimings = TypingTimings()
) -> tuple[TypingState, float]:
    word = words[state.word_index]

    if not state.is_deleting:
        char_index = min(state.char_index + 1, len(word))
        nxt = replace(state, char_index=char_index, displayed_text=word[:char_index])
        if char_index == len(word):
            return replace(nxt, is_deleting=True), timings.pause_delay
        return nxt, timings.typing_delay

    char_index = max(state.char_index - 1, 0)
    nxt = replace(state, char_index=char_index, displayed_text=word[:char_index])
    if char_index == 0:
        word_index = (state.word_index + 1) % len(words)
        return replace(nxt, word_index=word_index, is_deleting=False), timings.typing_delay
    return nxt, timings.deleting_delay


class TypingAnimator:
    def __init__(
        self,
        words: Sequence[str],
        scheduler: Scheduler,
        timings: TypingTimings | None = None,
    ) -> None:
        self.words = _check_words(words)
        self.scheduler = scheduler
        self.timings = timings or TypingTimings()
        self.state = TypingState()
        self._handle: Handle | None = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def text(self) -> str:
        return self.state.displayed_text

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._schedule(self.timings.typing_delay)

    def stop(self) -> None:
        self._running = False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self, delay: float) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = self.scheduler.call_later(delay, self._step)

    def _step(self) -> None:
        self._handle = None
        if not self._running:
            return
        self.state, delay = advance(self.state, self.words, self.timings)
        log.debug("Typing %r (word %d)", self.state.displayed_text, self.state.word_index)
        self._schedule(delay)
