"""Transport failures and the Result wrapper the page controller consumes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class TransportError(Exception):
    """A request to the job board API failed (network, HTTP status or bad JSON)."""

    def __init__(self, message: str, url: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is not None:
            return f"{base} (HTTP {self.status_code} {self.url})"
        if self.url:
            return f"{base} ({self.url})"
        return base


@dataclass
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[TransportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: T) -> T:
        return self.value if self.error is None else default  # type: ignore[return-value]


def capture(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    """Run *fn* and fold a TransportError into the returned Result."""
    try:
        return Result(value=fn(*args, **kwargs))
    except TransportError as exc:
        return Result(error=exc)
