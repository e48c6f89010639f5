"""Read-only authentication status used by the home page."""
from __future__ import annotations

from typing import Protocol

from jobboard.config import get_env


class AuthProvider(Protocol):
    def is_authenticated(self) -> bool: ...


class SessionAuth:
    """Authenticated when a session token is present."""

    def __init__(self, token: str | None = None) -> None:
        self.token = token or ""

    @classmethod
    def from_env(cls, env_getter=get_env) -> "SessionAuth":
        return cls(env_getter("JOBBOARD_AUTH_TOKEN"))

    def is_authenticated(self) -> bool:
        return bool(self.token)
