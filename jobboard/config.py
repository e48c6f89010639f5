"""Load home page settings from config/home.yaml and the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from jobboard.log import get_logger

log = get_logger(__name__)

load_dotenv()

CONFIG_DIR: Path = Path(__file__).resolve().parent.parent / "config"
HOME_CONFIG_PATH: Path = CONFIG_DIR / "home.yaml"

DEFAULT_API_URL = "http://localhost:3000"
DEFAULT_WORDS: list[str] = ["Developer", "Designer", "Marketer", "Manager"]


@dataclass
class TypingConfig:
    words: list[str] = field(default_factory=lambda: list(DEFAULT_WORDS))
    # Seconds.
    typing_delay: float = 0.1
    deleting_delay: float = 0.05
    pause_delay: float = 2.0


@dataclass
class HomeConfig:
    api_url: str = DEFAULT_API_URL
    timeout: float = 15.0
    sync_category_counts: bool = False
    typing: TypingConfig = field(default_factory=TypingConfig)


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        log.debug("No config at %s, using defaults", path)
        return {}
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    return data or {}


def _float(data: dict[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    try:
        number = float(value)
    except (TypeError, ValueError):
        log.warning("Ignoring invalid %s=%r, using %s", key, value, default)
        return default
    if number < 0:
        log.warning("Ignoring negative %s=%r, using %s", key, value, default)
        return default
    return number


def _words(data: dict[str, Any]) -> list[str]:
    value = data.get("words", DEFAULT_WORDS)
    if not isinstance(value, list) or not value or any(w is None or str(w) == "" for w in value):
        log.warning("Ignoring invalid typing words %r, using defaults", value)
        return list(DEFAULT_WORDS)
    return [str(w) for w in value]


def load_home_config(path: Path | None = None) -> HomeConfig:
    """Build a HomeConfig from YAML, then apply JOBBOARD_* env overrides.

    Invalid values are logged and replaced by their defaults.
    """
    data = _read_yaml(path or HOME_CONFIG_PATH)
    typing_data = data.get("typing") or {}
    if not isinstance(typing_data, dict):
        log.warning("Ignoring invalid typing section %r", typing_data)
        typing_data = {}

    typing = TypingConfig(
        words=_words(typing_data),
        typing_delay=_float(typing_data, "typing_delay", 0.1),
        deleting_delay=_float(typing_data, "deleting_delay", 0.05),
        pause_delay=_float(typing_data, "pause_delay", 2.0),
    )
    cfg = HomeConfig(
        api_url=str(data.get("api_url", DEFAULT_API_URL)),
        timeout=_float(data, "timeout", 15.0),
        sync_category_counts=bool(data.get("sync_category_counts", False)),
        typing=typing,
    )

    api_url = get_env("JOBBOARD_API_URL")
    if api_url:
        cfg.api_url = api_url
    timeout = get_env("JOBBOARD_TIMEOUT")
    if timeout:
        try:
            cfg.timeout = float(timeout)
        except ValueError:
            log.warning("Ignoring invalid JOBBOARD_TIMEOUT=%r", timeout)

    return cfg
