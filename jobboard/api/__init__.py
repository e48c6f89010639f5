from .base import JobBoardApi
from .client import HttpJobBoardApi
from .mock import MockJobBoardApi

from jobboard.config import HomeConfig
from jobboard.log import get_logger

log = get_logger(__name__)

__all__ = ["JobBoardApi", "HttpJobBoardApi", "MockJobBoardApi", "get_api"]

_TRUTHY = {"1", "true", "yes", "on"}


def get_api(config: HomeConfig, env_getter) -> JobBoardApi:
    if env_getter("JOBBOARD_MOCK_API").lower() in _TRUTHY:
        log.info("JOBBOARD_MOCK_API set — using MockJobBoardApi")
        return MockJobBoardApi()

    if not config.api_url:
        log.info("No api_url configured — using MockJobBoardApi")
        return MockJobBoardApi()

    log.info("Using job board API at %s", config.api_url)
    return HttpJobBoardApi(config.api_url, timeout=config.timeout)
