#!/usr/bin/env python3
"""Console run of the home page: load everything, animate the hero, tear down."""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobboard.api import get_api
from jobboard.auth import SessionAuth
from jobboard.config import get_env, load_home_config
from jobboard.home import HomePageController
from jobboard.log import get_logger

log = get_logger(__name__)

RUN_SECONDS = 5.0


async def _run(seconds: float) -> HomePageController:
    config = load_home_config()
    controller = HomePageController(
        api=get_api(config, get_env),
        auth=SessionAuth.from_env(),
        scheduler=asyncio.get_running_loop(),
        config=config,
    )
    controller.activate()
    try:
        elapsed = 0.0
        while elapsed < seconds:
            await asyncio.sleep(0.5)
            elapsed += 0.5
            log.info("Hero text: %r", controller.animator.text)
    finally:
        controller.deactivate()
    return controller


if __name__ == "__main__":
    seconds = float(get_env("JOBBOARD_RUN_SECONDS", str(RUN_SECONDS)) or RUN_SECONDS)
    controller = asyncio.run(_run(seconds))
    state = controller.state

    log.info("Run complete.")
    log.info("  Authenticated: %s", state.is_authenticated)
    log.info("  Featured jobs: %d", len(state.featured_jobs))
    for job in state.featured_jobs:
        log.info("    - %s @ %s", job.title, job.company)
    log.info(
        "  Stats: %d jobs, %d companies, %d applications, %d placements",
        state.stats.total_jobs,
        state.stats.total_companies,
        state.stats.total_applications,
        state.stats.successful_placements,
    )
    for cat in state.categories:
        log.info("  Category %-12s %d", cat.name, cat.count)
    log.info("  Testimonials: %d", len(state.testimonials))
