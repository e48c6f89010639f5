"""Streamlit UI for the job board home page and job search.

Each rerun loads the home page synchronously (InlineScheduler and
InlineExecutor), so the hero lists the typing words statically. The typing
animation itself only runs under an asyncio loop: see run_home.py.
"""
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from jobboard.api import get_api
from jobboard.auth import SessionAuth
from jobboard.config import get_env, load_home_config
from jobboard.formatting import job_type_display, time_ago
from jobboard.home import HomePageController, HomePageState
from jobboard.inline import InlineExecutor, InlineScheduler
from jobboard.log import get_logger
from jobboard.models import JobPosting
from jobboard.search import SearchFilters, build_search_params, search_jobs

log = get_logger(__name__)

_PAGE_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(135deg, #e8eaf6 0%, #f3e5f5 40%, #e0f2f1 100%);
}
.hero-word { color: #4f46e5; font-weight: 700; }
</style>
"""

JOB_TYPES: list[str] = ["", "full-time", "part-time", "contract", "remote"]
EXPERIENCE_LEVELS: list[str] = ["", "entry", "mid", "senior", "executive"]


def _controller() -> HomePageController:
    config = load_home_config()
    return HomePageController(
        api=get_api(config, get_env),
        auth=SessionAuth.from_env(),
        scheduler=InlineScheduler(),
        config=config,
        executor=InlineExecutor(),
    )


def _load_home() -> tuple[HomePageState, list[str]]:
    controller = _controller()
    controller.activate()
    controller.deactivate()
    return controller.state, controller.animator.words


def _job_card(job: JobPosting) -> None:
    with st.container(border=True):
        st.markdown(f"**{job.title}** · {job.company}")
        meta = [job_type_display(job.type)]
        if job.location:
            meta.append(job.location)
        if job.salary:
            meta.append(job.salary)
        if job.posted_date:
            try:
                meta.append(time_ago(job.posted_date))
            except ValueError:
                log.debug("Unparseable posted date %r on job %s", job.posted_date, job.id)
        st.caption(" · ".join(meta))
        if job.description:
            st.write(job.description)


# ── Page: Home ───────────────────────────────────────────────────────────


def page_home() -> None:
    state, words = _load_home()

    hero = " / ".join(f"<span class='hero-word'>{w}</span>" for w in words)
    st.markdown(f"## Find your next role as a {hero}", unsafe_allow_html=True)

    c1, c2, c3 = st.columns([3, 2, 1])
    with c1:
        query = st.text_input("Job title or keyword", key="home_q")
    with c2:
        location = st.text_input("Location", key="home_loc")
    with c3:
        st.write("")
        if st.button("Search", type="primary", use_container_width=True):
            st.session_state["search_params"] = build_search_params(query, location)
            st.switch_page(jobs_page)

    if not state.is_authenticated:
        st.info("Sign in to save jobs and track your applications.")

    st.divider()
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Jobs", state.stats.total_jobs)
    c2.metric("Companies", state.stats.total_companies)
    c3.metric("Applications", state.stats.total_applications)
    c4.metric("Placements", state.stats.successful_placements)

    if state.categories:
        st.subheader("Browse by category")
        cols = st.columns(3)
        for i, cat in enumerate(state.categories):
            cols[i % 3].metric(cat.name, f"{cat.count} jobs", help=cat.description or None)

    st.subheader("Featured jobs")
    if not state.featured_jobs:
        st.info("No jobs available right now.")
    for job in state.featured_jobs:
        _job_card(job)

    if state.testimonials:
        st.subheader("What people say")
        cols = st.columns(len(state.testimonials))
        for col, t in zip(cols, state.testimonials):
            with col:
                st.markdown(f"> {t.content}")
                st.caption(f"{t.name}, {t.role} at {t.company}")


# ── Page: Jobs ───────────────────────────────────────────────────────────


def page_jobs() -> None:
    st.header("Jobs")
    params = st.session_state.pop("search_params", {})

    c1, c2 = st.columns(2)
    with c1:
        query = st.text_input("Keyword", value=params.get("q", ""))
        job_type = st.selectbox("Job type", JOB_TYPES, format_func=lambda t: job_type_display(t) or "Any")
        company = st.text_input("Company")
    with c2:
        location = st.text_input("Location", value=params.get("location", ""))
        level = st.selectbox("Experience", EXPERIENCE_LEVELS, format_func=lambda t: t.title() or "Any")
        remote = st.checkbox("Remote only")

    filters = SearchFilters(
        query=query,
        location=location,
        job_type=job_type,
        experience_level=level,
        company=company,
        remote=remote,
    )
    config = load_home_config()
    results = search_jobs(get_api(config, get_env), filters)

    st.caption(f"{results.filtered_count} of {results.total_count} jobs")
    for job in results.jobs:
        _job_card(job)


# ── Main ─────────────────────────────────────────────────────────────────


def _wrap_home():
    st.markdown(_PAGE_CSS, unsafe_allow_html=True)
    page_home()


def _wrap_jobs():
    st.markdown(_PAGE_CSS, unsafe_allow_html=True)
    page_jobs()


home_page = st.Page(_wrap_home, title="Home", icon="🏠", url_path="home", default=True)
jobs_page = st.Page(_wrap_jobs, title="Jobs", icon="💼", url_path="jobs")

nav = st.navigation([home_page, jobs_page])
nav.run()
