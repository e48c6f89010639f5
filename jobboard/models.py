"""Data models for job postings, categories, testimonials and page stats."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class JobPosting:
    id: str
    title: str
    company: str
    type: str = "full-time"
    featured: bool = False
    application_count: int = 0
    location: str = ""
    salary: str | None = None
    description: str = ""
    requirements: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    posted_date: str | None = None
    experience_level: str | None = None
    is_active: bool = True
    raw: dict = field(default_factory=dict, compare=False, hash=False)


@dataclass
class JobCategory:
    id: str
    name: str
    icon: str = ""
    color: str = ""
    description: str = ""
    count: int = 0


@dataclass
class Testimonial:
    id: str
    name: str
    role: str = ""
    company: str = ""
    content: str = ""
    avatar: str = ""
    rating: int = 5
    location: str = ""
    joined_date: str | None = None


@dataclass
class PlatformStats:
    total_jobs: int = 0
    total_companies: int = 0
    total_applications: int = 0
    successful_placements: int = 0


@dataclass
class TypingState:
    word_index: int = 0
    char_index: int = 0
    is_deleting: bool = False
    displayed_text: str = ""
