from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class JobStatus(str, Enum):
    """Fixed set of states a job application can be in."""

    APPLIED = "Applied"
    INTERVIEWING = "Interviewing"
    OFFER = "Offer"
    REJECTED = "Rejected"


@dataclass(frozen=True)
class ApplicationDraft:
    """
    Raw input for a new application as collected from a form or the CLI.

    Values are taken as-is; the store trims and validates them.
    """

    company: str
    title: str
    date: str
    link: str = ""
    notes: str = ""


@dataclass(frozen=True)
class JobApplication:
    """
    A single tracked job application.

    ``date`` is the ISO calendar date (``YYYY-MM-DD``) the application was
    submitted. ``link`` and ``notes`` are empty strings when not provided.
    Only ``status`` changes after creation.
    """

    id: str
    company: str
    title: str
    date: str
    link: str = ""
    notes: str = ""
    status: JobStatus = JobStatus.APPLIED


@dataclass(frozen=True)
class DeletionCandidate:
    """Record selected for deletion and the label shown when confirming."""

    application_id: str
    label: str


class StorePhase(str, Enum):
    """Lifecycle of the application store."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


@dataclass(frozen=True)
class TrackerConfig:
    """Application-level configuration loaded from config.json."""

    storage_backend: str = "json"
    storage_path: str = "./data"
    storage_key: str = "jobApplications"
    log_level: str = "warning"
