"""Public interface for the Jenkins adapter."""

from __future__ import annotations

from .client import JenkinsAPIError, JenkinsBuildLoader, job_url_of, parent_url_of
from .schema import BuildPayload, ContainerPayload, JobPayload
from .translator import build_snapshot

__all__ = [
    "BuildPayload",
    "ContainerPayload",
    "JenkinsAPIError",
    "JenkinsBuildLoader",
    "JobPayload",
    "build_snapshot",
    "job_url_of",
    "parent_url_of",
]
