"""Shared fixtures for Jenkins adapter tests."""

from __future__ import annotations

import pytest

from refbuild.config.http_resilience import ResilienceConfig
from refbuild.config.jenkins import JenkinsConfig
from tests.helpers.jenkins import (
    BASE_URL,
    BUILD_URL,
    CONTAINER_URL,
    JOB_URL,
    JenkinsPayload,
)


@pytest.fixture
def build_payload() -> JenkinsPayload:
    return {
        "_class": "org.jenkinsci.plugins.workflow.job.WorkflowRun",
        "number": 5,
        "url": BUILD_URL,
        "result": None,
        "building": True,
    }


@pytest.fixture
def job_payload() -> JenkinsPayload:
    return {
        "_class": "org.jenkinsci.plugins.workflow.job.WorkflowJob",
        "name": "PR-1",
        "fullName": "org/repo/PR-1",
        "url": JOB_URL,
        "builds": [
            {"number": 4, "url": f"{JOB_URL}4/", "result": "FAILURE", "building": False},
        ],
    }


@pytest.fixture
def container_payload(job_payload: JenkinsPayload) -> JenkinsPayload:
    return {
        "_class": "org.jenkinsci.plugins.workflow.multibranch.WorkflowMultiBranchProject",
        "name": "repo",
        "fullName": "org/repo",
        "url": CONTAINER_URL,
        "jobs": [
            {
                "_class": "org.jenkinsci.plugins.workflow.job.WorkflowJob",
                "name": "main",
                "fullName": "org/repo/main",
                "url": f"{CONTAINER_URL}job/main/",
                "builds": [
                    {"number": 13, "result": None, "building": True},
                    {"number": 12, "result": "SUCCESS", "building": False},
                    {"number": 11, "result": "FAILURE", "building": False},
                ],
            },
            {
                "_class": "org.jenkinsci.plugins.workflow.job.WorkflowJob",
                "name": "feature%2Flogin",
                "fullName": "org/repo/feature%2Flogin",
                "builds": [{"number": 2, "result": "UNSTABLE", "building": False}],
            },
            job_payload,
        ],
    }


@pytest.fixture
def jenkins_config() -> JenkinsConfig:
    return JenkinsConfig(
        url=BASE_URL,
        resilience=ResilienceConfig(name="jenkins", base_url=BASE_URL),
    )


@pytest.fixture
def jenkins_routes(
    build_payload: JenkinsPayload,
    job_payload: JenkinsPayload,
    container_payload: JenkinsPayload,
) -> dict[str, JenkinsPayload]:
    return {
        f"{BUILD_URL}api/json": build_payload,
        f"{JOB_URL}api/json": job_payload,
        f"{CONTAINER_URL}api/json": container_payload,
    }

