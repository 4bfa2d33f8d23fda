"""Pydantic models describing the Jenkins remote JSON API payloads."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from refbuild.domain.model import BuildResult

MULTI_BRANCH_CLASSES: Final[frozenset[str]] = frozenset(
    {
        "org.jenkinsci.plugins.workflow.multibranch.WorkflowMultiBranchProject",
        "jenkins.branch.MultiBranchProject",
    }
)


class JenkinsBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class BuildPayload(JenkinsBaseModel):
    class_name: str | None = Field(default=None, alias="_class")
    number: int
    url: str | None = None
    result: BuildResult | None = None
    building: bool = False

    @field_validator("result", mode="before")
    @classmethod
    def _parse_result(cls, value: object) -> object:
        if value is None or isinstance(value, BuildResult):
            return value
        if isinstance(value, str):
            return BuildResult.parse(value)
        return value


class JobPayload(JenkinsBaseModel):
    class_name: str | None = Field(default=None, alias="_class")
    name: str
    full_name: str | None = Field(default=None, alias="fullName")
    url: str | None = None
    builds: list[BuildPayload] = Field(default_factory=list[BuildPayload])


class ContainerPayload(JenkinsBaseModel):
    class_name: str | None = Field(default=None, alias="_class")
    name: str = ""
    full_name: str = Field(default="", alias="fullName")
    url: str | None = None
    jobs: list[JobPayload] = Field(default_factory=list[JobPayload])

    @property
    def is_multi_branch(self) -> bool:
        if self.class_name is None:
            return False
        return self.class_name in MULTI_BRANCH_CLASSES or self.class_name.endswith(
            "MultiBranchProject"
        )
