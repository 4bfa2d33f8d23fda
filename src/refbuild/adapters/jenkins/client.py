"""Build loader reading snapshots from the Jenkins remote JSON API."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ValidationError

from refbuild.adapters.http_resilience import ResilientClient
from refbuild.config.jenkins import JenkinsConfig, get_jenkins_config

from .schema import BuildPayload, ContainerPayload, JobPayload
from .translator import build_snapshot

if TYPE_CHECKING:
    from collections.abc import Callable

    from refbuild.adapters.memory import MemoryBuild
    from refbuild.config.http_resilience import ResilienceConfig
    from refbuild.domain.ports.loading import BuildLoader

log = getLogger(__name__)

DEFAULT_HISTORY_DEPTH: Final[int] = 20
_BUILD_FIELDS: Final[str] = "_class,number,url,result,building"


class JenkinsAPIError(RuntimeError):
    """Raised when Jenkins answers with a payload that cannot be used."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


def normalize_build_url(locator: str) -> str:
    url = locator.strip()
    if not url:
        raise ValueError("Build locator must not be blank")
    return url if url.endswith("/") else url + "/"


def job_url_of(build_url: str) -> str:
    """Strip the trailing build number segment from a build URL."""

    head, _, number = normalize_build_url(build_url).rstrip("/").rpartition("/")
    if not number.isdigit() or not head:
        raise JenkinsAPIError(f"Not a build URL: {build_url}", url=build_url)
    return head + "/"


def parent_url_of(job_url: str) -> str:
    """Strip the trailing ``job/<name>`` segment from a job URL."""

    path = normalize_build_url(job_url).rstrip("/")
    head, separator, _ = path.rpartition("/job/")
    if separator:
        return head + "/"
    if path.startswith("job/"):
        return ""
    raise JenkinsAPIError(f"Not a job URL: {job_url}", url=job_url)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class JenkinsBuildLoader:
    config: JenkinsConfig = field(default_factory=get_jenkins_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    history_depth: int = DEFAULT_HISTORY_DEPTH

    def __call__(self, locator: str) -> MemoryBuild:
        return asyncio.run(self._load_async(normalize_build_url(locator)))

    async def _load_async(self, build_url: str) -> MemoryBuild:
        builds_tree = f"builds[{_BUILD_FIELDS}]{{0,{self.history_depth}}}"
        job_fields = f"_class,name,fullName,url,{builds_tree}"

        async with self.client_factory(self.config.resilience) as client:
            build = await self._fetch(client, build_url, _BUILD_FIELDS, BuildPayload)
            job_url = job_url_of(build.url or build_url)
            job = await self._fetch(client, job_url, job_fields, JobPayload)
            container_url = parent_url_of(job_url)
            container = await self._fetch(
                client,
                container_url,
                f"_class,name,fullName,url,jobs[{job_fields}]",
                ContainerPayload,
            )

        log.info(
            "Loaded build #%s of %s (container %r, %d jobs)",
            build.number,
            job.full_name or job.name,
            container.full_name,
            len(container.jobs),
        )
        return build_snapshot(build, job, container)

    async def _fetch[ModelT: BaseModel](
        self,
        client: ResilientClient,
        url: str,
        tree: str,
        model: type[ModelT],
    ) -> ModelT:
        response = await client.get(f"{url}api/json", params={"tree": tree})
        response.raise_for_status()

        try:
            payload = response.json()
        except json.JSONDecodeError:
            msg = f"Jenkins returned a non-JSON response for {url}"
            raise JenkinsAPIError(msg, url=url) from None
        if not isinstance(payload, dict):
            raise JenkinsAPIError(f"Unexpected Jenkins response payload for {url}", url=url)

        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            log.error(f"Invalid Jenkins payload for {url}: {exc}")
            raise JenkinsAPIError(f"Invalid Jenkins payload for {url}", url=url) from exc


if TYPE_CHECKING:
    _loader_check: BuildLoader = JenkinsBuildLoader()
