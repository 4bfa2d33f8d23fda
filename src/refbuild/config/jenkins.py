"""Jenkins remote API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import BasicAuth, CacheConfig, RateLimit, ResilienceConfig

JENKINS_TIMEOUT_SECONDS = 15.0


@dataclass(frozen=True)
class JenkinsConfig:
    """Holds the connection settings for a Jenkins controller."""

    url: str
    resilience: ResilienceConfig
    user: str | None = None
    api_token: str | None = None


def get_jenkins_config(*, resilience: ResilienceConfig | None = None) -> JenkinsConfig:
    values = require_env_vars(("JENKINS_URL",))
    url = values["JENKINS_URL"].strip().rstrip("/") + "/"
    user = optional_env_var("JENKINS_USER")
    api_token = optional_env_var("JENKINS_API_TOKEN")
    if (user is None) != (api_token is None):
        raise ConfigurationError("JENKINS_USER and JENKINS_API_TOKEN must be set together")

    auth = BasicAuth(user=user, token=api_token) if user and api_token else None
    return JenkinsConfig(
        url=url,
        user=user,
        api_token=api_token,
        resilience=resilience
        or ResilienceConfig(
            name="jenkins",
            base_url=url,
            timeout_seconds=JENKINS_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            cache=CacheConfig(backend="memory"),
            auth=auth,
            default_headers={"Accept": "application/json"},
        ),
    )
