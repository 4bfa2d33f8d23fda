"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import BasicAuth, CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .jenkins import JenkinsConfig, get_jenkins_config
from .logging import configure_logging
from .reference import ReferenceSettings, get_reference_settings
from .storage import StorageConfig, get_storage_config

__all__ = [
    "BasicAuth",
    "CacheConfig",
    "ConfigurationError",
    "JenkinsConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ReferenceSettings",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "get_jenkins_config",
    "get_reference_settings",
    "get_storage_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
