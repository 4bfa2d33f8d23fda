from __future__ import annotations

import asyncio

import httpx
import pytest
from hishel import AsyncSqliteStorage

from refbuild.adapters.http_resilience import ResilientClient, _build_cache_storage, build_retry
from refbuild.config.http_resilience import (
    BasicAuth,
    CacheConfig,
    RateLimit,
    ResilienceConfig,
    RetryPolicy,
)


def test_build_retry_copies_policy() -> None:
    retry = build_retry(RetryPolicy(total=7))

    assert retry.total == 7


def test_cache_storage_is_optional() -> None:
    assert _build_cache_storage(None) is None
    assert _build_cache_storage(CacheConfig(enabled=False)) is None
    assert isinstance(_build_cache_storage(CacheConfig(backend="memory")), AsyncSqliteStorage)


def test_unsupported_cache_backend_raises() -> None:
    with pytest.raises(ValueError, match="Unsupported cache backend"):
        _build_cache_storage(CacheConfig(backend="redis"))  # type: ignore[arg-type]


def test_client_sends_configured_auth_and_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    config = ResilienceConfig(
        name="jenkins",
        base_url="https://ci.example.com/",
        ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
        auth=BasicAuth(user="bot", token="secret"),
        default_headers={"Accept": "application/json"},
    )

    async def run() -> httpx.Response:
        client = ResilientClient(config)
        inner = client._client  # noqa: SLF001  # type: ignore[reportPrivateUsage]
        client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
            base_url=inner.base_url,
            headers=inner.headers,
            auth=inner.auth,
            transport=httpx.MockTransport(handler),
        )
        await inner.aclose()
        async with client:
            return await client.get("api/json", params={"tree": "jobs[name]"})

    response = asyncio.run(run())

    assert response.json() == {"ok": True}
    request = seen[0]
    assert str(request.url) == "https://ci.example.com/api/json?tree=jobs%5Bname%5D"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Authorization"].startswith("Basic ")
