"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for every outbound client.
- Eases testing: a `transport` (e.g. `httpx.MockTransport`) can be injected.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def _default_headers(settings: AppSettings, extra_headers: dict[str, str] | None) -> dict[str, str]:
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return headers


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so every caller behaves the same.
    - One client is meant to be reused across calls; it is safe to share
      between concurrent requests.
    """

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=_default_headers(settings, extra_headers),
        transport=transport,
    )


def build_client(
    settings: AppSettings | None = None,
    *,
    base_url: str = "",
    timeout_seconds: float | None = None,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Synchronous counterpart, used by the CLI side."""

    settings = settings or AppSettings()
    return httpx.Client(
        base_url=base_url,
        timeout=httpx.Timeout(timeout_seconds or settings.http_timeout_seconds),
        headers=_default_headers(settings, extra_headers),
        transport=transport,
    )
