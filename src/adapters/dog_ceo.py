"""Upstream adapter: dog.ceo public API.

Responsibility:
- One HTTP GET per logical operation against the configured base URL.
- Decode the `{status, message}` envelope and check `status == "success"`.
- Narrow `message` to the shape the operation expects (string, list of
  strings, or breed -> sub-breeds map).

Notes:
- Non-string items inside list/map messages are dropped, not reported.
- Nothing here retries; a failed call surfaces immediately.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import StrictStr, TypeAdapter, ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import BreedCatalog, Envelope
from core.errors import DecodeError, ShapeError, TransportError, UpstreamStatusError
from core.interfaces.dog_source import DogImageSource

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "success"

_TEXT = TypeAdapter(StrictStr)
_LIST = TypeAdapter(list[Any])
_MAP = TypeAdapter(dict[str, Any])


def _segment(value: object) -> str:
    """Percent-encode a path parameter so it stays a single path segment."""

    return quote(str(value), safe="")


def _strings(items: list[Any]) -> list[str]:
    return [item for item in items if isinstance(item, str)]


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return str(errors[0].get("msg") or exc)


class DogCeoClient(DogImageSource):
    """Async client for https://dog.ceo/api.

    A single `httpx.AsyncClient` is reused for every call. When the client is
    built here it is closed by `aclose()` / `async with`; a client passed in by
    the caller is left open.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._base_url = self._settings.upstream_base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings)

    async def __aenter__(self) -> "DogCeoClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # --- plumbing ---------------------------------------------------------

    def _effective_timeout(self, timeout: float | None) -> float:
        configured = self._settings.http_timeout_seconds
        if timeout is None:
            return configured
        return min(configured, timeout)

    async def _fetch(self, path: str, *, timeout: float | None = None) -> Any:
        """GET `path`, unwrap the envelope and return the raw `message`."""

        url = f"{self._base_url}{path}"
        deadline = self._effective_timeout(timeout)
        logger.debug("GET %s (timeout=%.2fs)", url, deadline)

        try:
            # httpx timeouts apply per step; wait_for caps the whole exchange.
            response = await asyncio.wait_for(self._client.get(url, timeout=deadline), deadline)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise TransportError(f"request timed out after {deadline:g}s: {url}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"failed to make request: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            raise TransportError(self._status_error_text(response))

        try:
            envelope = Envelope.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"failed to decode response: {_first_error(exc)}") from exc

        if envelope.status != SUCCESS_STATUS:
            raise UpstreamStatusError(envelope.status)
        return envelope.message

    @staticmethod
    def _status_error_text(response: httpx.Response) -> str:
        text = f"unexpected status code: {response.status_code}"
        # dog.ceo explains 404s in an error envelope ("Breed not found ...").
        try:
            envelope = Envelope.model_validate_json(response.content)
        except ValidationError:
            return text
        if isinstance(envelope.message, str) and envelope.message:
            return f"{text} ({envelope.message})"
        return text

    async def _fetch_text(self, path: str, *, timeout: float | None) -> str:
        message = await self._fetch(path, timeout=timeout)
        try:
            return _TEXT.validate_python(message)
        except ValidationError as exc:
            raise ShapeError("unexpected message format: expected a string") from exc

    async def _fetch_list(self, path: str, *, timeout: float | None) -> list[str]:
        message = await self._fetch(path, timeout=timeout)
        try:
            items = _LIST.validate_python(message)
        except ValidationError as exc:
            raise ShapeError("unexpected message format: expected a list") from exc
        return _strings(items)

    async def _fetch_catalog(self, path: str, *, timeout: float | None) -> BreedCatalog:
        message = await self._fetch(path, timeout=timeout)
        try:
            mapping = _MAP.validate_python(message)
        except ValidationError as exc:
            raise ShapeError("unexpected message format: expected a breed map") from exc

        catalog: BreedCatalog = {}
        for breed, sub_breeds in mapping.items():
            if not isinstance(sub_breeds, list):
                continue
            catalog[breed] = _strings(sub_breeds)
        return catalog

    # --- operations -------------------------------------------------------

    async def list_all_breeds(self, *, timeout: float | None = None) -> BreedCatalog:
        return await self._fetch_catalog("/breeds/list/all", timeout=timeout)

    async def list_breeds(self, *, timeout: float | None = None) -> list[str]:
        return await self._fetch_list("/breeds/list", timeout=timeout)

    async def get_random_image(self, *, timeout: float | None = None) -> str:
        return await self._fetch_text("/breeds/image/random", timeout=timeout)

    async def get_random_images(self, count: int, *, timeout: float | None = None) -> list[str]:
        return await self._fetch_list(f"/breeds/image/random/{_segment(count)}", timeout=timeout)

    async def get_breed_images(self, breed: str, *, timeout: float | None = None) -> list[str]:
        return await self._fetch_list(f"/breed/{_segment(breed)}/images", timeout=timeout)

    async def get_random_breed_image(self, breed: str, *, timeout: float | None = None) -> str:
        return await self._fetch_text(f"/breed/{_segment(breed)}/images/random", timeout=timeout)

    async def get_random_breed_images(
        self, breed: str, count: int, *, timeout: float | None = None
    ) -> list[str]:
        path = f"/breed/{_segment(breed)}/images/random/{_segment(count)}"
        return await self._fetch_list(path, timeout=timeout)

    async def get_sub_breed_images(
        self, breed: str, sub_breed: str, *, timeout: float | None = None
    ) -> list[str]:
        path = f"/breed/{_segment(breed)}/{_segment(sub_breed)}/images"
        return await self._fetch_list(path, timeout=timeout)

    async def get_random_sub_breed_image(
        self, breed: str, sub_breed: str, *, timeout: float | None = None
    ) -> str:
        path = f"/breed/{_segment(breed)}/{_segment(sub_breed)}/images/random"
        return await self._fetch_text(path, timeout=timeout)

    async def list_sub_breeds(self, breed: str, *, timeout: float | None = None) -> list[str]:
        return await self._fetch_list(f"/breed/{_segment(breed)}/list", timeout=timeout)
