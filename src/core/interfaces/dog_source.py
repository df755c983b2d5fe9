"""Contract for dog image sources.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The dog.ceo adapter and test fakes are interchangeable behind the
  request translator.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import BreedCatalog


@runtime_checkable
class DogImageSource(Protocol):
    """One coroutine per upstream operation.

    Design rules:
    - Every method does exactly one network call (no fan-out, no retries).
    - `timeout` optionally tightens the configured per-call deadline.
    - Failures are raised as `core.errors.UpstreamError` subclasses.
    """

    async def list_all_breeds(self, *, timeout: float | None = None) -> BreedCatalog: ...

    async def list_breeds(self, *, timeout: float | None = None) -> list[str]: ...

    async def get_random_image(self, *, timeout: float | None = None) -> str: ...

    async def get_random_images(self, count: int, *, timeout: float | None = None) -> list[str]: ...

    async def get_breed_images(self, breed: str, *, timeout: float | None = None) -> list[str]: ...

    async def get_random_breed_image(self, breed: str, *, timeout: float | None = None) -> str: ...

    async def get_random_breed_images(
        self, breed: str, count: int, *, timeout: float | None = None
    ) -> list[str]: ...

    async def get_sub_breed_images(
        self, breed: str, sub_breed: str, *, timeout: float | None = None
    ) -> list[str]: ...

    async def get_random_sub_breed_image(
        self, breed: str, sub_breed: str, *, timeout: float | None = None
    ) -> str: ...

    async def list_sub_breeds(self, breed: str, *, timeout: float | None = None) -> list[str]: ...
