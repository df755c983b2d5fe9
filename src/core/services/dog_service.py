"""Request translator for the DogService RPC surface.

Flow per operation:
1) Validate arguments (non-empty breed/sub-breed, count in [1, 50]) before
   any network cost.
2) Call the matching `DogImageSource` operation.
3) Wrap the result in the typed response model, unchanged.

Any `UpstreamError` becomes an `InternalError` carrying the upstream text as
`detail`; the sub-cause is not surfaced to callers.
"""

from __future__ import annotations

import logging
from typing import Awaitable, TypeVar

from core.domain.models import (
    GetBreedImagesRequest,
    GetRandomBreedImageRequest,
    GetRandomBreedImagesRequest,
    GetRandomImageRequest,
    GetRandomImagesRequest,
    GetRandomSubBreedImageRequest,
    GetSubBreedImagesRequest,
    ImageListResponse,
    ImageResponse,
    ListAllBreedsRequest,
    ListAllBreedsResponse,
    ListBreedsRequest,
    ListBreedsResponse,
    ListSubBreedsRequest,
    ListSubBreedsResponse,
    SubBreeds,
)
from core.errors import InternalError, InvalidArgumentError, UpstreamError
from core.interfaces.dog_source import DogImageSource

logger = logging.getLogger(__name__)

MIN_IMAGE_COUNT = 1
MAX_IMAGE_COUNT = 50

T = TypeVar("T")


def _require_breed(breed: str) -> None:
    if not breed:
        raise InvalidArgumentError("breed is required")


def _require_breed_and_sub_breed(breed: str, sub_breed: str) -> None:
    if not breed or not sub_breed:
        raise InvalidArgumentError("breed and sub-breed are required")


def _require_count(count: int) -> None:
    if count < MIN_IMAGE_COUNT or count > MAX_IMAGE_COUNT:
        raise InvalidArgumentError(
            f"count must be between {MIN_IMAGE_COUNT} and {MAX_IMAGE_COUNT}"
        )


class DogService:
    """Typed boundary between the RPC layer and a `DogImageSource`.

    Holds no per-call state: a single instance is shared by all concurrent
    requests. `timeout` (seconds) is the caller's remaining deadline and is
    handed to the source unchanged.
    """

    def __init__(self, source: DogImageSource) -> None:
        self._source = source

    async def _call(self, failure: str, call: Awaitable[T]) -> T:
        try:
            return await call
        except UpstreamError as exc:
            logger.warning("%s: %s", failure, exc)
            raise InternalError(failure, detail=str(exc)) from exc

    async def list_all_breeds(
        self, request: ListAllBreedsRequest, *, timeout: float | None = None
    ) -> ListAllBreedsResponse:
        catalog = await self._call(
            "failed to list breeds", self._source.list_all_breeds(timeout=timeout)
        )
        return ListAllBreedsResponse(
            breeds={breed: SubBreeds(sub_breeds=subs) for breed, subs in catalog.items()}
        )

    async def list_breeds(
        self, request: ListBreedsRequest, *, timeout: float | None = None
    ) -> ListBreedsResponse:
        breeds = await self._call("failed to list breeds", self._source.list_breeds(timeout=timeout))
        return ListBreedsResponse(breeds=breeds)

    async def get_random_image(
        self, request: GetRandomImageRequest, *, timeout: float | None = None
    ) -> ImageResponse:
        image_url = await self._call(
            "failed to get random image", self._source.get_random_image(timeout=timeout)
        )
        return ImageResponse(image_url=image_url)

    async def get_random_images(
        self, request: GetRandomImagesRequest, *, timeout: float | None = None
    ) -> ImageListResponse:
        _require_count(request.count)
        images = await self._call(
            "failed to get random images",
            self._source.get_random_images(request.count, timeout=timeout),
        )
        return ImageListResponse(image_urls=images)

    async def get_breed_images(
        self, request: GetBreedImagesRequest, *, timeout: float | None = None
    ) -> ImageListResponse:
        _require_breed(request.breed)
        images = await self._call(
            "failed to get breed images",
            self._source.get_breed_images(request.breed, timeout=timeout),
        )
        return ImageListResponse(image_urls=images)

    async def get_random_breed_image(
        self, request: GetRandomBreedImageRequest, *, timeout: float | None = None
    ) -> ImageResponse:
        _require_breed(request.breed)
        image_url = await self._call(
            "failed to get random breed image",
            self._source.get_random_breed_image(request.breed, timeout=timeout),
        )
        return ImageResponse(image_url=image_url)

    async def get_random_breed_images(
        self, request: GetRandomBreedImagesRequest, *, timeout: float | None = None
    ) -> ImageListResponse:
        _require_breed(request.breed)
        _require_count(request.count)
        images = await self._call(
            "failed to get random breed images",
            self._source.get_random_breed_images(request.breed, request.count, timeout=timeout),
        )
        return ImageListResponse(image_urls=images)

    async def get_sub_breed_images(
        self, request: GetSubBreedImagesRequest, *, timeout: float | None = None
    ) -> ImageListResponse:
        _require_breed_and_sub_breed(request.breed, request.sub_breed)
        images = await self._call(
            "failed to get sub-breed images",
            self._source.get_sub_breed_images(request.breed, request.sub_breed, timeout=timeout),
        )
        return ImageListResponse(image_urls=images)

    async def get_random_sub_breed_image(
        self, request: GetRandomSubBreedImageRequest, *, timeout: float | None = None
    ) -> ImageResponse:
        _require_breed_and_sub_breed(request.breed, request.sub_breed)
        image_url = await self._call(
            "failed to get random sub-breed image",
            self._source.get_random_sub_breed_image(
                request.breed, request.sub_breed, timeout=timeout
            ),
        )
        return ImageResponse(image_url=image_url)

    async def list_sub_breeds(
        self, request: ListSubBreedsRequest, *, timeout: float | None = None
    ) -> ListSubBreedsResponse:
        _require_breed(request.breed)
        sub_breeds = await self._call(
            "failed to list sub-breeds",
            self._source.list_sub_breeds(request.breed, timeout=timeout),
        )
        return ListSubBreedsResponse(sub_breeds=sub_breeds)
