"""DogService RPC endpoints.

Each operation is exposed as ``POST /DogService/<Operation>`` (mounted under
``/api/v1`` by ``create_app``) with a JSON request body. Bodies may be omitted
or empty; missing fields take their zero value and are then rejected by the
request translator when they matter.

Callers can bound the upstream call with an ``X-Request-Timeout`` header
(seconds). The value is passed through the translator to the adapter.
"""

import math
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

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
)
from core.errors import InvalidArgumentError
from core.services.dog_service import DogService

DEADLINE_HEADER = "X-Request-Timeout"

router = APIRouter(prefix="/DogService", tags=["DogService"])


def get_service(request: Request) -> DogService:
    """Return the translator built during application startup."""
    return request.app.state.dog_service


def get_deadline(
    x_request_timeout: Optional[str] = Header(default=None, alias=DEADLINE_HEADER),
) -> Optional[float]:
    """Parse the caller's deadline header into seconds."""
    if x_request_timeout is None:
        return None
    try:
        value = float(x_request_timeout)
    except ValueError:
        raise InvalidArgumentError(f"{DEADLINE_HEADER} must be a number of seconds") from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgumentError(f"{DEADLINE_HEADER} must be a positive number of seconds")
    return value


@router.post("/ListAllBreeds", response_model=ListAllBreedsResponse)
async def list_all_breeds(
    body: Optional[ListAllBreedsRequest] = None,
    service: DogService = Depends(get_service),
    timeout: Optional[float] = Depends(get_deadline),
) -> ListAllBreedsResponse:
    """Return every breed with its sub-breeds."""
    return await service.list_all_breeds(body or ListAllBreedsRequest(), timeout=timeout)


@router.post("/ListBreeds", response_model=ListBreedsResponse)
async def list_breeds(
    body: Optional[ListBreedsRequest] = None,
    service: DogService = Depends(get_service),
    timeout: Optional[float] = Depends(get_deadline),
) -> ListBreedsResponse:
    return await service.list_breeds(body or ListBreedsRequest(), timeout=timeout)


@router.post("/GetRandomImage", response_model=ImageResponse)
async def get_random_image(
    body: Optional[GetRandomImageRequest] = None,
    service: DogService = Depends(get_service),
    timeout: Optional[float] = Depends(get_deadline),
) -> ImageResponse:
    return await service.get_random_image(body or GetRandomImageRequest(), timeout=timeout)


@router.post("/GetRandomImages", response_model=ImageListResponse)
async def get_random_images(
    body: Optional[GetRandomImagesRequest] = None,
    service: DogService = Depends(get_service),
    timeout: Optional[float] = Depends(get_deadline),
) -> ImageListResponse:
    """Return ``count`` random images (1..50)."""
    return await service.get_random_images(body or GetRandomImagesRequest(), timeout=timeout)


@router.post("/GetBreedImages", response_model=ImageListResponse)
async def get_breed_images(
    body: Optional[GetBreedImagesRequest] = None,
    service: DogService = Depends(get_service),
    timeout: Optional[float] = Depends(get_deadline),
) -> ImageListResponse:
    return await service.get_breed_images(body or GetBreedImagesRequest(), timeout=timeout)


@router.post("/GetRandomBreedImage", response_model=ImageResponse)
async def get_random_breed_image(
    body: Optional[GetRandomBreedImageRequest] = None,
    service: DogService = Depends(get_service),
    timeout: Optional[float] = Depends(get_deadline),
) -> ImageResponse:
    return await service.get_random_breed_image(
        body or GetRandomBreedImageRequest(), timeout=timeout
    )


@router.post("/GetRandomBreedImages", response_model=ImageListResponse)
async def get_random_breed_images(
    body: Optional[GetRandomBreedImagesRequest] = None,
    service: DogService = Depends(get_service),
    timeout: Optional[float] = Depends(get_deadline),
) -> ImageListResponse:
    return await service.get_random_breed_images(
        body or GetRandomBreedImagesRequest(), timeout=timeout
    )


@router.post("/GetSubBreedImages", response_model=ImageListResponse)
async def get_sub_breed_images(
    body: Optional[GetSubBreedImagesRequest] = None,
    service: DogService = Depends(get_service),
    timeout: Optional[float] = Depends(get_deadline),
) -> ImageListResponse:
    return await service.get_sub_breed_images(body or GetSubBreedImagesRequest(), timeout=timeout)


@router.post("/GetRandomSubBreedImage", response_model=ImageResponse)
async def get_random_sub_breed_image(
    body: Optional[GetRandomSubBreedImageRequest] = None,
    service: DogService = Depends(get_service),
    timeout: Optional[float] = Depends(get_deadline),
) -> ImageResponse:
    return await service.get_random_sub_breed_image(
        body or GetRandomSubBreedImageRequest(), timeout=timeout
    )


@router.post("/ListSubBreeds", response_model=ListSubBreedsResponse)
async def list_sub_breeds(
    body: Optional[ListSubBreedsRequest] = None,
    service: DogService = Depends(get_service),
    timeout: Optional[float] = Depends(get_deadline),
) -> ListSubBreedsResponse:
    return await service.list_sub_breeds(body or ListSubBreedsRequest(), timeout=timeout)
