"""Client for the DogService RPC surface.

Used by the `dogapi client ...` commands. Each call is a JSON `POST` to
`/api/v1/DogService/<Operation>`, with the client's own timeout sent in the
`X-Request-Timeout` header so the server bounds its upstream call too.

Failures come back as `RemoteCallError`:
- error bodies from the server keep their code (`INVALID_ARGUMENT`, `INTERNAL`);
- a server that cannot be reached is reported as `UNAVAILABLE`.
"""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import (
    ErrorResponse,
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
from core.errors import ErrorCode, RemoteCallError

ResponseT = TypeVar("ResponseT", bound=BaseModel)

SERVICE_PATH = "/api/v1/DogService"

# Client-side only; the server never answers with it.
UNAVAILABLE = "UNAVAILABLE"


def normalize_target(target: str) -> str:
    """`localhost:50051` -> `http://localhost:50051` (full URLs pass through)."""

    target = target.strip().rstrip("/")
    if "://" in target:
        return target
    return f"http://{target}"


class DogServiceClient:
    """Synchronous RPC client; one `httpx.Client` per instance."""

    def __init__(
        self,
        target: str | None = None,
        *,
        settings: AppSettings | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self.target = normalize_target(target or self._settings.client_target)
        self.timeout_seconds = timeout_seconds or self._settings.client_timeout_seconds
        self._client = build_client(
            self._settings,
            base_url=self.target,
            timeout_seconds=self.timeout_seconds,
            extra_headers={"X-Request-Timeout": f"{self.timeout_seconds:g}"},
            transport=transport,
        )

    def __enter__(self) -> "DogServiceClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _invoke(self, operation: str, request: BaseModel, response_model: type[ResponseT]) -> ResponseT:
        try:
            response = self._client.post(
                f"{SERVICE_PATH}/{operation}",
                json=request.model_dump(by_alias=True),
            )
        except httpx.HTTPError as exc:
            raise RemoteCallError(
                UNAVAILABLE,
                f"could not reach {self.target}",
                detail=str(exc) or type(exc).__name__,
            ) from exc

        if response.is_success:
            try:
                return response_model.model_validate(response.json())
            except (ValueError, ValidationError) as exc:
                raise RemoteCallError(
                    ErrorCode.INTERNAL.value, f"malformed {operation} response", detail=str(exc)
                ) from exc

        raise self._error_from(response)

    @staticmethod
    def _error_from(response: httpx.Response) -> RemoteCallError:
        try:
            error = ErrorResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            return RemoteCallError(
                f"HTTP_{response.status_code}",
                response.reason_phrase or "request failed",
                detail=response.text[:500] or None,
            )
        return RemoteCallError(error.code, error.message, detail=error.detail)

    def list_all_breeds(self) -> ListAllBreedsResponse:
        return self._invoke("ListAllBreeds", ListAllBreedsRequest(), ListAllBreedsResponse)

    def list_breeds(self) -> ListBreedsResponse:
        return self._invoke("ListBreeds", ListBreedsRequest(), ListBreedsResponse)

    def get_random_image(self) -> ImageResponse:
        return self._invoke("GetRandomImage", GetRandomImageRequest(), ImageResponse)

    def get_random_images(self, count: int) -> ImageListResponse:
        return self._invoke("GetRandomImages", GetRandomImagesRequest(count=count), ImageListResponse)

    def get_breed_images(self, breed: str) -> ImageListResponse:
        return self._invoke("GetBreedImages", GetBreedImagesRequest(breed=breed), ImageListResponse)

    def get_random_breed_image(self, breed: str) -> ImageResponse:
        return self._invoke(
            "GetRandomBreedImage", GetRandomBreedImageRequest(breed=breed), ImageResponse
        )

    def get_random_breed_images(self, breed: str, count: int) -> ImageListResponse:
        return self._invoke(
            "GetRandomBreedImages",
            GetRandomBreedImagesRequest(breed=breed, count=count),
            ImageListResponse,
        )

    def get_sub_breed_images(self, breed: str, sub_breed: str) -> ImageListResponse:
        return self._invoke(
            "GetSubBreedImages",
            GetSubBreedImagesRequest(breed=breed, sub_breed=sub_breed),
            ImageListResponse,
        )

    def get_random_sub_breed_image(self, breed: str, sub_breed: str) -> ImageResponse:
        return self._invoke(
            "GetRandomSubBreedImage",
            GetRandomSubBreedImageRequest(breed=breed, sub_breed=sub_breed),
            ImageResponse,
        )

    def list_sub_breeds(self, breed: str) -> ListSubBreedsResponse:
        return self._invoke("ListSubBreeds", ListSubBreedsRequest(breed=breed), ListSubBreedsResponse)
