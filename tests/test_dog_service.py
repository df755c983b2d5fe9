import asyncio

import pytest

from core.domain.models import (
    GetBreedImagesRequest,
    GetRandomBreedImageRequest,
    GetRandomBreedImagesRequest,
    GetRandomImageRequest,
    GetRandomImagesRequest,
    GetRandomSubBreedImageRequest,
    GetSubBreedImagesRequest,
    ListAllBreedsRequest,
    ListBreedsRequest,
    ListSubBreedsRequest,
)
from core.errors import (
    DecodeError,
    ErrorCode,
    InternalError,
    InvalidArgumentError,
    ShapeError,
    TransportError,
    UpstreamStatusError,
)
from core.services.dog_service import DogService


def test_list_all_breeds_wraps_sub_breeds(fake_source):
    response = asyncio.run(DogService(fake_source).list_all_breeds(ListAllBreedsRequest()))

    assert response.breeds["husky"].sub_breeds == ["agouti"]
    assert response.breeds["boxer"].sub_breeds == []


def test_random_image_passes_url_through(fake_source):
    fake_source.results["get_random_image"] = "https://x/y.jpg"

    response = asyncio.run(DogService(fake_source).get_random_image(GetRandomImageRequest()))

    assert response.image_url == "https://x/y.jpg"


def test_random_images_keep_order(fake_source):
    fake_source.results["get_random_images"] = ["c", "a", "b"]

    response = asyncio.run(
        DogService(fake_source).get_random_images(GetRandomImagesRequest(count=3))
    )

    assert response.image_urls == ["c", "a", "b"]
    assert fake_source.calls == [("get_random_images", (3,), None)]


def test_sub_breed_arguments_reach_the_source(fake_source):
    service = DogService(fake_source)

    asyncio.run(
        service.get_random_sub_breed_image(
            GetRandomSubBreedImageRequest(breed="spaniel", sub_breed="cocker")
        )
    )
    asyncio.run(service.list_sub_breeds(ListSubBreedsRequest(breed="spaniel")))

    assert fake_source.calls == [
        ("get_random_sub_breed_image", ("spaniel", "cocker"), None),
        ("list_sub_breeds", ("spaniel",), None),
    ]


def test_deadline_is_forwarded(fake_source):
    asyncio.run(DogService(fake_source).list_breeds(ListBreedsRequest(), timeout=1.5))

    assert fake_source.calls == [("list_breeds", (), 1.5)]


# Validation

COUNT_OPERATIONS = [
    lambda s, count: s.get_random_images(GetRandomImagesRequest(count=count)),
    lambda s, count: s.get_random_breed_images(
        GetRandomBreedImagesRequest(breed="husky", count=count)
    ),
]


@pytest.mark.parametrize("count", [-5, -1, 0, 51, 1000])
@pytest.mark.parametrize("call", COUNT_OPERATIONS)
def test_out_of_range_count_is_rejected_without_upstream_call(fake_source, call, count):
    with pytest.raises(InvalidArgumentError, match="count must be between 1 and 50") as excinfo:
        asyncio.run(call(DogService(fake_source), count))

    assert excinfo.value.code is ErrorCode.INVALID_ARGUMENT
    assert fake_source.calls == []


@pytest.mark.parametrize("count", [1, 50])
@pytest.mark.parametrize("call", COUNT_OPERATIONS)
def test_count_bounds_are_inclusive(fake_source, call, count):
    asyncio.run(call(DogService(fake_source), count))

    assert len(fake_source.calls) == 1


EMPTY_BREED_OPERATIONS = [
    lambda s: s.get_breed_images(GetBreedImagesRequest(breed="")),
    lambda s: s.get_random_breed_image(GetRandomBreedImageRequest(breed="")),
    lambda s: s.get_random_breed_images(GetRandomBreedImagesRequest(breed="", count=3)),
    lambda s: s.list_sub_breeds(ListSubBreedsRequest()),
    lambda s: s.get_sub_breed_images(GetSubBreedImagesRequest(breed="", sub_breed="cocker")),
    lambda s: s.get_sub_breed_images(GetSubBreedImagesRequest(breed="spaniel", sub_breed="")),
    lambda s: s.get_random_sub_breed_image(GetRandomSubBreedImageRequest(breed="spaniel")),
    lambda s: s.get_random_sub_breed_image(GetRandomSubBreedImageRequest(sub_breed="cocker")),
]


@pytest.mark.parametrize("call", EMPTY_BREED_OPERATIONS)
def test_empty_identifiers_are_rejected_without_upstream_call(fake_source, call):
    with pytest.raises(InvalidArgumentError, match="required"):
        asyncio.run(call(DogService(fake_source)))

    assert fake_source.calls == []


def test_breed_is_checked_before_count(fake_source):
    request = GetRandomBreedImagesRequest(breed="", count=0)

    with pytest.raises(InvalidArgumentError, match="breed is required"):
        asyncio.run(DogService(fake_source).get_random_breed_images(request))


# Upstream failures

@pytest.mark.parametrize(
    "error",
    [
        TransportError("unexpected status code: 404"),
        DecodeError("failed to decode response: Invalid JSON"),
        UpstreamStatusError("error"),
        ShapeError("unexpected message format: expected a string"),
    ],
)
def test_upstream_failures_become_internal(fake_source, error):
    fake_source.error = error

    with pytest.raises(InternalError) as excinfo:
        asyncio.run(DogService(fake_source).get_random_image(GetRandomImageRequest()))

    assert excinfo.value.code is ErrorCode.INTERNAL
    assert excinfo.value.message == "failed to get random image"
    assert excinfo.value.detail == str(error)
    assert excinfo.value.__cause__ is error


def test_unexpected_exceptions_are_not_masked(fake_source):
    fake_source.error = RuntimeError("bug")

    with pytest.raises(RuntimeError, match="bug"):
        asyncio.run(DogService(fake_source).list_breeds(ListBreedsRequest()))
