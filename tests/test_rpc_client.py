import json

import httpx
import pytest

from adapters.rpc_client import DogServiceClient, normalize_target
from core.config import AppSettings
from core.errors import RemoteCallError


def make_client(handler, timeout_seconds=4.0):
    return DogServiceClient(
        "localhost:50051",
        settings=AppSettings(),
        timeout_seconds=timeout_seconds,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.parametrize(
    "target, expected",
    [
        ("localhost:50051", "http://localhost:50051"),
        ("dogs.internal:8080/", "http://dogs.internal:8080"),
        ("https://dogs.example.com", "https://dogs.example.com"),
    ],
)
def test_normalize_target(target, expected):
    assert normalize_target(target) == expected


def test_call_posts_camel_case_body_with_deadline():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"imageUrl": "https://x/c.jpg"})

    with make_client(handler) as client:
        response = client.get_random_sub_breed_image("spaniel", "cocker")

    assert response.image_url == "https://x/c.jpg"
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/api/v1/DogService/GetRandomSubBreedImage"
    assert json.loads(request.content) == {"breed": "spaniel", "subBreed": "cocker"}
    assert request.headers["X-Request-Timeout"] == "4"


def test_list_all_breeds_is_parsed():
    payload = {"breeds": {"husky": {"subBreeds": ["agouti"]}, "boxer": {"subBreeds": []}}}

    with make_client(lambda request: httpx.Response(200, json=payload)) as client:
        response = client.list_all_breeds()

    assert response.breeds["husky"].sub_breeds == ["agouti"]
    assert response.breeds["boxer"].sub_breeds == []


def test_error_body_keeps_its_code():
    payload = {"code": "INVALID_ARGUMENT", "message": "count must be between 1 and 50", "detail": None}

    with make_client(lambda request: httpx.Response(400, json=payload)) as client:
        with pytest.raises(RemoteCallError) as excinfo:
            client.get_random_images(0)

    assert excinfo.value.code == "INVALID_ARGUMENT"
    assert excinfo.value.message == "count must be between 1 and 50"


def test_internal_error_carries_detail():
    payload = {"code": "INTERNAL", "message": "failed to list breeds", "detail": "api returned error status: error"}

    with make_client(lambda request: httpx.Response(500, json=payload)) as client:
        with pytest.raises(RemoteCallError) as excinfo:
            client.list_breeds()

    assert excinfo.value.code == "INTERNAL"
    assert excinfo.value.detail == "api returned error status: error"


def test_non_json_error_response():
    with make_client(lambda request: httpx.Response(404, text="Not Found")) as client:
        with pytest.raises(RemoteCallError) as excinfo:
            client.list_breeds()

    assert excinfo.value.code == "HTTP_404"


def test_unreachable_server_is_unavailable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with make_client(handler) as client:
        with pytest.raises(RemoteCallError) as excinfo:
            client.get_random_image()

    assert excinfo.value.code == "UNAVAILABLE"
    assert "localhost:50051" in excinfo.value.message
