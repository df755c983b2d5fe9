"""Pytest configuration.

- Makes `src/` importable (`core`, `adapters`, `api`, `cli`) without an install.
- Provides an in-memory `DogImageSource` that records every call.
"""

import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


DEFAULT_RESULTS = {
    "list_all_breeds": {"husky": ["agouti"], "boxer": []},
    "list_breeds": ["boxer", "husky"],
    "get_random_image": "https://images.dog.ceo/breeds/husky/n1.jpg",
    "get_random_images": ["a", "b", "c"],
    "get_breed_images": ["h1", "h2"],
    "get_random_breed_image": "https://images.dog.ceo/breeds/husky/n2.jpg",
    "get_random_breed_images": ["h3", "h4", "h5"],
    "get_sub_breed_images": ["c1", "c2"],
    "get_random_sub_breed_image": "https://images.dog.ceo/breeds/spaniel-cocker/c3.jpg",
    "list_sub_breeds": ["cocker", "welsh"],
}


class FakeDogSource:
    """Records `(operation, args, timeout)` and returns canned results.

    Set `error` to make every call raise it.
    """

    def __init__(self):
        self.calls = []
        self.results = dict(DEFAULT_RESULTS)
        self.error = None

    async def _record(self, name, *args, timeout=None):
        self.calls.append((name, args, timeout))
        if self.error is not None:
            raise self.error
        return self.results[name]

    async def list_all_breeds(self, *, timeout=None):
        return await self._record("list_all_breeds", timeout=timeout)

    async def list_breeds(self, *, timeout=None):
        return await self._record("list_breeds", timeout=timeout)

    async def get_random_image(self, *, timeout=None):
        return await self._record("get_random_image", timeout=timeout)

    async def get_random_images(self, count, *, timeout=None):
        return await self._record("get_random_images", count, timeout=timeout)

    async def get_breed_images(self, breed, *, timeout=None):
        return await self._record("get_breed_images", breed, timeout=timeout)

    async def get_random_breed_image(self, breed, *, timeout=None):
        return await self._record("get_random_breed_image", breed, timeout=timeout)

    async def get_random_breed_images(self, breed, count, *, timeout=None):
        return await self._record("get_random_breed_images", breed, count, timeout=timeout)

    async def get_sub_breed_images(self, breed, sub_breed, *, timeout=None):
        return await self._record("get_sub_breed_images", breed, sub_breed, timeout=timeout)

    async def get_random_sub_breed_image(self, breed, sub_breed, *, timeout=None):
        return await self._record("get_random_sub_breed_image", breed, sub_breed, timeout=timeout)

    async def list_sub_breeds(self, breed, *, timeout=None):
        return await self._record("list_sub_breeds", breed, timeout=timeout)


@pytest.fixture
def fake_source():
    return FakeDogSource()
