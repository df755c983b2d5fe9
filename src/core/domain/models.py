"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Typed request/response contracts for the ten RPC operations, documented
  through `Field` and validated at the edge.
- camelCase on the wire (`imageUrl`, `subBreeds`), snake_case in Python.

Note:
- These models describe *what* is exchanged, not *how* it is fetched. The
  upstream envelope lives here too because it is the raw shape the adapter
  decodes before narrowing it per operation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, StrictInt
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

BreedCatalog = dict[str, list[str]]
"""Breed name -> sub-breed names (possibly empty)."""


class Envelope(BaseModel):
    """The `{status, message}` wrapper returned by every upstream endpoint.

    `message` stays untyped: each operation narrows it to its own shape.
    """

    model_config = ConfigDict(extra="ignore")

    status: str = Field(
        ...,
        description='Upstream outcome, "success" when the call worked.',
    )
    message: Any = Field(
        default=None,
        description="Payload: a string, a list of strings or a breed map.",
    )


class RpcModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# --- Requests -----------------------------------------------------------------
# Fields default to their zero value so that a missing argument is rejected by
# the translator (InvalidArgument) rather than by the wire layer.


class ListAllBreedsRequest(RpcModel):
    pass


class ListBreedsRequest(RpcModel):
    pass


class GetRandomImageRequest(RpcModel):
    pass


class GetRandomImagesRequest(RpcModel):
    count: StrictInt = Field(default=0, description="How many images to return (1..50).")


class GetBreedImagesRequest(RpcModel):
    breed: str = Field(default="", description="Breed name, e.g. 'husky'.")


class GetRandomBreedImageRequest(RpcModel):
    breed: str = Field(default="", description="Breed name.")


class GetRandomBreedImagesRequest(RpcModel):
    breed: str = Field(default="", description="Breed name.")
    count: StrictInt = Field(default=0, description="How many images to return (1..50).")


class GetSubBreedImagesRequest(RpcModel):
    breed: str = Field(default="", description="Breed name.")
    sub_breed: str = Field(default="", description="Sub-breed name, e.g. 'cocker'.")


class GetRandomSubBreedImageRequest(RpcModel):
    breed: str = Field(default="", description="Breed name.")
    sub_breed: str = Field(default="", description="Sub-breed name.")


class ListSubBreedsRequest(RpcModel):
    breed: str = Field(default="", description="Breed name.")


# --- Responses ----------------------------------------------------------------


class SubBreeds(RpcModel):
    sub_breeds: list[str] = Field(
        default_factory=list,
        description="Sub-breeds of a breed; empty when the breed has none.",
    )


class ListAllBreedsResponse(RpcModel):
    """Full breed catalog. No ordering guarantee across calls."""

    breeds: dict[str, SubBreeds] = Field(
        default_factory=dict,
        description="Breed name -> its sub-breeds.",
    )


class ListBreedsResponse(RpcModel):
    breeds: list[str] = Field(default_factory=list, description="Breed names.")


class ListSubBreedsResponse(RpcModel):
    sub_breeds: list[str] = Field(default_factory=list, description="Sub-breed names.")


class ImageResponse(RpcModel):
    """A single image reference, passed through verbatim from upstream."""

    image_url: str = Field(..., description="Image URL.")


class ImageListResponse(RpcModel):
    """Image references in the order the upstream returned them."""

    image_urls: list[str] = Field(default_factory=list, description="Image URLs.")


class ErrorResponse(BaseModel):
    """Body returned by the API for every failed call."""

    code: str = Field(..., description="INVALID_ARGUMENT or INTERNAL.")
    message: str = Field(..., description="Human readable summary.")
    detail: str | None = Field(
        default=None,
        description="Underlying upstream error text, when there is one.",
    )
