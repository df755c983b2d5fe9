"""Error taxonomy.

Two layers:
- `UpstreamError` and subclasses: raised by the upstream adapter. They never
  cross the request translator.
- `ServiceError` and subclasses: what callers of the RPC surface see, each one
  carrying an `ErrorCode`.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Service-level error codes exposed on the wire."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INTERNAL = "INTERNAL"

    def http_status(self) -> int:
        """HTTP status used when the code is returned by the API."""

        if self is ErrorCode.INVALID_ARGUMENT:
            return 400
        return 500


class UpstreamError(Exception):
    """Base class for failures talking to the upstream dog API."""


class TransportError(UpstreamError):
    """The request could not complete, timed out, or the HTTP status was not 200."""


class DecodeError(UpstreamError):
    """The body is not JSON or does not match the `{status, message}` envelope."""


class UpstreamStatusError(UpstreamError):
    """The envelope status is not "success"."""

    def __init__(self, status: str) -> None:
        super().__init__(f"api returned error status: {status}")
        self.status = status


class ShapeError(UpstreamError):
    """The envelope message is not the type the operation expects."""


class ServiceError(Exception):
    code: ErrorCode = ErrorCode.INTERNAL

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class InvalidArgumentError(ServiceError):
    code = ErrorCode.INVALID_ARGUMENT


class InternalError(ServiceError):
    code = ErrorCode.INTERNAL


class RemoteCallError(Exception):
    """Raised by the RPC client when the DogService call fails.

    `code` is a wire code (`INVALID_ARGUMENT`, `INTERNAL`) or `UNAVAILABLE`
    when the client could not reach the server at all.
    """

    def __init__(self, code: str, message: str, *, detail: str | None = None) -> None:
        super().__init__(f"{code}: {message}" + (f" ({detail})" if detail else ""))
        self.code = code
        self.message = message
        self.detail = detail
