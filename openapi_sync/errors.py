"""Errors raised while fetching definitions, and their serialized form."""

from __future__ import annotations

import httpx

from .models.status import SerializedError

UNKNOWN_ERROR = "Unknown error"


class ResponseError(Exception):
    """An HTTP response with a non-2xx status."""

    name = "ResponseError"

    def __init__(
        self,
        message: str,
        status_code: int,
        status_text: str,
        body: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.status_text = status_text
        self.body = body

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ResponseError":
        """Build the error from an already-read response."""
        status_text = response.reason_phrase
        return cls(
            message=f"Request failed with {response.status_code} {status_text}",
            status_code=response.status_code,
            status_text=status_text,
            body=response.text or None,
        )


def serialize_error(error: Exception) -> SerializedError:
    """Serialize an exception into a SerializedError."""
    name = getattr(error, "name", None) or type(error).__name__
    extra: dict[str, object] = {}

    if isinstance(error, ResponseError):
        extra["statusCode"] = error.status_code
        extra["statusText"] = error.status_text
        if error.body:
            extra["cause"] = error.body
    elif isinstance(error, httpx.RequestError):
        try:
            extra["url"] = str(error.request.url)
        except RuntimeError:
            # .request is unset when the error was raised outside a request
            pass

    return SerializedError(name=name, message=str(error) or name, **extra)


def unknown_error(value: object) -> SerializedError:
    """Serialize a failure that has no recognizable error shape."""
    return SerializedError(name=UNKNOWN_ERROR, message=str(value))
