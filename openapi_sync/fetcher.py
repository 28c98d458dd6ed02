"""HTTP fetcher for OpenAPI documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from .errors import UNKNOWN_ERROR, ResponseError, serialize_error, unknown_error
from .models.status import SerializedError

logger = logging.getLogger(__name__)


@dataclass
class FetchSuccess:
    """Fetched document body."""

    text: str


@dataclass
class FetchFailure:
    """Classified fetch failure."""

    message: str
    error: SerializedError

    @classmethod
    def from_exception(cls, error: Exception) -> "FetchFailure":
        serialized = serialize_error(error)
        return cls(message=serialized.message, error=serialized)

    @classmethod
    def unknown(cls, value: object) -> "FetchFailure":
        return cls(message=UNKNOWN_ERROR, error=unknown_error(value))


FetchResult = FetchSuccess | FetchFailure


class DefinitionFetcher:
    """Fetches documents over HTTP(S) with a single GET.

    No retries, headers or authentication. Timeouts come from the client
    configuration only.

    The body is decoded with httpx's ``response.text``: the charset from the
    Content-Type header, falling back to UTF-8, with undecodable bytes
    replaced by U+FFFD. A body that is not valid in that encoding is
    therefore stored lossily rather than byte-for-byte.
    """

    def __init__(
        self,
        timeout_seconds: float | None = 30.0,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.verify_ssl = verify_ssl
        self._transport = transport

    async def fetch(self, url: str) -> FetchResult:
        """Fetch the document at url as text.

        Returns:
            FetchSuccess with the body on a 2xx response, FetchFailure otherwise.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                verify=self.verify_ssl,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)

            if not response.is_success:
                return FetchFailure.from_exception(ResponseError.from_response(response))

            return FetchSuccess(text=response.text)

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return FetchFailure.from_exception(e)
        except Exception as e:
            # Failures from outside httpx's error hierarchy
            logger.debug(f"Unclassified failure fetching {url}: {e!r}")
            return FetchFailure.unknown(e)
