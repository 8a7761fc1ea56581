# SPDX-License-Identifier: Apache-2.0
"""HTTP requests to the Google Translate web endpoints.

Usage:
    result = await request(Endpoint.TEXT, TextParams("en", "es", "hello")).doing(
        lambda response: response.data or None
    )

Each call runs at most ``MAX_RETRIES + 1`` attempts. An attempt is repeated
when it fails with a retryable error (connection failure, 429, 5xx) or when
the callback produces an empty result. Every attempt rebuilds the request
with a fresh User-Agent and opens its own session. Once the attempts are
exhausted, or after a non-retryable failure, the call resolves to None.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union
from urllib.parse import quote

import aiohttp
from browserforge.headers import HeaderGenerator  # type: ignore[import-untyped]
from yarl import URL

from illyria_scraper.transport.config import DEFAULT_CONFIG, RequestConfig
from illyria_scraper.transport.errors import HTTPStatusError, InvalidEndpointError

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_RETRIES = 3

INFO_PATH = "/_/TranslateWebserverUi/data/batchexecute?rpcids=MkEWBc&rt=c"
TEXT_PATH = "/m"
AUDIO_PATH = "/translate_tts"
AUDIO_CLIENT = "tw-ob"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

# Characters left unescaped by JavaScript's encodeURIComponent, which is how
# the web client escapes queries.
_URI_COMPONENT_SAFE = "!~*'()"


class Endpoint(str, Enum):
    """Upstream endpoints."""

    INFO = "info"
    TEXT = "text"
    AUDIO = "audio"


@dataclass(frozen=True)
class InfoParams:
    """Parameters for the batch-execute RPC.

    Attributes:
        body: URL-encoded form body (``f.req=...``).
    """

    body: str


@dataclass(frozen=True)
class TextParams:
    """Parameters for the mobile text endpoint.

    Attributes:
        source: Google source language code.
        target: Google target language code.
        query: URL-escaped query.
    """

    source: str
    target: str
    query: str


@dataclass(frozen=True)
class AudioParams:
    """Parameters for the text-to-speech endpoint.

    Attributes:
        lang: Google language code.
        text: URL-escaped text to speak.
        text_length: Length of the unescaped text.
        speed: Playback speed (1 normal, 0.1 slow).
    """

    lang: str
    text: str
    text_length: int
    speed: float


Params = Union[InfoParams, TextParams, AudioParams]

_PARAMS_TYPES: dict[Endpoint, type] = {
    Endpoint.INFO: InfoParams,
    Endpoint.TEXT: TextParams,
    Endpoint.AUDIO: AudioParams,
}


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to issue one HTTP attempt."""

    method: str
    url: str
    headers: dict[str, str]
    timeout: float
    data: str | None = None
    binary: bool = False


@dataclass(frozen=True)
class HTTPResponse:
    """Response body read from the upstream.

    ``data`` is ``bytes`` for the audio endpoint and ``str`` otherwise.
    """

    status: int
    data: str | bytes


def encode_uri_component(text: str) -> str:
    """Escape text the way the web client does (``encodeURIComponent``).

    Examples:
        >>> encode_uri_component("hello world!")
        'hello%20world!'
    """
    return quote(text, safe=_URI_COMPONENT_SAFE)


@functools.lru_cache(maxsize=1)
def _header_generator() -> HeaderGenerator:
    return HeaderGenerator()


def random_user_agent() -> str:
    """Generate a realistic browser User-Agent string."""
    headers = _header_generator().generate()
    for key, value in headers.items():
        if key.lower() == "user-agent":
            return str(value)
    return DEFAULT_USER_AGENT


def resolve_endpoint(endpoint: Endpoint | str) -> Endpoint:
    """Convert an endpoint selector, rejecting unknown values.

    Raises:
        InvalidEndpointError: If ``endpoint`` is not one of ``Endpoint``.
    """
    try:
        return Endpoint(endpoint)
    except ValueError:
        raise InvalidEndpointError(endpoint) from None


def build_request(
    endpoint: Endpoint | str,
    params: Params,
    config: RequestConfig = DEFAULT_CONFIG,
) -> RequestSpec:
    """Build the request for one attempt.

    Args:
        endpoint: Endpoint to call.
        params: Parameters matching the endpoint.
        config: Request settings.

    Returns:
        RequestSpec with a freshly generated User-Agent.

    Raises:
        InvalidEndpointError: If the endpoint is unknown.
        TypeError: If ``params`` does not match the endpoint.
    """
    endpoint = resolve_endpoint(endpoint)
    expected = _PARAMS_TYPES[endpoint]
    if not isinstance(params, expected):
        raise TypeError(
            f"{endpoint.value} endpoint expects {expected.__name__}, "
            f"got {type(params).__name__}"
        )

    headers = {"User-Agent": random_user_agent()}

    if isinstance(params, InfoParams):
        headers["Content-Type"] = FORM_CONTENT_TYPE
        return RequestSpec(
            method="POST",
            url=f"{config.base_url}{INFO_PATH}",
            headers=headers,
            timeout=config.timeout,
            data=params.body,
        )

    if isinstance(params, TextParams):
        return RequestSpec(
            method="GET",
            url=(
                f"{config.base_url}{TEXT_PATH}"
                f"?sl={params.source}&tl={params.target}&q={params.query}"
            ),
            headers=headers,
            timeout=config.timeout,
        )

    return RequestSpec(
        method="GET",
        url=(
            f"{config.base_url}{AUDIO_PATH}"
            f"?tl={params.lang}&q={params.text}&textlen={params.text_length}"
            f"&speed={params.speed}&client={AUDIO_CLIENT}"
        ),
        headers=headers,
        timeout=config.audio_timeout,
        binary=True,
    )


async def send(spec: RequestSpec) -> HTTPResponse:
    """Issue a single HTTP attempt on its own session.

    Raises:
        HTTPStatusError: On a 4xx/5xx status.
        aiohttp.ClientError: On connection-level failures.
        asyncio.TimeoutError: When the request times out.
    """
    timeout = aiohttp.ClientTimeout(total=spec.timeout)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.request(
            spec.method,
            URL(spec.url, encoded=True),
            data=spec.data,
            headers=spec.headers,
        ) as response:
            if response.status >= 400:
                raise HTTPStatusError(response.status, response.reason)
            data: str | bytes
            if spec.binary:
                data = await response.read()
            else:
                # Invalid byte sequences are replaced with U+FFFD
                data = await response.text(errors="replace")
            return HTTPResponse(status=response.status, data=data)


def is_empty(result: Any) -> bool:
    """Return True for None and for zero-length strings, bytes or sequences."""
    if result is None:
        return True
    try:
        return len(result) == 0
    except TypeError:
        return False


def _log_failure(error: Exception, endpoint: Endpoint, attempt: int) -> bool:
    """Log a failed attempt and report whether it may be retried."""
    if isinstance(error, HTTPStatusError):
        if error.status == 429:
            detail = "Rate limit exceeded"
        elif error.status == 403:
            detail = "Access forbidden"
        elif error.status == 404:
            detail = "Resource not found"
        elif error.status >= 500:
            detail = "Server error"
        else:
            detail = "Unexpected status"
        logger.error(
            "Response error from %s endpoint (status %d, attempt %d): %s: %s",
            endpoint.value,
            error.status,
            attempt,
            detail,
            error,
        )
        return error.retryable

    logger.error(
        "Request error from %s endpoint (attempt %d): %s",
        endpoint.value,
        attempt,
        str(error) or type(error).__name__,
    )
    return True


class PendingRequest(Generic[T]):
    """A validated request that runs when a result callback is supplied."""

    def __init__(
        self,
        endpoint: Endpoint,
        params: Params,
        config: RequestConfig = DEFAULT_CONFIG,
    ) -> None:
        self.endpoint = endpoint
        self.params = params
        self.config = config

    async def doing(self, callback: Callable[[HTTPResponse], T | None]) -> T | None:
        """Run the request and post-process the response.

        Args:
            callback: Maps a response to a result. Returning None or an
                empty value causes another attempt.

        Returns:
            The first non-empty callback result, or None when every attempt
            failed or came back empty.
        """
        for attempt in range(MAX_RETRIES + 1):
            spec = build_request(self.endpoint, self.params, self.config)
            try:
                response = await send(spec)
            except (aiohttp.ClientError, asyncio.TimeoutError, HTTPStatusError) as e:
                retryable = _log_failure(e, self.endpoint, attempt)
                if not retryable or attempt >= MAX_RETRIES:
                    return None
                logger.warning(
                    "Retrying %s request (attempt %d/%d)",
                    self.endpoint.value,
                    attempt + 1,
                    MAX_RETRIES,
                )
                continue

            result = callback(response)
            if not is_empty(result):
                return result
            if attempt < MAX_RETRIES:
                logger.warning(
                    "Empty result from %s endpoint, retrying (attempt %d/%d)",
                    self.endpoint.value,
                    attempt + 1,
                    MAX_RETRIES,
                )

        return None


def request(
    endpoint: Endpoint | str,
    params: Params,
    config: RequestConfig | None = None,
) -> PendingRequest[Any]:
    """Prepare a request to an upstream endpoint.

    The endpoint is checked immediately, so an invalid selector raises here
    rather than when the request is awaited.

    Args:
        endpoint: Endpoint to call.
        params: Parameters matching the endpoint.
        config: Request settings (default: DEFAULT_CONFIG).

    Returns:
        PendingRequest; await ``.doing(callback)`` to run it.

    Raises:
        InvalidEndpointError: If the endpoint is unknown.
    """
    return PendingRequest(resolve_endpoint(endpoint), params, config or DEFAULT_CONFIG)
