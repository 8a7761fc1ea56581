# SPDX-License-Identifier: Apache-2.0
"""HTTP transport with bounded retries."""

from .config import DEFAULT_CONFIG, RequestConfig
from .errors import HTTPStatusError, InvalidEndpointError, ScraperError
from .request import (
    MAX_RETRIES,
    AudioParams,
    Endpoint,
    HTTPResponse,
    InfoParams,
    PendingRequest,
    TextParams,
    encode_uri_component,
    request,
)

__all__ = [
    "DEFAULT_CONFIG",
    "MAX_RETRIES",
    "AudioParams",
    "Endpoint",
    "HTTPResponse",
    "HTTPStatusError",
    "InfoParams",
    "InvalidEndpointError",
    "PendingRequest",
    "RequestConfig",
    "ScraperError",
    "TextParams",
    "encode_uri_component",
    "request",
]
