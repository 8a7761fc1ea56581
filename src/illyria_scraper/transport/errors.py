# SPDX-License-Identifier: Apache-2.0
"""Transport error definitions."""

from __future__ import annotations


class ScraperError(Exception):
    """Base exception for the scraper."""


class InvalidEndpointError(ScraperError, ValueError):
    """Endpoint selector outside the supported set.

    This is a programming error and is raised immediately instead of being
    turned into an absent result.
    """

    def __init__(self, endpoint: object) -> None:
        super().__init__(f"Invalid endpoint: {endpoint}")
        self.endpoint = endpoint


class HTTPStatusError(ScraperError):
    """Upstream answered with an error status."""

    def __init__(self, status: int, reason: str | None = None) -> None:
        message = f"Server error ({status})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.status = status
        self.reason = reason

    @property
    def retryable(self) -> bool:
        """Rate limiting and server errors are worth retrying."""
        return self.status == 429 or self.status >= 500
