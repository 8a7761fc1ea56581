# SPDX-License-Identifier: Apache-2.0
"""Request configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestConfig:
    """Settings shared by every outbound request.

    Attributes:
        base_url: Upstream host, without trailing slash.
        timeout: Total timeout in seconds for RPC and text requests.
        audio_timeout: Total timeout in seconds for speech synthesis,
            which is slower than the other endpoints.
    """

    base_url: str = "https://translate.google.com"
    timeout: float = 10.0
    audio_timeout: float = 60.0


DEFAULT_CONFIG = RequestConfig()
