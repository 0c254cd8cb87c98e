"""Interpret GitHub throttling signals on a response.

This encapsulates simple GitHub-relevant logic:
- 429 responses carry Retry-After.
- 403 with X-RateLimit-Remaining==0 carries X-RateLimit-Reset (epoch seconds).

Nothing here sleeps or retries; callers log the condition and fail.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Mapping, Optional

import httpx


@dataclass(frozen=True)
class RateLimitInfo:
    status_code: int
    reset_in: Optional[int]  # seconds until requests are accepted again, if known


def detect_rate_limit(response: httpx.Response) -> Optional[RateLimitInfo]:
    # Returns None when the response is not a throttling signal.
    if response.status_code == 429:
        return RateLimitInfo(429, _parse_int_header(response.headers, "Retry-After"))

    if response.status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0":
        reset = _parse_int_header(response.headers, "X-RateLimit-Reset")
        reset_in = None if reset is None else max(0, reset - int(time.time()))
        return RateLimitInfo(403, reset_in)

    return None


def _parse_int_header(headers: Mapping[str, str], name: str) -> Optional[int]:
    value = headers.get(name)
    if not value:
        return None
    value = value.strip()
    if not value.isdigit():
        return None
    return int(value)
