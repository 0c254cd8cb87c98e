"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
GITHUB_TOKEN, HTTP_VERIFY, GITHUB_TIMEOUT and LOG_LEVEL).
"""

from __future__ import annotations

import os
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_str(name: str) -> Optional[str]:
    raw = (os.environ.get(name) or "").strip()
    return raw or None


# GitHub access; without a token the API is used anonymously (lower rate limit)
GITHUB_TOKEN = _env_str("GITHUB_TOKEN")
GITHUB_TIMEOUT = _env_float("GITHUB_TIMEOUT", 20.0)

# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)

# Logging (stderr only, stdout carries the MCP stream)
LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
