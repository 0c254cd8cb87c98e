from __future__ import annotations

import re
from typing import Tuple

from core.errors import InvalidIdentifierError


# Matches github.com/<owner>/<repo> anywhere in the string; a trailing ".git"
# and anything after the repo segment (/tree/main, ?tab=readme, ...) are dropped.
_GITHUB_URL_RE = re.compile(r"github\.com/([^/\s]+)/([^/\s?#]+?)(?:\.git)?(?:[/?#]|$)")
_OWNER_REPO_RE = re.compile(r"^([^/]+)/([^/]+)$")

GITHUB_WEB_URL = "https://github.com"


def normalize_identifier(identifier: str) -> str:
    """Canonicalize a repository reference into a mapping-table key.

    URLs collapse to "owner/repo"; anything else ("owner/repo" or a bare
    short name registered earlier) is returned as given.
    """
    raw = (identifier or "").strip()
    m = _GITHUB_URL_RE.search(raw)
    if m:
        return f"{m.group(1)}/{m.group(2)}"
    return raw


def parse_repo_identifier(identifier: str) -> Tuple[str, str]:
    raw = (identifier or "").strip()
    m = _GITHUB_URL_RE.search(raw) or _OWNER_REPO_RE.match(raw)
    if not m:
        raise InvalidIdentifierError(f"Invalid GitHub repository URL or name: {identifier}")
    return m.group(1), m.group(2)


def repo_web_url(owner: str, repo: str) -> str:
    return f"{GITHUB_WEB_URL}/{owner}/{repo}"
