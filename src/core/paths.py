from __future__ import annotations

"""
Path utilities used across the project.

Provides consistent POSIX-style normalization of user supplied paths and
the docs-root join used by the browser.
"""


def normalize_posix_relpath(p: str) -> str:
    """Normalize a user path to a clean POSIX relative path.

    Converts backslashes to '/', trims whitespace, removes leading '/'
    and repeated './' markers.
    """
    s = (p or "").strip()
    s = s.replace("\\", "/")        # Unify path separators across OSes.
    s = s.lstrip("/")               # Prevent accidental absolute paths.
    while s.startswith("./"):       # Drop repeated "./" prefixes.
        s = s[2:]
    return s


def join_docs_path(docs_path: str, relative_path: str) -> str:
    """Return `docs_path/relative_path`, or `docs_path` when nothing is left to join."""
    rel = normalize_posix_relpath(relative_path).rstrip("/")
    if not rel:
        return docs_path
    return f"{docs_path}/{rel}"
