"""Core protocol and interface definitions.

Defines the ContentAccessor protocol used by detection, the resolver and
the browser so the GitHub client can be swapped for a fake in tests.
"""

from __future__ import annotations

from typing import List, Protocol

from core.models import DirectoryEntry


class ContentAccessor(Protocol):
    """Contract for a remote repository content source (GitHub, fakes, etc.)."""
    async def list_directory(self, owner: str, repo: str, path: str) -> List[DirectoryEntry]:
        ...

    async def read_file(self, owner: str, repo: str, path: str) -> str:
        ...
