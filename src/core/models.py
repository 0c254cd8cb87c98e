"""Immutable dataclasses describing repositories, listings and browse results.

Includes the repository mapping record stored in the mapping table, the
directory entries produced by the GitHub accessor, and the two browse
result variants (DirectoryResult, FileResult) returned to the tools.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple, Union


EntryKind = Literal["file", "directory"]


@dataclass(frozen=True)
class RepositoryMapping:
    """Known documentation location for a repository."""

    url: str
    docs_path: str


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    path: str
    kind: EntryKind
    url: str

    @property
    def is_directory(self) -> bool:
        return self.kind == "directory"


@dataclass(frozen=True)
class RepositoryInfo:
    """Resolved repository identity attached to every browse result.

    - name: "owner/repo"
    - url: "https://github.com/owner/repo"
    - docs_path: documentation root inside the repository
    """

    name: str
    url: str
    docs_path: str


@dataclass(frozen=True)
class DirectoryResult:
    path: str
    items: Tuple[DirectoryEntry, ...]
    repository: RepositoryInfo


@dataclass(frozen=True)
class FileResult:
    path: str
    content: str
    repository: RepositoryInfo


BrowseResult = Union[DirectoryResult, FileResult]
