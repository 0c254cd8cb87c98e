"""Browse documentation directories and files relative to a repository's docs root."""

from __future__ import annotations

from typing import Dict, Optional

from loguru import logger

from clients.github.inputs import repo_web_url
from core.errors import PathNotAccessibleError
from core.interfaces import ContentAccessor
from core.models import BrowseResult, DirectoryResult, FileResult, RepositoryInfo, RepositoryMapping
from core.paths import join_docs_path
from core.result import Err, attempt
from explorer.resolver import DocsPathResolver


class DocsBrowser:
    def __init__(self, accessor: ContentAccessor, *, resolver: Optional[DocsPathResolver] = None) -> None:
        self._accessor = accessor
        self._resolver = resolver or DocsPathResolver(accessor)

    async def browse(self, identifier: str, relative_path: str = "") -> BrowseResult:
        """List a docs directory, or read a docs file when the path is not a directory.

        The path is relative to the repository's docs root; an empty path
        targets the root itself. The file read is only attempted after the
        directory listing failed.

        Raises:
          InvalidIdentifierError / DocsPathNotFoundError from resolution, and
          PathNotAccessibleError when the path is neither a directory nor a file.
        """
        owner, repo, docs_path = await self._resolver.locate(identifier)
        full_path = join_docs_path(docs_path, relative_path)
        repository = RepositoryInfo(
            name=f"{owner}/{repo}",
            url=repo_web_url(owner, repo),
            docs_path=docs_path,
        )

        listing = await attempt(self._accessor.list_directory(owner, repo, full_path))
        if not isinstance(listing, Err):
            return DirectoryResult(path=full_path, items=tuple(listing.value), repository=repository)

        content = await attempt(self._accessor.read_file(owner, repo, full_path))
        if not isinstance(content, Err):
            return FileResult(path=full_path, content=content.value, repository=repository)

        logger.debug("Neither directory nor file at {} in {}: {}", full_path, repository.name, content.error)
        raise PathNotAccessibleError(path=full_path, repository=repository.name, reason=str(content.error))

    def add_repository_mapping(self, name: str, url: str, docs_path: str) -> None:
        self._resolver.add_mapping(name, url, docs_path)

    def get_repository_mappings(self) -> Dict[str, RepositoryMapping]:
        return self._resolver.mappings()
