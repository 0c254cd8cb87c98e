"""Resolve a repository reference to its documentation root.

Known repositories are answered from the mapping table without touching
GitHub. Unknown ones go through folder detection and, on success, are
added to the table so the next lookup is answered locally.

A table hit is trusted even if the repository has since moved its docs;
re-register the mapping with `add_mapping` to correct a stale entry.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence, Tuple

from loguru import logger

from clients.github.inputs import normalize_identifier, parse_repo_identifier, repo_web_url
from core.errors import DocsPathNotFoundError, InvalidIdentifierError
from core.interfaces import ContentAccessor
from core.models import RepositoryMapping
from explorer.defaults import COMMON_DOCS_PATHS, DEFAULT_REPOSITORIES, DOC_INDICATOR_FILES
from explorer.detection import detect_docs_folder
from explorer.mapping import MappingTable


class DocsPathResolver:
    def __init__(
        self,
        accessor: ContentAccessor,
        *,
        seed: Optional[Mapping[str, RepositoryMapping]] = None,
        candidate_paths: Sequence[str] = COMMON_DOCS_PATHS,
        indicator_files: Sequence[str] = DOC_INDICATOR_FILES,
    ) -> None:
        self._accessor = accessor
        self._table = MappingTable(DEFAULT_REPOSITORIES if seed is None else seed)
        self._candidate_paths = tuple(candidate_paths)
        self._indicator_files = tuple(indicator_files)

    async def resolve(self, identifier: str) -> str:
        """Return the docs path for `identifier`, detecting and remembering it if unknown.

        Raises:
          InvalidIdentifierError if the identifier is unknown and is neither a
          GitHub URL nor "owner/repo"; DocsPathNotFoundError if detection finds
          no candidate directory.
        """
        key = normalize_identifier(identifier)
        known = self._table.get(key)
        if known is not None:
            return known.docs_path

        owner, repo = parse_repo_identifier(identifier)
        detected = await detect_docs_folder(
            self._accessor,
            owner,
            repo,
            self._candidate_paths,
            self._indicator_files,
        )
        if detected is None:
            raise DocsPathNotFoundError(f"Could not detect documentation path for repository: {identifier}")

        logger.info("Detected docs path '{}' for {}/{}", detected, owner, repo)
        self._table.set(key, RepositoryMapping(url=repo_web_url(owner, repo), docs_path=detected))
        return detected

    async def locate(self, identifier: str) -> Tuple[str, str, str]:
        """Return (owner, repo, docs_path) for `identifier`.

        Registered names are located through their stored URL, so short
        names like "datajoint-python" work without an owner prefix.
        """
        known = self._table.get(normalize_identifier(identifier))
        owner, repo = parse_repo_identifier(identifier) if known is None else _owner_repo_of(known, identifier)
        docs_path = await self.resolve(identifier)
        return owner, repo, docs_path

    def add_mapping(self, name: str, url: str, docs_path: str) -> None:
        self._table.set(normalize_identifier(name), RepositoryMapping(url=url, docs_path=docs_path))

    def mappings(self) -> Dict[str, RepositoryMapping]:
        return self._table.snapshot()


def _owner_repo_of(mapping: RepositoryMapping, identifier: str) -> Tuple[str, str]:
    # Prefer the stored URL; fall back to the identifier for non-GitHub URLs
    try:
        return parse_repo_identifier(mapping.url)
    except InvalidIdentifierError:
        return parse_repo_identifier(identifier)
