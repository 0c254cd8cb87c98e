"""Documentation folder auto-detection.

Two sequential passes over the candidate paths:

1. Indicator pass: the first listable candidate that contains one of the
   indicator files (checked in list order) wins immediately.
2. Fallback pass: the first candidate that is merely listable wins.

Every failed remote call is a negative signal and never aborts the search.
Calls are made one at a time so "first match wins" holds exactly.
"""

from __future__ import annotations

from typing import Optional, Sequence

from loguru import logger

from core.interfaces import ContentAccessor
from core.result import Err, attempt


async def detect_docs_folder(
    accessor: ContentAccessor,
    owner: str,
    repo: str,
    candidate_paths: Sequence[str],
    indicator_files: Sequence[str],
) -> Optional[str]:
    for path in candidate_paths:
        listing = await attempt(accessor.list_directory(owner, repo, path))
        if isinstance(listing, Err):
            continue

        for indicator in indicator_files:
            found = await attempt(accessor.read_file(owner, repo, f"{path}/{indicator}"))
            if not isinstance(found, Err):
                logger.debug("Found {}/{} in {}/{}", path, indicator, owner, repo)
                return path

    for path in candidate_paths:
        listing = await attempt(accessor.list_directory(owner, repo, path))
        if not isinstance(listing, Err):
            logger.debug("No indicator file in {}/{}, falling back to {}", owner, repo, path)
            return path

    return None
