"""Built-in repository mappings and the detection priority lists.

Both lists are priority rankings: earlier entries win ties.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from core.models import RepositoryMapping


DEFAULT_REPOSITORIES: Mapping[str, RepositoryMapping] = MappingProxyType(
    {
        "datajoint-python": RepositoryMapping(
            url="https://github.com/datajoint/datajoint-python",
            docs_path="docs/src",
        ),
    }
)

# Directories checked when auto-detecting a documentation root
COMMON_DOCS_PATHS: Tuple[str, ...] = (
    "docs",
    "doc",
    "documentation",
    "docs/src",
    "documentation/source",
    "site",
    "website",
)

# Files whose presence marks a directory as a real documentation root
DOC_INDICATOR_FILES: Tuple[str, ...] = (
    "mkdocs.yml",
    "conf.py",
    "docusaurus.config.js",
    "sphinx.json",
    "README.md",
    "index.md",
    "index.html",
)
