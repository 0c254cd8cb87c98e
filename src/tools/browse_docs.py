"""MCP tool that browses documentation inside a GitHub repository.

Registers the 'browse_docs' tool which adapts DocsBrowser results to
markdown text. Browse failures come back as tool errors (flagged result)
rather than protocol faults.
"""

from __future__ import annotations

from loguru import logger
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from core.errors import DocsExplorerError
from core.models import BrowseResult, DirectoryResult
from explorer.browser import DocsBrowser


def format_browse_result(result: BrowseResult) -> str:
    repo = result.repository
    footer = f"Repository: {repo.name} ({repo.url})"

    if isinstance(result, DirectoryResult):
        listing = "\n".join(
            f"{'📁' if item.is_directory else '📄'} {item.name} - {item.url}" for item in result.items
        ) or "Empty directory"
        return f"### Directory: {result.path}\n\n{listing}\n\n{footer}"

    return f"### File: {result.path}\n\n{footer}\n\n```\n{result.content}\n```"


def register(mcp: FastMCP, *, browser: DocsBrowser) -> None:
    @mcp.tool(name="browse_docs")
    async def browse_docs(repository: str, path: str = "") -> str:
        """Browse documentation files in a GitHub repository.

        Params:
          - repository: repository name, owner/repo format, or full GitHub URL.
          - path: path relative to the detected docs directory (optional).

        Returns:
          A directory listing (one line per entry with its GitHub URL) or the
          file content, each labelled with the resolved path and repository.
        """
        try:
            result = await browser.browse(repository, path or "")
        except DocsExplorerError as e:
            logger.warning("browse_docs failed for {} (path={!r}): {}", repository, path, e)
            raise ToolError(f"Error browsing docs: {e}") from e

        return format_browse_result(result)
