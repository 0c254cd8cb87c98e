"""MCP tool that registers a repository's documentation path."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from explorer.browser import DocsBrowser


def register(mcp: FastMCP, *, browser: DocsBrowser) -> None:
    @mcp.tool(name="add_repo_mapping")
    async def add_repo_mapping(name: str, url: str, docsPath: str) -> str:  # noqa: N803
        """Add a new repository mapping.

        Params:
          - name: short name (or owner/repo, or URL) for the repository.
          - url: full GitHub URL for the repository.
          - docsPath: path to the documentation directory within the repository.

        Later browse_docs calls for this name skip auto-detection.
        """
        browser.add_repository_mapping(name, url, docsPath)
        return (
            "✅ Successfully added repository mapping:\n"
            f"- Name: {name}\n"
            f"- URL: {url}\n"
            f"- Docs Path: {docsPath}"
        )
