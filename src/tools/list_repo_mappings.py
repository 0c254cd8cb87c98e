from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from explorer.browser import DocsBrowser


def register(mcp: FastMCP, *, browser: DocsBrowser) -> None:
    @mcp.tool(name="list_repo_mappings")
    async def list_repo_mappings() -> str:
        """List known repositories and their documentation paths (built-in, added or detected)."""
        mappings = browser.get_repository_mappings()
        if not mappings:
            return "No repository mappings."
        return "\n".join(f"- {key}: {m.url} (docs: {m.docs_path})" for key, m in mappings.items())
