"""Server bootstrap for the GitHub Docs Explorer MCP service.

Creates the FastMCP instance, configures logging, wires the GitHub client
and docs browser into the tools, and starts the MCP server (stdio transport).
"""

import sys

from loguru import logger
from mcp.server.fastmcp import FastMCP

from clients.github import GitHubClient
from config import GITHUB_TIMEOUT, GITHUB_TOKEN, HTTP_VERIFY, LOG_LEVEL
from explorer.browser import DocsBrowser

from tools.add_repo_mapping import register as register_add_repo_mapping
from tools.browse_docs import register as register_browse_docs
from tools.list_repo_mappings import register as register_list_repo_mappings

# stdout is the MCP channel
logger.remove()
logger.add(sys.stderr, level=LOG_LEVEL)

mcp = FastMCP("github-docs-explorer")


def register_tools() -> None:
    github_client = GitHubClient(token=GITHUB_TOKEN, timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)
    browser = DocsBrowser(github_client)

    register_browse_docs(mcp, browser=browser)
    register_add_repo_mapping(mcp, browser=browser)
    register_list_repo_mappings(mcp, browser=browser)


register_tools()


def main() -> None:
    if not GITHUB_TOKEN:
        logger.warning("GITHUB_TOKEN not set, using unauthenticated GitHub API access")
    logger.info("GitHub Docs Explorer MCP server running on stdio")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
