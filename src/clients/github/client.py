"""GitHub client module: list directories and read files via the Contents API.

This module provides a small async client focused on the two operations
the docs explorer needs: listing a directory and reading a text file,
both through `GET /repos/{owner}/{repo}/contents/{path}`. Throttling
responses are logged and surfaced as `RateLimitError`; nothing is retried
or cached.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, List, Mapping, Optional
from urllib.parse import quote

import httpx
from loguru import logger

from core.errors import ExternalServiceError, NotFoundError, RateLimitError
from core.models import DirectoryEntry
from core.paths import normalize_posix_relpath
from core.rate_limit import detect_rate_limit


class GitHubClient:
    """Async GitHub client for browsing repository contents.

    Purpose:
      - list_directory(owner, repo, path) -> List[DirectoryEntry]
      - read_file(owner, repo, path) -> str

    Key behavior:
      - 404, or a file where a directory was expected (and vice versa), raises NotFoundError.
      - Rate-limit responses are logged with the reset delay and raise RateLimitError.
      - Transport errors and other HTTP failures raise ExternalServiceError.
    """

    BASE_URL = "https://api.github.com"
    JSON_ACCEPT = "application/vnd.github+json"
    USER_AGENT = "github-docs-explorer"

    def __init__(
        self,
        *,
        token: Optional[str] = None,
        timeout: float = 20.0,
        verify: bool = True,
    ) -> None:
        self._timeout = float(timeout)
        self._verify = bool(verify)
        self._headers = self._build_headers(token)

    async def list_directory(self, owner: str, repo: str, path: str) -> List[DirectoryEntry]:
        """List a repository directory in the order GitHub returns it."""
        data = await self._get_contents(owner, repo, path)
        if not isinstance(data, list):
            raise NotFoundError(f"Not a directory: {path}")

        return [
            DirectoryEntry(
                name=str(item.get("name", "")),
                path=str(item.get("path", "")),
                kind="directory" if item.get("type") == "dir" else "file",
                url=str(item.get("html_url") or ""),
            )
            for item in data
            if isinstance(item, dict)
        ]

    async def read_file(self, owner: str, repo: str, path: str) -> str:
        """Read a repository file and decode its base64 payload as UTF-8 text."""
        data = await self._get_contents(owner, repo, path)
        if not isinstance(data, dict):
            raise NotFoundError(f"Not a file: {path}")

        content = data.get("content")
        if data.get("encoding") != "base64" or not isinstance(content, str):
            raise ExternalServiceError(f"Unexpected response format from GitHub API for file: {path}")

        try:
            raw = base64.b64decode(content)
        except (binascii.Error, ValueError) as e:
            raise ExternalServiceError(f"Invalid base64 content for file: {path}") from e
        return raw.decode("utf-8", errors="replace")

    # --- HTTP helpers ---

    def _build_headers(self, token: Optional[str]) -> dict[str, str]:
        headers = {
            "Accept": self.JSON_ACCEPT,
            "User-Agent": self.USER_AGENT,
        }
        # Without a token GitHub still answers, with a lower rate limit
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _create_client(self, custom_headers: Optional[Mapping[str, str]] = None) -> httpx.AsyncClient:
        headers = {**self._headers, **dict(custom_headers or {})}
        return httpx.AsyncClient(
            base_url=self.BASE_URL,
            headers=headers,
            timeout=self._timeout,
            verify=self._verify,
        )

    def _external(self, context: str, err: BaseException) -> ExternalServiceError:
        return ExternalServiceError(f"GitHub request failed ({context}): {err}")

    def _raise_for_status(self, resp: httpx.Response, *, context: str) -> None:
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._external(context, e) from e

    async def _get_contents(self, owner: str, repo: str, path: str) -> Any:
        path_clean = normalize_posix_relpath(path)
        # "#" and "?" are legal in GitHub file names but not in a raw URL path
        url = f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/contents/{quote(path_clean, safe='/')}"

        async with self._create_client() as client:
            resp = await self._request(client, url)

        if resp.status_code == 404:
            logger.debug("GitHub 404 for {}/{}/{}", owner, repo, path_clean)
            raise NotFoundError(f"Path not found: {path_clean}")

        limit = detect_rate_limit(resp)
        if limit is not None:
            wait = "unknown" if limit.reset_in is None else f"{limit.reset_in} seconds"
            logger.warning("GitHub API rate limit exceeded (HTTP {}). Reset in {}.", limit.status_code, wait)
            raise RateLimitError(
                f"GitHub API rate limit exceeded while fetching {owner}/{repo}/{path_clean}",
                reset_in=limit.reset_in,
            )

        if resp.is_error:
            logger.error("Error fetching contents for {}/{}/{}: HTTP {}", owner, repo, path_clean, resp.status_code)
        self._raise_for_status(resp, context=f"contents {owner}/{repo}/{path_clean}")

        try:
            return resp.json()
        except ValueError as e:
            raise self._external(f"contents {owner}/{repo}/{path_clean}", e) from e

    async def _request(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        try:
            return await client.get(url)
        except httpx.HTTPError as e:
            logger.error("GitHub request failed for {}: {}", url, e)
            raise self._external(f"GET {url}", e) from e
