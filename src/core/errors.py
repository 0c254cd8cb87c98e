from __future__ import annotations

from typing import Optional


class DocsExplorerError(Exception):
    """Base error for the docs explorer server."""


class ValidationError(DocsExplorerError):
    """Raised when user input is invalid."""


class InvalidIdentifierError(ValidationError):
    """Raised when a repository reference is neither a GitHub URL nor owner/repo."""


class NotFoundError(DocsExplorerError):
    """Raised when a requested resource is not found."""


class DocsPathNotFoundError(NotFoundError):
    """Raised when no documentation folder could be detected in a repository."""


class PathNotAccessibleError(DocsExplorerError):
    """Raised when a docs path is neither a listable directory nor a readable file."""

    def __init__(self, *, path: str, repository: str, reason: str) -> None:
        super().__init__(f"Could not access path '{path}' in repository {repository}: {reason}")
        self.path = path
        self.repository = repository
        self.reason = reason


class ExternalServiceError(DocsExplorerError):
    """Raised when GitHub fails or cannot be reached."""


class RateLimitError(ExternalServiceError):
    """Raised when GitHub reports that the rate limit is exhausted."""

    def __init__(self, message: str, *, reset_in: Optional[int] = None) -> None:
        super().__init__(message)
        self.reset_in = reset_in
