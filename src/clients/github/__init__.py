from .client import GitHubClient
from .inputs import normalize_identifier, parse_repo_identifier, repo_web_url

__all__ = ["GitHubClient", "normalize_identifier", "parse_repo_identifier", "repo_web_url"]
