# GitHub API integration module

from .github_api import GitHubAPIError, get_user_repos

__all__ = [
    "GitHubAPIError",
    "get_user_repos",
]
