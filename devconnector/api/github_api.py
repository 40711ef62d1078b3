"""GitHub API client for the public repository listing."""

from typing import Any
from urllib.parse import quote

import httpx

from devconnector.config import get_settings
from devconnector.constants import (
    GITHUB_ACCEPT,
    GITHUB_REPOS_DIRECTION,
    GITHUB_REPOS_SORT,
    GITHUB_USER_AGENT,
)
from devconnector.logging import get_logger, log_timing

logger = get_logger("github")


class GitHubAPIError(Exception):
    """Raised when the repository listing cannot be fetched."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def _get_headers() -> dict[str, str]:
    """Get headers for GitHub API requests."""
    headers = {
        "Accept": GITHUB_ACCEPT,
        "User-Agent": GITHUB_USER_AGENT,
    }
    token = get_settings().github_token
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


def build_repos_url(username: str) -> str:
    """URL of a user's repository listing; the username is path-quoted."""
    base = get_settings().github_api_base.rstrip("/")
    return f"{base}/users/{quote(username, safe='')}/repos"


@log_timing("github_user_repos", logger=logger)
def get_user_repos(username: str) -> list[dict[str, Any]]:
    """
    Fetch a user's repositories, oldest first, capped at the configured limit.

    Raises:
        GitHubAPIError: on transport errors, non-2xx responses (unknown user,
            rate limiting, bad token) and unexpected payloads.
    """
    settings = get_settings()
    params = {
        "per_page": settings.github_repos_limit,
        "sort": GITHUB_REPOS_SORT,
        "direction": GITHUB_REPOS_DIRECTION,
    }
    if not settings.github_token:
        logger.warning("no_token", message="GITHUB_TOKEN not set, using unauthenticated requests")

    url = build_repos_url(username)
    try:
        with httpx.Client(timeout=settings.github_timeout_seconds) as client:
            response = client.get(url, headers=_get_headers(), params=params)
            response.raise_for_status()
            repos = response.json()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        logger.warning("api_error", status=status, username=username)
        raise GitHubAPIError(f"GitHub responded with {status}", status_code=status) from exc
    except httpx.HTTPError as exc:
        logger.error("request_exception", error=str(exc), username=username)
        raise GitHubAPIError("GitHub request failed") from exc
    except ValueError as exc:
        logger.error("invalid_json", error=str(exc), username=username)
        raise GitHubAPIError("GitHub returned invalid JSON") from exc

    if not isinstance(repos, list):
        raise GitHubAPIError("Unexpected GitHub payload")

    return repos[: settings.github_repos_limit]
