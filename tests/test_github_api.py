"""
Tests for the GitHub repository listing client.
"""

import httpx
import pytest

from devconnector.api import github_api
from devconnector.api.github_api import GitHubAPIError, build_repos_url, get_user_repos

_RealClient = httpx.Client


class _Client:
    def __init__(self, handler):
        self._client = _RealClient(transport=httpx.MockTransport(handler))

    def __enter__(self):
        return self._client

    def __exit__(self, *args):
        self._client.close()


@pytest.fixture
def mock_github(monkeypatch):
    """Route client requests to a handler: mock_github(handler)."""

    def install(handler):
        monkeypatch.setattr(github_api.httpx, "Client", lambda **kwargs: _Client(handler))

    return install


def test_build_repos_url_quotes_username():
    assert build_repos_url("ada") == "https://api.github.com/users/ada/repos"
    assert build_repos_url("a/b c") == "https://api.github.com/users/a%2Fb%20c/repos"


def test_get_user_repos_sends_query_and_token(mock_github, sample_github_repos):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json=sample_github_repos)

    mock_github(handler)

    repos = get_user_repos("ada")

    assert repos == sample_github_repos
    request = seen["request"]
    assert request.url.path == "/users/ada/repos"
    assert request.url.params["per_page"] == "5"
    assert request.url.params["sort"] == "created"
    assert request.url.params["direction"] == "asc"
    assert request.headers["Authorization"] == "token test-github-token"


def test_get_user_repos_caps_result_size(mock_github):
    repos = [{"id": i, "name": f"repo{i}"} for i in range(8)]
    mock_github(lambda request: httpx.Response(200, json=repos))

    assert len(get_user_repos("ada")) == 5


@pytest.mark.parametrize("status_code", [401, 403, 404, 500])
def test_error_status_raises(mock_github, status_code):
    mock_github(lambda request: httpx.Response(status_code, json={"message": "nope"}))

    with pytest.raises(GitHubAPIError) as exc_info:
        get_user_repos("ada")

    assert exc_info.value.status_code == status_code


def test_transport_error_raises(mock_github):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    mock_github(handler)

    with pytest.raises(GitHubAPIError):
        get_user_repos("ada")


def test_non_list_payload_raises(mock_github):
    mock_github(lambda request: httpx.Response(200, json={"message": "weird"}))

    with pytest.raises(GitHubAPIError, match="Unexpected"):
        get_user_repos("ada")


def test_invalid_json_raises(mock_github):
    mock_github(lambda request: httpx.Response(200, content=b"<html>"))

    with pytest.raises(GitHubAPIError, match="invalid JSON"):
        get_user_repos("ada")
