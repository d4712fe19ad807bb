from datetime import date

import httpx
import pytest

from contribart.services.heatmap_service import GitHubAPIError
from contribart.services.heatmap_service import InvalidGitHubTokenError
from contribart.services.heatmap_service import build_baseline
from contribart.services.heatmap_service import get_authenticated_user_contributions


def status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", "https://api.github.com/graphql")
    return httpx.HTTPStatusError(
        "failed", request=request, response=httpx.Response(status_code, request=request)
    )


def test_build_baseline_skips_invalid_and_foreign_days() -> None:
    baseline = build_baseline(
        [
            {"date": "2024-02-01", "count": 4},
            {"date": "2024-02-30", "count": 4},
            {"date": "2025-01-01", "count": 9},
            {"date": "2024-02-02", "count": "7"},
            {"date": "2024-02-03", "count": -1},
            {"count": 2},
        ],
        2024,
    )

    assert baseline == {date(2024, 2, 1): 4}


def test_forbidden_contribution_query_is_invalid_token(monkeypatch) -> None:
    def forbidden_days(username: str, token: str, graphql_url: str, year: int):
        raise status_error(403)

    monkeypatch.setattr(
        "contribart.services.heatmap_service.fetch_authenticated_user",
        lambda token, api_url: {"id": 1, "login": "octocat"},
    )
    monkeypatch.setattr(
        "contribart.services.heatmap_service.fetch_contribution_days", forbidden_days
    )

    with pytest.raises(InvalidGitHubTokenError):
        get_authenticated_user_contributions(
            "secret", "https://api.github.com/graphql", "https://api.github.com", 2024
        )


def test_server_error_is_api_error(monkeypatch) -> None:
    def broken_user(token: str, api_url: str):
        raise status_error(500)

    monkeypatch.setattr(
        "contribart.services.heatmap_service.fetch_authenticated_user", broken_user
    )

    with pytest.raises(GitHubAPIError):
        get_authenticated_user_contributions(
            "secret", "https://api.github.com/graphql", "https://api.github.com", 2024
        )


def test_missing_login_is_api_error(monkeypatch) -> None:
    monkeypatch.setattr(
        "contribart.services.heatmap_service.fetch_authenticated_user",
        lambda token, api_url: {"id": 1, "login": ""},
    )

    with pytest.raises(GitHubAPIError):
        get_authenticated_user_contributions(
            "secret", "https://api.github.com/graphql", "https://api.github.com", 2024
        )
