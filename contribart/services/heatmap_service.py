import logging
from datetime import date

import httpx

from contribart.clients.github_client import fetch_authenticated_user
from contribart.clients.github_client import fetch_contribution_days
from contribart.services.design_service import DesignSession
from contribart.services.level_service import DEFAULT_POLICY
from contribart.services.level_service import ThresholdPolicy


logger = logging.getLogger(__name__)


class InvalidGitHubTokenError(Exception):
    """Raised when GitHub rejects the provided token."""


class GitHubAPIError(Exception):
    """Raised when GitHub requests fail for non-auth reasons."""


def build_baseline(
    contribution_days: list[dict[str, str | int]], year: int
) -> dict[date, int]:
    """Turn raw contribution days into real counts for days of `year`."""

    baseline: dict[date, int] = {}
    for item in contribution_days:
        raw_day = item.get("date")
        raw_count = item.get("count")
        if not isinstance(raw_day, str) or not isinstance(raw_count, int):
            continue

        try:
            parsed_day = date.fromisoformat(raw_day)
        except ValueError:
            continue

        if parsed_day.year != year or raw_count < 0:
            continue
        baseline[parsed_day] = raw_count

    return baseline


def get_authenticated_user_contributions(
    token: str,
    graphql_url: str,
    api_url: str,
    year: int,
    policy: ThresholdPolicy = DEFAULT_POLICY,
) -> dict[str, object]:
    """Import the real contribution history of the token owner for `year`."""

    try:
        github_user = fetch_authenticated_user(token, api_url)
    except httpx.HTTPStatusError as exc:
        if exc.response.status_code in {401, 403}:
            raise InvalidGitHubTokenError from exc
        raise GitHubAPIError from exc
    except Exception as exc:
        raise GitHubAPIError from exc

    raw_username = github_user.get("login")
    if not isinstance(raw_username, str) or not raw_username:
        raise GitHubAPIError("GitHub user response is invalid")
    username = raw_username.lower()

    try:
        contribution_days = fetch_contribution_days(
            username=username,
            token=token,
            graphql_url=graphql_url,
            year=year,
        )
    except httpx.HTTPStatusError as exc:
        if exc.response.status_code in {401, 403}:
            raise InvalidGitHubTokenError from exc
        logger.warning("Contribution query failed for %s: %s", username, exc)
        raise GitHubAPIError from exc
    except Exception as exc:
        logger.warning("Contribution query failed for %s: %s", username, exc)
        raise GitHubAPIError from exc

    session = DesignSession(year=year, policy=policy)
    session.import_baseline(build_baseline(contribution_days, year))
    return {
        "username": username,
        "year": year,
        "total": sum(session.baseline.values()),
        "observed_max": session.observed_max,
        "counts": session.baseline,
        "levels": session.overlay,
    }
