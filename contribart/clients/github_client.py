import logging
from collections.abc import Mapping
from typing import Any

import httpx


logger = logging.getLogger(__name__)

USER_AGENT = "contribart"

CONTRIBUTIONS_QUERY = """
query($login: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $login) {
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        weeks {
          contributionDays {
            date
            contributionCount
          }
        }
      }
    }
  }
}
"""


def fetch_authenticated_user(token: str, api_url: str) -> dict[str, str | int]:
    """Fetch basic profile data for the token owner from GitHub REST API."""

    response = httpx.get(
        f"{api_url.rstrip('/')}/user",
        headers={
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        },
        timeout=15.0,
    )
    response.raise_for_status()

    payload: Any = response.json()
    if not isinstance(payload, Mapping):
        raise ValueError("GitHub user response is invalid")

    raw_id = payload.get("id")
    raw_login = payload.get("login")
    if not isinstance(raw_id, int) or not isinstance(raw_login, str) or not raw_login:
        raise ValueError("GitHub user response is missing required fields")

    return {"id": raw_id, "login": raw_login}


def fetch_contribution_days(
    username: str,
    token: str,
    graphql_url: str,
    year: int,
) -> list[dict[str, str | int]]:
    """Fetch the contribution days of one calendar year from GitHub GraphQL API."""

    if not token:
        raise ValueError("GitHub token is required for GraphQL requests")

    variables = {
        "login": username,
        "from": f"{year}-01-01T00:00:00Z",
        "to": f"{year}-12-31T23:59:59Z",
    }
    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }

    response = httpx.post(
        graphql_url,
        json={"query": CONTRIBUTIONS_QUERY, "variables": variables},
        headers=headers,
        timeout=20.0,
    )
    response.raise_for_status()

    payload = response.json()
    if not isinstance(payload, Mapping):
        raise ValueError("GitHub GraphQL response is invalid")

    errors = payload.get("errors")
    if errors:
        first = errors[0] if isinstance(errors, list) and errors else None
        message = first.get("message") if isinstance(first, Mapping) else None
        logger.warning("GitHub GraphQL returned errors: %s", errors)
        raise ValueError(message or "GitHub GraphQL returned errors")

    data = payload.get("data")
    if not isinstance(data, Mapping):
        raise ValueError("GitHub GraphQL data is missing")

    user = data.get("user")
    if not isinstance(user, Mapping):
        raise ValueError("GitHub user not found")

    collection = user.get("contributionsCollection")
    if not isinstance(collection, Mapping):
        raise ValueError("GitHub contributionsCollection is missing")

    calendar = collection.get("contributionCalendar")
    if not isinstance(calendar, Mapping):
        raise ValueError("GitHub contributionCalendar is missing")

    weeks = calendar.get("weeks")
    if not isinstance(weeks, list):
        raise ValueError("GitHub contribution weeks are missing")

    days: list[dict[str, str | int]] = []
    for week in weeks:
        if not isinstance(week, Mapping):
            continue
        contribution_days = week.get("contributionDays")
        if not isinstance(contribution_days, list):
            continue
        for item in contribution_days:
            if not isinstance(item, Mapping):
                continue
            raw_date = item.get("date")
            raw_count = item.get("contributionCount")
            if isinstance(raw_date, str) and isinstance(raw_count, int):
                days.append({"date": raw_date, "count": raw_count})

    return days
