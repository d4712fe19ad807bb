from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException

from contribart.api.dependencies import check_year
from contribart.api.dependencies import threshold_policy
from contribart.api.schemas.contributions import ContributionsResponse
from contribart.core.security import require_github_token
from contribart.services.heatmap_service import GitHubAPIError
from contribart.services.heatmap_service import InvalidGitHubTokenError
from contribart.services.heatmap_service import get_authenticated_user_contributions
from contribart.settings import Settings


router = APIRouter()
settings = Settings()


@router.get("/")
async def root() -> dict[str, str]:
    """Return a basic service greeting."""

    return {"message": "contribart: design contribution-calendar art"}


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.get("/contributions/{year}", response_model=ContributionsResponse)
def get_authenticated_user_contributions_for_year(
    year: int,
    token: str = Depends(require_github_token),
) -> dict[str, object]:
    """Import real contribution counts of the authenticated GitHub user."""

    check_year(year, settings)

    try:
        return get_authenticated_user_contributions(
            token=token,
            graphql_url=settings.github_graphql_url,
            api_url=settings.github_api_url,
            year=year,
            policy=threshold_policy(settings),
        )
    except InvalidGitHubTokenError as exc:
        raise HTTPException(status_code=401, detail="GitHub token is invalid") from exc
    except GitHubAPIError as exc:
        raise HTTPException(
            status_code=502, detail="GitHub API request failed"
        ) from exc
