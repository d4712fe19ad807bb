from datetime import date

from fastapi import HTTPException

from contribart.api.schemas.design import DesignResponse
from contribart.api.schemas.design import DesignState
from contribart.services.design_service import DesignSession
from contribart.services.level_service import ThresholdPolicy
from contribart.settings import Settings


def threshold_policy(app_settings: Settings) -> ThresholdPolicy:
    return app_settings.threshold_policy()


def check_year(year: int, app_settings: Settings) -> int:
    """Reject years outside the selectable range with a 400."""

    current_year = date.today().year
    if not app_settings.min_year <= year <= current_year:
        raise HTTPException(
            status_code=400,
            detail=f"year must be between {app_settings.min_year} and {current_year}",
        )
    return year


def session_from_state(state: DesignState, app_settings: Settings) -> DesignSession:
    check_year(state.year, app_settings)
    return DesignSession(
        year=state.year,
        overlay=dict(state.overlay),
        baseline=dict(state.baseline),
        policy=threshold_policy(app_settings),
    )


def design_response(session: DesignSession) -> DesignResponse:
    return DesignResponse(
        year=session.year,
        overlay=session.overlay,
        baseline=session.baseline,
        observed_max=session.observed_max,
    )
