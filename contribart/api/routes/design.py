import random

from fastapi import APIRouter
from fastapi import HTTPException
from fastapi import Query

from contribart.api.dependencies import check_year
from contribart.api.dependencies import design_response
from contribart.api.dependencies import session_from_state
from contribart.api.schemas.calendar import CalendarResponse
from contribart.api.schemas.design import DesignResponse
from contribart.api.schemas.design import DesignState
from contribart.api.schemas.design import PaintRequest
from contribart.api.schemas.design import PatternName
from contribart.api.schemas.design import PatternRequest
from contribart.api.schemas.design import PreviewResponse
from contribart.api.schemas.design import TextRequest
from contribart.api.schemas.design import TextResponse
from contribart.services.calendar_service import WEEKDAY_LABELS
from contribart.services.calendar_service import build_grid
from contribart.services.fonts import get_font
from contribart.services.text_service import measure
from contribart.settings import Settings


router = APIRouter()
settings = Settings()


@router.get("/calendar/{year}", response_model=CalendarResponse)
def get_calendar(
    year: int, week_start: int = Query(default=0, ge=0, le=6)
) -> dict[str, object]:
    """Return the week-major grid layout of a year."""

    check_year(year, settings)
    grid = build_grid(year, week_start)
    labels = grid.month_labels()
    return {
        "year": year,
        "start": grid.start,
        "end": grid.end,
        "weekday_labels": list(WEEKDAY_LABELS),
        "weeks": [
            {
                "index": index,
                "month_label": labels[index],
                "days": [
                    {
                        "date": day.date,
                        "week": day.week,
                        "weekday": day.weekday,
                        "in_year": day.in_year,
                    }
                    for day in week
                ],
            }
            for index, week in enumerate(grid.weeks)
        ],
    }


@router.post("/design/preview", response_model=PreviewResponse)
def preview_design(payload: DesignState) -> dict[str, object]:
    """Return every grid cell with the level it displays."""

    session = session_from_state(payload, settings)
    grid = session.grid
    labels = grid.month_labels()
    return {
        "year": session.year,
        "observed_max": session.observed_max,
        "ceiling": session.policy.ceiling(session.observed_max),
        "targets": list(session.policy.targets(session.observed_max)),
        "weeks": [
            {
                "index": index,
                "month_label": labels[index],
                "days": [
                    {
                        "date": day.date,
                        "weekday": day.weekday,
                        "in_year": day.in_year,
                        "count": session.baseline.get(day.date, 0),
                        "painted": session.overlay.get(day.date, 0),
                        "level": session.level(day.date) if day.in_year else 0,
                    }
                    for day in week
                ],
            }
            for index, week in enumerate(grid.weeks)
        ],
    }


@router.post("/design/paint", response_model=DesignResponse)
def paint_design(payload: PaintRequest) -> DesignResponse:
    session = session_from_state(payload.design, settings)
    session.paint(payload.dates, payload.level)
    return design_response(session)


@router.post("/design/clear", response_model=DesignResponse)
def clear_design(payload: DesignState) -> DesignResponse:
    session = session_from_state(payload, settings)
    session.clear()
    return design_response(session)


@router.post("/design/patterns/{name}", response_model=DesignResponse)
def apply_pattern(name: PatternName, payload: PatternRequest) -> DesignResponse:
    """Apply a generated pattern to the design."""

    session = session_from_state(payload.design, settings)
    if name is PatternName.CHECKERBOARD:
        session.checkerboard()
    elif name is PatternName.INVERT:
        session.invert()
    else:
        session.random_noise(random.Random(payload.seed))
    return design_response(session)


@router.post("/design/text", response_model=TextResponse)
def draw_text(payload: TextRequest) -> dict[str, object]:
    """Paint pixel text onto the design at full level."""

    session = session_from_state(payload.design, settings)
    try:
        glyphs = get_font(payload.font or settings.default_font)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    dates = session.draw_text(payload.text, payload.column_offset, glyphs)
    return {
        "design": design_response(session),
        "dates": dates,
        "width": measure(payload.text, glyphs),
    }
