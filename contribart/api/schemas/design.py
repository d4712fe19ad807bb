from datetime import date
from enum import Enum
from typing import Annotated

from pydantic import BaseModel
from pydantic import Field


Level = Annotated[int, Field(ge=0, le=4)]
Count = Annotated[int, Field(ge=0)]


class DesignState(BaseModel):
    """Client-held design: the year, painted levels and real counts."""

    year: int
    overlay: dict[date, Level] = Field(default_factory=dict)
    baseline: dict[date, Count] = Field(default_factory=dict)


class DesignResponse(DesignState):
    """Design state after an operation, with the derived maximum count."""

    observed_max: int


class PaintRequest(BaseModel):
    design: DesignState
    dates: list[date]
    level: Level


class PatternName(str, Enum):
    CHECKERBOARD = "checkerboard"
    INVERT = "invert"
    RANDOM_NOISE = "random-noise"


class PatternRequest(BaseModel):
    design: DesignState
    seed: int | None = None


class TextRequest(BaseModel):
    design: DesignState
    text: str = Field(min_length=1, max_length=32)
    column_offset: int = Field(default=2, ge=0, le=52)
    font: str | None = None


class TextResponse(BaseModel):
    design: DesignResponse
    dates: list[date]
    width: int


class PreviewDay(BaseModel):
    """Day cell as displayed: real count, painted level and resulting level."""

    date: date
    weekday: int
    in_year: bool
    count: int
    painted: int
    level: int


class PreviewWeek(BaseModel):
    index: int
    month_label: str | None
    days: list[PreviewDay]


class PreviewResponse(BaseModel):
    year: int
    observed_max: int
    ceiling: int
    targets: list[int]
    weeks: list[PreviewWeek]
