from datetime import date

from pydantic import BaseModel


class ContributionsResponse(BaseModel):
    """Real activity of the authenticated user for one year."""

    username: str
    year: int
    total: int
    observed_max: int
    counts: dict[date, int]
    levels: dict[date, int]
