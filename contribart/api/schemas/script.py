from datetime import date

from pydantic import BaseModel


class ScriptResponse(BaseModel):
    """Compiled commit script and the thresholds it was built with."""

    ceiling: int
    targets: list[int]
    operation_count: int
    commits_by_date: dict[date, int]
    script: str
