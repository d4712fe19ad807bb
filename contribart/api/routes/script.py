from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from contribart.api.dependencies import session_from_state
from contribart.api.schemas.design import DesignState
from contribart.api.schemas.script import ScriptResponse
from contribart.settings import Settings


router = APIRouter()
settings = Settings()

SCRIPT_FILENAME = "git-art.sh"


@router.post("/script", response_model=ScriptResponse)
def compile_design(payload: DesignState) -> dict[str, object]:
    """Compile the design into a commit script and report its numbers."""

    compiled = session_from_state(payload, settings).compile(
        commit_time=settings.commit_time,
        message=settings.commit_message,
    )
    return {
        "ceiling": compiled.ceiling,
        "targets": list(compiled.targets),
        "operation_count": len(compiled.operations),
        "commits_by_date": compiled.commits_by_date,
        "script": compiled.text,
    }


@router.post("/script/download", response_class=PlainTextResponse)
def download_script(payload: DesignState) -> PlainTextResponse:
    """Return the compiled script as a shell file attachment."""

    compiled = session_from_state(payload, settings).compile(
        commit_time=settings.commit_time,
        message=settings.commit_message,
    )
    return PlainTextResponse(
        compiled.text,
        media_type="text/x-sh",
        headers={"Content-Disposition": f'attachment; filename="{SCRIPT_FILENAME}"'},
    )
