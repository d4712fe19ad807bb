from fastapi import HTTPException
from fastapi import Security
from fastapi.security import HTTPAuthorizationCredentials
from fastapi.security import HTTPBearer


bearer_scheme = HTTPBearer(auto_error=False)

MISSING_TOKEN_DETAIL = "Authorization Bearer token is required"


def require_github_token(
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> str:
    """Return the GitHub token sent as a Bearer credential.

    Raises:
        HTTPException: 401 if the header is missing, not Bearer, or blank.
    """

    if (
        credentials is None
        or credentials.scheme.lower() != "bearer"
        or not credentials.credentials.strip()
    ):
        raise HTTPException(status_code=401, detail=MISSING_TOKEN_DETAIL)

    return credentials.credentials.strip()
