from fastapi import FastAPI

from contribart.api.routes import design
from contribart.api.routes import heatmap
from contribart.api.routes import script
from contribart.core.middleware import ImportRateLimitMiddleware
from contribart.core.observability import configure_logging
from contribart.core.observability import init_sentry
from contribart.settings import Settings


def create_app() -> FastAPI:
    """Build the API application from current environment settings."""

    app_settings = Settings()
    configure_logging(app_settings)
    init_sentry(app_settings)

    application = FastAPI(title="contribart")
    application.add_middleware(
        ImportRateLimitMiddleware,
        requests_per_window=app_settings.rate_limit_per_minute,
        window_seconds=app_settings.rate_limit_window_seconds,
    )
    application.include_router(heatmap.router)
    application.include_router(design.router)
    application.include_router(script.router)
    return application


app = create_app()
