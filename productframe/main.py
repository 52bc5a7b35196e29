from fastapi import FastAPI

from productframe.api.routes.composites import router as composites_router
from productframe.api.routes.health import router as health_router
from productframe.config import settings
from productframe.logging_config import configure_logging


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title=settings.app_name)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(composites_router, prefix="/api/v1")
    return app


app = create_app()
