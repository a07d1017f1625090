"""Entry point for the Marketplace service."""

from fastapi import FastAPI

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.cors import cors_middleware
from app.core.error_handlers import register_exception_handlers
from app.core.logging_config import setup_logging

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.PROJECT_NAME)

register_exception_handlers(app)
app.middleware("http")(cors_middleware)

app.include_router(v1_router, prefix=settings.API_PREFIX)


@app.get("/health")
def health_check():
    return {"status": "ok"}


__all__ = ["app"]
