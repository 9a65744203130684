import logging
from fastapi import FastAPI
from databuilder.core.config import settings
from databuilder.core.logging import configure_logging
from databuilder.api.routes import router as api_router

configure_logging(settings.log_level)
log = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
)
app.include_router(api_router, prefix="/v1")
log.info("API routes registered")
