from fastapi import APIRouter
from databuilder.api.routes_health import router as health_router
from databuilder.api.routes_schema import router as schema_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(schema_router, tags=["schema"])
