# routers/health.py

from fastapi import APIRouter

from core.catalog_validator import validate_catalogs
from core.supabase_client import ping_supabase

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /health/app
# Simple API health check
# -----------------------------------------------------
@router.get("/app", summary="App health check")
async def health_app():
    return {
        "service": "CityPulse Access API",
        "status": "ok",
    }


# -----------------------------------------------------
# GET /health/catalogs
# Re-runs catalog validation (no auth required)
# -----------------------------------------------------
@router.get("/catalogs", summary="Access catalog health check")
async def health_catalogs():
    problems = validate_catalogs()
    return {
        "service": "Access catalogs",
        "status": "ok" if not problems else "error",
        "problems": problems,
    }


# -----------------------------------------------------
# GET /health/db
# Checks the assignment store connection
# -----------------------------------------------------
@router.get("/db", summary="Assignment store health check")
async def health_db():
    status = ping_supabase()
    return {
        "service": "Supabase",
        "status": status.get("status", "unknown"),
        "details": status,
    }
