# Standard library imports
from typing import Any, Dict

# External package imports
from fastapi import APIRouter

# Local application imports
from ...utils.datetime_utils import now_iso


SERVICE_NAME = "User Service API"
SERVICE_VERSION = "1.0.0"

router = APIRouter(tags=["root"])


@router.get("/")
async def get_api_info() -> Dict[str, Any]:
    """Basic information about the API"""
    return {
        "name": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "description": "User CRUD service built with Clean Architecture",
        "endpoints": {
            "users": "/api/v1/users",
            "health": "/api/v1/health",
            "docs": "/docs",
            "openapi": "/openapi.json",
        },
        "status": "running",
    }


@router.get("/status")
async def get_status() -> Dict[str, str]:
    """Quick status check"""
    return {
        "status": "UP",
        "service": SERVICE_NAME,
        "timestamp": now_iso(),
    }
