"""
Top-level router for version 1 of the API.

Flag routes are served under ``/flags`` at the root of the service,
not under ``/api/v1``; only the API documentation lives there.
"""

from fastapi import APIRouter

from .endpoints import flags

router = APIRouter()

router.include_router(flags.router, prefix="/flags", tags=["flags"])
