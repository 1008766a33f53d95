"""Versioned API router."""

from fastapi import APIRouter

from . import auth, health, lessor_calendar, rentals, trailers

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(trailers.router, tags=["trailers"])
router.include_router(lessor_calendar.router, tags=["lessor-calendar"])
router.include_router(rentals.router, tags=["rentals"])

__all__ = ["router"]
