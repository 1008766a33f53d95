"""Service layer exports."""
from buurbak.services import (
    auth_service,
    availability_service,
    blocked_period_service,
    calendar_service,
    rental_service,
    trailer_service,
    user_service,
)

__all__ = [
    "auth_service",
    "availability_service",
    "blocked_period_service",
    "calendar_service",
    "rental_service",
    "trailer_service",
    "user_service",
]
