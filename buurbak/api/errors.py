"""Translate service-layer errors into HTTP responses."""

from __future__ import annotations

from fastapi import HTTPException, status

from buurbak.services.errors import (
    NOT_FOUND_ERRORS,
    AvailabilityConflictError,
    OwnershipError,
)


def http_error(exc: Exception) -> HTTPException:
    """Map a domain exception onto the matching ``HTTPException``."""
    if isinstance(exc, NOT_FOUND_ERRORS):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, OwnershipError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    if isinstance(exc, AvailabilityConflictError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": str(exc),
                "date": exc.day.isoformat(),
                "status": exc.status,
            },
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


DOMAIN_ERRORS = (ValueError, OwnershipError)
"""Exceptions routers catch around service calls."""
