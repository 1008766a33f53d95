"""Domain errors raised by the service layer."""

from __future__ import annotations

import datetime as dt


class TrailerNotFoundError(ValueError):
    """Raised when a trailer id does not resolve to a trailer."""

    def __init__(self, message: str = "Trailer not found") -> None:
        super().__init__(message)


class BlockedPeriodNotFoundError(ValueError):
    """Raised when a blocked period id does not exist."""

    def __init__(self, message: str = "Blocked period not found") -> None:
        super().__init__(message)


class ExceptionNotFoundError(ValueError):
    """Raised when no availability exception exists for a date."""

    def __init__(self, message: str = "Availability exception not found") -> None:
        super().__init__(message)


class RentalNotFoundError(ValueError):
    """Raised when a rental id does not exist."""

    def __init__(self, message: str = "Rental not found") -> None:
        super().__init__(message)


class OwnershipError(PermissionError):
    """Raised when the acting user may not manage the referenced resource."""


class AvailabilityConflictError(ValueError):
    """Raised when requested dates collide with the trailer's calendar."""

    def __init__(self, day: dt.date, status: str) -> None:
        self.day = day
        self.status = status
        super().__init__(f"Trailer is {status} on {day.isoformat()}")


NOT_FOUND_ERRORS: tuple[type[ValueError], ...] = (
    TrailerNotFoundError,
    BlockedPeriodNotFoundError,
    ExceptionNotFoundError,
    RentalNotFoundError,
)

__all__ = [
    "AvailabilityConflictError",
    "BlockedPeriodNotFoundError",
    "ExceptionNotFoundError",
    "NOT_FOUND_ERRORS",
    "OwnershipError",
    "RentalNotFoundError",
    "TrailerNotFoundError",
]
