"""Rental request endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, status

from buurbak.api.deps import CurrentLessor, CurrentUser, SessionDep
from buurbak.api.errors import DOMAIN_ERRORS, http_error
from buurbak.api.rate_limits import DEFAULT_RATE_DEP
from buurbak.schemas.rental import RentalCreate, RentalRead, RentalStatusUpdate
from buurbak.services import rental_service

router = APIRouter(prefix="/rentals", dependencies=[DEFAULT_RATE_DEP])


@router.post(
    "",
    response_model=RentalRead,
    status_code=status.HTTP_201_CREATED,
    summary="Request a rental",
)
async def create_rental(
    payload: RentalCreate,
    session: SessionDep,
    current_user: CurrentUser,
) -> RentalRead:
    try:
        rental = await rental_service.create_rental(
            session,
            renter=current_user,
            trailer_id=payload.trailer_id,
            start_date=payload.start_date,
            end_date=payload.end_date,
            pickup_time=payload.pickup_time,
            return_time=payload.return_time,
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return RentalRead.model_validate(rental)


@router.get("", response_model=list[RentalRead], summary="List my rentals")
async def list_my_rentals(
    session: SessionDep,
    current_user: CurrentUser,
) -> list[RentalRead]:
    rentals = await rental_service.list_renter_rentals(session, renter=current_user)
    return [RentalRead.model_validate(rental) for rental in rentals]


@router.get(
    "/trailers/{trailer_id}",
    response_model=list[RentalRead],
    summary="List rentals of one of my trailers",
)
async def list_trailer_rentals(
    trailer_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentLessor,
) -> list[RentalRead]:
    try:
        rentals = await rental_service.list_trailer_rentals(
            session, user=current_user, trailer_id=trailer_id
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return [RentalRead.model_validate(rental) for rental in rentals]


@router.patch(
    "/{rental_id}/status",
    response_model=RentalRead,
    summary="Change a rental's status",
)
async def update_rental_status(
    rental_id: uuid.UUID,
    payload: RentalStatusUpdate,
    session: SessionDep,
    current_user: CurrentUser,
) -> RentalRead:
    try:
        rental = await rental_service.update_status(
            session, user=current_user, rental_id=rental_id, status=payload.status
        )
    except DOMAIN_ERRORS as exc:
        raise http_error(exc) from exc
    return RentalRead.model_validate(rental)
