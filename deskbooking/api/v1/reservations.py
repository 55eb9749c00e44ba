"""Reservations API router.

Ownership rule: a reservation can only be viewed or cancelled by the user
who made it.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from deskbooking.api.deps import get_current_user, get_db
from deskbooking.models.reservation import Reservation
from deskbooking.models.user import User
from deskbooking.schemas.reservation import (
    CancelDayRequest,
    ReservationCreate,
    ReservationCreated,
    ReservationDetailResponse,
)
from deskbooking.services import reservation_service

router = APIRouter(prefix="/api/v1/reservations", tags=["reservations"])


@router.post(
    "",
    response_model=ReservationCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Reserve a desk",
)
async def create_reservation(
    body: ReservationCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    """Reserve a desk for every day from ``start_date`` to ``end_date``.

    Rejected when the range is inverted, the desk is unknown or in
    maintenance, or any day is already booked.
    """
    reservation_id = await reservation_service.reserve(
        db,
        desk_id=body.desk_id,
        start_date=body.start_date,
        end_date=body.end_date,
        user_id=current_user.id,
    )
    return {"reservation_id": reservation_id}


@router.get(
    "/{reservation_id}",
    response_model=ReservationDetailResponse,
    summary="Get a reservation with its days",
)
async def get_reservation(
    reservation_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Reservation:
    return await reservation_service.get_reservation(db, reservation_id, current_user.id)


@router.delete(
    "/{reservation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Cancel a whole reservation",
)
async def cancel_reservation(
    reservation_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    await reservation_service.cancel_whole(db, reservation_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{reservation_id}/cancel-day",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Cancel one day of a reservation",
)
async def cancel_reservation_day(
    reservation_id: int,
    body: CancelDayRequest,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    """Cancel a single day. Cancelling the last active day cancels the reservation."""
    await reservation_service.cancel_day(db, reservation_id, body.date, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
