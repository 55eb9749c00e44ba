"""Desk availability API router."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from deskbooking.api.deps import get_current_user, get_db
from deskbooking.config import settings
from deskbooking.models.user import User
from deskbooking.schemas.desk import DeskView
from deskbooking.services.availability_service import check_window, compute_availability

router = APIRouter(prefix="/api/v1/desks", tags=["desks"])


@router.get(
    "",
    response_model=list[DeskView],
    summary="Desk availability over a date window",
)
async def list_desks(
    from_date: date = Query(..., alias="from", description="First day of the window (YYYY-MM-DD, inclusive)"),
    to_date: date = Query(..., alias="to", description="Last day of the window (YYYY-MM-DD, inclusive)"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[DeskView]:
    """Return every desk ordered by number with its status over the window.

    Desks the caller has reserved in the window carry the reservation id and
    full date range so the client can offer cancellation.
    """
    check_window(from_date, to_date, settings.max_availability_days)
    return await compute_availability(db, from_date, to_date, current_user.id)
