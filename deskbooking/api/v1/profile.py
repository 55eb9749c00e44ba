"""Profile API router."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from deskbooking.api.deps import get_current_user, get_db
from deskbooking.models.user import User
from deskbooking.schemas.profile import ProfileResponse
from deskbooking.services.profile_service import get_profile

router = APIRouter(prefix="/api/v1/profile", tags=["profile"])


@router.get(
    "",
    response_model=ProfileResponse,
    summary="Current user's profile and reservation history",
)
async def read_profile(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileResponse:
    return await get_profile(db, current_user.id)
