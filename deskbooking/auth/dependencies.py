"""FastAPI identity dependency.

The service has no login: the caller names itself with an ``X-User-Id``
header, and requests without one act as ``settings.default_user_id``.
"""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from deskbooking.config import settings
from deskbooking.database import get_db
from deskbooking.models.user import User


async def get_current_user(
    x_user_id: str | None = Header(None, description="Acting user id; defaults to the configured user"),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the acting user for this request.

    Raises:
        HTTPException 401: If the header is not an integer or the user does not exist.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unknown user",
    )

    if x_user_id is None:
        user_id = settings.default_user_id
    else:
        try:
            user_id = int(x_user_id)
        except ValueError:
            raise credentials_exception from None

    user = await db.get(User, user_id)
    if user is None:
        raise credentials_exception

    return user
