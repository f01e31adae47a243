"""
Request dependencies shared by the API routers
"""
from fastapi import Header, HTTPException, Request, status
from typing import Optional
from uuid import UUID
import logging

logger = logging.getLogger(__name__)


def get_current_user_id(
    request: Request,
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> UUID:
    """
    Resolve the authenticated learner

    The authentication layer in front of this service either sets
    request.state.user_id or forwards the identity in the X-User-Id header.
    """
    user_id = getattr(request.state, "user_id", None) or x_user_id

    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return user_id if isinstance(user_id, UUID) else UUID(str(user_id))
    except ValueError:
        logger.warning(f"Rejected malformed user id: {user_id!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user identity",
        )
