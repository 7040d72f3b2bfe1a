from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from sqlalchemy.orm import Session

from authlookup.auth.user_details import UserDetailsService, UserNotFoundError
from authlookup.core.config import settings
from authlookup.core.database import get_db, read_only_transaction
from authlookup.dependencies.user_details import get_user_details_service
from authlookup.schemas.user import UserDetailsOut


router = APIRouter(prefix="/internal/users", tags=["internal"], include_in_schema=False)

logger = logging.getLogger(__name__)


def _require_internal_token(x_internal_token: str | None) -> None:
    """
    Shared-secret auth for calls from the login pipeline.
    """
    if not settings.INTERNAL_API_SECRET:
        raise HTTPException(status_code=500, detail="Server missing INTERNAL_API_SECRET")

    if x_internal_token != settings.INTERNAL_API_SECRET:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


@router.get("/lookup", response_model=UserDetailsOut)
def lookup_user(
    identifier: str = Query(min_length=1),
    x_internal_token: str | None = Header(default=None),
    db: Session = Depends(get_db),
    service: UserDetailsService = Depends(get_user_details_service),
) -> UserDetailsOut:
    _require_internal_token(x_internal_token)

    with read_only_transaction(db):
        try:
            user = service.resolve(identifier)
        except UserNotFoundError as exc:
            logger.info("Internal user lookup miss: lookup=%s", exc.lookup)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)

        # Render before the scope rolls back and expires the instance.
        return UserDetailsOut.model_validate(user)
