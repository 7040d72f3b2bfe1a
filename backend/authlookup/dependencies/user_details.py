# authlookup/dependencies/user_details.py
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from authlookup.auth.user_details import IdentifierResolver, UserDetailsService
from authlookup.core.database import get_db
from authlookup.services.users import SqlAlchemyUserStore


def get_user_details_service(db: Session = Depends(get_db)) -> UserDetailsService:
    """
    Per-request resolver bound to the request's DB session.
    """
    return IdentifierResolver(SqlAlchemyUserStore(db))
