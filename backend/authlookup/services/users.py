# authlookup/services/users.py
"""
User lookups backed by SQLAlchemy.

Responsibilities:
- Lookup by username or email, exact match
- Nothing else: creating, updating and authenticating users happens elsewhere

Identifiers are compared as given. No case folding or trimming happens here,
so "Alice" and "alice" are different usernames.
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from authlookup.models.user import User

logger = logging.getLogger(__name__)


class SqlAlchemyUserStore:
    """UserStore over a request-scoped SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_username(self, username: str) -> Optional[User]:
        logger.debug("User lookup by username")
        return self._db.query(User).filter(User.username == username).first()

    def find_by_email(self, email: str) -> Optional[User]:
        logger.debug("User lookup by email")
        return self._db.query(User).filter(User.email == email).first()
