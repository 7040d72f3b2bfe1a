# authlookup/models/user.py
from __future__ import annotations

import enum

from sqlalchemy import Boolean, Column, DateTime, Integer, String, false, func, true

from authlookup.core.base import Base


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    REVIEWER = "REVIEWER"
    VIEWER = "VIEWER"


AUTHORITY_PREFIX = "ROLE_"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    username = Column(String(100), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    # Comma-separated Role names, e.g. "ADMIN,REVIEWER".
    roles = Column(String(255), nullable=False, default=Role.VIEWER.value, server_default=Role.VIEWER.value)

    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    is_locked = Column(Boolean, nullable=False, default=False, server_default=false())

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __init__(self, **kwargs) -> None:
        # Column defaults only apply on INSERT; mirror them so unsaved users read the same.
        kwargs.setdefault("roles", Role.VIEWER.value)
        kwargs.setdefault("is_active", True)
        kwargs.setdefault("is_locked", False)
        super().__init__(**kwargs)

    # -------------------------
    # User details view (read-only)
    # -------------------------
    @property
    def enabled(self) -> bool:
        return bool(self.is_active)

    @property
    def account_non_locked(self) -> bool:
        return not self.is_locked

    @property
    def authorities(self) -> list[str]:
        # Blank and unknown role names grant nothing.
        names = [r.strip() for r in (self.roles or "").split(",")]
        return [f"{AUTHORITY_PREFIX}{name}" for name in names if name in Role.__members__]
