from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserDetailsOut(BaseModel):
    id: int
    username: str
    email: str
    # Returned to the caller so it can verify credentials itself.
    password_hash: str
    enabled: bool
    account_non_locked: bool
    authorities: list[str]

    model_config = ConfigDict(from_attributes=True)
