# authlookup/auth/user_details.py
"""
Resolve a login identifier (username or email) to a stored user.

The authentication pipeline hands over whatever the person typed into the
"username or email" box. Email-shaped input is looked up by email, anything
else by username. The check is a loose syntactic one on purpose: it does not
validate the domain part, and existing usernames that contain "@" after an
allowed local part are treated as emails.
"""
from __future__ import annotations

import re
from typing import Optional, Protocol, runtime_checkable

from authlookup.models.user import User

# The domain part stops at any line terminator, not just "\n".
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@([^\n\r\u0085\u2028\u2029]+)$")

LOOKUP_EMAIL = "email"
LOOKUP_USERNAME = "username"


class UserNotFoundError(LookupError):
    """No stored user matches the identifier on the lookup path taken."""

    def __init__(self, identifier: str, lookup: str) -> None:
        self.identifier = identifier
        self.lookup = lookup
        super().__init__(f"User not found with {lookup}: {identifier}")

    @property
    def message(self) -> str:
        return str(self)


@runtime_checkable
class UserStore(Protocol):
    def find_by_username(self, username: str) -> Optional[User]:
        ...

    def find_by_email(self, email: str) -> Optional[User]:
        ...


@runtime_checkable
class UserDetailsService(Protocol):
    """Anything the authentication pipeline can ask for a user by identifier."""

    def resolve(self, identifier: str) -> User:
        ...


def is_email_identifier(identifier: str) -> bool:
    # fullmatch keeps "$" from accepting a trailing line terminator
    return EMAIL_PATTERN.fullmatch(identifier) is not None


class IdentifierResolver:
    """
    Stateless resolver over a UserStore.

    Safe to share between callers; each call is a single read through the
    store. Store errors propagate unchanged.
    """

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def resolve(self, identifier: str) -> User:
        if is_email_identifier(identifier):
            user = self._store.find_by_email(identifier)
            lookup = LOOKUP_EMAIL
        else:
            user = self._store.find_by_username(identifier)
            lookup = LOOKUP_USERNAME

        if user is None:
            raise UserNotFoundError(identifier, lookup)
        return user
