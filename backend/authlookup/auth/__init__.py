# authlookup/auth/__init__.py
"""
Authentication lookup for the surrounding login pipeline.

This package contains:
- user_details.py: identifier classification and user resolution
"""
from authlookup.auth.user_details import (
    IdentifierResolver,
    UserDetailsService,
    UserNotFoundError,
    UserStore,
)

__all__ = ["IdentifierResolver", "UserDetailsService", "UserNotFoundError", "UserStore"]
